"""
Infrastructure layer package.

Contains the Beanie documents and the repository adapters that
implement the domain ports against MongoDB.
"""
