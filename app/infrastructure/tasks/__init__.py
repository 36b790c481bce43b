"""
MongoDB adapters for tasks.
"""
