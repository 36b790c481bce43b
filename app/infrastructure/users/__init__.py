"""
MongoDB adapters for users.
"""
