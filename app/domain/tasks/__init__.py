"""
Tasks — domain layer.
"""
