"""
Users — domain layer.
"""
