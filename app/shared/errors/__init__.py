"""
Shared error handling package.

Centralizes error-to-HTTP mapping so that store faults, application
errors and unexpected exceptions are consistently translated into
API responses.
"""
