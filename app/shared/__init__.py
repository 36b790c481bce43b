"""
Shared module package.

Contains cross-cutting concerns used by every resource:
- Error classification and handling
- Response envelope
- Validation gate
- Request logging and rate limiting
"""
