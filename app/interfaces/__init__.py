"""
Interfaces layer package.

Contains FastAPI routers, Pydantic request/response schemas and the
dependency providers. No business logic belongs here.
Routes call services and return enveloped responses.
"""
