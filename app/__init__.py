"""
Task Manager API.

Application package root. A small CRUD service laid out with
hexagonal architecture (ports & adapters).

Resources:
    - tasks: To-do items with a completion flag.
    - users: People identified by a unique email address.

Layers:
    - domain: Entities, ports (ABCs), store fault variants.
    - application: Services orchestrating one resource each.
    - infrastructure: MongoDB/Beanie adapters implementing domain ports.
    - interfaces: FastAPI routers, Pydantic request/response schemas.
    - shared: Cross-cutting concerns (errors, envelope, validation, logging).
"""
