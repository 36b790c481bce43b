"""
Domain layer package.

Contains entities, port interfaces and the store fault variants.
No framework imports, no IO, no side effects.
"""
