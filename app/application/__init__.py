"""
Application layer package.

Contains one service per resource orchestrating its repository port.
This layer depends on domain ports, never on infrastructure.
"""
