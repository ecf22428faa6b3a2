"""Product API Package - GraphQL CRUD service over an in-memory product catalog.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)

Design Decisions:
    - Empty __init__.py: explicit imports only, no star exports
"""
