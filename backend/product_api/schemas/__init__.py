"""Pydantic Schemas - typed requests bound once from GraphQL resolver arguments.

Invariants:
    - Schemas are built at the GraphQL boundary, before any store call
    - Only fields the client actually supplied end up in model_fields_set

Design Decisions:
    - Separate from core: schemas are API contracts, core/ holds the records
"""
