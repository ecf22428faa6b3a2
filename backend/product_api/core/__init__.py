"""Core Layer - product records, the record store and id generation.

Invariants:
    - No module in core/ imports from graph/, services/, api/ or infrastructure/
    - No IO, no async

Design Decisions:
    - Functional core separated from the GraphQL/HTTP shell
"""
