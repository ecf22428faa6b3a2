"""API Layer - FastAPI route and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - All endpoints return JSON

Design Decisions:
    - Thin route delegates to services.execute_query
"""
