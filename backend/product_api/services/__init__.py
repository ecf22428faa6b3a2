"""Service Layer - orchestrates query execution between the route and the engine.

Invariants:
    - Services never construct HTTP responses
"""
