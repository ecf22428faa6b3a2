"""Infrastructure Layer - logging setup and seed file loading.

Invariants:
    - Modules here do IO; core/ never imports them
"""
