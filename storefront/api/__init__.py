"""API Layer — FastAPI routes, dependencies and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - Every endpoint answers with the {code, status, data} envelope

Design Decisions:
    - Thin routes delegate to services; HTTP status selection happens only here
"""
