"""Pydantic Schemas — request/response contracts for API endpoints.

Invariants:
    - Create/Update schemas declare every field constraint the service enforces
    - Response schemas carry all stored fields, id included, and nothing else

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence
    - Update schemas extend Create schemas with the id field: full replace, not patch
"""
