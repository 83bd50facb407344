"""Infrastructure Layer — database access and cross-cutting concerns.

Invariants:
    - Infrastructure never imports from services/ or api/
    - Every driver failure is mapped to core.errors.PersistenceError before leaving
      this layer
"""
