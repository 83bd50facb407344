"""Services Layer — generic CRUD orchestration and per-entity wiring.

Invariants:
    - One CrudService per entity, built once at startup with its collaborators
    - Entity wiring is explicit in registry.py (no auto-discovery)
"""
