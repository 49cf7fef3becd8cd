"""Infrastructure Layer — database sessions, view rendering and logging.

Invariants:
    - Infrastructure never imports from api/ route modules
    - Store failures are mapped to DatabaseError at this layer
"""
