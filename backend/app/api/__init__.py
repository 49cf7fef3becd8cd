"""API Layer — FastAPI routes and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - Catalog pages are rendered HTML; errors honour Accept: application/json
"""
