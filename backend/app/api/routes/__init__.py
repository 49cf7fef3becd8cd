"""Route Modules — one file per resource/concern.

Invariants:
    - Each module defines its own APIRouter with prefix and tags
    - Store access goes through services/catalog_store.py

Design Decisions:
    - Explicit registration in main.py over auto-discovery
"""
