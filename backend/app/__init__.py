"""Local Library Catalog — genre CRUD web application.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
