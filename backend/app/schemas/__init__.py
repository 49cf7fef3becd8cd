"""Pydantic Schemas — form validation at the HTTP boundary.

Invariants:
    - Schemas validate and sanitize user input before it reaches the store

Design Decisions:
    - Separate from models: schemas are form contracts, models are persistence
"""
