"""Services Layer — store operations the route handlers orchestrate.

Invariants:
    - Services own session lifetimes; routes never see an AsyncSession
"""
