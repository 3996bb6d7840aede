"""Infrastructure Layer: cross-cutting concerns (logging setup).

Invariants:
    - Infrastructure never imports from core/ domain logic

Design Decisions:
    - Kept separate from services so core stays free of logging handlers
"""
