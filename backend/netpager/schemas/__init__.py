"""Pydantic Schemas: request/response validation for API and tool boundaries.

Invariants:
    - Schemas validate at system boundary (tool input, API payloads)
    - Domain types from core/ used for enum fields
"""
