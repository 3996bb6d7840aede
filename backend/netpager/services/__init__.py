"""Services Layer: tool schemas, tool handlers, response builder, and tool dispatch.

Invariants:
    - Handlers raise NetPagerError; dispatch turns it into an error result
    - Tool dispatch uses explicit dict mapping (no auto-discovery)

Design Decisions:
    - Imperative shell around the pure core (ADR: impureim sandwich)
"""
