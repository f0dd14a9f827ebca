"""Core Layer — pure storefront logic, no IO, no async, no HTTP.

Invariants:
    - No module in core/ imports from services/, api/, or infrastructure/
    - Cart and configurator state have exactly one writer (their owning class)

Design Decisions:
    - Functional core separated from imperative shell (ADR: impureim sandwich)
"""
