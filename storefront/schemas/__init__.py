"""Pydantic Schemas — request/response validation for API endpoints.

Invariants:
    - Schemas validate shape at the system boundary; business rules stay in core/
    - Money serialized as two-decimal strings produced by core.pricing.round_money

Design Decisions:
    - from_domain classmethods keep routes thin: route → service → schema
"""
