"""Services Layer — shop sessions, checkout coordination, customization, fulfillment.

Invariants:
    - Services orchestrate core objects; business rules live in core/
    - Every collaborator call (fulfillment) happens here, never in core/

Design Decisions:
    - One file per concern for locality (no god objects)
"""
