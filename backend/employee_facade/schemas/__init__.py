"""Pydantic Schemas — request/response validation for the facade and upstream.

Invariants:
    - Schemas validate at system boundaries (caller input, upstream responses)

Design Decisions:
    - One module per resource; the facade has a single resource (employee)
"""
