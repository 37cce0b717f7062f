"""Services Layer — facade operations over the upstream employee API.

Invariants:
    - Services never issue HTTP directly; they go through the resilient client

Design Decisions:
    - Stateless service objects built per request from the shared client
"""
