"""Infrastructure Layer — upstream HTTP client and cross-cutting concerns.

Invariants:
    - All upstream calls wrapped with retry/timeout/error mapping

Design Decisions:
    - Resilient wrapper over the raw httpx client (ADR: single responsibility)
"""
