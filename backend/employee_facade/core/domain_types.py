"""Domain Types — enums and aliases shared by the client, services and API layers.

Invariants:
    - EmployeeId is the upstream-assigned opaque string, never parsed locally
    - UpstreamMethod covers read/create/delete only (no update is exposed)
    - UpstreamFailureKind enumerates every terminal failure of an upstream call
    - PayrollRecord is structural: core code reads name/salary without
      depending on the pydantic schemas

Design Decisions:
    - NewType over wrapper classes: zero runtime cost (ADR: type-checker support)
    - str Enums: values double as log fields and JSON without custom encoders
"""

from enum import Enum
from typing import NewType, Protocol


# ─── Identity Types ──────────────────────────────────────────────

EmployeeId = NewType("EmployeeId", str)


# ─── Enums ───────────────────────────────────────────────────────

class UpstreamMethod(str, Enum):
    """Logical upstream operation, mapped onto an HTTP verb."""
    READ = "GET"
    CREATE = "POST"
    DELETE = "DELETE"


class UpstreamFailureKind(str, Enum):
    """Terminal outcome of a failed upstream call."""
    NOT_FOUND = "not_found"
    RATE_LIMITED = "rate_limited"
    UPSTREAM_STATUS = "upstream_status"
    TRANSPORT = "transport"
    EMPTY_RESULT = "empty_result"
    INVALID_PAYLOAD = "invalid_payload"


# ─── Structural Types ────────────────────────────────────────────

class PayrollRecord(Protocol):
    """Anything exposing an optional name and salary; Employee conforms."""

    @property
    def name(self) -> str | None: ...

    @property
    def salary(self) -> int | None: ...
