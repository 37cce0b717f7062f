"""Error Hierarchy — typed, categorized exceptions for every facade failure mode.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - EmployeeNotFoundError is the only error with a distinct client-facing status (404)
    - Every upstream failure is an UpstreamError (502) tagged with an UpstreamFailureKind
    - to_response() produces the REST error envelope; no internal details leaked

Design Decisions:
    - Single UpstreamError class + kind enum over one subclass per failure:
      callers branch on exc.kind, not on isinstance chains (ADR: tagged errors)
    - ErrorContext as dataclass: carries id/url/status for logs and responses
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any
from datetime import datetime, timezone

from employee_facade.core.domain_types import UpstreamFailureKind


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    EXTERNAL_API = "external_api"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Identifying context attached to an error (id, url, upstream status)."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    employee_id: str | None = None
    url: str | None = None
    status_code: int | None = None
    debug_info: dict[str, Any] | None = None


class EmployeeFacadeError(Exception):
    """Base exception for all facade errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to standardized REST error response."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "employee_id": self.context.employee_id,
                    "url": self.context.url,
                    "status_code": self.context.status_code,
                },
            }
        }


# ─── Domain Errors (400-level) ──────────────────────────────────

class InvalidInputError(EmployeeFacadeError):
    """Caller-supplied value failed validation outside the request body."""
    def __init__(self, message: str, field: str, context: ErrorContext | None = None):
        super().__init__(
            message, "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, context, 400,
        )
        self.field = field


class EmployeeNotFoundError(EmployeeFacadeError):
    """Upstream has no employee for the requested id."""
    def __init__(self, employee_id: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.employee_id = employee_id
        super().__init__(
            f"Employee not found for id={employee_id}",
            "EMPLOYEE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.INFO, ctx, 404,
        )
        self.employee_id = employee_id


# ─── Infrastructure Errors (500-level) ──────────────────────────

class UpstreamError(EmployeeFacadeError):
    """Upstream employee API call failed; `kind` says how."""
    def __init__(
        self,
        kind: UpstreamFailureKind,
        message: str,
        context: ErrorContext | None = None,
    ):
        super().__init__(
            message, "UPSTREAM_ERROR", ErrorCategory.EXTERNAL_API,
            ErrorSeverity.CRITICAL, context, 502,
        )
        self.kind = kind

    @property
    def is_not_found(self) -> bool:
        return self.kind is UpstreamFailureKind.NOT_FOUND
