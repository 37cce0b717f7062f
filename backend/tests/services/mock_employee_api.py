"""Mock Employee API Client — scripted stand-in for ResilientEmployeeApiClient.

Invariants:
    - Responses are consumed in order, one per call()
    - A scripted Exception instance is raised instead of returned
    - Scripted dicts/lists are validated as `payload_type`, like the real client
    - Every call is logged as {"path", "method", "body"} for assertions

Design Decisions:
    - Flat class (no inheritance from the real client): explicit, easy to debug
    - Builder helpers return plain upstream-shaped dicts (employee_name, ...)
"""

from typing import Any

from pydantic import BaseModel, TypeAdapter

from employee_facade.core.domain_types import UpstreamFailureKind
from employee_facade.core.errors import ErrorContext, UpstreamError

BASE_URL = "http://upstream.test/api/v1/employee"


class MockEmployeeApiClient:
    """Returns scripted payloads; records every call."""

    def __init__(self, responses: list | None = None):
        self.responses = list(responses or [])
        self.calls: list[dict] = []
        self.base_url = BASE_URL
        self.max_attempts = 3

    async def call(self, path, method, body=None, *, payload_type: Any = Any):
        self.calls.append({
            "path": path,
            "method": method,
            "body": body.model_dump() if isinstance(body, BaseModel) else body,
        })
        if not self.responses:
            raise AssertionError(f"Unexpected upstream call: {method} {path!r}")
        item = self.responses.pop(0)
        if isinstance(item, Exception):
            raise item
        if item is None:
            return None
        return TypeAdapter(payload_type).validate_python(item)


def employee(id: str, name: str | None, salary: int | None = None, **extra) -> dict:
    """Upstream-shaped employee dict."""
    record = {"id": id, "employee_name": name, "employee_salary": salary}
    record.update({f"employee_{k}": v for k, v in extra.items()})
    return record


def upstream_error(kind: UpstreamFailureKind, status_code: int | None = None) -> UpstreamError:
    return UpstreamError(
        kind,
        f"Employee API request failed with status={status_code}",
        context=ErrorContext(url=BASE_URL, status_code=status_code),
    )
