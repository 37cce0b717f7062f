"""Employee Aggregates — pure search/max/top-N computations over an employee list.

Invariants:
    - Input order is preserved by filter_by_name
    - Absent salaries never fail a computation: excluded from max, ranked lowest in top-N
    - Absent names never match a search and never appear in top-N output
    - highest_salary of an empty (or all-absent) collection is 0

Design Decisions:
    - Plain functions over a service method: testable without IO (ADR: functional core)
    - Typed against the PayrollRecord protocol, not the pydantic Employee model,
      so core never imports schemas
    - sorted() is stable, so salary ties keep upstream order
"""

from collections.abc import Sequence
from typing import TypeVar

from employee_facade.core.domain_types import PayrollRecord

TOP_EARNERS_LIMIT = 10

R = TypeVar("R", bound=PayrollRecord)


def filter_by_name(employees: Sequence[R], needle: str) -> list[R]:
    """Employees whose name contains needle, case-insensitively. Blank needle → []."""
    if not needle or not needle.strip():
        return []
    lowered = needle.lower()
    return [
        e for e in employees
        if e.name is not None and lowered in e.name.lower()
    ]


def highest_salary(employees: Sequence[PayrollRecord]) -> int:
    return max(
        (e.salary for e in employees if e.salary is not None), default=0,
    )


def top_earner_names(
    employees: Sequence[PayrollRecord], limit: int = TOP_EARNERS_LIMIT,
) -> list[str]:
    """Names of the `limit` best-paid employees, highest salary first."""
    ranked = sorted(
        employees,
        key=lambda e: (e.salary is not None, e.salary or 0),
        reverse=True,
    )
    return [e.name for e in ranked[:limit] if e.name is not None]
