"""Employee Schemas — upstream wire models and facade request bodies.

Invariants:
    - Employee.id is always present; every other field may be absent upstream
    - Upstream wire names (employee_name, employee_salary, ...) are the aliases;
      responses are serialized by alias so callers see the upstream shape
    - UpstreamEnvelope tolerates missing data/status/error, unknown fields,
      and status/error of any JSON type (they are never read)
    - CreateEmployeeInput.name and .title are stripped and never blank

Design Decisions:
    - extra="ignore" over a custom decoder: lenient parsing comes from pydantic,
      only structurally invalid bodies (bad JSON, missing id) fail
    - coerce_numbers_to_str on Employee: upstream ids are opaque, numeric ids accepted
    - Generic envelope (UpstreamEnvelope[T]) lets the client validate any payload shape
"""

from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field, field_validator

T = TypeVar("T")


class Employee(BaseModel):
    """Flat employee record as returned by the upstream API."""
    model_config = ConfigDict(
        extra="ignore", populate_by_name=True, coerce_numbers_to_str=True,
    )

    id: str
    name: str | None = Field(None, alias="employee_name")
    salary: int | None = Field(None, alias="employee_salary")
    age: int | None = Field(None, alias="employee_age")
    title: str | None = Field(None, alias="employee_title")
    email: str | None = Field(None, alias="employee_email")


class UpstreamEnvelope(BaseModel, Generic[T]):
    """{data, status, error} wrapper around every upstream response."""
    model_config = ConfigDict(extra="ignore")

    data: T | None = None
    # Metadata only; any JSON shape accepted so a valid `data` is never rejected
    status: Any = None
    error: Any = None


class CreateEmployeeInput(BaseModel):
    """Employee creation body — validated before it reaches the service."""
    name: str
    salary: int = Field(gt=0)
    age: int = Field(ge=16, le=75)
    title: str

    @field_validator("name", "title")
    @classmethod
    def strip_not_blank(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("must not be blank")
        return v


class DeleteEmployeeInput(BaseModel):
    """Upstream delete body — upstream deletes by name, not id."""
    name: str
