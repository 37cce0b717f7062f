"""Employee Service — facade operations composed from upstream calls and pure aggregates.

Invariants:
    - Only ResilientEmployeeApiClient.call() touches the network; no retry here
    - list_all: absent payload is an empty collection, never an error
    - search_by_name with a blank needle returns [] without calling upstream
    - get_by_id: the id is percent-encoded as a single path segment, so
      reserved characters (?, #, /) never alter the upstream request;
      upstream NOT_FOUND or absent payload → EmployeeNotFoundError(id)
    - create: absent payload → UpstreamError(EMPTY_RESULT)
    - delete_by_id: fetch (to resolve name) then delete by name; false/absent
      result → UpstreamError(EMPTY_RESULT); returns the resolved name

Design Decisions:
    - Aggregations delegate to core/employee_aggregates (pure) after one list_all()
    - delete_by_id is not atomic: the id→name binding may change between the
      two calls; accepted (upstream offers no conditional delete)
    - A NOT_FOUND on the delete call itself means the employee vanished after the
      fetch, so it is reported as not found for the requested id
"""

import logging
from urllib.parse import quote

from employee_facade.core.domain_types import UpstreamFailureKind, UpstreamMethod
from employee_facade.core.employee_aggregates import (
    filter_by_name, highest_salary, top_earner_names,
)
from employee_facade.core.errors import (
    EmployeeNotFoundError, ErrorContext, UpstreamError,
)
from employee_facade.infrastructure.employee_api_client import (
    ResilientEmployeeApiClient,
)
from employee_facade.schemas.employee import (
    CreateEmployeeInput, DeleteEmployeeInput, Employee,
)

logger = logging.getLogger(__name__)

_COLLECTION = ""


class EmployeeService:
    """Employee operations over the upstream employee API."""

    def __init__(self, client: ResilientEmployeeApiClient):
        self.client = client

    async def list_all(self) -> list[Employee]:
        logger.debug("Fetching all employees")
        employees = await self.client.call(
            _COLLECTION, UpstreamMethod.READ, payload_type=list[Employee],
        )
        if employees is None:
            logger.info("Employee API returned empty response for list_all")
            return []
        logger.debug(
            f"Fetched {len(employees)} employees", extra={"count": len(employees)},
        )
        return employees

    async def search_by_name(self, search_string: str) -> list[Employee]:
        if not search_string or not search_string.strip():
            logger.debug("Empty search string provided; returning empty list")
            return []
        matches = filter_by_name(await self.list_all(), search_string)
        logger.debug(
            f"Found {len(matches)} employees matching search_string={search_string!r}",
            extra={"count": len(matches)},
        )
        return matches

    async def get_by_id(self, employee_id: str) -> Employee:
        logger.debug(
            f"Fetching employee by id={employee_id}",
            extra={"employee_id": employee_id},
        )
        try:
            employee = await self.client.call(
                f"/{quote(employee_id, safe='')}", UpstreamMethod.READ,
                payload_type=Employee,
            )
        except UpstreamError as e:
            if e.is_not_found:
                logger.info(
                    f"Employee not found for id={employee_id}",
                    extra={"employee_id": employee_id},
                )
                raise EmployeeNotFoundError(employee_id, e.context) from e
            raise
        if employee is None:
            logger.info(
                f"Employee API returned empty response for id={employee_id}",
                extra={"employee_id": employee_id},
            )
            raise EmployeeNotFoundError(employee_id)
        return employee

    async def highest_salary(self) -> int:
        result = highest_salary(await self.list_all())
        logger.debug(f"Highest employee salary resolved to {result}")
        return result

    async def top_ten_highest_earning_names(self) -> list[str]:
        names = top_earner_names(await self.list_all())
        logger.debug(
            f"Top 10 highest earning employee names resolved (count={len(names)})",
            extra={"count": len(names)},
        )
        return names

    async def create(self, employee_input: CreateEmployeeInput) -> Employee:
        logger.info(f"Creating employee name={employee_input.name}")
        created = await self.client.call(
            _COLLECTION, UpstreamMethod.CREATE, employee_input,
            payload_type=Employee,
        )
        if created is None:
            logger.error("Employee API returned empty response for create")
            raise UpstreamError(
                UpstreamFailureKind.EMPTY_RESULT,
                "Failed to create employee",
                context=ErrorContext(url=self.client.base_url),
            )
        logger.info(
            f"Created employee id={created.id}", extra={"employee_id": created.id},
        )
        return created

    async def delete_by_id(self, employee_id: str) -> str:
        """Delete the employee with `employee_id`; returns its name."""
        logger.info(
            f"Deleting employee by id={employee_id}",
            extra={"employee_id": employee_id},
        )
        employee = await self.get_by_id(employee_id)
        if employee.name is None:
            raise UpstreamError(
                UpstreamFailureKind.INVALID_PAYLOAD,
                f"Employee id={employee_id} has no name; upstream deletes by name",
                context=ErrorContext(employee_id=employee_id),
            )
        try:
            deleted = await self.client.call(
                _COLLECTION, UpstreamMethod.DELETE,
                DeleteEmployeeInput(name=employee.name), payload_type=bool,
            )
        except UpstreamError as e:
            if e.is_not_found:
                raise EmployeeNotFoundError(employee_id, e.context) from e
            raise
        if not deleted:
            logger.error(
                f"Employee API failed to delete employee id={employee_id} "
                f"name={employee.name}",
                extra={"employee_id": employee_id},
            )
            raise UpstreamError(
                UpstreamFailureKind.EMPTY_RESULT,
                f"Failed to delete employee with id={employee_id}",
                context=ErrorContext(employee_id=employee_id, url=self.client.base_url),
            )
        logger.info(
            f"Deleted employee id={employee_id} name={employee.name}",
            extra={"employee_id": employee_id},
        )
        return employee.name
