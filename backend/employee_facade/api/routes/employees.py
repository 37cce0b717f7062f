"""Employee Routes — thin HTTP surface over EmployeeService.

Invariants:
    - Blank path parameters (id, search string) rejected with 400 before any upstream call
    - Request bodies validated by Pydantic (CreateEmployeeInput) before reaching the service
    - Employees serialized with upstream wire names (employee_name, employee_salary, ...)
    - Fixed paths (/highestSalary, /topTen...) registered before /{employee_id}

Design Decisions:
    - Routes raise domain errors; status mapping lives in api/error_handlers.py
    - Path names kept compatible with the existing employee controller contract
"""

import logging

from fastapi import APIRouter, Depends

from employee_facade.api.dependencies import get_employee_service
from employee_facade.core.errors import InvalidInputError
from employee_facade.schemas.employee import CreateEmployeeInput, Employee
from employee_facade.services.employee_service import EmployeeService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/employee", tags=["employees"])


def _require_not_blank(value: str, field: str) -> str:
    if not value or not value.strip():
        logger.info(f"Invalid {field}: value={value!r}")
        raise InvalidInputError(f"{field} must not be blank", field)
    return value


@router.get("", response_model=list[Employee])
async def get_all_employees(
    service: EmployeeService = Depends(get_employee_service),
):
    return await service.list_all()


@router.get("/search/{search_string}", response_model=list[Employee])
async def get_employees_by_name_search(
    search_string: str,
    service: EmployeeService = Depends(get_employee_service),
):
    _require_not_blank(search_string, "search_string")
    return await service.search_by_name(search_string)


@router.get("/highestSalary", response_model=int)
async def get_highest_salary_of_employees(
    service: EmployeeService = Depends(get_employee_service),
):
    return await service.highest_salary()


@router.get("/topTenHighestEarningEmployeeNames", response_model=list[str])
async def get_top_ten_highest_earning_employee_names(
    service: EmployeeService = Depends(get_employee_service),
):
    return await service.top_ten_highest_earning_names()


@router.get("/{employee_id}", response_model=Employee)
async def get_employee_by_id(
    employee_id: str,
    service: EmployeeService = Depends(get_employee_service),
):
    _require_not_blank(employee_id, "id")
    return await service.get_by_id(employee_id)


@router.post("", response_model=Employee)
async def create_employee(
    body: CreateEmployeeInput,
    service: EmployeeService = Depends(get_employee_service),
):
    return await service.create(body)


@router.delete("/{employee_id}", response_model=str)
async def delete_employee_by_id(
    employee_id: str,
    service: EmployeeService = Depends(get_employee_service),
):
    _require_not_blank(employee_id, "id")
    return await service.delete_by_id(employee_id)
