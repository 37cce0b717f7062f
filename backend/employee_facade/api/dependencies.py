"""Route Dependencies — wires services to the process-wide upstream client."""

from fastapi import Depends

from employee_facade.infrastructure.employee_api_client import (
    ResilientEmployeeApiClient, get_employee_api_client,
)
from employee_facade.services.employee_service import EmployeeService


def get_employee_service(
    client: ResilientEmployeeApiClient = Depends(get_employee_api_client),
) -> EmployeeService:
    return EmployeeService(client)
