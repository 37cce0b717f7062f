"""Service test fixtures — scripted upstream client + service under test."""

import pytest

from employee_facade.services.employee_service import EmployeeService

from tests.services.mock_employee_api import MockEmployeeApiClient


@pytest.fixture
def mock_api():
    return MockEmployeeApiClient()


@pytest.fixture
def service(mock_api):
    return EmployeeService(mock_api)
