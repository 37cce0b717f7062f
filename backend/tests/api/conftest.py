"""API test fixtures — FastAPI app with the service dependency overridden.

Invariants:
    - Routes run against EmployeeService backed by a scripted MockEmployeeApiClient
    - Lifespan is not run (ASGITransport), so no real upstream client is created

Design Decisions:
    - Override get_employee_service, not the client singleton: routes stay untouched
    - raise_app_exceptions=False: lets the catch-all 500 handler's response reach the test
"""

import pytest
from httpx import ASGITransport, AsyncClient

from employee_facade.api.dependencies import get_employee_service
from employee_facade.main import app
from employee_facade.services.employee_service import EmployeeService

from tests.services.mock_employee_api import MockEmployeeApiClient


@pytest.fixture
def mock_api():
    return MockEmployeeApiClient()


@pytest.fixture
async def client(mock_api):
    """HTTP client against the app with a scripted upstream."""
    app.dependency_overrides[get_employee_service] = lambda: EmployeeService(mock_api)

    async with AsyncClient(
        transport=ASGITransport(app=app, raise_app_exceptions=False),
        base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
