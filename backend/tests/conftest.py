"""Root conftest — shared test configuration."""

import os

# Ensure tests never target a real upstream employee API
os.environ.setdefault("EMPLOYEE_API_BASE_URL", "http://upstream.test/api/v1/employee")
os.environ.setdefault("LOG_FORMAT", "text")
