"""Employee Facade API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map EmployeeFacadeError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Upstream client created on startup and closed on shutdown via lifespan

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - One pooled httpx client per process, shared by all requests (read-only config)
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from employee_facade.api.error_handlers import register_error_handlers
from employee_facade.api.routes import employees, health
from employee_facade.config import get_settings
from employee_facade.infrastructure.employee_api_client import (
    close_employee_api, init_employee_api,
)
from employee_facade.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    client = init_employee_api(settings)
    logger.info(
        "Employee facade started",
        extra={"url": client.base_url, "max_attempts": client.max_attempts},
    )
    yield
    await close_employee_api()
    logger.info("Employee facade shutting down")


app = FastAPI(
    title="Employee Facade API", version="1.0.0", lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(employees.router)

register_error_handlers(app)
