"""Resilient Employee API Client — one upstream exchange per call with bounded retry.

Invariants:
    - Rate limits (429): exponential backoff (initial, x2 per retry, no jitter),
      at most max_attempts attempts; the final attempt never sleeps
    - Not found (404): immediate UpstreamError(NOT_FOUND), never retried
    - Any other non-2xx: immediate UpstreamError(UPSTREAM_STATUS) carrying the code
    - Transport failure (connect/timeout/DNS): immediate UpstreamError(TRANSPORT)
      carrying the base URL
    - Absent envelope or absent data → None; callers decide if that is an error
    - Retry state lives in locals of one call(); the instance holds only config
      and the pooled httpx client, so concurrent calls never share backoff state
    - asyncio.CancelledError during a request or backoff sleep propagates
      unchanged (no further attempts, no partial result)

Design Decisions:
    - Wrapper over raw httpx: isolates retry + classification from services (ADR: single responsibility)
    - Tagged UpstreamError.kind over exception subclasses: callers branch on kind
    - Envelope parsed with pydantic TypeAdapter (cached per payload type):
      lenient on missing/unknown fields, strict only on malformed structure
    - Singleton client initialized on startup: FastAPI lifespan manages lifecycle
      (ADR: no global import side effects)
"""

import asyncio
import logging
from functools import lru_cache
from typing import Any, Optional

import httpx
from pydantic import BaseModel, TypeAdapter, ValidationError

from employee_facade.config import Settings
from employee_facade.core.domain_types import UpstreamFailureKind, UpstreamMethod
from employee_facade.core.errors import ErrorContext, UpstreamError
from employee_facade.schemas.employee import UpstreamEnvelope

logger = logging.getLogger(__name__)

_RATE_LIMITED_STATUS = 429
_NOT_FOUND_STATUS = 404


@lru_cache(maxsize=None)
def _envelope_adapter(payload_type: Any) -> TypeAdapter:
    """TypeAdapter for `UpstreamEnvelope[payload_type] | None` (a JSON null body is absence)."""
    return TypeAdapter(Optional[UpstreamEnvelope[payload_type]])


class ResilientEmployeeApiClient:
    """Wraps httpx.AsyncClient with retry on rate limits and error classification."""

    def __init__(
        self,
        base_url: str,
        max_attempts: int = 3,
        initial_backoff_ms: int = 250,
        connect_timeout_seconds: float = 2.0,
        read_timeout_seconds: float = 4.0,
        http_client: httpx.AsyncClient | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.max_attempts = max(1, max_attempts)
        self.initial_backoff_ms = initial_backoff_ms
        self.client = http_client or httpx.AsyncClient(
            timeout=httpx.Timeout(
                read_timeout_seconds, connect=connect_timeout_seconds,
            ),
        )

    async def call(
        self,
        path: str,
        method: UpstreamMethod,
        body: BaseModel | dict | None = None,
        *,
        payload_type: Any = Any,
    ):
        """Perform one logical upstream request and return the unwrapped payload.

        Returns the envelope's `data` validated as `payload_type`, or None when
        the body, the envelope or its data is absent. Raises UpstreamError.
        """
        url = self.build_url(path)
        json_body = body.model_dump(mode="json") if isinstance(body, BaseModel) else body
        attempt = 1
        while True:
            response = await self._send(url, method, json_body)
            if (
                response.status_code != _RATE_LIMITED_STATUS
                or attempt >= self.max_attempts
            ):
                break
            await self._backoff_before_retry(url, method, attempt)
            attempt += 1
        self._raise_for_status(response, url, method, attempt)
        return self._unwrap(response, url, payload_type)

    def build_url(self, path: str | None) -> str:
        """Join base URL and path with exactly one separating slash."""
        if not path or not path.strip():
            return self.base_url
        return f"{self.base_url}/{path.lstrip('/')}"

    def backoff_ms(self, attempt: int) -> int:
        """Delay before the retry that follows `attempt` (1-based)."""
        return self.initial_backoff_ms * (2 ** (attempt - 1))

    async def aclose(self) -> None:
        await self.client.aclose()

    async def _send(
        self, url: str, method: UpstreamMethod, json_body: dict | None,
    ) -> httpx.Response:
        """Single HTTP exchange; transport failures mapped to UpstreamError."""
        try:
            return await self.client.request(method.value, url, json=json_body)
        except httpx.TransportError as e:
            logger.error(
                f"Employee API unreachable: {e!r}",
                extra={"url": url, "method": method.value,
                       "kind": UpstreamFailureKind.TRANSPORT},
            )
            raise UpstreamError(
                UpstreamFailureKind.TRANSPORT,
                f"Employee API request failed: {self.base_url}",
                context=ErrorContext(url=self.base_url, debug_info={"cause": repr(e)}),
            ) from e

    async def _backoff_before_retry(
        self, url: str, method: UpstreamMethod, attempt: int,
    ) -> None:
        delay = self.backoff_ms(attempt)
        logger.warning(
            f"Rate limited by employee API (attempt {attempt}/{self.max_attempts}), "
            f"backing off {delay}ms",
            extra={
                "url": url, "method": method.value, "attempt": attempt,
                "max_attempts": self.max_attempts, "backoff_ms": delay,
            },
        )
        try:
            await asyncio.sleep(delay / 1000)
        except asyncio.CancelledError:
            logger.info(
                "Employee API call cancelled during backoff",
                extra={"url": url, "attempt": attempt},
            )
            raise

    def _raise_for_status(
        self,
        response: httpx.Response,
        url: str,
        method: UpstreamMethod,
        attempt: int,
    ) -> None:
        """Classify a final (non-retried) response; returns only on 2xx."""
        status = response.status_code
        if response.is_success:
            return
        ctx = ErrorContext(url=url, status_code=status)
        if status == _NOT_FOUND_STATUS:
            logger.info(
                "Employee API resource not found",
                extra={"url": url, "method": method.value, "status_code": status},
            )
            raise UpstreamError(
                UpstreamFailureKind.NOT_FOUND,
                f"Employee API resource not found: {url}",
                context=ctx,
            )
        if status == _RATE_LIMITED_STATUS:
            kind = UpstreamFailureKind.RATE_LIMITED
            message = (
                f"Employee API request failed with status={status} "
                f"after {attempt} attempt(s)"
            )
        else:
            kind = UpstreamFailureKind.UPSTREAM_STATUS
            message = f"Employee API request failed with status={status}"
        logger.error(
            message,
            extra={"url": url, "method": method.value, "status_code": status,
                   "kind": kind, "attempt": attempt},
        )
        raise UpstreamError(kind, message, context=ctx)

    def _unwrap(self, response: httpx.Response, url: str, payload_type: Any):
        if not response.content.strip():
            return None
        try:
            envelope = _envelope_adapter(payload_type).validate_json(response.content)
        except ValidationError as e:
            logger.error(
                f"Employee API returned an unreadable body: {e.error_count()} error(s)",
                extra={"url": url, "status_code": response.status_code,
                       "kind": UpstreamFailureKind.INVALID_PAYLOAD},
            )
            raise UpstreamError(
                UpstreamFailureKind.INVALID_PAYLOAD,
                f"Employee API returned an invalid response body: {url}",
                context=ErrorContext(
                    url=url, status_code=response.status_code,
                    debug_info={"errors": e.errors(include_url=False)},
                ),
            ) from e
        return envelope.data if envelope is not None else None


# Singleton (initialized on startup)
employee_api_client: ResilientEmployeeApiClient | None = None


def init_employee_api(settings: Settings) -> ResilientEmployeeApiClient:
    global employee_api_client
    employee_api_client = ResilientEmployeeApiClient(
        settings.employee_api_base_url,
        max_attempts=settings.employee_api_max_attempts,
        initial_backoff_ms=settings.employee_api_initial_backoff_ms,
        connect_timeout_seconds=settings.employee_api_connect_timeout_seconds,
        read_timeout_seconds=settings.employee_api_read_timeout_seconds,
    )
    return employee_api_client


async def close_employee_api() -> None:
    global employee_api_client
    if employee_api_client is not None:
        await employee_api_client.aclose()
        employee_api_client = None


def get_employee_api_client() -> ResilientEmployeeApiClient:
    """FastAPI dependency for the process-wide upstream client."""
    if not employee_api_client:
        raise RuntimeError("Employee API client not initialized")
    return employee_api_client
