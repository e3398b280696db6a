"""
Application registry client for Gateway.
"""

import time
from typing import Mapping, Optional
from urllib.parse import quote

import httpx

from shared.errors import ServiceError
from shared.logging import get_logger
from shared.metrics import MetricsCollector
from ..domain.query_builder import QueryPairs, SearchCriteria, build_search_query
from ..domain.results import BackendCallResult, BackendFailure, BackendSuccess


def build_backend_path(path_template: str, path_params: Optional[Mapping[str, str]] = None) -> str:
    """Fill ``{name}`` placeholders, encoding each value as one path segment."""
    encoded = {name: quote(str(value), safe="") for name, value in (path_params or {}).items()}
    try:
        return path_template.format(**encoded)
    except (KeyError, IndexError) as exc:
        raise ServiceError(
            f"Missing path parameter for {path_template}",
            details={"path_template": path_template, "missing": str(exc)}
        ) from exc


def create_http_client(base_url: str, timeout_seconds: float, connect_timeout_seconds: float) -> httpx.AsyncClient:
    """Create the long-lived HTTP client bound to the backend base URL."""
    return httpx.AsyncClient(
        base_url=base_url,
        timeout=httpx.Timeout(timeout_seconds, connect=connect_timeout_seconds),
    )


class RegistryClient:
    """Client for the downstream application registry service.

    Every call issues exactly one GET. A completed exchange is returned as
    ``BackendSuccess`` whatever its status code; anything raised while
    performing the exchange is returned as ``BackendFailure``.
    """

    def __init__(self, http_client: httpx.AsyncClient, metrics: Optional[MetricsCollector] = None):
        self._client = http_client
        self.metrics = metrics
        self.logger = get_logger("gateway.registry_client")

    @property
    def base_url(self) -> str:
        return str(self._client.base_url)

    async def list_apps(self) -> BackendCallResult:
        """Fetch every registered application."""
        return await self.fetch("/api/apps")

    async def search_apps(self, criteria: SearchCriteria) -> BackendCallResult:
        """Search applications by the supplied filters."""
        return await self.fetch("/api/apps/search", query=build_search_query(criteria))

    async def get_app(self, app_name: str) -> BackendCallResult:
        """Fetch a single application by name."""
        return await self.fetch("/api/apps/{appName}", path_params={"appName": app_name})

    async def fetch(
        self,
        path_template: str,
        path_params: Optional[Mapping[str, str]] = None,
        query: Optional[QueryPairs] = None
    ) -> BackendCallResult:
        """Perform one GET against the backend and capture the outcome."""
        path = build_backend_path(path_template, path_params)
        start_time = time.perf_counter()

        try:
            response = await self._client.get(path, params=query or None)
        except Exception as exc:
            duration = time.perf_counter() - start_time
            self.logger.warning(
                "Backend request failed",
                path=path,
                error_type=type(exc).__name__,
                error=str(exc),
                duration_ms=round(duration * 1000, 2)
            )
            self._record(path_template, "failure", duration)
            return BackendFailure(cause=exc)

        duration = time.perf_counter() - start_time
        self.logger.debug(
            "Backend request completed",
            path=path,
            status_code=response.status_code,
            duration_ms=round(duration * 1000, 2)
        )
        self._record(path_template, "success", duration)

        return BackendSuccess(
            status_code=response.status_code,
            body=response.content,
            content_type=response.headers.get("content-type")
        )

    def _record(self, route: str, outcome: str, duration: float) -> None:
        if self.metrics is not None:
            self.metrics.record_backend_request(route, outcome, duration)
