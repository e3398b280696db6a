"""
API Gateway service for the application registry.
"""

import os
from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

import httpx
from fastapi import Path, Query, Response
from fastapi.responses import JSONResponse

from shared.base_service import BaseService
from service_gateway.app.adapters.registry_client import RegistryClient, create_http_client
from service_gateway.app.domain.fallback import ErrorPayload, encode_fallback
from service_gateway.app.domain.query_builder import SearchCriteria
from service_gateway.app.domain.results import BackendCallResult, BackendSuccess

GATEWAY_TAG = "App Registry Gateway"


@dataclass(frozen=True)
class RouteSpec:
    """One entry of the gateway's route table."""

    path: str
    handler: str
    name: str
    summary: str
    description: str
    method: str = "GET"
    forwards: bool = False
    advertised: bool = True


ROUTE_TABLE: Tuple[RouteSpec, ...] = (
    RouteSpec(
        path="/",
        handler="gateway_info",
        name="gatewayInfo",
        summary="Get API Gateway Information",
        description="Returns information about the API Gateway service and available endpoints",
        advertised=False,
    ),
    RouteSpec(
        path="/health",
        handler="health_check",
        name="health",
        summary="Health Check",
        description="Returns the health status of the API Gateway",
    ),
    RouteSpec(
        path="/api/apps",
        handler="get_all_apps",
        name="getAllApps",
        summary="Get All Applications",
        description="Retrieves all applications from the backend service",
        forwards=True,
    ),
    # Must stay ahead of /api/apps/{appName} so "search" is not taken as a name
    RouteSpec(
        path="/api/apps/search",
        handler="search_apps",
        name="searchApps",
        summary="Search Applications",
        description="Search applications by name, owner, or validity status",
        forwards=True,
    ),
    RouteSpec(
        path="/api/apps/{appName}",
        handler="get_app_by_name",
        name="getAppByName",
        summary="Get Application by Name",
        description="Retrieves a specific application by its name",
        forwards=True,
    ),
)


class GatewayService(BaseService):
    """API Gateway service implementation."""

    def __init__(self, http_client: Optional[httpx.AsyncClient] = None, **config_overrides):
        super().__init__("gateway", int(os.getenv("GATEWAY_PORT", "8080")), **config_overrides)

        # A caller-supplied client stays owned by the caller
        self._owns_http_client = http_client is None
        if http_client is None:
            http_client = create_http_client(
                self.config.backend_base_url,
                self.config.backend_timeout_seconds,
                self.config.backend_connect_timeout_seconds,
            )
        self.http_client = http_client
        self.registry_client = RegistryClient(http_client, metrics=self.metrics)

        self._register_routes()

        # Expose service instance via app state for introspection/testing
        self.app.state.gateway_service = self
        self.app.state.registry_client = self.registry_client

    def _openapi_tags(self):
        return [{
            "name": GATEWAY_TAG,
            "description": "Stable entry point in front of the application registry",
        }]

    async def on_startup(self) -> None:
        self.logger.info("Gateway forwarding to backend", backend_base_url=self.registry_client.base_url)

    async def on_shutdown(self) -> None:
        if self._owns_http_client:
            await self.http_client.aclose()

    def _register_routes(self):
        """Register every entry of the route table on the app."""
        for route in ROUTE_TABLE:
            self.app.add_api_route(
                route.path,
                getattr(self, route.handler),
                methods=[route.method],
                name=route.name,
                summary=route.summary,
                description=route.description,
                tags=[GATEWAY_TAG],
                responses=self._documented_responses(route),
            )

    def _documented_responses(self, route: RouteSpec) -> Dict[int, Dict[str, Any]]:
        if not route.forwards:
            return {}
        responses: Dict[int, Dict[str, Any]] = {
            200: {"description": "Backend response, passed through unchanged"},
        }
        if route.handler == "get_app_by_name":
            responses[404] = {"description": "Application not found"}
        fallback_status = self.config.fallback_status_code
        if fallback_status in responses:
            responses[fallback_status]["description"] += "; fallback payload when the backend service is unavailable"
        else:
            responses[fallback_status] = {
                "model": ErrorPayload,
                "description": "Backend service unavailable",
            }
        return responses

    def endpoint_catalog(self) -> Dict[str, str]:
        """Map of advertised route names to their paths."""
        return {route.name: route.path for route in ROUTE_TABLE if route.advertised}

    async def gateway_info(self) -> Dict[str, Any]:
        return {
            "service": self.config.service_display_name,
            "version": self.config.service_version,
            "status": "UP",
            "timestamp": self._timestamp(),
            "endpoints": self.endpoint_catalog(),
        }

    async def get_all_apps(self) -> Response:
        return self._to_response(await self.registry_client.list_apps())

    async def search_apps(
        self,
        app_name: Optional[str] = Query(None, alias="appName", description="Application name to search"),
        app_owner: Optional[str] = Query(None, alias="appOwner", description="Application owner to search"),
        is_valid: Optional[bool] = Query(None, alias="isValid", description="Application validity status to search"),
    ) -> Response:
        criteria = SearchCriteria(app_name=app_name, app_owner=app_owner, is_valid=is_valid)
        return self._to_response(await self.registry_client.search_apps(criteria))

    async def get_app_by_name(
        self,
        appName: str = Path(..., description="Name of the application to retrieve"),
    ) -> Response:
        return self._to_response(await self.registry_client.get_app(appName))

    def _to_response(self, result: BackendCallResult) -> Response:
        """Pass a backend response through untouched, or substitute the fallback."""
        if isinstance(result, BackendSuccess):
            # Set as a raw header; media_type would append a charset to text/* types
            return Response(
                content=result.body,
                status_code=result.status_code,
                headers={"content-type": result.content_type} if result.content_type else None,
            )

        payload = encode_fallback(result)
        return JSONResponse(
            status_code=self.config.fallback_status_code,
            content=payload.model_dump(),
        )


def create_app(http_client: Optional[httpx.AsyncClient] = None, **config_overrides):
    """Create FastAPI application."""
    service = GatewayService(http_client=http_client, **config_overrides)
    return service.app


def main():
    service = GatewayService()
    service.run()


if __name__ == "__main__":
    main()
