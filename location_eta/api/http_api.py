"""HTTP API adapter for the order update reconciler.

Endpoints:
- ``POST /location/current``: store an order's current position,
  returns and publishes the refreshed travel time.
- ``POST /location/target``: store an order's target position.
- ``POST /transport``: store an order's transport mode.
- ``GET /health``: store reachability.

Error handling strategy:
- Unparsable or invalid bodies -> HTTP 400.
- PublishError -> HTTP 500 "Failed to publish travel time".
- Any other domain error -> HTTP 500 "Failed to update and calculate time".
  The concrete error type is returned in ``error_type`` and logged.

Route functions are synchronous; FastAPI runs each request in its
worker thread pool.
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from fastapi import Depends, FastAPI, Request, Response
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from ..container import Container, get_container
from ..domain.errors import LocationEtaError, PublishError
from ..domain.models import LocationKind
from ..ports.store import HashStorePort
from ..services.reconciler import OrderUpdateReconciler
from .schemas import (
    ErrorResponse,
    HealthResponse,
    LocationUpdateRequest,
    LocationUpdateResponse,
    TransportUpdateRequest,
    TransportUpdateResponse,
)

logger = logging.getLogger(__name__)

UPDATE_FAILED_MESSAGE = "Failed to update and calculate time"
PUBLISH_FAILED_MESSAGE = "Failed to publish travel time"
INVALID_PAYLOAD_MESSAGE = "Invalid request payload"


def _get_reconciler(request: Request) -> OrderUpdateReconciler:
    return request.app.state.container.resolve(OrderUpdateReconciler)


def create_app(container: Optional[Container] = None) -> FastAPI:
    """Build the FastAPI application.

    Args:
        container: Dependency container (defaults to get_container()).
            It is closed when the application shuts down.

    Returns:
        The configured application.
    """
    container = container or get_container()

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        logger.info("Shutting down, releasing client resources")
        container.close()

    app = FastAPI(title="Location ETA", lifespan=lifespan)
    app.state.container = container

    @app.exception_handler(RequestValidationError)
    async def invalid_payload(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        logger.info(
            "Rejected request payload",
            extra={"path": request.url.path, "errors": str(exc.errors())},
        )
        return JSONResponse(
            status_code=400,
            content=ErrorResponse(detail=INVALID_PAYLOAD_MESSAGE).model_dump(),
        )

    @app.exception_handler(LocationEtaError)
    async def domain_error(request: Request, exc: LocationEtaError) -> JSONResponse:
        message = (
            PUBLISH_FAILED_MESSAGE
            if isinstance(exc, PublishError)
            else UPDATE_FAILED_MESSAGE
        )
        logger.error(
            message,
            extra={
                "path": request.url.path,
                "error_type": type(exc).__name__,
                "error": str(exc),
            },
        )
        return JSONResponse(
            status_code=500,
            content=ErrorResponse(
                detail=message, error_type=type(exc).__name__
            ).model_dump(),
        )

    def _point_update(
        payload: LocationUpdateRequest,
        kind: LocationKind,
        reconciler: OrderUpdateReconciler,
    ) -> LocationUpdateResponse:
        result = reconciler.apply_point_update(
            payload.order_id, payload.to_point(), kind
        )
        return LocationUpdateResponse(
            order_id=result.order_id,
            kind=result.kind.value,
            travel_time_seconds=result.travel_time_seconds,
            published=result.published,
        )

    @app.post("/location/current", response_model=LocationUpdateResponse)
    def update_current_location(
        payload: LocationUpdateRequest,
        reconciler: OrderUpdateReconciler = Depends(_get_reconciler),
    ) -> LocationUpdateResponse:
        return _point_update(payload, LocationKind.CURRENT, reconciler)

    @app.post("/location/target", response_model=LocationUpdateResponse)
    def update_target_location(
        payload: LocationUpdateRequest,
        reconciler: OrderUpdateReconciler = Depends(_get_reconciler),
    ) -> LocationUpdateResponse:
        return _point_update(payload, LocationKind.TARGET, reconciler)

    @app.post("/transport", response_model=TransportUpdateResponse)
    def update_transport(
        payload: TransportUpdateRequest,
        reconciler: OrderUpdateReconciler = Depends(_get_reconciler),
    ) -> TransportUpdateResponse:
        reconciler.apply_mode_update(payload.order_id, payload.mode)
        return TransportUpdateResponse(
            order_id=payload.order_id, mode=payload.mode.value
        )

    @app.get("/health", response_model=HealthResponse)
    def health(request: Request, response: Response) -> HealthResponse:
        store_ok = request.app.state.container.resolve(HashStorePort).ping()
        if not store_ok:
            response.status_code = 503
        return HealthResponse(status="ok" if store_ok else "degraded", store=store_ok)

    return app
