"""FastAPI application factory"""

import logging
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
from starlette.responses import Response

from financing_gateway.api.dependencies import get_request_id
from financing_gateway.api.middleware import RequestIDMiddleware, MetricsMiddleware
from financing_gateway.api.v1 import simulation
from financing_gateway.domain.exceptions import InvalidCalculationInputError
from financing_gateway.infrastructure.observability.logging import setup_logging
from financing_gateway.infrastructure.observability.metrics import record_rejection
from financing_gateway.config import settings

# Setup structured logging
setup_logging(settings.log_level)


async def invalid_input_handler(request: Request, exc: InvalidCalculationInputError) -> JSONResponse:
    """Engine precondition failures are caller errors: 422 with the engine's message"""
    record_rejection(exc.reason)
    logging.warning(
        f"Invalid simulation input: {exc}",
        extra={"request_id": get_request_id(request), "reason": exc.reason},
    )
    return JSONResponse(status_code=422, content={"detail": str(exc)})


async def unexpected_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Anything else is a 500 without internals leaking to the caller"""
    logging.error(f"Unexpected error: {exc}", extra={"request_id": get_request_id(request)})
    return JSONResponse(status_code=500, content={"detail": "Internal server error"})


def create_app() -> FastAPI:
    """Create and configure FastAPI application"""
    app = FastAPI(
        title="Financing Gateway",
        description="Real-estate financing simulation service (SAC and PRICE)",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
    )

    # Add middleware (order matters: last added = first executed)
    app.add_middleware(MetricsMiddleware)
    app.add_middleware(RequestIDMiddleware)

    # Domain errors map to HTTP responses here, not in each router
    app.add_exception_handler(InvalidCalculationInputError, invalid_input_handler)
    app.add_exception_handler(Exception, unexpected_error_handler)

    @app.get("/health")
    def health_check():
        return {"status": "ok", "service": settings.service_name}

    # Prometheus metrics endpoint
    @app.get("/metrics")
    def metrics():
        return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)

    app.include_router(simulation.router, prefix="/v1", tags=["simulations"])

    return app


app = create_app()
