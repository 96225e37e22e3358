"""FastAPI application factory"""

from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
from starlette.responses import Response

from finance_advisor.api.middleware import RequestIDMiddleware, MetricsMiddleware
from finance_advisor.api.v1 import alerts, analysis
from finance_advisor.config import Settings, settings as default_settings
from finance_advisor.domain.exceptions import InvalidInputError
from finance_advisor.infrastructure.observability.logging import setup_logging


def create_app(app_settings: Optional[Settings] = None) -> FastAPI:
    """Build the advisor service; logging follows the given settings"""
    app_settings = app_settings or default_settings
    setup_logging(app_settings.log_level)

    app = FastAPI(
        title="Finance Advisor",
        description="Stateless analysis of a transaction and goal snapshot",
        version="0.1.0",
    )

    # Last added runs first, so every response carries a request id
    app.add_middleware(MetricsMiddleware)
    app.add_middleware(RequestIDMiddleware)

    @app.exception_handler(InvalidInputError)
    async def invalid_input_handler(request: Request, exc: InvalidInputError) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content={"detail": str(exc), "index": exc.index, "field": exc.field},
        )

    @app.get("/health")
    def health_check():
        return {"status": "ok", "service": app_settings.service_name}

    @app.get("/metrics")
    def metrics():
        return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)

    app.include_router(analysis.router, prefix="/v1", tags=["analysis"])
    app.include_router(alerts.router, prefix="/v1", tags=["alerts"])

    return app


app = create_app()
