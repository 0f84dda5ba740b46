"""FastAPI application factory"""

from fastapi import FastAPI
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
from starlette.responses import Response

from assetflow.api.middleware import RequestContextMiddleware
from assetflow.api.v1 import occurrences, projection, summary
from assetflow.infrastructure.observability.logging import setup_logging
from assetflow.config import settings

# Setup structured logging
setup_logging(settings.log_level)


def create_app() -> FastAPI:
    """Create and configure FastAPI application"""
    app = FastAPI(
        title="AssetFlow Projection Engine",
        description="Recurring schedule previews and cash-flow projections",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
    )

    app.add_middleware(RequestContextMiddleware)

    @app.get("/health")
    def health_check():
        return {"status": "ok", "service": settings.service_name}

    # Prometheus metrics endpoint
    @app.get("/metrics")
    def metrics():
        return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)

    app.include_router(occurrences.router, prefix="/v1", tags=["occurrences"])
    app.include_router(projection.router, prefix="/v1", tags=["projections"])
    app.include_router(summary.router, prefix="/v1", tags=["summaries"])

    return app


app = create_app()
