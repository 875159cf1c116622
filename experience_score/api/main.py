"""FastAPI application factory"""

from fastapi import FastAPI
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
from starlette.responses import Response

from experience_score.api.middleware import RequestIDMiddleware, MetricsMiddleware
from experience_score.api.v1 import dates, rules, score
from experience_score.infrastructure.observability.logging import setup_logging
from experience_score.config import settings

# Setup structured logging
setup_logging(settings.log_level)


def create_app() -> FastAPI:
    """Create and configure FastAPI application"""
    app = FastAPI(
        title="Experience Score",
        description="Points for 180-day experience periods plus degree bonus",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
    )

    # Add middleware (order matters: last added = first executed)
    app.add_middleware(MetricsMiddleware)
    app.add_middleware(RequestIDMiddleware)

    # Health check endpoint
    @app.get("/health")
    def health_check():
        return {"status": "ok", "service": settings.service_name}

    # Prometheus metrics endpoint
    @app.get("/metrics")
    def metrics():
        return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)

    # Register API routers
    app.include_router(score.router, prefix="/v1", tags=["score"])
    app.include_router(dates.router, prefix="/v1", tags=["dates"])
    app.include_router(rules.router, prefix="/v1", tags=["rules"])

    return app


app = create_app()
