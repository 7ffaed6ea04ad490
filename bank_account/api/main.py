"""Builds the bank account HTTP app: account routes, health and Prometheus endpoints"""

from fastapi import FastAPI
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
from starlette.responses import Response

from bank_account.api.middleware import RequestIDMiddleware, MetricsMiddleware
from bank_account.api.v1 import account
from bank_account.infrastructure.observability.logging import setup_logging
from bank_account.config import settings

# JSON log lines must be configured before the first operation is dispatched
setup_logging(settings.log_level)


def create_app() -> FastAPI:
    """App with request-ID and latency middleware and the account router under settings.api_prefix"""
    app = FastAPI(
        title="Bank Account",
        description="Single bank account with deposits, withdrawals and a loan",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
    )

    # Last added runs first: the request ID exists before latency is recorded
    app.add_middleware(MetricsMiddleware)
    app.add_middleware(RequestIDMiddleware)

    @app.get("/health")
    def health_check():
        return {"status": "ok", "service": settings.service_name}

    @app.get("/metrics")
    def metrics():
        return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)

    app.include_router(account.router, prefix=settings.api_prefix, tags=["account"])

    return app


app = create_app()
