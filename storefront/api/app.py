"""
FastAPI application for the Dev Electricals booking backend.

Usage:
    from storefront.api import create_app

    app = create_app()                      # store chosen by configuration
    app = create_app(RepairRecordStore())   # explicit store, e.g. in tests
"""

from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from storefront.api.repairs import BOOKING_FAILED_MESSAGE, message_response, router
from storefront.config import AppConfig, settings
from storefront.logging_context import (
    get_request_id,
    get_request_logger,
    new_request_id,
    set_request_id,
)
from storefront.store import RepairRecordStore, build_store

logger = get_request_logger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"


def create_app(
    store: Optional[RepairRecordStore] = None,
    config: AppConfig = settings,
) -> FastAPI:
    """Build the API with its routes, middleware and error handlers."""
    app = FastAPI(title=f"{config.business.name} API")
    app.state.repair_store = store if store is not None else build_store(config)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.server.allowed_origins(),
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def bind_request_id(request: Request, call_next):
        request_id = request.headers.get(REQUEST_ID_HEADER) or new_request_id()
        set_request_id(request_id)
        response = await call_next(request)
        response.headers[REQUEST_ID_HEADER] = request_id
        return response

    @app.exception_handler(Exception)
    async def unhandled_error(request: Request, exc: Exception):
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        response = message_response(500, BOOKING_FAILED_MESSAGE)
        response.headers[REQUEST_ID_HEADER] = get_request_id()
        return response

    @app.get("/health")
    async def health():
        return {"status": "ok"}

    app.include_router(router)
    return app
