"""
Security Core - lead intake, customers, service tickets, chat and call logs
backed by the hosted store
"""
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.core.config import Settings, settings as default_settings
from app.core.errors import ConfigurationError, NotFoundError, RecordValidationError, StoreError
from app.core.logging import configure_logging
from app.services.connection_provider import ConnectionProvider
from app.services.store_client import Privilege
from app.api.v1 import leads, customers, tickets, chat, calls, auth

ERROR_STATUS = [
    (NotFoundError, 404),
    (RecordValidationError, 422),
    (ConfigurationError, 503),
]


async def store_error_handler(request: Request, exc: StoreError) -> JSONResponse:
    status_code = next((code for kind, code in ERROR_STATUS if isinstance(exc, kind)), 500)
    return JSONResponse(status_code=status_code, content={"success": False, "error": exc.message})


def create_app(
    settings: Optional[Settings] = None,
    provider: Optional[ConnectionProvider] = None,
) -> FastAPI:
    if settings is None:
        settings = default_settings
    configure_logging(settings.LOG_LEVEL)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        yield
        app.state.store_provider.close()

    app = FastAPI(
        title="Security Core API",
        description="Leads, customers, service tickets, chat transcripts and call logs",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.store_provider = provider or ConnectionProvider(settings)

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(StoreError, store_error_handler)

    # API routes
    app.include_router(leads.router, prefix="/v1/leads", tags=["leads"])
    app.include_router(customers.router, prefix="/v1/customers", tags=["customers"])
    app.include_router(tickets.router, prefix="/v1/tickets", tags=["tickets"])
    app.include_router(chat.router, prefix="/v1/chat", tags=["chat"])
    app.include_router(calls.router, prefix="/v1/calls", tags=["calls"])
    app.include_router(auth.router, prefix="/v1/auth", tags=["auth"])

    @app.get("/health")
    async def health_check():
        store_provider: ConnectionProvider = app.state.store_provider
        tiers = {
            privilege.value: store_provider.client_for(privilege).granted.value
            for privilege in (Privilege.RESTRICTED, Privilege.FULL)
        }
        degraded = any(requested != granted for requested, granted in tiers.items())
        return {
            "status": "degraded" if degraded else "healthy",
            "service": settings.APP_NAME,
            "store": tiers,
        }

    @app.get("/")
    async def root():
        return {
            "service": settings.APP_NAME,
            "version": "1.0.0",
            "docs": "/docs"
        }

    return app


app = create_app()
