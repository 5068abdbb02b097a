"""FastAPI application."""

import logfire
from dishka import AsyncContainer
from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from blogcraft.config import Settings
from blogcraft.interface.api.routes import (
    categories,
    comments,
    health,
    posts,
    search,
    seo,
    tags,
)
from blogcraft.util.di.container import create_container, setup_di
from blogcraft.util.observability import instrument_fastapi


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Log unexpected errors and answer 500 without leaking details."""
    logfire.error(
        "Unhandled error",
        method=request.method,
        path=request.url.path,
        error=str(exc),
        error_type=type(exc).__name__,
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal server error"},
    )


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.

    Args:
        container: DI container to use; the production container if None
    """
    settings = Settings()

    app_instance = FastAPI(
        title="Blogcraft Reader API",
        description="Public read, search and comment API for the Blogcraft blog",
        version="0.1.0",
    )

    # Instrument FastAPI for automatic tracing of HTTP requests
    instrument_fastapi(app_instance)

    # The blog frontend is the only browser client
    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=[
            settings.api.site_url,
            "http://localhost:3000",  # Local development
            "http://localhost:5173",  # Vite default
        ],
        allow_credentials=False,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Content-Type", "Accept", "Origin", "User-Agent"],
        expose_headers=["Content-Length", "Content-Type"],
        max_age=600,  # Cache preflight requests for 10 minutes
    )

    # Setup dependency injection
    # Settings are loaded from environment automatically
    setup_di(app_instance, container or create_container())

    app_instance.add_exception_handler(Exception, unhandled_error_handler)

    # Register routes
    app_instance.include_router(health.router)
    app_instance.include_router(posts.router)
    app_instance.include_router(comments.router)
    app_instance.include_router(categories.router)
    app_instance.include_router(tags.router)
    app_instance.include_router(search.router)
    app_instance.include_router(seo.router)

    return app_instance
