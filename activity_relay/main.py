"""
GitHub Activity Relay

A FastAPI application that relays a user's public GitHub events as a
simplified activity list.
"""

from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from activity_relay.core.config import get_settings, logger
from activity_relay.middleware import REQUEST_ID_HEADER, RequestIDMiddleware
from activity_relay.routes import activity_router

settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager.

    Logs startup and shutdown; the relay holds no resources between requests.
    """
    logger.info(
        f"Starting {settings.app_name} {settings.app_version} "
        f"(upstream={settings.github_api_url}, "
        f"authenticated={settings.github_authenticated})"
    )

    yield

    logger.info(f"Shutting down {settings.app_name}...")


# Create FastAPI application
app = FastAPI(
    title=settings.app_name,
    description="Relay for simplified public GitHub activity",
    version=settings.app_version,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url=f"{settings.api_prefix}/openapi.json",
)

# CORS Middleware
if settings.cors_origins:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["GET", "OPTIONS"],
        allow_headers=["Content-Type", REQUEST_ID_HEADER],
        expose_headers=[REQUEST_ID_HEADER],
    )

app.add_middleware(RequestIDMiddleware)

# Include API routers
app.include_router(activity_router, prefix=settings.api_prefix)


@app.get("/", tags=["Root"])
async def root() -> dict:
    """
    Root endpoint with API information.

    Returns:
        dict: API metadata and available endpoints
    """
    return {
        "message": settings.app_name,
        "version": settings.app_version,
        "endpoints": {
            "activity": f"{settings.api_prefix}/activity",
            "docs": "/docs",
            "redoc": "/redoc",
            "health": "/health",
        },
    }


@app.get("/health", tags=["Health"])
async def health_check() -> dict:
    """Health check endpoint. Does not contact GitHub."""
    return {
        "status": "healthy",
        "version": settings.app_version,
        "authenticated": settings.github_authenticated,
    }


def run() -> None:
    """Start the HTTP server on the configured host and port.

    A bind failure is logged by uvicorn, which then exits the process
    with a non-zero status.
    """
    logger.info(f"Server starting on port {settings.port}")
    uvicorn.run(
        "activity_relay.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
