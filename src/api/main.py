"""
FastAPI Application Factory

Assembles the read-only diagnostics API:
- Routes (frame config, latest frame, render metrics)
- CORS middleware
- Exception handlers

Used by main_asyncio.py (served through APIServerWrapper) and by tests
(via TestClient).
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from typing import Optional

from api.routes import frame
from api.middleware.error_handler import register_exception_handlers
from utils.logger import get_logger
from models.enums import LogCategory

log = get_logger().for_category(LogCategory.API)


def create_app(
    title: str = "Matrix Torus",
    description: str = "Read-only diagnostics for the LED matrix torus renderer",
    version: str = "1.0.0",
    docs_enabled: bool = True,
    cors_origins: Optional[list[str]] = None
) -> FastAPI:
    """
    Create and configure FastAPI application.

    Args:
        title: API title (shown in docs)
        description: API description
        version: API version
        docs_enabled: Enable /docs and /redoc
        cors_origins: CORS allowed origins (default: localhost dev servers)

    Returns:
        Configured FastAPI application ready to run
    """
    app = FastAPI(
        title=title,
        description=description,
        version=version,
        docs_url="/docs" if docs_enabled else None,
        redoc_url="/redoc" if docs_enabled else None,
        openapi_url="/openapi.json" if docs_enabled else None
    )

    log.info(f"Creating FastAPI app: {title} v{version}")

    # =========================================================================
    # CORS Configuration
    # =========================================================================

    if cors_origins is None:
        cors_origins = [
            "http://localhost:3000",
            "http://localhost:5173",
            "http://localhost",
            "http://127.0.0.1:3000",
            "http://127.0.0.1:5173",
        ]

    app.add_middleware(
        CORSMiddleware,
        allow_origins=cors_origins,
        allow_credentials=True,
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    # =========================================================================
    # Exception Handlers
    # =========================================================================

    register_exception_handlers(app)

    # =========================================================================
    # Routes
    # =========================================================================

    app.include_router(
        frame.router,
        prefix="/api/v1"
    )

    log.debug("Routes registered: frame (/api/v1/frame)")

    @app.get(
        "/api/health",
        tags=["System"],
        summary="Health check",
        description="Check if API is running and responding"
    )
    async def health_check():
        return {
            "status": "healthy",
            "service": "matrix-torus-api",
            "version": version
        }

    @app.get("/", include_in_schema=False)
    async def root():
        return JSONResponse(
            {
                "message": "Matrix Torus API",
                "docs": "/docs" if docs_enabled else None,
                "health": "/api/health"
            }
        )

    return app
