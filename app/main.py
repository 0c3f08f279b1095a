# =============================================================================
# app/main.py - FastAPI Application Entry Point
# =============================================================================
# This is the main entry point for the Album Catalog API.
# It configures the FastAPI application with middleware, routers, and handlers.
#
# Usage:
#   uvicorn app.main:app --reload --port 3001
#   album-catalog            (console script, uses API_HOST / API_PORT)
# =============================================================================

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.config import settings
from app.dependencies import album_store
from app.exceptions import (
    AVAILABLE_ENDPOINTS,
    CatalogException,
    catalog_exception_handler,
    http_exception_handler,
    unhandled_exception_handler,
    validation_exception_handler,
)
from app.routers import albums, health, stats
from app.routers.health import API_VERSION

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if settings.DEBUG else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    Logs the configuration and the endpoint list on startup, and the
    shutdown. The catalog itself needs no setup or teardown.
    """
    logger.info(f"Starting Album Catalog API in {settings.ENVIRONMENT} mode")
    logger.info(f"CORS origins: {settings.cors_origins_list}")
    logger.info(f"Catalog loaded with {len(album_store)} albums")
    logger.info(f"Listening on http://{settings.API_HOST}:{settings.API_PORT}")
    for endpoint in AVAILABLE_ENDPOINTS:
        logger.info(f"  {endpoint}")

    yield

    logger.info("Shutting down Album Catalog API")


# Create FastAPI application
app = FastAPI(
    title="Album Catalog API",
    description="""
## In-memory album catalog

Browse, search and edit a collection of music albums. The catalog lives in
memory only: restarting the server resets it to the built-in seed albums.

### Quick Start

```bash
# List albums
curl http://localhost:3001/albums

# Add an album
curl -X POST http://localhost:3001/albums \\
  -H "Content-Type: application/json" \\
  -d '{"band": "Queen", "title": "A Night at the Opera", "year": 1975}'

# Statistics
curl http://localhost:3001/stats
```
""",
    version=API_VERSION,
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
    openapi_tags=[
        {
            "name": "Albums",
            "description": "List, search, create, update and delete albums",
        },
        {
            "name": "Stats",
            "description": "Aggregate catalog statistics",
        },
        {
            "name": "Health",
            "description": "API health check",
        },
    ],
)


# =============================================================================
# Middleware
# =============================================================================

# CORS middleware - browsers on any origin may call the API by default
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials="*" not in settings.cors_origins_list,
    allow_methods=["*"],
    allow_headers=["*"],
)


# =============================================================================
# Exception Handlers
# =============================================================================

app.add_exception_handler(CatalogException, catalog_exception_handler)
app.add_exception_handler(RequestValidationError, validation_exception_handler)
app.add_exception_handler(StarletteHTTPException, http_exception_handler)
app.add_exception_handler(Exception, unhandled_exception_handler)


# =============================================================================
# Routers
# =============================================================================

# Album endpoints
app.include_router(
    albums.router,
    prefix="/albums",
    tags=["Albums"]
)

# Statistics endpoint
app.include_router(
    stats.router,
    tags=["Stats"]
)

# Health check endpoint
app.include_router(
    health.router,
    tags=["Health"]
)


# =============================================================================
# Root Endpoint
# =============================================================================

@app.get("/", tags=["Root"])
async def root():
    """
    Root endpoint - returns API info.
    """
    return {
        "name": "Album Catalog API",
        "version": API_VERSION,
        "docs": "/docs",
        "health": "/health",
        "endpoints": AVAILABLE_ENDPOINTS,
    }


def run() -> None:
    """Start the API server with uvicorn."""
    import uvicorn

    uvicorn.run(
        "app.main:app",
        host=settings.API_HOST,
        port=settings.API_PORT,
        log_level="debug" if settings.DEBUG else "info",
    )


if __name__ == "__main__":
    run()
