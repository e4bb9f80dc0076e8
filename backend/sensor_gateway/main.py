"""
Sensor Gateway - Backend API
============================
FastAPI application that stores sensor measurements in MongoDB.

ARCHITECTURE:
    Sensors POST their readings here; dashboards read them back over a
    time window.

    [Sensor] --POST /sensor--> [This Gateway] --> [MongoDB]
                                     ^
    [Dashboard] --GET /read/...------+

HOW TO RUN:
    # Install
    pip install -e .

    # Copy environment config
    cp env.example.txt .env
    # Edit .env with your settings

    # Run the server (binds $PORT, default 8080)
    python -m sensor_gateway

    # Or with uvicorn directly
    uvicorn sensor_gateway.main:create_app --factory --port 8080

API DOCUMENTATION:
    After starting the server, visit:
    - Swagger UI: http://localhost:8080/docs
    - ReDoc: http://localhost:8080/redoc
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.concurrency import run_in_threadpool

from sensor_gateway import __version__
from sensor_gateway.config import CORS_METHODS, Config
from sensor_gateway.errors import MeasureAPIError, measure_api_error_handler
from sensor_gateway.routers import measures_router
from sensor_gateway.services import MeasureStore


logging.basicConfig(
    level=logging.INFO,
    format='[%(asctime)s] %(message)s',
    datefmt='%H:%M:%S',
    handlers=[logging.StreamHandler(sys.stderr)]
)
logger = logging.getLogger(__name__)


# =============================================================================
# APPLICATION LIFESPAN
# =============================================================================

@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    STARTUP:
        Open the MeasureStore (unless one was handed to create_app)

    SHUTDOWN:
        Close the MongoDB client if we opened it
    """
    config: Config = app.state.config
    owns_store = app.state.store is None
    if owns_store:
        app.state.store = MeasureStore(config)

    logger.info(f"Sensor gateway started (database: {config.database}, collection: {config.collection})")
    logger.info(f"CORS origins: {len(config.cors_origins)} configured")

    yield  # Application runs here

    logger.info("Shutting down...")
    if owns_store:
        app.state.store.close()
        app.state.store = None
    logger.info("Shutdown complete")


# =============================================================================
# CREATE FASTAPI APPLICATION
# =============================================================================

def create_app(config: Optional[Config] = None, store: Optional[MeasureStore] = None) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        config: Gateway settings. Read from the environment when omitted.
        store: Already-open store. When omitted the lifespan opens one.

    Raises:
        ConfigError: If the environment is missing required settings
    """
    if config is None:
        config = Config.from_env()

    logging.getLogger().setLevel(config.log_level)

    app = FastAPI(
        title="Sensor Gateway API",
        description="""
## Overview

Stores sensor measurements and serves them back over a time window.

## Authentication

- `POST /sensor` requires `Authorization: Bearer <API_WRITE>`
- `DELETE /measures` requires `Authorization: Bearer <API_DELETE>`
- `GET /read/{value}/{scale}` is open
        """,
        version=__version__,
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
    )
    app.state.config = config
    app.state.store = store

    # CORS: only the configured frontends, only the methods we serve
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_origins,
        allow_methods=CORS_METHODS,
        allow_headers=["*"],
    )

    app.add_exception_handler(MeasureAPIError, measure_api_error_handler)

    app.include_router(measures_router)

    # =========================================================================
    # ROOT ENDPOINTS
    # =========================================================================

    @app.get("/", summary="API Information")
    async def root():
        """Root endpoint with API overview."""
        return {
            "name": "Sensor Gateway API",
            "version": __version__,
            "endpoints": {
                "save": "POST /sensor",
                "read": "GET /read/{value}/{hours|mins|secs}",
                "delete": "DELETE /measures",
            },
        }

    @app.get("/health", summary="Health Check")
    async def health():
        """Health check endpoint. Pings the database."""
        database_ok = await run_in_threadpool(app.state.store.ping)
        return {
            "status": "healthy" if database_ok else "degraded",
            "database": "reachable" if database_ok else "unreachable",
        }

    return app
