"""
FastAPI Application Configuration

This module contains the main FastAPI application setup with:
- CORS middleware
- API routes
- Error handling
"""

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from contextlib import asynccontextmanager
import logging

from .. import __version__
from ..core import GraphError, PathingConfig

# Configure logging
logging.basicConfig(level=getattr(logging, PathingConfig().log_level, logging.INFO))
logger = logging.getLogger(__name__)


# =============================================================================
# Application Lifespan
# =============================================================================

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager for startup/shutdown events"""
    # Startup
    logger.info("Starting Infiltration Pathing API...")

    yield

    # Shutdown
    logger.info("Shutting down...")


# =============================================================================
# Create FastAPI Application
# =============================================================================

app = FastAPI(
    title="Infiltration Pathing API",
    description="""
    Route planning for an agent infiltrating a building.

    ## Features
    - Register mission buildings (rooms, connections, enemies, items)
    - BFS/DFS traversal of the building
    - Best entry point for the agent's current state
    - Cheapest route to the target or to the closest med kit
    """,
    version=__version__,
    lifespan=lifespan,
    docs_url="/api/docs",
    redoc_url="/api/redoc",
    openapi_url="/api/openapi.json"
)


# =============================================================================
# CORS Configuration
# =============================================================================

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# =============================================================================
# Import and Include Routers
# =============================================================================

from .routes import missions

app.include_router(missions.router, prefix="/api/missions", tags=["Missions"])


# =============================================================================
# Root Endpoint
# =============================================================================

@app.get("/", tags=["Root"])
async def root():
    """API root endpoint with welcome message and links"""
    return {
        "message": "Welcome to the Infiltration Pathing API",
        "version": __version__,
        "documentation": "/api/docs",
        "health": "/health",
        "endpoints": {
            "missions": "/api/missions"
        }
    }


@app.get("/health", tags=["Health"])
async def health_check():
    """Health check endpoint for monitoring"""
    return {
        "status": "healthy",
        "service": "infiltration-pathing-api",
        "version": __version__
    }


# =============================================================================
# Error Handlers
# =============================================================================

@app.exception_handler(HTTPException)
async def http_exception_handler(request, exc):
    """Custom HTTP exception handler"""
    return JSONResponse(
        status_code=exc.status_code,
        content={
            "error": exc.detail,
            "status_code": exc.status_code
        }
    )


@app.exception_handler(GraphError)
async def graph_exception_handler(request, exc):
    """Graph and mission errors that escaped a route are client errors"""
    logger.warning(f"Graph error: {exc}")
    return JSONResponse(
        status_code=400,
        content={
            "error": str(exc),
            "status_code": 400
        }
    )


@app.exception_handler(Exception)
async def general_exception_handler(request, exc):
    """Handle all unhandled exceptions"""
    logger.error(f"Unhandled exception: {exc}", exc_info=True)
    return JSONResponse(
        status_code=500,
        content={
            "error": "Internal server error",
            "status_code": 500
        }
    )
