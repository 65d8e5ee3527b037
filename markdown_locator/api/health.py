"""Health check and monitoring API endpoints."""

import time
from datetime import datetime

from fastapi import APIRouter, HTTPException
from fastapi.responses import JSONResponse

from ..models.response import HealthResponse
from ..models.word import Word
from ..config import get_settings

router = APIRouter(prefix="/api/v1", tags=["health"])
settings = get_settings()

# Import the global search engine instance
from ..engine_instance import search_engine

# Track application start time
app_start_time = time.time()


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check",
    description="Check the health status of the search service"
)
async def health_check() -> HealthResponse:
    """
    Perform a health check on the search service.

    Runs a tiny search through each matcher to make sure they respond.
    """
    uptime = time.time() - app_start_time

    dependencies = {
        "fuzzy_matcher": "healthy",
        "word_matcher": "healthy",
        "file_finder": "healthy",
    }

    try:
        if search_engine.fuzzy_matcher.find_with_backoff("tset", "a test") != [2]:
            dependencies["fuzzy_matcher"] = "degraded"
    except Exception:
        dependencies["fuzzy_matcher"] = "unhealthy"

    try:
        words = [Word(content="a"), Word(content=" "), Word(content="test")]
        if search_engine.word_matcher.match_indices("a test", words) != [0]:
            dependencies["word_matcher"] = "degraded"
    except Exception:
        dependencies["word_matcher"] = "unhealthy"

    if search_engine.root is None:
        dependencies["file_finder"] = "degraded"

    # Determine overall status
    if all(status == "healthy" for status in dependencies.values()):
        status = "healthy"
    elif any(status == "unhealthy" for status in dependencies.values()):
        status = "unhealthy"
    else:
        status = "degraded"

    return HealthResponse(
        status=status,
        version=settings.app_version,
        uptime=uptime,
        dependencies=dependencies
    )


@router.get(
    "/health/ready",
    summary="Readiness check",
    description="Check if the service is ready to accept requests"
)
async def readiness_check() -> JSONResponse:
    """Ready once file discovery has run."""
    stats = search_engine.get_stats()
    ready = search_engine.root is not None

    return JSONResponse(
        status_code=200 if ready else 503,
        content={
            "status": "ready" if ready else "not_ready",
            "timestamp": datetime.utcnow().isoformat(),
            "file_stats": stats["file_stats"]
        }
    )


@router.get(
    "/health/live",
    summary="Liveness check",
    description="Check if the service is alive and responding"
)
async def liveness_check() -> JSONResponse:
    """Check if the service is alive and responding."""
    return JSONResponse(
        status_code=200,
        content={
            "status": "alive",
            "timestamp": datetime.utcnow().isoformat(),
            "uptime": time.time() - app_start_time
        }
    )


@router.get(
    "/status",
    summary="Service status",
    description="Get detailed status information about the service"
)
async def service_status() -> JSONResponse:
    """
    Get detailed status information about the service.

    Includes query statistics and the effective configuration.
    """
    try:
        stats = search_engine.get_stats()

        config_info = {
            "docs_root": settings.docs_root,
            "respect_gitignore": settings.respect_gitignore,
            "ignore_file": settings.ignore_file,
            "max_query_length": settings.max_query_length,
            "max_results": settings.max_results,
            "debug": settings.debug
        }

        return JSONResponse(
            status_code=200,
            content={
                "service": {
                    "name": settings.app_name,
                    "version": settings.app_version,
                    "status": "running",
                    "uptime": time.time() - app_start_time,
                    "start_time": datetime.fromtimestamp(app_start_time).isoformat()
                },
                "configuration": config_info,
                "statistics": stats,
                "timestamp": datetime.utcnow().isoformat()
            }
        )

    except Exception as e:
        raise HTTPException(
            status_code=500,
            detail=f"Failed to get service status: {str(e)}"
        )
