"""Metrics and monitoring API endpoints."""

from datetime import datetime

import psutil
from fastapi import APIRouter, HTTPException
from fastapi.responses import JSONResponse

from ..models.response import MetricsResponse

router = APIRouter(prefix="/api/v1", tags=["metrics"])

# Import the global search engine instance
from ..engine_instance import search_engine


@router.get(
    "/metrics",
    response_model=MetricsResponse,
    summary="Get performance metrics",
    description="Get query statistics and memory usage of the search service"
)
async def get_metrics() -> MetricsResponse:
    """Get query statistics and memory usage."""
    try:
        stats = search_engine.get_stats()

        memory_info = psutil.Process().memory_info()
        memory_usage_mb = memory_info.rss / (1024 * 1024)

        return MetricsResponse(
            total_queries=stats["total_queries"],
            average_response_time_ms=stats["average_execution_time_ms"],
            exact_match_rate=stats["exact_match_rate"],
            fuzzy_match_rate=stats["fuzzy_match_rate"],
            no_match_rate=stats["no_match_rate"],
            marked_words=stats["marked_words"],
            memory_usage_mb=memory_usage_mb
        )

    except Exception as e:
        raise HTTPException(
            status_code=500,
            detail=f"Failed to get metrics: {str(e)}"
        )


@router.post(
    "/metrics/reset",
    summary="Reset statistics",
    description="Reset query statistics while keeping the discovered files"
)
async def reset_metrics() -> JSONResponse:
    """Reset query statistics."""
    search_engine.reset_stats()

    return JSONResponse(
        status_code=200,
        content={
            "message": "Statistics reset",
            "timestamp": datetime.utcnow().isoformat()
        }
    )
