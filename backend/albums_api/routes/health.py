"""
Album Catalog API - Health Check Route
======================================

What:  Health check endpoint for monitoring and load balancer probes.
How:   The catalog is in memory and always available, so the service is
       healthy whenever it can answer. The response reports the catalog size
       and uptime for dashboards.
"""

import time

from fastapi import APIRouter, Depends

from albums_api import __version__
from albums_api.schemas.album import HealthResponse
from albums_api.services.catalog import Catalog, get_catalog

router = APIRouter(tags=["Health"])

# Initialized once when the module loads
_start_time = time.time()


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Service health check",
)
async def health_check(catalog: Catalog = Depends(get_catalog)) -> HealthResponse:
    """Report service status, version, catalog size and uptime."""
    return HealthResponse(
        status="healthy",
        version=__version__,
        album_count=len(catalog),
        uptime_seconds=round(time.time() - _start_time, 2),
    )
