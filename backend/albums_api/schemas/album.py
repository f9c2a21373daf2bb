"""
Album Catalog API - Pydantic Response Schemas
=============================================

What:  Pydantic models defining the API contract.
How:   FastAPI uses these models to serialize responses and generate the
       OpenAPI document (when docs are enabled).

Field order matters: AlbumResponse declares id, title, artist, price in the
order clients expect to see the keys.
"""

from typing import Optional

from pydantic import BaseModel, Field


# ══════════════════════════════════════════════════════════════════════════
# Response Models
# ══════════════════════════════════════════════════════════════════════════


class AlbumResponse(BaseModel):
    """
    What:  Wire representation of a single album.
    Who:   Returned (as a list) by GET /albums.
    """
    id: str = Field(description="Opaque album identifier")
    title: str = Field(description="Album title")
    artist: str = Field(description="Performing artist")
    price: float = Field(description="Price, serialized with natural precision")

    model_config = {"from_attributes": True}


class HealthResponse(BaseModel):
    """Returned by GET /health for monitoring and load balancer probes."""
    status: str = Field(description="Overall service status")
    version: str = Field(description="Application version")
    album_count: int = Field(description="Number of albums in the loaded catalog")
    uptime_seconds: float = Field(description="Seconds since service started")


# ══════════════════════════════════════════════════════════════════════════
# Error Response Models
# ══════════════════════════════════════════════════════════════════════════


class ErrorResponse(BaseModel):
    """
    What:  JSON error envelope used when ERROR_BODY_STYLE=json.

    Example:
        {
            "error": "not_found",
            "message": "404 page not found",
            "request_id": "a1b2c3d4"
        }
    """
    error: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error description")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")
