"""
Album Catalog API - Albums Route Handler
========================================

What:  Handles GET /albums.
How:   Reads the injected Catalog and serializes every album, in catalog
       order, as a JSON array of {id, title, artist, price} objects.

Response:
    200 with a JSON array (``[]`` for an empty catalog, never ``null``).
    Faults are not handled here; FaultIsolationMiddleware answers them with 500.
"""

import logging
from typing import List

from fastapi import APIRouter, Depends

from albums_api.schemas.album import AlbumResponse, ErrorResponse
from albums_api.services.catalog import Catalog, get_catalog

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Albums"])


@router.get(
    "/albums",
    response_model=List[AlbumResponse],
    responses={
        200: {"description": "Every album in catalog order"},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="List all albums",
)
async def list_albums(catalog: Catalog = Depends(get_catalog)) -> List[AlbumResponse]:
    """Return the full catalog, preserving insertion order."""
    albums = catalog.list()
    logger.debug("Listing %d albums", len(albums))
    return [AlbumResponse.model_validate(album) for album in albums]
