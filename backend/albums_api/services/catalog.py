"""
Album Catalog API - Catalog Service
===================================

What:  Holds the ordered album records and exposes them for read access.
How:   Records are frozen into a tuple at construction. The application
       factory stores one Catalog on ``app.state.catalog``; routes receive it
       through the ``get_catalog`` dependency.
When:  Built once at startup, lives for the lifetime of the process.

Concurrency:
    Nothing mutates a Catalog after __init__, so concurrent requests read it
    without locking.
"""

import logging
from typing import Iterable, Iterator, Tuple

from fastapi import Request

from albums_api.exceptions import CatalogIntegrityError
from albums_api.models.album import Album

logger = logging.getLogger(__name__)


class Catalog:
    """
    Ordered, read-only collection of albums.

    Insertion order is display order: ``list()`` returns the records exactly
    as they were passed in. No sorting is ever applied.

    Raises:
        CatalogIntegrityError: Two records share the same id.
    """

    def __init__(self, albums: Iterable[Album] = ()):
        records = tuple(albums)
        seen = set()
        for album in records:
            if album.id in seen:
                raise CatalogIntegrityError(album_id=album.id)
            seen.add(album.id)
        self._albums: Tuple[Album, ...] = records

    def list(self) -> Tuple[Album, ...]:
        """Return every album in insertion order (shared, immutable view)."""
        return self._albums

    def __len__(self) -> int:
        return len(self._albums)

    def __iter__(self) -> Iterator[Album]:
        return iter(self._albums)

    def __repr__(self) -> str:
        return f"<Catalog(albums={len(self._albums)})>"


def default_catalog() -> Catalog:
    """
    Build the catalog the service ships with.

    Returns a fresh Catalog on every call; the application factory calls it
    once and keeps the result.
    """
    return Catalog(
        [
            Album(id="1", title="Blue Train", artist="John Coltrane", price=56.99),
            Album(id="2", title="Jeru", artist="Gerry Mulligan", price=17.99),
            Album(
                id="3",
                title="Sarah Vaughan and Clifford Brown",
                artist="Sarah Vaughan",
                price=39.99,
            ),
        ]
    )


# ── Catalog Dependency ────────────────────────────────────────────────────
def get_catalog(request: Request) -> Catalog:
    """
    FastAPI dependency that provides the application's catalog.

    Example usage in a route:
        @router.get("/albums")
        async def list_albums(catalog: Catalog = Depends(get_catalog)):
            return catalog.list()

    Tests swap the catalog per app through create_app(catalog=...) or
    replace this dependency via ``app.dependency_overrides``.
    """
    return request.app.state.catalog
