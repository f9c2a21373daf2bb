"""
Album Catalog API - Album Record
================================

What:  The immutable value type held by the catalog.
Who:   Built once at startup by services.catalog; read by the albums route.

Field notes:
    id:     Opaque string identifier. Compared by string equality only, even
            though the default records use small decimal strings.
    price:  Serialized with its natural precision (56.99 stays 56.99).
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Album:
    """A single catalog entry. Frozen: attribute assignment raises."""

    id: str
    title: str
    artist: str
    price: float

    def __repr__(self) -> str:
        return f"<Album(id={self.id!r}, title={self.title!r}, artist={self.artist!r})>"
