# =============================================================================
# core/models/ - Pydantic Data Models
# =============================================================================
# This package contains Pydantic schemas for data validation:
# - album.py: Album record, create/update payloads, delete response, stats
#
# These models define the "contract" between API and clients.
# =============================================================================

from .album import (
    DEFAULT_COVER,
    DEFAULT_GENRE,
    Album,
    AlbumCreate,
    AlbumDeleted,
    AlbumUpdate,
    CatalogStats,
)

__all__ = [
    "DEFAULT_COVER",
    "DEFAULT_GENRE",
    "Album",
    "AlbumCreate",
    "AlbumDeleted",
    "AlbumUpdate",
    "CatalogStats",
]
