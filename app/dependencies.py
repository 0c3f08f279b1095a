# =============================================================================
# app/dependencies.py - Shared Dependencies
# =============================================================================
# FastAPI dependency injection for shared resources.
# These are injected into route handlers using Depends().
# =============================================================================

from typing import Annotated

from fastapi import Depends

from app.config import settings
from core.services.album_store import AlbumStore

# Process-wide catalog; lives until the server stops
album_store = AlbumStore.seeded() if settings.SEED_CATALOG else AlbumStore()


def get_album_store() -> AlbumStore:
    """
    Get the album store instance.

    Returns the process-wide catalog. Tests replace it through
    app.dependency_overrides.
    """
    return album_store


# Type alias for dependency injection
AlbumStoreDep = Annotated[AlbumStore, Depends(get_album_store)]
