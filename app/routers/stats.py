# =============================================================================
# app/routers/stats.py - Catalog Statistics Endpoint
# =============================================================================

from fastapi import APIRouter

from app.dependencies import AlbumStoreDep
from core.models.album import CatalogStats

router = APIRouter()


@router.get("/stats", response_model=CatalogStats)
async def catalog_stats(store: AlbumStoreDep):
    """
    Catalog statistics.

    Returns the album total, distinct band and genre counts, and album
    counts per decade (e.g. "1980s") and per genre.
    """
    return store.stats()
