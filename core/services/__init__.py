# =============================================================================
# core/services/__init__.py - Service Layer Exports
# =============================================================================

from .album_store import AlbumStore, decade_label

__all__ = [
    "AlbumStore",
    "decade_label",
]
