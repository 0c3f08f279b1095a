# =============================================================================
# core/services/album_store.py - In-Memory Album Catalog
# =============================================================================
# Owns the authoritative list of albums for the lifetime of the process.
# Nothing is persisted: a restart resets the catalog to the seed data.
#
# All operations run under a single lock. Mutations (insert/update/remove)
# need it so that the duplicate check and id assignment happen atomically;
# reads take it to copy a consistent snapshot.
# =============================================================================

from __future__ import annotations

import logging
import threading
from collections import Counter
from typing import Any, Iterable

from app.exceptions import (
    AlbumNotFoundError,
    AlbumValidationError,
    DuplicateAlbumError,
)
from core.models.album import (
    DEFAULT_COVER,
    DEFAULT_GENRE,
    Album,
    AlbumCreate,
    AlbumUpdate,
    CatalogStats,
)
from core.services.seed_data import SEED_ALBUMS

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("band", "title", "year")


def _clean(value: str | None) -> str:
    return (value or "").strip()


def decade_label(year: int) -> str:
    """Return the decade bucket for a year, e.g. 1986 -> "1980s"."""
    return f"{(year // 10) * 10}s"


class AlbumStore:
    """
    In-memory album catalog.

    Callers only ever receive copies of stored albums, so the underlying
    collection can only change through insert/update/remove.
    """

    def __init__(self, albums: Iterable[Album | dict[str, Any]] = ()):
        self._lock = threading.Lock()
        self._albums: list[Album] = [
            a.model_copy() if isinstance(a, Album) else Album(**a)
            for a in albums
        ]
        # Monotonic counter; ids of deleted albums are never handed out again
        self._next_id = max((a.id for a in self._albums), default=0) + 1

    @classmethod
    def seeded(cls) -> AlbumStore:
        """Create a store holding the built-in seed albums."""
        return cls(SEED_ALBUMS)

    def __len__(self) -> int:
        with self._lock:
            return len(self._albums)

    # -------------------------------------------------------------------------
    # Reads
    # -------------------------------------------------------------------------

    def list(self) -> list[Album]:
        """Return every album in collection order."""
        with self._lock:
            return [a.model_copy() for a in self._albums]

    def find(self, album_id: int) -> Album:
        """
        Get an album by ID.

        Raises:
            AlbumNotFoundError: If no album has this ID
        """
        with self._lock:
            return self._get(album_id).model_copy()

    def find_by_band(self, text: str) -> list[Album]:
        """Albums whose band contains ``text`` (case-insensitive)."""
        return self._search("band", text)

    def find_by_genre(self, text: str) -> list[Album]:
        """Albums whose genre contains ``text`` (case-insensitive)."""
        return self._search("genre", text)

    def stats(self) -> CatalogStats:
        """
        Compute aggregate statistics over the current catalog.

        Band and genre values are counted exactly as stored (no case folding).

        Returns:
            CatalogStats with totals, distinct band/genre counts and
            per-decade and per-genre album counts
        """
        with self._lock:
            albums = list(self._albums)

        by_decade = Counter(decade_label(a.year) for a in albums)
        by_genre = Counter(a.genre for a in albums)

        return CatalogStats(
            total_albums=len(albums),
            band_count=len({a.band for a in albums}),
            genre_count=len(by_genre),
            albums_by_decade=dict(by_decade),
            albums_by_genre=dict(by_genre),
        )

    # -------------------------------------------------------------------------
    # Mutations
    # -------------------------------------------------------------------------

    def insert(self, candidate: AlbumCreate) -> Album:
        """
        Add a new album to the catalog.

        Args:
            candidate: The album data supplied by the client

        Returns:
            The stored album, with its assigned ID and defaults applied

        Raises:
            AlbumValidationError: If band, title or year is missing
            DuplicateAlbumError: If the same band + title is already stored
        """
        band = _clean(candidate.band)
        title = _clean(candidate.title)

        missing = [
            name for name, value in zip(REQUIRED_FIELDS, (band, title, candidate.year))
            if not value
        ]
        if missing:
            logger.warning(f"Rejected album, missing fields: {', '.join(missing)}")
            raise AlbumValidationError(missing)

        with self._lock:
            key = (band.lower(), title.lower())
            if any((a.band.lower(), a.title.lower()) == key for a in self._albums):
                logger.warning(f"Rejected duplicate album: {band} - {title}")
                raise DuplicateAlbumError()

            album = Album(
                id=self._next_id,
                band=band,
                title=title,
                year=candidate.year,
                genre=_clean(candidate.genre) or DEFAULT_GENRE,
                cover=_clean(candidate.cover) or DEFAULT_COVER,
            )
            self._next_id += 1
            self._albums.append(album)

        logger.info(f"Added album {album.id}: {album.band} - {album.title}")
        return album.model_copy()

    def update(self, album_id: int, patch: AlbumUpdate) -> Album:
        """
        Apply a partial update to an album.

        Only fields present in ``patch`` change. The band + title uniqueness
        rule is only enforced on insert, so an update may create a duplicate.

        Args:
            album_id: The album to update
            patch: Fields to change

        Returns:
            The album after the update

        Raises:
            AlbumNotFoundError: If no album has this ID
        """
        changes = patch.changes()
        for field, value in changes.items():
            if isinstance(value, str):
                changes[field] = value.strip()

        with self._lock:
            index = self._index_of(album_id)
            updated = self._albums[index].model_copy(update=changes)
            self._albums[index] = updated

        logger.info(f"Updated album {album_id}: {sorted(changes) or 'no changes'}")
        return updated.model_copy()

    def remove(self, album_id: int) -> Album:
        """
        Remove an album from the catalog.

        Returns:
            The removed album

        Raises:
            AlbumNotFoundError: If no album has this ID
        """
        with self._lock:
            removed = self._albums.pop(self._index_of(album_id))

        logger.info(f"Removed album {album_id}: {removed.band} - {removed.title}")
        return removed

    # -------------------------------------------------------------------------
    # Internal helpers (caller holds the lock)
    # -------------------------------------------------------------------------

    def _index_of(self, album_id: int) -> int:
        for index, album in enumerate(self._albums):
            if album.id == album_id:
                return index
        raise AlbumNotFoundError()

    def _get(self, album_id: int) -> Album:
        return self._albums[self._index_of(album_id)]

    def _search(self, field: str, text: str) -> list[Album]:
        needle = text.lower()
        with self._lock:
            return [
                a.model_copy() for a in self._albums
                if needle in getattr(a, field).lower()
            ]
