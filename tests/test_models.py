# =============================================================================
# tests/test_models.py - Pydantic Model Tests
# =============================================================================
# Unit tests for the album models to ensure:
# - Valid data is accepted and parsed correctly
# - Invalid data raises ValidationError
# - Models serialize with the keys clients expect
# - Default values work as expected
#
# Run with: pytest tests/test_models.py -v
# =============================================================================

import pytest
from pydantic import ValidationError

from core.models import (
    DEFAULT_COVER,
    DEFAULT_GENRE,
    Album,
    AlbumCreate,
    AlbumDeleted,
    AlbumUpdate,
    CatalogStats,
)


# =============================================================================
# Album Model Tests
# =============================================================================

class TestAlbum:
    """Tests for the Album model."""

    def test_valid_album(self):
        """Test creating a valid Album."""
        # Arrange: Define valid album data
        data = {
            "id": 1,
            "band": "Metallica",
            "title": "Master of Puppets",
            "year": 1986,
            "genre": "Thrash Metal",
            "cover": "https://example.com/mop.jpg",
        }

        # Act: Create the model
        album = Album(**data)

        # Assert: Values are correct
        assert album.id == 1
        assert album.band == "Metallica"
        assert album.year == 1986

    def test_album_defaults(self):
        """Test that genre and cover fall back to their defaults."""
        album = Album(id=2, band="Queen", title="Jazz", year=1978)

        assert album.genre == DEFAULT_GENRE == "Unknown"
        assert album.cover == DEFAULT_COVER

    def test_album_requires_year(self):
        """Test that a stored album always has a year."""
        with pytest.raises(ValidationError):
            Album(id=3, band="Queen", title="Jazz")


# =============================================================================
# Request Model Tests
# =============================================================================

class TestAlbumCreate:
    """Tests for AlbumCreate model."""

    def test_all_fields_optional_at_schema_level(self):
        """Test that missing fields are left for the store to report."""
        request = AlbumCreate()

        assert request.band is None
        assert request.year is None

    def test_numeric_string_year_is_coerced(self):
        """Test that "1975" is parsed as an integer year."""
        request = AlbumCreate(band="Queen", title="A Night at the Opera", year="1975")

        assert request.year == 1975

    def test_non_numeric_year_fails(self):
        """Test that a year that is not a number is rejected."""
        with pytest.raises(ValidationError):
            AlbumCreate(band="Queen", title="A Night at the Opera", year="nineteen")


class TestAlbumUpdate:
    """Tests for AlbumUpdate model."""

    def test_changes_only_include_sent_fields(self):
        """Test that unset fields are not part of the patch."""
        patch = AlbumUpdate(year=1986)

        assert patch.changes() == {"year": 1986}

    def test_changes_skip_null_fields(self):
        """Test that explicit nulls leave the stored value untouched."""
        patch = AlbumUpdate(genre=None, title="Kill 'Em All")

        assert patch.changes() == {"title": "Kill 'Em All"}

    def test_empty_patch(self):
        """Test that an empty body produces no changes."""
        assert AlbumUpdate().changes() == {}


# =============================================================================
# Response Model Tests
# =============================================================================

class TestResponseModels:
    """Tests for the delete and stats response models."""

    def test_album_deleted_serializes_camel_case(self):
        """Test that the removed album is exposed as deletedAlbum."""
        album = Album(id=1, band="Metallica", title="Master of Puppets", year=1986)

        body = AlbumDeleted(deleted_album=album).model_dump(by_alias=True)

        assert body["message"] == "Album deleted successfully."
        assert body["deletedAlbum"]["id"] == 1

    def test_catalog_stats_aliases(self):
        """Test CatalogStats accepts and emits camelCase keys."""
        stats = CatalogStats(
            totalAlbums=2,
            bandCount=1,
            genreCount=1,
            albumsByDecade={"1980s": 2},
            albumsByGenre={"Thrash Metal": 2},
        )

        body = stats.model_dump(by_alias=True)

        assert stats.total_albums == 2
        assert set(body) == {
            "totalAlbums",
            "bandCount",
            "genreCount",
            "albumsByDecade",
            "albumsByGenre",
        }

    def test_catalog_stats_rejects_negative_counts(self):
        """Test that counts cannot be negative."""
        with pytest.raises(ValidationError):
            CatalogStats(total_albums=-1)
