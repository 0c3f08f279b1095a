# =============================================================================
# core/models/album.py - Album Schemas
# =============================================================================
# These models define the API contract for album operations:
# - Album: A stored catalog record (returned to clients)
# - AlbumCreate: Input for adding a new album
# - AlbumUpdate: Partial input for changing an existing album
# - AlbumDeleted: Output of a delete (message + the removed record)
# - CatalogStats: Aggregate counts over the whole catalog
# =============================================================================

from pydantic import BaseModel, ConfigDict, Field

# Applied on creation when the client leaves genre/cover blank
DEFAULT_GENRE = "Unknown"
DEFAULT_COVER = (
    "https://encrypted-tbn0.gstatic.com/images"
    "?q=tbn:ANd9GcS1BhBgvAdx2cQwiyvb-89VbGVzgQbB983tfw&s"
)


class Album(BaseModel):
    """
    A single catalog record.

    Example:
        {
            "id": 1,
            "band": "Metallica",
            "title": "Master of Puppets",
            "year": 1986,
            "genre": "Thrash Metal",
            "cover": "https://upload.wikimedia.org/..."
        }
    """

    id: int = Field(..., description="Unique album identifier, assigned by the store")
    band: str = Field(..., description="Band or artist name")
    title: str = Field(..., description="Album title")
    year: int = Field(..., description="Release year")
    genre: str = Field(default=DEFAULT_GENRE, description="Musical genre")
    cover: str = Field(default=DEFAULT_COVER, description="Cover image URL")


class AlbumCreate(BaseModel):
    """
    Schema for adding a new album.

    band, title and year are required, but the store checks that itself so
    a missing field is reported as a catalog error instead of a schema error.
    Numeric strings are accepted for year ("1975" -> 1975).

    Example:
        {
            "band": "Queen",
            "title": "A Night at the Opera",
            "year": 1975
        }
    """

    band: str | None = Field(default=None, description="Band or artist name")
    title: str | None = Field(default=None, description="Album title")
    year: int | None = Field(default=None, description="Release year")
    genre: str | None = Field(default=None, description="Genre (defaults to 'Unknown')")
    cover: str | None = Field(default=None, description="Cover image URL (defaults to a placeholder)")

    model_config = {
        "json_schema_extra": {
            "examples": [
                {"band": "Queen", "title": "A Night at the Opera", "year": 1975},
                {
                    "band": "Black Sabbath",
                    "title": "Paranoid",
                    "year": 1970,
                    "genre": "Heavy Metal",
                },
            ]
        }
    }


class AlbumUpdate(BaseModel):
    """
    Schema for updating an album.

    Every field is optional; only the fields present in the request are
    applied and the rest of the record stays as it is.

    Example:
        {
            "year": 1986
        }
    """

    band: str | None = Field(default=None, description="New band name")
    title: str | None = Field(default=None, description="New title")
    year: int | None = Field(default=None, description="New release year")
    genre: str | None = Field(default=None, description="New genre")
    cover: str | None = Field(default=None, description="New cover image URL")

    def changes(self) -> dict:
        """Return the fields that were actually supplied (null means "leave as is")."""
        return self.model_dump(exclude_unset=True, exclude_none=True)


class AlbumDeleted(BaseModel):
    """Response returned after removing an album."""

    model_config = ConfigDict(populate_by_name=True)

    message: str = Field(default="Album deleted successfully.")
    deleted_album: Album = Field(..., alias="deletedAlbum")


class CatalogStats(BaseModel):
    """
    Aggregate statistics over the catalog.

    Serialized with camelCase keys.

    Example:
        {
            "totalAlbums": 8,
            "bandCount": 6,
            "genreCount": 5,
            "albumsByDecade": {"1980s": 5, "1970s": 3},
            "albumsByGenre": {"Thrash Metal": 2, "Hard Rock": 2, ...}
        }
    """

    model_config = ConfigDict(populate_by_name=True)

    total_albums: int = Field(default=0, ge=0, alias="totalAlbums")
    band_count: int = Field(default=0, ge=0, alias="bandCount")
    genre_count: int = Field(default=0, ge=0, alias="genreCount")
    albums_by_decade: dict[str, int] = Field(default_factory=dict, alias="albumsByDecade")
    albums_by_genre: dict[str, int] = Field(default_factory=dict, alias="albumsByGenre")
