# =============================================================================
# app/routers/albums.py - Album CRUD Endpoints
# =============================================================================
# Handles listing, searching, creating, updating and deleting albums.
# Search routes are declared before /{album_id} so "band" and "genre" are
# never parsed as album IDs. Search terms use the path converter so names
# containing a slash ("AC/DC", sent as AC%2FDC) still match.
# =============================================================================

from typing import Annotated

from fastapi import APIRouter, Path

from app.dependencies import AlbumStoreDep
from app.exceptions import NoAlbumsFoundError
from core.models.album import Album, AlbumCreate, AlbumDeleted, AlbumUpdate

router = APIRouter()

AlbumId = Annotated[int, Path(description="Album ID")]


# =============================================================================
# Read Endpoints
# =============================================================================

@router.get("", response_model=list[Album])
async def list_albums(store: AlbumStoreDep):
    """List every album in the catalog."""
    return store.list()


@router.get("/band/{band:path}", response_model=list[Album])
async def albums_by_band(
    band: Annotated[str, Path(description="Part of the band name (case-insensitive)")],
    store: AlbumStoreDep,
):
    """
    Find albums by band.

    Matches any album whose band contains the search text, ignoring case.
    Returns 404 with the original search term when nothing matches.
    """
    albums = store.find_by_band(band)
    if not albums:
        raise NoAlbumsFoundError("No albums found for this band.", band)
    return albums


@router.get("/genre/{genre:path}", response_model=list[Album])
async def albums_by_genre(
    genre: Annotated[str, Path(description="Part of the genre name (case-insensitive)")],
    store: AlbumStoreDep,
):
    """
    Find albums by genre.

    Matches any album whose genre contains the search text, ignoring case.
    Returns 404 with the original search term when nothing matches.
    """
    albums = store.find_by_genre(genre)
    if not albums:
        raise NoAlbumsFoundError("No albums found for this genre.", genre)
    return albums


@router.get("/{album_id}", response_model=Album)
async def get_album(album_id: AlbumId, store: AlbumStoreDep):
    """Get a single album by ID."""
    return store.find(album_id)


# =============================================================================
# Write Endpoints
# =============================================================================

@router.post("", response_model=Album, status_code=201)
async def create_album(request: AlbumCreate, store: AlbumStoreDep):
    """
    Add a new album.

    band, title and year are required. genre defaults to "Unknown" and
    cover to a placeholder image. An album with the same band and title
    (ignoring case) is rejected with 409.
    """
    return store.insert(request)


@router.put("/{album_id}", response_model=Album)
async def update_album(
    album_id: AlbumId,
    store: AlbumStoreDep,
    request: AlbumUpdate | None = None,
):
    """
    Update an album.

    Only the fields sent in the body change; everything else is kept.
    A request without a body leaves the album unchanged.
    """
    return store.update(album_id, request or AlbumUpdate())


@router.delete("/{album_id}", response_model=AlbumDeleted)
async def delete_album(album_id: AlbumId, store: AlbumStoreDep):
    """Delete an album and return the removed record."""
    removed = store.remove(album_id)
    return AlbumDeleted(deleted_album=removed)
