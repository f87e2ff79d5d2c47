"""
Typed models for the Apple Music JSON envelope.

Every list or detail response wraps its resources in the same shape::

    {"data": [{"id": "...", "type": "...", "attributes": {...},
               "relationships": {...}}]}

``ResponseRoot`` and ``Resource`` are generic over the attribute and
relationship types so a single decoder serves every endpoint. Wire keys
are camelCase; fields here are snake_case and mapped through an alias
generator, so either spelling decodes.
"""

from typing import Any, Generic, List, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

ARTWORK_PLACEHOLDER = "{w}x{h}bb"
ARTWORK_SIZE = "640x640bb"

AttributesT = TypeVar("AttributesT")
RelationshipsT = TypeVar("RelationshipsT")
ResourceT = TypeVar("ResourceT")


def sized_artwork_url(url: Optional[str]) -> str:
    """Fill the ``{w}x{h}bb`` template in an artwork URL with a fixed size."""
    if not url:
        return ""
    return url.replace(ARTWORK_PLACEHOLDER, ARTWORK_SIZE)


class AppleMusicModel(BaseModel):
    """Base for all wire models: camelCase aliases, unknown keys ignored."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )


# =============================================================================
# Envelope
# =============================================================================

class Resource(AppleMusicModel, Generic[AttributesT, RelationshipsT]):
    """A single typed resource inside an envelope."""

    id: str
    type: Optional[str] = None
    href: Optional[str] = None
    attributes: Optional[AttributesT] = None
    relationships: Optional[RelationshipsT] = None


class ResponseRoot(AppleMusicModel, Generic[ResourceT]):
    """Top-level envelope carrying an optional list of resources."""

    data: Optional[List[ResourceT]] = None
    next: Optional[str] = None


# =============================================================================
# Attributes
# =============================================================================

class Artwork(AppleMusicModel):
    url: str
    width: Optional[int] = None
    height: Optional[int] = None

    def sized_url(self) -> str:
        return sized_artwork_url(self.url)


class PlayParameters(AppleMusicModel):
    id: str
    kind: str
    is_library: Optional[bool] = None
    catalog_id: Optional[str] = None


class EditorialNotes(AppleMusicModel):
    standard: Optional[str] = None
    short: Optional[str] = None


class SongAttributes(AppleMusicModel):
    """Catalog song attributes."""

    name: str
    album_name: str = ""
    artist_name: str = ""
    isrc: Optional[str] = None
    artwork: Optional[Artwork] = None
    duration_in_millis: Optional[int] = None
    url: Optional[str] = None
    play_params: Optional[PlayParameters] = None


class LibrarySongAttributes(AppleMusicModel):
    """Attributes of a song copy held in the user's library."""

    name: str
    album_name: Optional[str] = None
    artist_name: Optional[str] = None
    artwork: Optional[Artwork] = None
    play_params: Optional[PlayParameters] = None


class PlaylistAttributes(AppleMusicModel):
    """Library playlist attributes."""

    name: str
    description: Optional[EditorialNotes] = None
    can_edit: bool = False
    is_public: bool = False
    has_catalog: Optional[bool] = None
    date_added: Optional[str] = None
    artwork: Optional[Artwork] = None
    play_params: Optional[PlayParameters] = None


class AlbumAttributes(AppleMusicModel):
    name: Optional[str] = None
    artist_name: Optional[str] = None
    artwork: Optional[Artwork] = None


class ArtistSearchAttributes(AppleMusicModel):
    name: str
    genre_names: List[str] = []
    url: Optional[str] = None


class Relationship(AppleMusicModel, Generic[ResourceT]):
    href: Optional[str] = None
    data: Optional[List[ResourceT]] = None


AlbumResource = Resource[AlbumAttributes, Any]


class ArtistRelationships(AppleMusicModel):
    albums: Optional[Relationship[AlbumResource]] = None


# =============================================================================
# Concrete resources
# =============================================================================

Song = Resource[SongAttributes, Any]
LibrarySong = Resource[LibrarySongAttributes, Any]
LibraryPlaylist = Resource[PlaylistAttributes, Any]
ArtistSearchResource = Resource[ArtistSearchAttributes, ArtistRelationships]


# =============================================================================
# Search
# =============================================================================

class ArtistSearchResults(AppleMusicModel):
    artists: Optional[ResponseRoot[ArtistSearchResource]] = None


class ArtistSearchResponse(AppleMusicModel):
    results: ArtistSearchResults = Field(default_factory=ArtistSearchResults)


# =============================================================================
# Non-Apple artist representation
# =============================================================================

class ArtistImage(AppleMusicModel):
    url: str
    width: Optional[int] = None
    height: Optional[int] = None


class ArtistProfile(AppleMusicModel):
    """
    Artist as described by other providers' profile payloads.

    Carries a list of pre-sized images rather than an artwork template.
    """

    id: str
    name: str
    images: List[ArtistImage] = []
