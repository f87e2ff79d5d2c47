from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from socially_music.apple_music.schema import (
        ArtistProfile,
        ArtistSearchResource,
    )


@dataclass(frozen=True)
class Artist:
    """
    An artist reference with a display image.

    Built from one of three shapes, each through its own constructor:
        - an Apple Music search resource (``from_search_resource``)
        - a flat string map, e.g. stored JSON (``from_dict``)
        - an ``ArtistProfile`` from another provider (``from_profile``)
    """

    name: str
    id: str
    image_url: str = ""

    @classmethod
    def from_search_resource(
        cls, resource: "ArtistSearchResource"
    ) -> Optional["Artist"]:
        """
        Build from a catalog search result.

        The image comes from the first related album's artwork, if any.
        Returns None when the resource carries no attributes.
        """
        attributes = resource.attributes
        if attributes is None:
            return None

        image_url = ""
        relationships = resource.relationships
        if relationships and relationships.albums and relationships.albums.data:
            first = relationships.albums.data[0]
            if first.attributes and first.attributes.artwork:
                image_url = first.attributes.artwork.sized_url()

        return cls(name=attributes.name, id=resource.id, image_url=image_url)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Optional["Artist"]:
        """
        Build from the flat map produced by ``to_dict``.

        Returns None unless ``name``, ``id`` and ``imageURL`` are all
        present as strings.
        """
        name = data.get("name")
        artist_id = data.get("id")
        image_url = data.get("imageURL")
        if not all(isinstance(v, str) for v in (name, artist_id, image_url)):
            return None
        return cls(name=name, id=artist_id, image_url=image_url)

    @classmethod
    def from_profile(cls, profile: "ArtistProfile") -> "Artist":
        """Build from another provider's artist; first image becomes the URL."""
        image_url = profile.images[0].url if profile.images else ""
        return cls(name=profile.name, id=profile.id, image_url=image_url)

    def to_dict(self) -> Dict[str, str]:
        """Flat JSON-friendly representation."""
        return {
            "name": self.name,
            "id": self.id,
            "imageURL": self.image_url,
        }
