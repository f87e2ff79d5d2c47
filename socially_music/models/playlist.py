from dataclasses import dataclass
from typing import Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from socially_music.apple_music.schema import LibraryPlaylist


@dataclass(frozen=True)
class Playlist:
    """A playlist from the user's library."""

    id: str
    name: str
    description: str = ""
    can_edit: bool = False
    is_public: bool = False
    image_url: str = ""

    @classmethod
    def from_resource(cls, resource: "LibraryPlaylist") -> Optional["Playlist"]:
        """Project a library playlist resource; None without attributes."""
        attributes = resource.attributes
        if attributes is None:
            return None

        description = ""
        if attributes.description:
            description = (
                attributes.description.standard
                or attributes.description.short
                or ""
            )

        return cls(
            id=resource.id,
            name=attributes.name,
            description=description,
            can_edit=attributes.can_edit,
            is_public=attributes.is_public,
            image_url=attributes.artwork.sized_url() if attributes.artwork else "",
        )
