from dataclasses import dataclass
import logging
from typing import Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from socially_music.apple_music.schema import Song

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Track:
    """A single recording, identified for later lookup by its context."""

    album: str
    artist: str
    name: str
    isrc: str
    context: str
    image_url: str = ""

    @classmethod
    def from_song(cls, song: "Song", context: Optional[str] = None) -> Optional["Track"]:
        """
        Project a catalog song resource into a Track.

        Args:
            song: Decoded catalog song resource.
            context: Identifier to store as the track context. Defaults to
                the resource id.

        Returns:
            The Track, or None when the resource carries no attributes.
        """
        attributes = song.attributes
        if attributes is None:
            logger.debug("Song %s has no attributes, skipping", song.id)
            return None

        return cls(
            album=attributes.album_name,
            artist=attributes.artist_name,
            name=attributes.name,
            isrc=attributes.isrc or "",
            context=context if context is not None else song.id,
            image_url=attributes.artwork.sized_url() if attributes.artwork else "",
        )
