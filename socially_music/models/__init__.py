from .artist import Artist
from .playlist import Playlist
from .track import Track

__all__ = ["Artist", "Playlist", "Track"]
