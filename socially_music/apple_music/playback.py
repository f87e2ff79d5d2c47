"""
Platform playback collaborator.

The service never talks to a media player directly; it drives whatever
object satisfies ``MusicPlayer``.
"""

from typing import List, Protocol, runtime_checkable


@runtime_checkable
class MusicPlayer(Protocol):
    """System music player control surface."""

    def set_queue(self, store_ids: List[str]) -> None:
        """Replace the play queue with the given catalog store ids."""
        ...

    def play(self) -> None:
        """Start playing the current queue."""
        ...
