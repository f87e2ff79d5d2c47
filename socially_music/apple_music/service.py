"""
Apple Music service operations.

Each public method is one independent request/response cycle: check the
configured tokens, build the request, run it through the HTTP client's
fetch/decode pipeline, and project the decoded envelope into domain
models. Failures raise exactly one ``AppleMusicServiceError`` subclass;
use ``submit`` to receive the outcome through a callback instead.
"""

import json
import logging
import threading
from typing import Any, Callable, Dict, List, Optional
from urllib.parse import quote

from socially_music.models import Artist, Playlist, Track

from .callbacks import Result, dispatch
from .credentials import DEFAULT_STOREFRONT, AppleMusicCredentials
from .exceptions import (
    APIError,
    InvalidCompiledURLError,
    NoDataError,
    TokenNilError,
)
from .http_client import AppleMusicHTTPClient
from .playback import MusicPlayer
from .schema import (
    ArtistSearchResponse,
    LibraryPlaylist,
    LibrarySong,
    ResponseRoot,
    Song,
)

logger = logging.getLogger(__name__)

PLAYLIST_PAGE_LIMIT = 100
# Library song ids carry a two-character prefix ("i.", "a.") ahead of
# the catalog id.
LIBRARY_ID_PREFIX_LENGTH = 2


def catalog_id_from_library_id(library_id: str) -> str:
    """Strip the library prefix from a library song id."""
    return library_id[LIBRARY_ID_PREFIX_LENGTH:]


class AppleMusicService:
    """
    Apple Music web API client plus system playback control.

    Example:
        service = AppleMusicService()
        service.set_token(dev_token, user_token)
        playlists = service.get_playlists()
        tracks = service.get_all_tracks_for_playlist(playlists[0].id)

    Example with callbacks:
        service.submit("get_playlists", callback=handle_result)
    """

    SUBMITTABLE = (
        "get_playlists",
        "get_all_tracks_for_playlist",
        "search_by_isrc",
        "get_track_info",
        "add_to_playlist",
        "search_artists",
        "play",
    )

    def __init__(
        self,
        http_client: Optional[AppleMusicHTTPClient] = None,
        player: Optional[MusicPlayer] = None,
        storefront: str = DEFAULT_STOREFRONT,
    ):
        """
        Initialize the service.

        Args:
            http_client: Transport used for every request.
            player: Optional system music player for ``play``.
            storefront: Catalog country code for catalog lookups.
        """
        self._http = http_client or AppleMusicHTTPClient()
        self._player = player
        self.storefront = storefront
        self._dev_token: Optional[str] = None
        self._user_token: Optional[str] = None

    @classmethod
    def from_credentials(
        cls,
        credentials: AppleMusicCredentials,
        http_client: Optional[AppleMusicHTTPClient] = None,
        player: Optional[MusicPlayer] = None,
    ) -> "AppleMusicService":
        """Create a service with its tokens already configured."""
        service = cls(
            http_client=http_client,
            player=player,
            storefront=credentials.storefront,
        )
        service.set_token(credentials.developer_token, credentials.user_token)
        return service

    def set_token(self, dev_token: str, user_token: Optional[str] = None) -> None:
        """
        Set the tokens used for subsequent requests.

        Args:
            dev_token: The application's developer token.
            user_token: The signed-in user's music user token.
        """
        self._dev_token = dev_token or None
        self._user_token = user_token or None
        logger.debug(
            "Tokens configured (user token %s)",
            "present" if self._user_token else "absent",
        )

    def _headers(self, user_scoped: bool = False) -> Dict[str, str]:
        """
        Build auth headers, failing before any request is made if a
        required token is missing.
        """
        if not self._dev_token:
            raise TokenNilError("Developer token is not set")
        headers = {"Authorization": f"Bearer {self._dev_token}"}
        if user_scoped:
            if not self._user_token:
                raise TokenNilError("Music user token is not set")
            headers["Music-User-Token"] = self._user_token
        return headers

    # =========================================================================
    # Library
    # =========================================================================

    def get_playlists(self) -> List[Playlist]:
        """
        Get the playlists in the user's library.

        Returns:
            Playlists in the order Apple Music lists them.

        Raises:
            TokenNilError: If either token is missing.
            NoDataError: If the library has no playlists.
        """
        headers = self._headers(user_scoped=True)
        root = self._http.fetch(
            "GET", "me/library/playlists",
            ResponseRoot[LibraryPlaylist],
            headers=headers,
            params={"limit": PLAYLIST_PAGE_LIMIT},
        )
        playlists = [
            playlist for playlist in map(Playlist.from_resource, root.data or [])
            if playlist is not None
        ]
        if not playlists:
            raise NoDataError("No playlists returned")
        logger.debug("Retrieved %d playlists", len(playlists))
        return playlists

    def get_all_tracks_for_playlist(self, playlist: str) -> List[Track]:
        """
        Get the catalog tracks for a library playlist.

        Library song ids are converted to catalog ids and resolved in one
        batched catalog lookup.

        Raises:
            TokenNilError: If either token is missing.
            NoDataError: If the playlist or the catalog lookup is empty.
        """
        headers = self._headers(user_scoped=True)
        root = self._http.fetch(
            "GET", f"me/library/playlists/{quote(playlist, safe='')}/tracks",
            ResponseRoot[LibrarySong],
            headers=headers,
        )
        if not root.data:
            raise NoDataError(f"Playlist {playlist} has no tracks")

        song_ids = [catalog_id_from_library_id(song.id) for song in root.data]
        return self._get_catalog_songs(song_ids)

    def _get_catalog_songs(self, song_ids: List[str]) -> List[Track]:
        """Resolve catalog song ids into Tracks with a single request."""
        headers = self._headers()
        root = self._http.fetch(
            "GET", f"catalog/{self.storefront}/songs",
            ResponseRoot[Song],
            headers=headers,
            params={"ids": ",".join(song_ids)},
        )
        tracks = [
            track for track in map(Track.from_song, root.data or [])
            if track is not None
        ]
        if not tracks:
            raise NoDataError("Catalog lookup returned no songs")
        logger.debug("Resolved %d of %d catalog songs", len(tracks), len(song_ids))
        return tracks

    def add_to_playlist(self, playlist_id: str, track: str) -> Dict[str, str]:
        """
        Append a catalog song to a library playlist.

        Args:
            playlist_id: The library playlist to add to.
            track: Catalog id of the song.

        Returns:
            An empty dict on success.

        Raises:
            TokenNilError: If either token is missing.
            InvalidCompiledURLError: If the request body cannot be built.
            InvalidResponseError: If Apple Music rejects the request.
        """
        headers = self._headers(user_scoped=True)
        try:
            body = json.dumps({"data": [{"id": track, "type": "songs"}]})
        except (TypeError, ValueError) as e:
            raise InvalidCompiledURLError(f"Cannot encode request body: {e}") from e
        headers["Content-Type"] = "application/json"

        self._http.send_no_payload(
            "POST", f"me/library/playlists/{quote(playlist_id, safe='')}/tracks",
            headers=headers,
            data=body,
        )
        logger.debug("Added %s to playlist %s", track, playlist_id)
        return {}

    # =========================================================================
    # Catalog
    # =========================================================================

    def search_by_isrc(self, isrc: str, country_code: Optional[str] = None) -> Track:
        """
        Look up a catalog track by ISRC.

        Args:
            isrc: International Standard Recording Code.
            country_code: Storefront override for this lookup.

        Raises:
            TokenNilError: If the developer token is missing.
            NoDataError: If no catalog song matches.
        """
        headers = self._headers()
        storefront = country_code or self.storefront
        root = self._http.fetch(
            "GET", f"catalog/{storefront}/songs",
            ResponseRoot[Song],
            headers=headers,
            params={"filter[isrc]": isrc},
        )
        track = Track.from_song(root.data[0]) if root.data else None
        if track is None:
            raise NoDataError(f"No catalog song for ISRC {isrc}")
        return track

    def get_track_info(self, id: str) -> Track:
        """
        Get a catalog track by its catalog id.

        Raises:
            TokenNilError: If the developer token is missing.
            APIError: If the response carries no song attributes.
        """
        headers = self._headers()
        root = self._http.fetch(
            "GET", f"catalog/{self.storefront}/songs/{quote(id, safe='')}",
            ResponseRoot[Song],
            headers=headers,
        )
        track = Track.from_song(root.data[0], context=id) if root.data else None
        if track is None:
            raise APIError(f"Song {id} returned without attributes")
        return track

    def search_artists(self, term: str, limit: int = 10) -> List[Artist]:
        """
        Search the catalog for artists, with album artwork as their image.

        Raises:
            TokenNilError: If the developer token is missing.
            NoDataError: If nothing matches.
        """
        headers = self._headers()
        response = self._http.fetch(
            "GET", f"catalog/{self.storefront}/search",
            ArtistSearchResponse,
            headers=headers,
            params={
                "term": term,
                "types": "artists",
                "limit": limit,
                "include[artists]": "albums",
            },
        )
        found = response.results.artists
        resources = (found.data or []) if found else []
        artists = [
            artist for artist in map(Artist.from_search_resource, resources)
            if artist is not None
        ]
        if not artists:
            raise NoDataError(f"No artists found for {term!r}")
        return artists

    # =========================================================================
    # Playback
    # =========================================================================

    def play(self, context: str) -> None:
        """
        Queue a catalog track on the system player and start playback.

        Returns once the player has been told to play; actual playback
        start is not confirmed.

        Raises:
            ValueError: If no player was supplied.
        """
        if self._player is None:
            raise ValueError("No music player configured")
        self._player.set_queue([context])
        self._player.play()
        logger.debug("Playback requested for %s", context)

    # =========================================================================
    # Callback dispatch
    # =========================================================================

    def submit(
        self,
        operation: str,
        *args,
        callback: Callable[[Result[Any]], Any],
        **kwargs,
    ) -> threading.Thread:
        """
        Run a named operation in the background and report its Result.

        Args:
            operation: Name of a public operation, e.g. ``"get_playlists"``.
            callback: Called once with the Result.

        Raises:
            ValueError: If ``operation`` is not a service operation, or is
                ``"play"`` without a configured player.
        """
        if operation not in self.SUBMITTABLE:
            raise ValueError(f"Unknown operation: {operation}")
        if operation == "play" and self._player is None:
            raise ValueError("No music player configured")
        return dispatch(getattr(self, operation), *args, callback=callback, **kwargs)
