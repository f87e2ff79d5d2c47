"""
Apple Music API integration module.

Architecture:
    - credentials.py: AppleMusicCredentials for config/DI
    - schema.py: pydantic models of the JSON response envelope
    - http_client.py: AppleMusicHTTPClient, the fetch/decode pipeline
    - service.py: AppleMusicService endpoint operations and playback
    - playback.py: MusicPlayer protocol for the system player
    - callbacks.py: Result and background dispatch
    - exceptions.py: Exception hierarchy and ErrorKind

Usage:
    from socially_music.apple_music import (
        AppleMusicCredentials,
        AppleMusicService,
    )

    credentials = AppleMusicCredentials.from_env()
    service = AppleMusicService.from_credentials(credentials, player=player)
    for playlist in service.get_playlists():
        tracks = service.get_all_tracks_for_playlist(playlist.id)
    service.play(tracks[0].context)
"""

# Credentials
from .credentials import AppleMusicCredentials, DEFAULT_STOREFRONT

# Transport
from .http_client import AppleMusicHTTPClient, BASE_URL

# Service
from .service import AppleMusicService
from .playback import MusicPlayer
from .callbacks import Result, dispatch

# Exceptions
from .exceptions import (
    ErrorKind,
    AppleMusicServiceError,
    TokenNilError,
    APIError,
    InvalidResponseError,
    DecodeError,
    NoDataError,
    InvalidCompiledURLError,
)


__all__ = [
    # Credentials
    'AppleMusicCredentials',
    'DEFAULT_STOREFRONT',

    # Transport
    'AppleMusicHTTPClient',
    'BASE_URL',

    # Service
    'AppleMusicService',
    'MusicPlayer',
    'Result',
    'dispatch',

    # Exceptions
    'ErrorKind',
    'AppleMusicServiceError',
    'TokenNilError',
    'APIError',
    'InvalidResponseError',
    'DecodeError',
    'NoDataError',
    'InvalidCompiledURLError',
]
