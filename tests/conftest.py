"""
Pytest configuration and shared fixtures for socially-music tests.

Provides sample Apple Music payloads, mock HTTP responses and sessions,
and a configured service wired to a spy session.
"""

import pytest
from unittest.mock import MagicMock

from socially_music.apple_music.http_client import AppleMusicHTTPClient
from socially_music.apple_music.service import AppleMusicService


ARTWORK_TEMPLATE = "https://is1-ssl.mzstatic.com/image/thumb/Music/{w}x{h}bb.jpg"


# =============================================================================
# Helpers
# =============================================================================

def mock_response(status_code=200, json_data=None):
    """Create a mock requests.Response."""
    resp = MagicMock()
    resp.status_code = status_code
    if isinstance(json_data, Exception):
        resp.json.side_effect = json_data
    else:
        resp.json.return_value = json_data if json_data is not None else {}
    return resp


# =============================================================================
# Sample Data Fixtures
# =============================================================================

@pytest.fixture
def song_payload():
    """A catalog song resource as Apple Music returns it."""
    return {
        'id': '1440857781',
        'type': 'songs',
        'href': '/v1/catalog/us/songs/1440857781',
        'attributes': {
            'name': 'Bad Guy',
            'albumName': 'WHEN WE ALL FALL ASLEEP, WHERE DO WE GO?',
            'artistName': 'Billie Eilish',
            'isrc': 'USUM71900764',
            'durationInMillis': 194088,
            'artwork': {
                'url': ARTWORK_TEMPLATE,
                'width': 3000,
                'height': 3000,
            },
        },
    }


@pytest.fixture
def playlist_payload():
    """A library playlist resource."""
    return {
        'id': 'p.MoGJYM3CYXW09B',
        'type': 'library-playlists',
        'attributes': {
            'name': 'Road Trip',
            'description': {'standard': 'Songs for the drive'},
            'canEdit': True,
            'isPublic': False,
            'hasCatalog': True,
            'dateAdded': '2020-02-13T18:00:00Z',
        },
    }


@pytest.fixture
def artist_search_payload():
    """A catalog search response with one artist and related albums."""
    return {
        'results': {
            'artists': {
                'href': '/v1/catalog/us/search?term=billie&types=artists',
                'data': [
                    {
                        'id': '1065981054',
                        'type': 'artists',
                        'attributes': {
                            'name': 'Billie Eilish',
                            'genreNames': ['Alternative'],
                        },
                        'relationships': {
                            'albums': {
                                'data': [
                                    {
                                        'id': '1450695723',
                                        'type': 'albums',
                                        'attributes': {
                                            'name': 'WHEN WE ALL FALL ASLEEP',
                                            'artwork': {'url': ARTWORK_TEMPLATE},
                                        },
                                    },
                                ],
                            },
                        },
                    },
                ],
            },
        },
    }


# =============================================================================
# Service Fixtures
# =============================================================================

@pytest.fixture
def mock_session():
    """A spy session; configure ``request`` per test."""
    session = MagicMock()
    session.request.return_value = mock_response(200, {'data': []})
    return session


@pytest.fixture
def http_client(mock_session):
    """HTTP client backed by the spy session."""
    return AppleMusicHTTPClient(session=mock_session)


@pytest.fixture
def mock_player():
    """A stand-in system music player."""
    return MagicMock()


@pytest.fixture
def service(http_client, mock_player):
    """Service with both tokens configured."""
    svc = AppleMusicService(http_client=http_client, player=mock_player)
    svc.set_token('dev-token', 'user-token')
    return svc
