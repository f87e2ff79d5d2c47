"""
Apple Music credentials management.

Provides a frozen dataclass holding the tokens and storefront a service
needs, loadable from a plain mapping or from the environment.
"""

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from dotenv import load_dotenv

DEFAULT_STOREFRONT = "us"


@dataclass(frozen=True)
class AppleMusicCredentials:
    """
    Immutable container for Apple Music API credentials.

    Attributes:
        developer_token: Signed developer JWT, sent on every request.
        user_token: Music user token, needed for library-scoped calls.
        storefront: Two-letter catalog country code.

    Example:
        credentials = AppleMusicCredentials.from_env()
        service = AppleMusicService.from_credentials(credentials)
    """

    developer_token: str
    user_token: Optional[str] = None
    storefront: str = DEFAULT_STOREFRONT

    def __post_init__(self):
        """Validate credentials on creation."""
        if not self.developer_token:
            raise ValueError("developer_token is required")
        if not self.storefront:
            raise ValueError("storefront is required")

    @classmethod
    def from_config(cls, config: Mapping[str, str]) -> 'AppleMusicCredentials':
        """
        Create credentials from a config mapping.

        Raises:
            ValueError: If the developer token is missing.
        """
        return cls(
            developer_token=config.get('APPLE_MUSIC_DEVELOPER_TOKEN', ''),
            user_token=config.get('APPLE_MUSIC_USER_TOKEN') or None,
            storefront=config.get('APPLE_MUSIC_STOREFRONT') or DEFAULT_STOREFRONT,
        )

    @classmethod
    def from_env(cls) -> 'AppleMusicCredentials':
        """
        Create credentials from environment variables, reading a ``.env``
        file first if one is present.

        Raises:
            ValueError: If the developer token is missing.
        """
        load_dotenv()
        return cls.from_config(os.environ)

    def to_dict(self) -> dict:
        return {
            'developer_token': self.developer_token,
            'user_token': self.user_token,
            'storefront': self.storefront,
        }
