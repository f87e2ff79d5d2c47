"""
Apple Music module exceptions.

Every failed call ends in exactly one of these. Each carries an
``ErrorKind`` so callers receiving errors through a callback can
switch on the kind without isinstance chains.
"""

from enum import Enum


class ErrorKind(str, Enum):
    """Fixed taxonomy of service failures."""

    TOKEN_NIL = "tokenNilError"
    API_ERROR = "apiError"
    INVALID_RESPONSE = "invalidResponse"
    DECODE_ERROR = "decodeError"
    NO_DATA = "noData"
    INVALID_COMPILED_URL = "invalidCompiledURL"


class AppleMusicServiceError(Exception):
    """Base exception for all Apple Music service errors."""

    kind: ErrorKind = ErrorKind.API_ERROR


class TokenNilError(AppleMusicServiceError):
    """Raised when a required token has not been configured."""

    kind = ErrorKind.TOKEN_NIL


class APIError(AppleMusicServiceError):
    """Raised on transport failure or an incomplete successful response."""

    kind = ErrorKind.API_ERROR


class InvalidResponseError(AppleMusicServiceError):
    """Raised when the status code is outside the accepted set."""

    kind = ErrorKind.INVALID_RESPONSE

    def __init__(self, message: str, status_code: int = None):
        super().__init__(message)
        self.status_code = status_code


class DecodeError(AppleMusicServiceError):
    """Raised when a response body does not match the expected schema."""

    kind = ErrorKind.DECODE_ERROR


class NoDataError(AppleMusicServiceError):
    """Raised when a response envelope carries no resources."""

    kind = ErrorKind.NO_DATA


class InvalidCompiledURLError(AppleMusicServiceError):
    """Raised when a request URL or body cannot be built."""

    kind = ErrorKind.INVALID_COMPILED_URL
