"""
Lightweight HTTP client for the Apple Music web API.

Wraps requests.Session with a single-attempt fetch/decode pipeline:
issue the request, check the status code, decode the body into a
pydantic model. Every deviation is reported as one classified error.
"""

import logging
from typing import Any, Dict, Optional, Type, TypeVar

import requests
from pydantic import BaseModel, ValidationError
from requests.exceptions import RequestException

from .exceptions import APIError, DecodeError, InvalidResponseError

logger = logging.getLogger(__name__)

BASE_URL = "https://api.music.apple.com/v1/"
REQUEST_TIMEOUT = 30  # seconds

# Accepted status codes for requests that carry no response payload.
NO_PAYLOAD_STATUSES = (200, 204)

ModelT = TypeVar("ModelT", bound=BaseModel)


def _is_success(status_code: int) -> bool:
    return 200 <= status_code < 299


class AppleMusicHTTPClient:
    """
    HTTP transport for Apple Music requests.

    Headers are passed per request since the authorization context lives
    on the service and may change between calls. No retries are made.
    """

    def __init__(
        self,
        session: Optional[requests.Session] = None,
        base_url: str = BASE_URL,
    ):
        """
        Initialize the HTTP client.

        Args:
            session: Optional pre-built session. A new one is created
                when omitted.
            base_url: API root that relative paths are joined onto.
        """
        self._session = session or requests.Session()
        self._base_url = base_url if base_url.endswith("/") else base_url + "/"

    @property
    def base_url(self) -> str:
        return self._base_url

    def close(self) -> None:
        """Close the underlying HTTP session."""
        self._session.close()

    def url_for(self, path: str) -> str:
        """Join a relative API path onto the base URL."""
        return f"{self._base_url}{path.lstrip('/')}"

    # -----------------------------------------------------------------
    # Pipeline
    # -----------------------------------------------------------------

    def fetch(
        self,
        method: str,
        path: str,
        response_model: Type[ModelT],
        headers: Optional[Dict[str, str]] = None,
        params: Optional[Dict[str, Any]] = None,
        data: Optional[str] = None,
    ) -> ModelT:
        """
        Execute a request and decode the body as ``response_model``.

        Raises:
            APIError: If no response was received.
            InvalidResponseError: If the status is outside [200, 299).
            DecodeError: If the body is not valid JSON for the model.
        """
        response = self._send(method, path, headers, params, data)

        if not _is_success(response.status_code):
            logger.warning(
                "%s %s rejected with status %d",
                method, path, response.status_code,
            )
            raise InvalidResponseError(
                f"Unexpected status {response.status_code} for {path}",
                status_code=response.status_code,
            )

        return self.decode(response, response_model)

    def send_no_payload(
        self,
        method: str,
        path: str,
        headers: Optional[Dict[str, str]] = None,
        params: Optional[Dict[str, Any]] = None,
        data: Optional[str] = None,
    ) -> None:
        """
        Execute a request whose success carries no body.

        Raises:
            APIError: If no response was received.
            InvalidResponseError: If the status is not 200 or 204.
        """
        response = self._send(method, path, headers, params, data)

        if response.status_code not in NO_PAYLOAD_STATUSES:
            logger.warning(
                "%s %s rejected with status %d",
                method, path, response.status_code,
            )
            raise InvalidResponseError(
                f"Unexpected status {response.status_code} for {path}",
                status_code=response.status_code,
            )

    @staticmethod
    def decode(response: requests.Response, response_model: Type[ModelT]) -> ModelT:
        """Decode a response body into ``response_model``."""
        try:
            return response_model.model_validate(response.json())
        except (ValidationError, ValueError) as e:
            logger.warning(
                "Failed to decode response as %s: %s",
                response_model.__name__, e,
            )
            raise DecodeError(
                f"Response does not match {response_model.__name__}"
            ) from e

    # -----------------------------------------------------------------
    # Internal request handling
    # -----------------------------------------------------------------

    def _send(
        self,
        method: str,
        path: str,
        headers: Optional[Dict[str, str]],
        params: Optional[Dict[str, Any]],
        data: Optional[str],
    ) -> requests.Response:
        url = self.url_for(path)
        logger.debug("%s %s params=%s", method, url, params)
        try:
            return self._session.request(
                method, url,
                headers=headers, params=params, data=data,
                timeout=REQUEST_TIMEOUT,
            )
        except RequestException as e:
            logger.error("Network error on %s %s: %s", method, url, e)
            raise APIError(f"Network error: {e}") from e
