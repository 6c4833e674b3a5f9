"""HTTP client for the remote firmware service."""

import logging
import time
from typing import TYPE_CHECKING, Any

import httpx

from firmware_descriptor.config import ConfigurationError
from firmware_descriptor.exceptions import FatalEnvelopeException
from firmware_descriptor.models.result_envelope import DecodedEnvelope, decode_envelope

if TYPE_CHECKING:
    from firmware_descriptor.config import Settings

logger = logging.getLogger(__name__)


def unpack_response(response: httpx.Response) -> DecodedEnvelope:
    """Decode the envelope carried by an HTTP response.

    The HTTP status code is not inspected; the envelope's ``status`` field
    carries the outcome.

    Raises:
        FatalEnvelopeException: If the body cannot be read or decoded
    """
    try:
        text = response.text
    except (httpx.HTTPError, httpx.StreamError, UnicodeDecodeError, LookupError) as e:
        raise FatalEnvelopeException("cannot unpack response!") from e
    return decode_envelope(text)


class FirmwareApiClient:
    """Client for calls to the remote firmware service.

    This is a singleton service holding one pooled httpx client. Every call
    returns a decoded envelope; transport failures are fatal.
    """

    def __init__(self, settings: "Settings") -> None:
        """Initialize the firmware API client.

        Args:
            settings: Application settings with the API URL and timeout
        """
        self.settings = settings
        self.enabled = settings.FIRMWARE_API_URL is not None

        self._http_client = httpx.Client(
            base_url=settings.FIRMWARE_API_URL or "",
            timeout=settings.HTTP_TIMEOUT_SECONDS,
        )

        if self.enabled:
            logger.info("FirmwareApiClient initialized with URL: %s", settings.FIRMWARE_API_URL)
        else:
            logger.warning("FirmwareApiClient disabled - FIRMWARE_API_URL is not set")

    def get(self, path: str, params: dict[str, Any] | None = None) -> DecodedEnvelope:
        """Send a GET request and decode the response envelope."""
        return self._request("GET", path, params=params)

    def post(self, path: str, json: dict[str, Any] | None = None) -> DecodedEnvelope:
        """Send a POST request and decode the response envelope."""
        return self._request("POST", path, json=json)

    def close(self) -> None:
        """Close the underlying HTTP client."""
        self._http_client.close()

    def _request(self, method: str, path: str, **kwargs: Any) -> DecodedEnvelope:
        if not self.enabled:
            raise ConfigurationError("FIRMWARE_API_URL must be set to call the firmware service")

        start_time = time.perf_counter()
        try:
            response = self._http_client.request(method, path, **kwargs)
        except httpx.HTTPError as e:
            duration = time.perf_counter() - start_time
            logger.error("%s %s failed: %s (%.3fs)", method, path, str(e), duration)
            raise FatalEnvelopeException("cannot unpack response!") from e

        duration = time.perf_counter() - start_time
        logger.debug(
            "%s %s returned HTTP %d in %.3fs", method, path, response.status_code, duration
        )
        return unpack_response(response)
