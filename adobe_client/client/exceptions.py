"""Error taxonomy for the Adobe client and the response status classifier.

Every error raised by the SDK derives from AdobeClientError. Nothing here
retries or recovers; errors surface to the immediate caller.
"""

import logging

import requests

logger = logging.getLogger(__name__)


class AdobeClientError(Exception):
    """Base class for all SDK errors."""


class ConfigurationError(AdobeClientError):
    """Malformed construction arguments."""


class SerializationError(AdobeClientError):
    """A payload could not be encoded to JSON, or a response body could not be decoded."""


class TransportError(AdobeClientError):
    """The transport could not complete the HTTP exchange.

    The underlying library error (connection refused, timeout, TLS failure)
    is kept as ``__cause__``.
    """


class ApiError(AdobeClientError):
    """The server answered with a non-2xx status.

    Attributes:
        message: Operation-specific description, e.g. "Failed to create audience".
        response: The offending response, for status and body inspection.
    """

    def __init__(self, message: str, response: requests.Response | None = None):
        super().__init__(message)
        self.message = message
        self.response = response

    @property
    def status_code(self) -> int | None:
        return self.response.status_code if self.response is not None else None


def is_success(response: requests.Response, min_status: int = 0) -> bool:
    """Any status below 300 is a success; 3xx, 4xx and 5xx are all failures.

    ``min_status`` lets an endpoint also reject statuses below a floor.
    """

    return min_status <= response.status_code < 300


def raise_for_status(
    response: requests.Response, message: str, min_status: int = 0
) -> None:
    """Raises ApiError carrying the response when it is not a success.

    Args:
        response: The completed HTTP response.
        message: Static, call-site specific failure message.
        min_status: Statuses below this also fail.

    Raises:
        ApiError: If the response status is 300 or above.
    """

    if is_success(response, min_status):
        return

    logger.warning(
        "ADOBE_API_ERROR status=%s url=%s message=%s",
        response.status_code,
        response.url,
        message,
    )

    raise ApiError(message, response)
