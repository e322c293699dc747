"""Request pipeline shared by every Adobe resource client.

This module composes base URI and path, applies the standard and configured
headers, runs the authenticator, serializes JSON bodies and hands the result
to the injected transport. It does not retry and imposes no timeout.
"""

import json
import logging
import time
from typing import Any

import requests

from adobe_client.client.auth import AuthLike, apply_auth
from adobe_client.client.exceptions import AdobeClientError, SerializationError
from adobe_client.client.messages import HttpRequest
from adobe_client.client.transport import Transport
from adobe_client.config.sdk_config import SdkConfig

logger = logging.getLogger(__name__)


def join_url(base_uri: str, path: str) -> str:
    """Joins base and path with exactly one separating slash."""

    return f"{base_uri.rstrip('/')}/{path.lstrip('/')}"


def encode_json(payload: Any) -> bytes:
    """Compact UTF-8 JSON, key order preserved.

    Raises:
        SerializationError: For NaN/Infinity, cyclic structures or values
            json cannot represent.
    """

    try:
        text = json.dumps(payload, separators=(",", ":"), allow_nan=False)
    except (TypeError, ValueError) as e:
        raise SerializationError(f"Payload is not JSON serializable: {e}") from e

    return text.encode("utf-8")


class HttpClient:
    """Builds authenticated requests and dispatches them to a transport.

    Attributes:
        config (SdkConfig): Base URI, user agent and default headers.
    """

    def __init__(
        self,
        transport: Transport,
        config: SdkConfig,
        auth_provider: AuthLike | None = None,
    ):
        """Initializes the pipeline.

        Args:
            transport: Anything with ``send_request(HttpRequest) -> requests.Response``.
            config: Immutable SDK configuration.
            auth_provider: Optional authenticator; None sends unauthenticated requests.
        """

        self._transport = transport
        self._auth_provider = auth_provider
        self.config = config

        logger.info("HttpClient initialized with base_uri=%s", self.config.base_uri)

    def create_request(self, method: str, path: str) -> HttpRequest:
        request = HttpRequest.create(method, join_url(self.config.base_uri, path))
        request = request.with_header("Accept", "application/json")
        request = request.with_header("User-Agent", self.config.user_agent)

        for name, value in self.config.default_headers.items():
            request = request.with_header(name, value)

        return apply_auth(self._auth_provider, request)

    def create_json_request(self, method: str, path: str, payload: Any) -> HttpRequest:
        body = encode_json(payload)

        return self.create_request(method, path).with_header(
            "Content-Type", "application/json"
        ).with_body(body)

    def send(self, request: HttpRequest) -> requests.Response:
        """Sends a request through the transport.

        Transport failures are logged and re-raised unchanged.

        Returns:
            requests.Response: The completed response, whatever its status.
        """

        start_ts = time.perf_counter()

        try:
            logger.debug(
                "ADOBE_REQUEST_START method=%s url=%s", request.method, request.url
            )
            response = self._transport.send_request(request)

            duration = (time.perf_counter() - start_ts) * 1000
            logger.info(
                "ADOBE_REQUEST_COMPLETE method=%s url=%s status=%s latency_ms=%.2f",
                request.method,
                request.url,
                response.status_code,
                duration,
            )

            return response

        except (AdobeClientError, requests.exceptions.RequestException) as e:
            duration = (time.perf_counter() - start_ts) * 1000
            logger.error(
                "ADOBE_REQUEST_FAILED method=%s url=%s latency_ms=%.2f error=%s",
                request.method,
                request.url,
                duration,
                str(e),
            )

            raise
