"""Transport capability and the default requests-backed implementation.

The transport is the only component that touches the network. It receives a
fully formed HttpRequest and returns a ``requests.Response`` or raises
TransportError. Any deadline belongs here, set by whoever builds the
transport.
"""

import logging
from typing import Protocol

import requests

from adobe_client.client.exceptions import TransportError
from adobe_client.client.messages import HttpRequest

logger = logging.getLogger(__name__)


class Transport(Protocol):
    def send_request(self, request: HttpRequest) -> requests.Response: ...


class RequestsTransport:
    """Sends HttpRequest values through a requests.Session.

    Attributes:
        session (requests.Session): Session used for every exchange.
        timeout: Passed straight to requests; None waits indefinitely.
    """

    def __init__(
        self,
        session: requests.Session | None = None,
        timeout: float | tuple[float, float] | None = None,
    ):
        """Initializes the transport.

        Args:
            session: An existing session to reuse, e.g. one with proxies or
                mounted adapters. A fresh session is created otherwise.
            timeout: Connect/read timeout in seconds, or a (connect, read) tuple.
        """

        self.session = session or requests.Session()
        self.timeout = timeout

    def send_request(self, request: HttpRequest) -> requests.Response:
        """Sends one request and returns the completed response.

        Non-2xx responses are returned, not raised; classification happens
        further up.

        Raises:
            TransportError: On connection, TLS or timeout failures.
        """

        # Session-level headers merge underneath ours.
        prepared = self.session.prepare_request(
            requests.Request(
                method=request.method,
                url=request.url,
                headers=dict(request.headers.items()),
                data=request.body,
            )
        )

        try:
            return self.session.send(prepared, timeout=self.timeout)

        except requests.exceptions.RequestException as e:
            raise TransportError(f"{request.method} {request.url} failed: {e}") from e

    def close(self) -> None:
        self.session.close()
