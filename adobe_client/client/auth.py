"""Authentication capabilities.

An authenticator takes an outgoing request and returns a copy carrying
credentials. Any object with an ``authenticate`` method, or a plain function
with the same signature, can be handed to the HttpClient.
"""

from typing import Callable, Protocol, Union, runtime_checkable

from adobe_client.client.messages import HttpRequest


@runtime_checkable
class AuthProvider(Protocol):
    def authenticate(self, request: HttpRequest) -> HttpRequest: ...


AuthLike = Union[AuthProvider, Callable[[HttpRequest], HttpRequest]]


class BearerTokenProvider:
    """Sends ``Authorization: Bearer <token>``.

    The token must already be valid; it is never refreshed here.
    """

    def __init__(self, access_token: str):
        self._access_token = access_token

    def authenticate(self, request: HttpRequest) -> HttpRequest:
        return request.with_header("Authorization", f"Bearer {self._access_token}")

    def __repr__(self) -> str:
        return "BearerTokenProvider(access_token=***)"


class ApiKeyProvider:
    """Sends a static API key header (``x-api-key`` by default)."""

    def __init__(self, api_key: str, header_name: str = "x-api-key"):
        self._api_key = api_key
        self._header_name = header_name

    def authenticate(self, request: HttpRequest) -> HttpRequest:
        return request.with_header(self._header_name, self._api_key)

    def __repr__(self) -> str:
        return f"ApiKeyProvider(header_name={self._header_name!r}, api_key=***)"


class ChainedAuthProvider:
    """Applies several authenticators in order; later ones win on header collision."""

    def __init__(self, *providers: AuthLike):
        self._providers = providers

    def authenticate(self, request: HttpRequest) -> HttpRequest:
        for provider in self._providers:
            request = apply_auth(provider, request)
        return request


def apply_auth(provider: AuthLike | None, request: HttpRequest) -> HttpRequest:
    """Runs ``provider`` against ``request``; no provider means unauthenticated."""

    if provider is None:
        return request
    if isinstance(provider, AuthProvider):
        return provider.authenticate(request)
    return provider(request)
