"""
Immutable HTTP request value.

Every modifier returns a new HttpRequest, so a request handed to an
authenticator or a transport can never be changed behind the caller's back.
Header names are case-insensitive; later writes win on collision.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import BinaryIO, Iterable, Union

from requests.structures import CaseInsensitiveDict

Body = Union[bytes, BinaryIO, None]


@dataclass(frozen=True)
class HttpRequest:
    method: str
    url: str
    _headers: CaseInsensitiveDict = field(
        default_factory=CaseInsensitiveDict, repr=False, hash=False
    )
    body: Body = None

    @classmethod
    def create(
        cls,
        method: str,
        url: str,
        headers: Iterable[tuple[str, str]] = (),
        body: Body = None,
    ) -> HttpRequest:
        return cls(method.upper(), url, CaseInsensitiveDict(list(headers)), body)

    @property
    def headers(self) -> CaseInsensitiveDict:
        """A copy of the headers; mutating it does not affect the request."""
        return self._headers.copy()

    def header(self, name: str) -> str | None:
        return self._headers.get(name)

    def with_header(self, name: str, value: str) -> HttpRequest:
        """Sets ``name``, replacing any existing value."""
        headers = self._headers.copy()
        headers.pop(name, None)
        headers[name] = value
        return replace(self, _headers=headers)

    def with_added_header(self, name: str, value: str) -> HttpRequest:
        """Appends ``value`` to ``name`` (comma-joined), keeping existing values."""
        existing = self._headers.get(name)
        if existing is None:
            return self.with_header(name, value)
        headers = self._headers.copy()
        headers[name] = f"{existing}, {value}"
        return replace(self, _headers=headers)

    def without_header(self, name: str) -> HttpRequest:
        headers = self._headers.copy()
        headers.pop(name, None)
        return replace(self, _headers=headers)

    def with_body(self, body: Body) -> HttpRequest:
        return replace(self, body=body)
