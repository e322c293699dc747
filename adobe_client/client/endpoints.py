"""
Declarative endpoint descriptors and the one routine that executes them.

Resource clients hold a table of Endpoint values and delegate every call to
``ResourceClient._call``. The send / classify / decode sequence therefore
exists once, here.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping

import requests

from adobe_client.client.encoding import (
    encode_hierarchical_path,
    encode_segment,
    with_query,
)
from adobe_client.client.exceptions import SerializationError, raise_for_status
from adobe_client.client.http_client import HttpClient


class PathEncoding(str, Enum):
    """How the single path parameter of an endpoint is encoded."""

    SEGMENT = "segment"  # flat id, "/" escaped
    HIERARCHICAL = "hierarchical"  # repository path, "/" kept
    VERBATIM = "verbatim"  # appended as given


_ENCODERS = {
    PathEncoding.SEGMENT: encode_segment,
    PathEncoding.HIERARCHICAL: encode_hierarchical_path,
    PathEncoding.VERBATIM: str,
}


@dataclass(frozen=True)
class Endpoint:
    """
    One remote operation.

    path:
        Template relative to the base URI. ``{param}`` marks where the
        encoded path parameter goes.
    json_body:
        Send the payload as a JSON body via create_json_request.
    decode:
        Decode the success body as JSON. False for no-content operations.
    min_status:
        Lowest status accepted as success; the ceiling is always 299.
    error_message:
        Static failure message; may reference {status}.
    """

    method: str
    path: str
    error_message: str
    encoding: PathEncoding = PathEncoding.SEGMENT
    json_body: bool = False
    decode: bool = True
    min_status: int = 0

    def render_path(
        self, param: str | None = None, query: Mapping[str, Any] | None = None
    ) -> str:
        path = self.path
        if "{param}" in path:
            if param is None:
                raise TypeError(f"{self.method} {self.path} requires a path parameter")
            path = path.replace("{param}", _ENCODERS[self.encoding](param))

        return with_query(path, query)


def decode_json(response: requests.Response) -> Any:
    """Decodes a success body into plain dicts, lists and scalars."""

    try:
        return json.loads(response.content)
    except ValueError as e:
        raise SerializationError(
            f"Response from {response.url} is not valid JSON: {e}"
        ) from e


class ResourceClient:
    """Base for the per-API-family facades. Holds nothing but the pipeline."""

    ENDPOINTS: Mapping[str, Endpoint] = {}

    def __init__(self, client: HttpClient):
        self._client = client

    def _call(
        self,
        name: str,
        param: str | None = None,
        *,
        query: Mapping[str, Any] | None = None,
        payload: Any = None,
    ) -> Any:
        endpoint = self.ENDPOINTS[name]
        path = endpoint.render_path(param, query)

        if endpoint.json_body:
            request = self._client.create_json_request(endpoint.method, path, payload)
        else:
            request = self._client.create_request(endpoint.method, path)

        response = self._client.send(request)
        raise_for_status(
            response,
            endpoint.error_message.format(status=response.status_code),
            endpoint.min_status,
        )

        if not endpoint.decode:
            return None

        return decode_json(response)
