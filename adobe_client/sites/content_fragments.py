"""
AEM Sites Content Fragments API.

Fragments are addressed by their repository path (e.g.
``/content/dam/site/article``). Paths are encoded segment by segment so the
``/`` separators survive while each segment's special characters are escaped.

Base path: /api/sites/v1/fragments
"""

from __future__ import annotations

from typing import Any, Mapping

from adobe_client.client.encoding import encode_hierarchical_path
from adobe_client.client.endpoints import Endpoint, PathEncoding, ResourceClient

FRAGMENTS_PATH = "/api/sites/v1/fragments"
DEFAULT_CONTAINER_PATH = "/content/dam"


def _fragment(
    method: str, suffix: str, message: str, **kwargs: Any
) -> Endpoint:
    return Endpoint(
        method,
        FRAGMENTS_PATH + "{param}" + suffix,
        message,
        encoding=PathEncoding.HIERARCHICAL,
        **kwargs,
    )


class ContentFragmentsClient(ResourceClient):
    ENDPOINTS = {
        "list": Endpoint("GET", FRAGMENTS_PATH, "Failed to list Content Fragments"),
        "create": Endpoint(
            "POST", FRAGMENTS_PATH, "Failed to create Content Fragment", json_body=True
        ),
        "get": _fragment("GET", "", "Failed to fetch Content Fragment"),
        "update": _fragment(
            "PATCH", "", "Failed to update Content Fragment", json_body=True
        ),
        "delete": _fragment(
            "DELETE", "", "Failed to delete Content Fragment", decode=False
        ),
        "delete_and_unpublish": _fragment(
            "POST",
            "/delete-and-unpublish",
            "Failed to delete and unpublish Content Fragment",
            decode=False,
        ),
        "previews": _fragment(
            "GET", "/previews", "Failed to fetch preview URLs for Content Fragment"
        ),
        "copy": _fragment(
            "POST", "/copy", "Failed to copy Content Fragment", json_body=True
        ),
    }

    @staticmethod
    def encode_path(path: str) -> str:
        return encode_hierarchical_path(path)

    def list(
        self,
        container_path: str = DEFAULT_CONTAINER_PATH,
        options: Mapping[str, Any] | None = None,
    ) -> Any:
        """
        Lists Content Fragments under a container path.

        Args:
            container_path: Folder to list, sent as the ``path`` query parameter.
            options: limit, offset, model, recursive, search, sort. A ``path``
                key here overrides container_path.
        """
        query = {"path": container_path, **(options or {})}
        return self._call("list", query=query)

    def create(self, payload: Mapping[str, Any]) -> Any:
        """Payload should include model, name, title, path and elements."""
        return self._call("create", payload=payload)

    def get(self, fragment_path: str) -> Any:
        return self._call("get", fragment_path)

    def update(self, fragment_path: str, payload: Mapping[str, Any]) -> Any:
        return self._call("update", fragment_path, payload=payload)

    def delete(self, fragment_path: str) -> None:
        self._call("delete", fragment_path)

    def delete_and_unpublish(self, fragment_path: str) -> None:
        self._call("delete_and_unpublish", fragment_path)

    def get_preview_urls(self, fragment_path: str) -> Any:
        return self._call("previews", fragment_path)

    def copy(self, fragment_path: str, payload: Mapping[str, Any]) -> Any:
        """Payload should include destinationPath and optionally name/title."""
        return self._call("copy", fragment_path, payload=payload)
