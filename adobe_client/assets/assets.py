"""
AEM Assets (DAM) API.

Asset paths are appended to the prefix as given; callers pass an already
well-formed path such as ``/content/dam/images/logo.png``.

Base path: /api/assets/v1
"""

from __future__ import annotations

from typing import Any, BinaryIO, Mapping

from adobe_client.client.endpoints import Endpoint, PathEncoding, ResourceClient
from adobe_client.client.exceptions import raise_for_status

ASSETS_PATH = "/api/assets/v1"
META_HEADER_PREFIX = "X-Meta-"


class AssetsClient(ResourceClient):
    ENDPOINTS = {
        "upload": Endpoint(
            "PUT",
            ASSETS_PATH + "{param}",
            "Failed to upload asset",
            encoding=PathEncoding.VERBATIM,
            decode=False,
        ),
        "get": Endpoint(
            "GET",
            ASSETS_PATH + "{param}",
            "Failed to retrieve asset",
            encoding=PathEncoding.VERBATIM,
        ),
    }

    def upload(
        self,
        target_path: str,
        content: bytes | BinaryIO,
        content_type: str,
        metadata: Mapping[str, str] | None = None,
    ) -> None:
        """
        Uploads raw content to the DAM.

        Content-Type and one ``X-Meta-<name>`` header per metadata entry are
        set after authentication, so they win over anything set earlier.

        Args:
            target_path: Destination asset path.
            content: Raw bytes or a binary file object.
            content_type: MIME type of ``content``.
            metadata: Asset metadata sent as headers.
        """
        endpoint = self.ENDPOINTS["upload"]
        request = (
            self._client.create_request(endpoint.method, endpoint.render_path(target_path))
            .with_header("Content-Type", content_type)
            .with_body(content)
        )

        for name, value in (metadata or {}).items():
            request = request.with_header(META_HEADER_PREFIX + name, value)

        response = self._client.send(request)
        raise_for_status(response, endpoint.error_message)

    def get(self, asset_path: str) -> Any:
        return self._call("get", asset_path)
