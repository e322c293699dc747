"""
Adobe Experience Platform Segment Definitions API.

Segment definitions hold the PQL criteria that identify groups of profiles.

Base path: /data/core/ups/segment/definitions
"""

from __future__ import annotations

from typing import Any, Mapping, Sequence

from adobe_client.client.endpoints import Endpoint, ResourceClient

DEFINITIONS_PATH = "/data/core/ups/segment/definitions"
CONVERSION_PATH = "/data/core/ups/segment/conversion"


class SegmentDefinitionsClient(ResourceClient):
    ENDPOINTS = {
        "list": Endpoint("GET", DEFINITIONS_PATH, "Failed to list segment definitions"),
        "create": Endpoint(
            "POST",
            DEFINITIONS_PATH,
            "Failed to create segment definition",
            json_body=True,
        ),
        "get": Endpoint(
            "GET",
            DEFINITIONS_PATH + "/{param}",
            "Failed to retrieve segment definition",
        ),
        "delete": Endpoint(
            "DELETE",
            DEFINITIONS_PATH + "/{param}",
            "Failed to delete segment definition",
        ),
        "patch": Endpoint(
            "PATCH",
            DEFINITIONS_PATH + "/{param}",
            "Failed to patch segment definition",
            json_body=True,
        ),
        "bulk_get": Endpoint(
            "POST",
            DEFINITIONS_PATH + "/bulk-get",
            "Failed to bulk retrieve segment definitions",
            json_body=True,
        ),
        "convert": Endpoint(
            "POST",
            CONVERSION_PATH,
            "Failed to convert segment definition",
            json_body=True,
        ),
    }

    def list_segment_definitions(self, options: Mapping[str, Any] | None = None) -> Any:
        """Query parameters: start, limit, page, sort."""
        return self._call("list", query=options)

    def create_segment_definition(self, payload: Mapping[str, Any]) -> Any:
        return self._call("create", payload=payload)

    def get_segment_definition(self, segment_id: str) -> Any:
        return self._call("get", segment_id)

    def delete_segment_definition(self, segment_id: str) -> Any:
        return self._call("delete", segment_id)

    def patch_segment_definition(
        self, segment_id: str, payload: Mapping[str, Any]
    ) -> Any:
        return self._call("patch", segment_id, payload=payload)

    def bulk_get_segment_definitions(self, ids: Sequence[str]) -> Any:
        return self._call("bulk_get", payload={"ids": list(ids)})

    def convert_segment_definition(self, payload: Mapping[str, Any]) -> Any:
        """Converts a definition between pql/text and pql/json."""
        return self._call("convert", payload=payload)
