"""
Adobe Experience Platform Audience API.

Audiences are collections of profiles matching criteria defined by segment
definitions or external sources.

Base path: /data/core/ups/audiences
"""

from __future__ import annotations

from typing import Any, Mapping, Sequence

from adobe_client.client.endpoints import Endpoint, ResourceClient

AUDIENCES_PATH = "/data/core/ups/audiences"


class AudiencesClient(ResourceClient):
    ENDPOINTS = {
        "list": Endpoint("GET", AUDIENCES_PATH, "Failed to list audiences"),
        "create": Endpoint(
            "POST", AUDIENCES_PATH, "Failed to create audience", json_body=True
        ),
        "get": Endpoint(
            "GET", AUDIENCES_PATH + "/{param}", "Failed to retrieve audience"
        ),
        "delete": Endpoint(
            "DELETE",
            AUDIENCES_PATH + "/{param}",
            "Failed to delete audience",
            decode=False,
        ),
        "patch": Endpoint(
            "PATCH",
            AUDIENCES_PATH + "/{param}",
            "Failed to patch audience",
            json_body=True,
        ),
        "update": Endpoint(
            "PUT",
            AUDIENCES_PATH + "/{param}",
            "Failed to update audience",
            json_body=True,
        ),
        "bulk_get": Endpoint(
            "POST",
            AUDIENCES_PATH + "/bulk-get",
            "Failed to bulk retrieve audiences",
            json_body=True,
        ),
    }

    def list_audiences(self, options: Mapping[str, Any] | None = None) -> Any:
        """
        Lists audiences.

        Args:
            options: Query parameters such as start, limit, sort, property,
                name, description, entityType.
        """
        return self._call("list", query=options)

    def create_audience(self, payload: Mapping[str, Any]) -> Any:
        return self._call("create", payload=payload)

    def get_audience(self, audience_id: str) -> Any:
        return self._call("get", audience_id)

    def delete_audience(self, audience_id: str) -> None:
        self._call("delete", audience_id)

    def patch_audience(
        self, audience_id: str, operations: Sequence[Mapping[str, Any]]
    ) -> Any:
        """Applies JSON Patch operations (op, path, value) to an audience."""
        return self._call("patch", audience_id, payload=operations)

    def update_audience(self, audience_id: str, payload: Mapping[str, Any]) -> Any:
        """Replaces the audience with ``payload`` in full."""
        return self._call("update", audience_id, payload=payload)

    def bulk_get_audiences(self, ids: Sequence[str]) -> Any:
        return self._call("bulk_get", payload={"ids": list(ids)})
