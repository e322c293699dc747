"""AEM Sites pages. The endpoint path may differ per AEM setup."""

from typing import Any

from adobe_client.client.endpoints import Endpoint, ResourceClient


class SitesClient(ResourceClient):
    ENDPOINTS = {
        # The page path is encoded as one flat value, "/" included. Only 2xx
        # counts as success.
        "list_pages": Endpoint(
            "GET",
            "/api/sites/v1/pages?path={param}",
            "Failed to list AEM pages; status {status}",
            min_status=200,
        ),
    }

    def list_pages(self, path: str = "/content") -> Any:
        return self._call("list_pages", path)
