"""
Adobe Experience Platform Export Jobs API.

Export jobs persist audience members to a dataset asynchronously.

Base path: /data/core/ups/export/jobs
"""

from __future__ import annotations

from typing import Any, Mapping

from adobe_client.client.endpoints import Endpoint, ResourceClient

EXPORT_JOBS_PATH = "/data/core/ups/export/jobs"


class ExportJobsClient(ResourceClient):
    ENDPOINTS = {
        "list": Endpoint("GET", EXPORT_JOBS_PATH, "Failed to list export jobs"),
        "create": Endpoint(
            "POST", EXPORT_JOBS_PATH, "Failed to create export job", json_body=True
        ),
        "get": Endpoint(
            "GET", EXPORT_JOBS_PATH + "/{param}", "Failed to retrieve export job"
        ),
        # Unlike segment jobs, cancelling an export job returns the job.
        "cancel": Endpoint(
            "DELETE", EXPORT_JOBS_PATH + "/{param}", "Failed to cancel export job"
        ),
    }

    def list_export_jobs(self, options: Mapping[str, Any] | None = None) -> Any:
        """Query parameters: limit, offset, status."""
        return self._call("list", query=options)

    def create_export_job(self, payload: Mapping[str, Any]) -> Any:
        """
        Starts an export job.

        Args:
            payload: Job configuration: fields, mergePolicy, filter,
                destination, schema, etc.
        """
        return self._call("create", payload=payload)

    def get_export_job(self, export_job_id: str) -> Any:
        return self._call("get", export_job_id)

    def cancel_export_job(self, export_job_id: str) -> Any:
        return self._call("cancel", export_job_id)
