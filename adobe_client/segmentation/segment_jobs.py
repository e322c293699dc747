"""
Adobe Experience Platform Segment Jobs API.

Segment jobs evaluate segment definitions against profiles to produce
audiences.

Base path: /data/core/ups/segment/jobs
"""

from __future__ import annotations

from typing import Any, Mapping, Sequence

from adobe_client.client.endpoints import Endpoint, ResourceClient

SEGMENT_JOBS_PATH = "/data/core/ups/segment/jobs"


class SegmentJobsClient(ResourceClient):
    ENDPOINTS = {
        "list": Endpoint("GET", SEGMENT_JOBS_PATH, "Failed to list segment jobs"),
        "create": Endpoint(
            "POST", SEGMENT_JOBS_PATH, "Failed to create segment job", json_body=True
        ),
        "get": Endpoint(
            "GET", SEGMENT_JOBS_PATH + "/{param}", "Failed to retrieve segment job"
        ),
        "cancel": Endpoint(
            "DELETE",
            SEGMENT_JOBS_PATH + "/{param}",
            "Failed to cancel segment job",
            decode=False,
        ),
        "bulk_get": Endpoint(
            "POST",
            SEGMENT_JOBS_PATH + "/bulk-get",
            "Failed to bulk retrieve segment jobs",
            json_body=True,
        ),
    }

    def list_segment_jobs(self, options: Mapping[str, Any] | None = None) -> Any:
        """Query parameters: snapshot.name, start, limit, status, sort, property."""
        return self._call("list", query=options)

    def create_segment_job(
        self, segment_job_requests: Sequence[Mapping[str, Any]]
    ) -> Any:
        """Starts a job; the body is a list of segment job request objects."""
        return self._call("create", payload=list(segment_job_requests))

    def get_segment_job(self, segment_job_id: str) -> Any:
        return self._call("get", segment_job_id)

    def cancel_segment_job(self, segment_job_id: str) -> None:
        self._call("cancel", segment_job_id)

    def bulk_get_segment_jobs(self, ids: Sequence[str]) -> Any:
        return self._call("bulk_get", payload={"ids": list(ids)})
