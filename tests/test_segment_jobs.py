import json

import pytest
import responses

from adobe_client.client.exceptions import ApiError
from adobe_client.segmentation.segment_jobs import SegmentJobsClient

from conftest import BASE_URI

JOBS_URL = f"{BASE_URI}/data/core/ups/segment/jobs"
JOB_ID = "d3b4a50d-dfea-43eb-9fca-a3d6a6b66ba7"


# --- FIXTURES ---
@pytest.fixture
def client(http):
    return SegmentJobsClient(http)


# --- 1. POSITIVE TESTING (The Contract) ---
@responses.activate
def test_list_segment_jobs(client):
    responses.add(responses.GET, JOBS_URL, json={"children": []}, status=200)

    client.list_segment_jobs({"status": "SUCCEEDED", "snapshot.name": "nightly"})

    assert (
        responses.calls[0].request.url
        == f"{JOBS_URL}?status=SUCCEEDED&snapshot.name=nightly"
    )


@responses.activate
def test_create_segment_job_sends_list_body(client):
    job_requests = [{"segmentId": "seg-1"}, {"segmentId": "seg-2"}]
    responses.add(responses.POST, JOBS_URL, json={"id": JOB_ID, "status": "NEW"}, status=200)

    result = client.create_segment_job(job_requests)

    assert result["status"] == "NEW"
    assert json.loads(responses.calls[0].request.body) == job_requests


@responses.activate
def test_get_segment_job(client):
    responses.add(responses.GET, f"{JOBS_URL}/{JOB_ID}", json={"id": JOB_ID}, status=200)

    assert client.get_segment_job(JOB_ID) == {"id": JOB_ID}


@responses.activate
def test_cancel_segment_job_discards_body(client):
    responses.add(responses.DELETE, f"{JOBS_URL}/{JOB_ID}", status=204)

    assert client.cancel_segment_job(JOB_ID) is None


@responses.activate
def test_bulk_get_segment_jobs(client):
    responses.add(responses.POST, f"{JOBS_URL}/bulk-get", json={"results": {}}, status=200)

    client.bulk_get_segment_jobs((JOB_ID,))

    assert json.loads(responses.calls[0].request.body) == {"ids": [JOB_ID]}


# --- 2. NEGATIVE TESTING (The Fragility) ---
@responses.activate
def test_cancel_segment_job_failure(client):
    responses.add(responses.DELETE, f"{JOBS_URL}/{JOB_ID}", status=409)

    with pytest.raises(ApiError, match="Failed to cancel segment job") as exc_info:
        client.cancel_segment_job(JOB_ID)

    assert exc_info.value.response.status_code == 409
