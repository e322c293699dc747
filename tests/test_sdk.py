import responses

from adobe_client.assets.assets import AssetsClient
from adobe_client.client.auth import BearerTokenProvider
from adobe_client.client.transport import RequestsTransport
from adobe_client.config.sdk_config import SdkConfig
from adobe_client.config.settings import AdobeSettings
from adobe_client.sdk import AdobeSdk
from adobe_client.segmentation.audiences import AudiencesClient
from adobe_client.segmentation.export_jobs import ExportJobsClient
from adobe_client.segmentation.segment_definitions import SegmentDefinitionsClient
from adobe_client.segmentation.segment_jobs import SegmentJobsClient
from adobe_client.sites.content_fragments import ContentFragmentsClient
from adobe_client.sites.pages import SitesClient

from conftest import BASE_URI, StubTransport, make_response


def test_sdk_exposes_every_resource_client(config):
    sdk = AdobeSdk(StubTransport(), config)

    assert isinstance(sdk.sites, SitesClient)
    assert isinstance(sdk.assets, AssetsClient)
    assert isinstance(sdk.content_fragments, ContentFragmentsClient)
    assert isinstance(sdk.audiences, AudiencesClient)
    assert isinstance(sdk.export_jobs, ExportJobsClient)
    assert isinstance(sdk.segment_definitions, SegmentDefinitionsClient)
    assert isinstance(sdk.segment_jobs, SegmentJobsClient)


def test_resource_clients_share_one_pipeline(config):
    stub = StubTransport(lambda request: make_response(200, {}))
    sdk = AdobeSdk(stub, config, BearerTokenProvider("t"))

    sdk.audiences.get_audience("a")
    sdk.segment_jobs.get_segment_job("b")
    sdk.content_fragments.get("/content/dam/c")

    assert len(stub.requests) == 3
    assert all(r.header("Authorization") == "Bearer t" for r in stub.requests)


def test_separate_sdks_do_not_share_state():
    first = AdobeSdk(StubTransport(), SdkConfig(base_uri="https://one.test"))
    second = AdobeSdk(StubTransport(), SdkConfig(base_uri="https://two.test"))

    assert first.http is not second.http
    assert first.http.create_request("GET", "/x").url == "https://one.test/x"
    assert second.http.create_request("GET", "/x").url == "https://two.test/x"


@responses.activate
def test_from_settings_end_to_end():
    settings = AdobeSettings(
        _env_file=None,
        access_token="tok",
        api_key="key",
        ims_org_id="org@AdobeOrg",
        sandbox_name="dev",
    )
    responses.add(
        responses.GET,
        f"{BASE_URI}/data/core/ups/audiences",
        json={"audiences": [], "page": {"totalCount": 0}},
        status=200,
    )

    sdk = AdobeSdk.from_settings(settings)
    result = sdk.audiences.list_audiences({"limit": 5, "start": 0})

    assert result["page"]["totalCount"] == 0
    assert isinstance(sdk.http._transport, RequestsTransport)
    headers = responses.calls[0].request.headers
    assert headers["Authorization"] == "Bearer tok"
    assert headers["x-api-key"] == "key"
    assert headers["x-gw-ims-org-id"] == "org@AdobeOrg"
    assert headers["x-sandbox-name"] == "dev"
