import json

import pytest
import requests
from requests.structures import CaseInsensitiveDict

from adobe_client.client.auth import BearerTokenProvider
from adobe_client.client.http_client import HttpClient
from adobe_client.client.transport import RequestsTransport
from adobe_client.config.sdk_config import SdkConfig

BASE_URI = "https://platform.adobe.io"


def make_response(status=200, json_body=None, url=BASE_URI, body=None):
    # Logic: Build a real requests.Response without touching the network.
    response = requests.Response()
    response.status_code = status
    response.url = url
    response.headers = CaseInsensitiveDict({"Content-Type": "application/json"})
    if body is not None:
        response._content = body
    elif json_body is not None:
        response._content = json.dumps(json_body).encode("utf-8")
    else:
        response._content = b""
    return response


class StubTransport:
    """Records every request and answers through a handler."""

    def __init__(self, handler=None):
        self.handler = handler or (lambda request: make_response(200, {}))
        self.requests = []

    def send_request(self, request):
        self.requests.append(request)
        return self.handler(request)

    @property
    def last(self):
        return self.requests[-1]


# --- FIXTURES ---
@pytest.fixture
def config():
    return SdkConfig(base_uri=BASE_URI)


@pytest.fixture
def stub():
    return StubTransport()


@pytest.fixture
def stub_http(stub, config):
    return HttpClient(stub, config)


@pytest.fixture
def http(config):
    # Logic: Real requests transport; tests intercept it with `responses`.
    return HttpClient(RequestsTransport(), config, BearerTokenProvider("test_token"))
