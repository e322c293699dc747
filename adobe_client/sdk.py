"""
Single entry point aggregating every Adobe resource client.

All resource clients share one HttpClient, built once from the transport,
configuration and authenticator passed in. Nothing here is global.
"""

from __future__ import annotations

import logging

from adobe_client.assets.assets import AssetsClient
from adobe_client.client.auth import AuthLike, BearerTokenProvider
from adobe_client.client.http_client import HttpClient
from adobe_client.client.transport import RequestsTransport, Transport
from adobe_client.config.sdk_config import SdkConfig
from adobe_client.config.settings import AdobeSettings
from adobe_client.segmentation.audiences import AudiencesClient
from adobe_client.segmentation.export_jobs import ExportJobsClient
from adobe_client.segmentation.segment_definitions import SegmentDefinitionsClient
from adobe_client.segmentation.segment_jobs import SegmentJobsClient
from adobe_client.sites.content_fragments import ContentFragmentsClient
from adobe_client.sites.pages import SitesClient

logger = logging.getLogger(__name__)


class AdobeSdk:
    """
    Facade over the AEM Sites, AEM Assets and Experience Platform
    segmentation clients.

    Example:
        sdk = AdobeSdk(RequestsTransport(timeout=30), SdkConfig(base_uri=...),
                       BearerTokenProvider(token))
        sdk.audiences.list_audiences({"limit": 5})
    """

    def __init__(
        self,
        transport: Transport,
        config: SdkConfig,
        auth_provider: AuthLike | None = None,
    ) -> None:
        self.http = HttpClient(transport, config, auth_provider)

        self.sites = SitesClient(self.http)
        self.assets = AssetsClient(self.http)
        self.content_fragments = ContentFragmentsClient(self.http)
        self.audiences = AudiencesClient(self.http)
        self.export_jobs = ExportJobsClient(self.http)
        self.segment_definitions = SegmentDefinitionsClient(self.http)
        self.segment_jobs = SegmentJobsClient(self.http)

    @classmethod
    def from_settings(
        cls,
        settings: AdobeSettings | None = None,
        transport: Transport | None = None,
    ) -> AdobeSdk:
        """
        Builds an SDK from environment settings with bearer authentication.

        Args:
            settings: Loaded from .env / the environment when omitted.
            transport: Defaults to a RequestsTransport with no timeout.
        """
        settings = settings or AdobeSettings()
        config = settings.to_sdk_config()

        logger.info(
            "AdobeSdk configured from settings base_uri=%s sandbox=%s",
            config.base_uri,
            settings.sandbox_name,
        )

        return cls(
            transport or RequestsTransport(),
            config,
            BearerTokenProvider(settings.access_token),
        )
