from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from adobe_client.config.sdk_config import DEFAULT_USER_AGENT, SdkConfig


class AdobeSettings(BaseSettings):
    """
    Loads Adobe credentials and tenant headers from .env.
    """

    base_uri: str = Field(default="https://platform.adobe.io", alias="ADOBE_BASE_URI")
    access_token: str = Field(alias="ADOBE_ACCESS_TOKEN")
    api_key: str | None = Field(default=None, alias="ADOBE_API_KEY")
    ims_org_id: str | None = Field(default=None, alias="ADOBE_IMS_ORG_ID")
    sandbox_name: str = Field(default="prod", alias="ADOBE_SANDBOX_NAME")
    user_agent: str = Field(default=DEFAULT_USER_AGENT, alias="ADOBE_USER_AGENT")

    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",
        populate_by_name=True,  # Allows AdobeSettings(access_token=...) in Python code
    )

    @property
    def platform_headers(self) -> dict[str, str]:
        """Experience Platform tenant headers; unset values are left out."""

        headers = {}
        if self.api_key:
            headers["x-api-key"] = self.api_key
        if self.ims_org_id:
            headers["x-gw-ims-org-id"] = self.ims_org_id
        headers["x-sandbox-name"] = self.sandbox_name

        return headers

    def to_sdk_config(self) -> SdkConfig:

        return SdkConfig(
            base_uri=self.base_uri,
            user_agent=self.user_agent,
            default_headers=self.platform_headers,
        )
