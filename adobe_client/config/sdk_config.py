"""
Immutable configuration shared by every request the SDK sends.

One SdkConfig is owned by one HttpClient. Reconfiguring means building a new
instance; there are no setters.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from pydantic import BaseModel, ConfigDict, Field, field_validator

from adobe_client.client.exceptions import ConfigurationError

DEFAULT_USER_AGENT = "adobe-client-python/0.1.0"


class SdkConfig(BaseModel):
    """
    Base URI, user agent and default headers for outgoing requests.

    Default headers are applied after Accept and User-Agent, so a default
    header with either of those names wins.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    base_uri: str
    user_agent: str = DEFAULT_USER_AGENT
    default_headers: Mapping[str, str] = Field(default_factory=dict, validate_default=True)

    @field_validator("base_uri")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        if not value:
            raise ConfigurationError("base_uri must not be empty")
        return value.removesuffix("/")

    @field_validator("default_headers", mode="after")
    @classmethod
    def _freeze_headers(cls, value: Mapping[str, str]) -> Mapping[str, str]:
        # Insertion order is the order headers get applied.
        return MappingProxyType(dict(value))
