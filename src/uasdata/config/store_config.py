from __future__ import annotations

import os
from typing import Any, Dict

import httpx
from pydantic import BaseModel, Field, ValidationInfo, field_validator

from uasdata import __version__
from uasdata.core.acquisition import DEFAULT_TIMEOUT_SECONDS, UrlStreamOpener
from uasdata.core.url import build_url

DEFAULT_DATA_URL = "http://user-agent-string.info/rpc/get_data.php?key=free&format=xml"
DEFAULT_VERSION_URL = (
    "http://user-agent-string.info/rpc/get_data.php?key=free&format=ini&ver=y"
)


class StoreConfig(BaseModel):
    """UAS data store configuration."""

    data_url: str = Field(
        DEFAULT_DATA_URL,
        description="URL to UAS data",
    )
    version_url: str = Field(
        DEFAULT_VERSION_URL,
        description="URL to version information about UAS data",
    )
    request_timeout: float = Field(
        DEFAULT_TIMEOUT_SECONDS,
        gt=0,
        description="Timeout for requests to the data source (seconds)",
    )
    user_agent: str = Field(
        f"uas-datastore/{__version__}",
        description="User-Agent header sent with HTTP requests",
    )

    @field_validator("data_url", "version_url")
    @classmethod
    def validate_url(cls, v: str, info: ValidationInfo) -> str:
        """Reject anything build_url would refuse at store construction."""
        build_url(v, argument=info.field_name or "url")
        return v

    @property
    def data_locator(self) -> httpx.URL:
        return build_url(self.data_url)

    @property
    def version_locator(self) -> httpx.URL:
        return build_url(self.version_url)

    def build_opener(self) -> UrlStreamOpener:
        return UrlStreamOpener(
            timeout=self.request_timeout,
            headers={"User-Agent": self.user_agent},
        )

    @classmethod
    def from_env(cls) -> "StoreConfig":
        values: Dict[str, Any] = {}
        data_url = os.getenv("UAS_DATA_URL")
        if data_url:
            values["data_url"] = data_url
        version_url = os.getenv("UAS_VERSION_URL")
        if version_url:
            values["version_url"] = version_url
        timeout = os.getenv("UAS_REQUEST_TIMEOUT")
        if timeout:
            values["request_timeout"] = timeout
        user_agent = os.getenv("UAS_USER_AGENT")
        if user_agent:
            values["user_agent"] = user_agent
        return cls(**values)

    @classmethod
    def from_yaml(cls, path: str) -> "StoreConfig":
        """Load configuration from YAML file."""
        import yaml

        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
        return cls.model_validate(data if data is not None else {})

    @classmethod
    def from_dict(cls, data: dict) -> "StoreConfig":
        return cls(**data)


__all__ = ["StoreConfig", "DEFAULT_DATA_URL", "DEFAULT_VERSION_URL"]
