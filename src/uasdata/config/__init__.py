"""Configuration models."""

from uasdata.config.store_config import (
    DEFAULT_DATA_URL,
    DEFAULT_VERSION_URL,
    StoreConfig,
)

__all__ = ["StoreConfig", "DEFAULT_DATA_URL", "DEFAULT_VERSION_URL"]
