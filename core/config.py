"""Environment-backed settings for the image MCP server.

Domain constants live in the config/ package:
- Image defaults and sizes: config.image.defaults
- Recommended models: config.image.models
- fal.ai queue endpoints and timings: config.image.providers.fal

This module only reads the environment once into a frozen ``Settings``
instance which is then passed down explicitly to the provider client and the
storage layer.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from config.api_keys import load_api_keys
from config.image.providers import fal as fal_config
from core.utils.env import get_env, get_float_env


@dataclass(frozen=True)
class Settings:
    """Dependency injection wrapper for process settings."""

    fal_api_key: Optional[str] = None
    images_output_dir: Optional[str] = None
    fal_queue_base_url: str = fal_config.DEFAULT_QUEUE_BASE_URL
    poll_interval_seconds: float = fal_config.POLL_INTERVAL_SECONDS
    request_timeout_seconds: float = fal_config.REQUEST_TIMEOUT_SECONDS
    download_timeout_seconds: float = fal_config.DOWNLOAD_TIMEOUT_SECONDS

    @property
    def has_fal_credentials(self) -> bool:
        return bool(self.fal_api_key)


def _optional(key: str) -> Optional[str]:
    value = (get_env(key) or "").strip()
    return value or None


def load_settings() -> Settings:
    """Build ``Settings`` from the current environment."""

    return Settings(
        fal_api_key=load_api_keys()["fal"].strip() or None,
        images_output_dir=_optional("FAL_IMAGES_OUTPUT_DIR"),
        fal_queue_base_url=_optional("FAL_QUEUE_BASE_URL") or fal_config.DEFAULT_QUEUE_BASE_URL,
        poll_interval_seconds=get_float_env(
            "FAL_POLL_INTERVAL_SECONDS", fal_config.POLL_INTERVAL_SECONDS
        ),
        request_timeout_seconds=get_float_env(
            "FAL_REQUEST_TIMEOUT_SECONDS", fal_config.REQUEST_TIMEOUT_SECONDS
        ),
        download_timeout_seconds=get_float_env(
            "FAL_DOWNLOAD_TIMEOUT_SECONDS", fal_config.DOWNLOAD_TIMEOUT_SECONDS
        ),
    )


__all__ = [
    "Settings",
    "load_settings",
]
