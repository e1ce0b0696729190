"""Persist generated images from provider URLs to the local filesystem."""

from __future__ import annotations

import asyncio
import logging
import re
from datetime import UTC, datetime
from pathlib import Path
from typing import Callable

import httpx

from config.image.defaults import FILENAME_PROMPT_CHARS, IMAGE_FILE_EXTENSION
from config.image.providers import fal as fal_config
from core.exceptions import FetchError, PersistenceError

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


def _utc_now() -> datetime:
    return datetime.now(UTC)


def sanitise_prompt(prompt: str) -> str:
    """Return a lower-cased, filesystem-safe prefix of ``prompt``."""

    return re.sub(r"[^A-Za-z0-9]", "_", prompt[:FILENAME_PROMPT_CHARS]).lower()


def format_timestamp(moment: datetime) -> str:
    """Format ``moment`` as a UTC ISO-8601 millisecond stamp without ``:`` or ``.``."""

    moment = moment.astimezone(UTC)
    stamp = moment.strftime("%Y-%m-%dT%H:%M:%S") + f".{moment.microsecond // 1000:03d}Z"
    return stamp.replace(":", "-").replace(".", "-")


def build_filename(prompt: str, moment: datetime, index: int | None = None) -> str:
    """Return ``<prompt>_<timestamp>[_<index + 1>].png``."""

    suffix = f"_{index + 1}" if index is not None else ""
    return f"{sanitise_prompt(prompt)}_{format_timestamp(moment)}{suffix}.{IMAGE_FILE_EXTENSION}"


class LocalImageStorage:
    """Download generated images and write them under one output directory."""

    def __init__(
        self,
        output_dir: Path,
        *,
        timeout: float = fal_config.DOWNLOAD_TIMEOUT_SECONDS,
        clock: Clock | None = None,
    ) -> None:
        self.output_dir = Path(output_dir)
        self._timeout = timeout
        self._clock = clock or _utc_now

    def ensure_output_dir(self) -> Path:
        """Create the output directory if needed. Safe to call concurrently."""

        if not self.output_dir.is_dir():
            self.output_dir.mkdir(parents=True, exist_ok=True)
            logger.info("Created directory: %s", self.output_dir)
        return self.output_dir

    async def _download(self, url: str) -> bytes:
        try:
            async with httpx.AsyncClient(timeout=self._timeout, follow_redirects=True) as client:
                response = await client.get(url)
        except httpx.RequestError as exc:
            raise PersistenceError(f"Failed to fetch {url}: {exc}", url=url) from exc

        if response.status_code >= 400:
            raise FetchError(
                f"Failed to fetch {url}: {response.status_code} {response.reason_phrase}".rstrip(),
                url=url,
                status_code=response.status_code,
            )
        return response.content

    async def save_from_url(self, url: str, prompt: str, index: int | None = None) -> str:
        """
        Download ``url`` and write it to a file named after ``prompt``.

        Args:
            url: Remote image URL returned by the provider
            prompt: Prompt text used for the filename prefix
            index: Zero-based position of the image in the batch

        Returns:
            Absolute path of the written file

        Raises:
            PersistenceError: On download or write failure (not retried)
        """
        try:
            output_dir = await asyncio.to_thread(self.ensure_output_dir)
            path = output_dir / build_filename(prompt, self._clock(), index)

            content = await self._download(url)
            await asyncio.to_thread(path.write_bytes, content)
        except PersistenceError as exc:
            logger.error("Failed to download image: %s", exc)
            raise
        except OSError as exc:
            logger.error("Failed to save image from %s: %s", url, exc)
            raise PersistenceError(f"Failed to save image: {exc}", url=url) from exc

        logger.info("Downloaded image to: %s", path)
        return str(path)


__all__ = [
    "LocalImageStorage",
    "build_filename",
    "format_timestamp",
    "sanitise_prompt",
]
