"""Business logic for image generation."""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Dict, Optional, Protocol

from core.exceptions import ProviderError, ServiceError
from core.providers.image.fal import PROVIDER_NAME, LogSink
from core.pydantic_schemas.image import GeneratedImage, GenerationRequest, GenerationResult

logger = logging.getLogger(__name__)


class ImageJobClient(Protocol):
    """Provider handle able to run one generation job to completion."""

    async def subscribe(
        self,
        model_id: str,
        arguments: Dict[str, Any],
        on_log: Optional[LogSink] = None,
    ) -> Dict[str, Any]: ...


class ImageStorage(Protocol):
    """Local persistence for generated images."""

    async def save_from_url(self, url: str, prompt: str, index: int | None = None) -> str: ...


class ImageGenerationService:
    """Coordinate the generation provider and local image storage."""

    def __init__(self, client: ImageJobClient, storage: ImageStorage) -> None:
        self._client = client
        self._storage = storage

    async def generate(
        self,
        request: GenerationRequest,
        on_log: Optional[LogSink] = None,
    ) -> GenerationResult:
        """Run a generation job and save every returned image locally.

        Args:
            request: Validated generation parameters
            on_log: Optional sink receiving provider progress log lines

        Returns:
            Provider result with ``localPath`` attached to each saved image

        Raises:
            ProviderError: When the job cannot be submitted or fails
        """

        logger.info(
            "Generating %s image(s) with model %s (%s, steps=%s, guidance=%s)",
            request.num_images,
            request.model,
            request.image_size,
            request.num_inference_steps,
            request.guidance_scale,
        )

        try:
            data = await self._client.subscribe(
                request.model,
                request.to_provider_arguments(),
                on_log=on_log,
            )
        except ServiceError as exc:
            logger.error("fal.ai text-to-image error: %s", exc)
            raise
        except Exception as exc:
            logger.error("Unexpected image provider failure: %s", exc)
            raise ProviderError(
                f"Failed to generate image: {exc}",
                provider=PROVIDER_NAME,
                original_error=exc,
            ) from exc

        logger.debug("Image generation result: %s", data)

        payload = dict(data) if isinstance(data, dict) else {}
        descriptors = payload.pop("images", None)
        if not isinstance(descriptors, list):
            descriptors = []

        images = await asyncio.gather(
            *(
                self._persist_image(descriptor, request.prompt, index)
                for index, descriptor in enumerate(descriptors)
            )
        )

        saved = sum(1 for image in images if image.local_path)
        logger.info(
            "Image generation finished (model=%s, returned=%s, saved=%s)",
            request.model,
            len(images),
            saved,
        )
        return GenerationResult(**payload, images=list(images))

    async def _persist_image(self, descriptor: Any, prompt: str, index: int) -> GeneratedImage:
        """Save one image; failures leave the descriptor without ``localPath``."""

        fields = dict(descriptor) if isinstance(descriptor, dict) else {}
        fields.pop("localPath", None)
        url = fields.get("url")
        if not isinstance(url, str) or not url:
            logger.warning("Image #%s has no URL; skipping download", index + 1)
            return GeneratedImage.model_validate(fields)

        try:
            local_path = await self._storage.save_from_url(url, prompt, index)
        except Exception as exc:  # one failed download must not fail the request
            logger.error("Failed to download image #%s: %s", index + 1, exc)
            return GeneratedImage.model_validate(fields)

        logger.info("Image #%s saved to: %s", index + 1, local_path)
        return GeneratedImage.model_validate({**fields, "localPath": local_path})


__all__ = ["ImageGenerationService", "ImageJobClient", "ImageStorage"]
