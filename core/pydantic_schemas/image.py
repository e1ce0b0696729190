"""Request and result models for image generation."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from config.image.defaults import (
    DEFAULT_ENABLE_SAFETY_CHECKER,
    DEFAULT_GUIDANCE_SCALE,
    DEFAULT_IMAGE_SIZE,
    DEFAULT_NUM_IMAGES,
    DEFAULT_NUM_INFERENCE_STEPS,
    MAX_NUM_IMAGES,
    ImageSize,
)
from config.image.models import DEFAULT_MODEL_ID


class GenerationRequest(BaseModel):
    """Validated parameters for one generate-image tool call."""

    model_config = ConfigDict(frozen=True)

    prompt: str = Field(..., min_length=1)
    image_size: ImageSize = DEFAULT_IMAGE_SIZE
    num_inference_steps: int = Field(DEFAULT_NUM_INFERENCE_STEPS, gt=0)
    guidance_scale: float = Field(DEFAULT_GUIDANCE_SCALE, gt=0)
    num_images: int = Field(DEFAULT_NUM_IMAGES, ge=1, le=MAX_NUM_IMAGES)
    enable_safety_checker: bool = DEFAULT_ENABLE_SAFETY_CHECKER
    model: str = Field(DEFAULT_MODEL_ID, min_length=1)

    def to_provider_arguments(self) -> Dict[str, Any]:
        """Return the fal.ai input payload for this request."""

        return {
            "prompt": self.prompt,
            "image_size": self.image_size,
            "num_inference_steps": self.num_inference_steps,
            "guidance_scale": self.guidance_scale,
            "num_images": self.num_images,
            "enable_safety_checker": self.enable_safety_checker,
        }


class GeneratedImage(BaseModel):
    """One image returned by the provider, optionally mirrored to disk.

    Provider fields (``width``, ``height``, ``content_type`` ...) are kept as
    extra attributes and serialized back unchanged.
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    url: Optional[str] = None
    local_path: Optional[str] = Field(default=None, alias="localPath")


class GenerationResult(BaseModel):
    """Terminal result of one generation call."""

    model_config = ConfigDict(extra="allow")

    images: List[GeneratedImage] = Field(default_factory=list)

    def to_payload(self) -> Dict[str, Any]:
        """Serialize for the tool response.

        Only fields the provider sent (plus ``localPath`` when an image was
        saved) are emitted.
        """

        return self.model_dump(by_alias=True, exclude_unset=True)


__all__ = [
    "GenerationRequest",
    "GeneratedImage",
    "GenerationResult",
]
