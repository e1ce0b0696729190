"""Validation of generate-image tool arguments."""

from __future__ import annotations

import logging
from typing import Any, Mapping

from config.image.defaults import (
    DEFAULT_ENABLE_SAFETY_CHECKER,
    DEFAULT_GUIDANCE_SCALE,
    DEFAULT_IMAGE_SIZE,
    DEFAULT_NUM_IMAGES,
    DEFAULT_NUM_INFERENCE_STEPS,
    IMAGE_SIZES,
    MAX_NUM_IMAGES,
)
from config.image.models import DEFAULT_MODEL_ID, describe_supported_models, find_supported_model
from core.exceptions import ValidationError
from core.pydantic_schemas.image import GenerationRequest

logger = logging.getLogger(__name__)


def _is_integer(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def validate_prompt(value: Any) -> str:
    """Require a non-blank text prompt."""
    if value is None or not isinstance(value, str) or not value.strip():
        raise ValidationError(
            "A non-empty 'prompt' describing the image is required.",
            field="prompt",
        )
    return value


def validate_image_size(value: Any) -> str:
    """Validate image size against the supported presets."""
    if value is None:
        return DEFAULT_IMAGE_SIZE
    if value not in IMAGE_SIZES:
        raise ValidationError(
            f"Invalid image_size '{value}'. Allowed: {', '.join(IMAGE_SIZES)}",
            field="image_size",
        )
    return value


def validate_num_images(value: Any) -> int:
    """Validate the requested batch size."""
    if value is None:
        return DEFAULT_NUM_IMAGES
    if not _is_integer(value):
        raise ValidationError(
            f"num_images must be an integer between 1 and {MAX_NUM_IMAGES}.",
            field="num_images",
        )
    if value > MAX_NUM_IMAGES:
        raise ValidationError(
            f"num_images cannot exceed the maximum of {MAX_NUM_IMAGES}, got {value}.",
            field="num_images",
        )
    if value < 1:
        raise ValidationError(
            f"num_images must be between 1 and {MAX_NUM_IMAGES}, got {value}.",
            field="num_images",
        )
    return value


def validate_safety_checker(value: Any) -> bool:
    """Require a genuine boolean, not a truthy string or number."""
    if value is None:
        return DEFAULT_ENABLE_SAFETY_CHECKER
    if not isinstance(value, bool):
        raise ValidationError(
            f"enable_safety_checker must be a boolean (true or false), got {value!r}.",
            field="enable_safety_checker",
        )
    return value


def validate_inference_steps(value: Any) -> int:
    """Validate the number of inference steps."""
    if value is None:
        return DEFAULT_NUM_INFERENCE_STEPS
    if not _is_integer(value) or value <= 0:
        raise ValidationError(
            f"num_inference_steps must be a positive integer, got {value!r}.",
            field="num_inference_steps",
        )
    return value


def validate_guidance_scale(value: Any) -> float:
    """Validate the classifier-free guidance scale."""
    if value is None:
        return DEFAULT_GUIDANCE_SCALE
    if not _is_number(value) or value <= 0:
        raise ValidationError(
            f"guidance_scale must be a positive number, got {value!r}.",
            field="guidance_scale",
        )
    return float(value)


def validate_model(value: Any) -> str:
    """
    Check the model id against the recommended list.

    Unlisted ids are allowed through unchanged with a warning: fal.ai hosts
    many more text-to-image endpoints than the recommended list.
    """
    if value is None:
        return DEFAULT_MODEL_ID
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(
            f"model must be a non-empty fal.ai model id, got {value!r}.",
            field="model",
        )
    if find_supported_model(value) is None:
        logger.warning(
            "Model '%s' is not in the recommended list; passing it through to fal.ai. Recommended: %s",
            value,
            describe_supported_models(),
        )
    return value


def validate_generation_arguments(raw: Mapping[str, Any] | None) -> GenerationRequest:
    """
    Validate raw tool arguments and build a ``GenerationRequest``.

    Checks run in a fixed order and stop at the first failure.

    Raises:
        ValidationError: With a caller-actionable message and the failing field
    """
    raw = raw or {}

    prompt = validate_prompt(raw.get("prompt"))
    image_size = validate_image_size(raw.get("image_size"))
    num_images = validate_num_images(raw.get("num_images"))
    enable_safety_checker = validate_safety_checker(raw.get("enable_safety_checker"))
    num_inference_steps = validate_inference_steps(raw.get("num_inference_steps"))
    guidance_scale = validate_guidance_scale(raw.get("guidance_scale"))
    model = validate_model(raw.get("model"))

    return GenerationRequest(
        prompt=prompt,
        image_size=image_size,
        num_inference_steps=num_inference_steps,
        guidance_scale=guidance_scale,
        num_images=num_images,
        enable_safety_checker=enable_safety_checker,
        model=model,
    )


__all__ = [
    "validate_generation_arguments",
    "validate_guidance_scale",
    "validate_image_size",
    "validate_inference_steps",
    "validate_model",
    "validate_num_images",
    "validate_prompt",
    "validate_safety_checker",
]
