"""Utilities for formatting tool error messages with corrective guidance."""

from __future__ import annotations

import json
from typing import Callable, List, Optional, Tuple

from config.image.defaults import EXAMPLE_PROMPT, IMAGE_SIZES, MAX_NUM_IMAGES, MODELS_DOCUMENTATION_URL
from config.image.models import SUPPORTED_MODELS
from core.exceptions import ProviderError, ValidationError

_CREDENTIAL_MARKERS = ("api key", "fal_key", "401", "unauthorized", "forbidden")


def _size_hint() -> str:
    return "Valid image_size values: " + ", ".join(IMAGE_SIZES)


def _prompt_hint() -> str:
    example = json.dumps({"prompt": EXAMPLE_PROMPT})
    return f"Example: {example}"


def _num_images_hint() -> str:
    return f"num_images must be an integer from 1 to {MAX_NUM_IMAGES}."


def _model_hint() -> str:
    lines = ["Recommended models:"]
    lines.extend(f"- {model.name} ({model.id})" for model in SUPPORTED_MODELS)
    lines.append(f"Browse all available models at {MODELS_DOCUMENTATION_URL}")
    return "\n".join(lines)


def _credentials_hint() -> str:
    return "Check that the FAL_KEY environment variable holds a valid fal.ai API key."


# (field, text markers, hint builder), applied in this order
_RULES: List[Tuple[str, Tuple[str, ...], Callable[[], str]]] = [
    ("prompt", ("prompt",), _prompt_hint),
    ("image_size", ("size",), _size_hint),
    ("num_images", ("num_images",), _num_images_hint),
    ("model", ("model",), _model_hint),
]


def build_guidance(message: str, field: Optional[str] = None) -> List[str]:
    """Return the hint paragraphs that apply to an error.

    A validation ``field`` selects hints precisely; without one the hints are
    picked by matching the lower-cased message text.
    """

    lowered = (message or "").lower()
    hints: List[str] = []
    for rule_field, markers, build in _RULES:
        if field is not None:
            matched = field == rule_field
        else:
            matched = any(marker in lowered for marker in markers)
        if matched:
            hints.append(build())

    if field is None and any(marker in lowered for marker in _CREDENTIAL_MARKERS):
        hints.append(_credentials_hint())
    return hints


def with_guidance(message: str, field: Optional[str] = None) -> str:
    """Append applicable hints to ``message``, one paragraph each."""

    return "\n\n".join([message, *build_guidance(message, field)])


def format_validation_error(exc: ValidationError, tool_name: str) -> str:
    """Return the user-facing text for a :class:`ValidationError`."""

    return with_guidance(f"Invalid arguments for {tool_name}: {exc.message}", exc.field)


def format_provider_error(exc: ProviderError) -> str:
    """Return the user-facing text for a :class:`ProviderError`."""

    return with_guidance(f"Error generating image: {exc.message}")


def format_service_error(exc: Exception) -> str:
    """Return the user-facing text for any other failure."""

    message = getattr(exc, "message", None) or str(exc)
    return with_guidance(f"Error generating image: {message or exc.__class__.__name__}")


__all__ = [
    "build_guidance",
    "format_provider_error",
    "format_service_error",
    "format_validation_error",
    "with_guidance",
]
