"""The generate-image tool: discovery metadata and call handling."""

from __future__ import annotations

import json
import logging
from typing import Any, Dict, List, Mapping, Optional

from config.image.defaults import (
    DEFAULT_ENABLE_SAFETY_CHECKER,
    DEFAULT_GUIDANCE_SCALE,
    DEFAULT_IMAGE_SIZE,
    DEFAULT_NUM_IMAGES,
    DEFAULT_NUM_INFERENCE_STEPS,
    IMAGE_SIZES,
    MAX_NUM_IMAGES,
)
from config.image.models import DEFAULT_MODEL_ID, SUPPORTED_MODELS
from core.exceptions import ProviderError, UnknownToolError, ValidationError
from core.providers.image.fal import LogSink
from core.pydantic_schemas.tools import ToolResponse
from features.image.guidance import (
    format_provider_error,
    format_service_error,
    format_validation_error,
)
from features.image.service import ImageGenerationService
from features.image.validation import validate_generation_arguments

logger = logging.getLogger(__name__)
progress_logger = logging.getLogger("fal.progress")

TOOL_NAME = "generate-image"

TOOL_DESCRIPTION = "Generate an image from a text prompt using a selectable text-to-image model."

IMAGE_TOOL_INPUT_SCHEMA: Dict[str, Any] = {
    "type": "object",
    "properties": {
        "prompt": {
            "type": "string",
            "description": "Text prompt describing the image to generate",
        },
        "model": {
            "type": "string",
            "default": DEFAULT_MODEL_ID,
            "description": (
                "ID of the fal.ai text-to-image model to use. Recommended: "
                + ", ".join(model.id for model in SUPPORTED_MODELS)
                + ". Other fal.ai model IDs are accepted."
            ),
        },
        "image_size": {
            "type": "string",
            "enum": list(IMAGE_SIZES),
            "default": DEFAULT_IMAGE_SIZE,
            "description": "Size of the generated image",
        },
        "num_images": {
            "type": "integer",
            "default": DEFAULT_NUM_IMAGES,
            "minimum": 1,
            "maximum": MAX_NUM_IMAGES,
            "description": "Number of images to generate",
        },
        "num_inference_steps": {
            "type": "integer",
            "default": DEFAULT_NUM_INFERENCE_STEPS,
            "description": "Number of inference steps",
        },
        "guidance_scale": {
            "type": "number",
            "default": DEFAULT_GUIDANCE_SCALE,
            "description": "Classifier Free Guidance scale",
        },
        "enable_safety_checker": {
            "type": "boolean",
            "default": DEFAULT_ENABLE_SAFETY_CHECKER,
            "description": "Enable the safety checker",
        },
    },
    "required": ["prompt"],
}

IMAGE_TOOL_DEFINITION: Dict[str, Any] = {
    "name": TOOL_NAME,
    "description": TOOL_DESCRIPTION,
    "inputSchema": IMAGE_TOOL_INPUT_SCHEMA,
}


def list_tools() -> List[Dict[str, Any]]:
    """Return the tool definitions exposed on discovery."""

    return [IMAGE_TOOL_DEFINITION]


def _log_progress(message: str) -> None:
    progress_logger.info(message)


class ImageToolHandler:
    """Translate tool calls into image generation and wrap the outcome."""

    def __init__(self, service: ImageGenerationService, log_sink: Optional[LogSink] = None) -> None:
        self._service = service
        self._log_sink = log_sink or _log_progress

    async def handle(self, name: str, arguments: Optional[Mapping[str, Any]]) -> ToolResponse:
        """Run one tool call; every failure becomes an error response."""

        if name != TOOL_NAME:
            error = UnknownToolError(name)
            logger.warning("Rejected call to unknown tool '%s'", name)
            return ToolResponse.failure(error.message)

        try:
            request = validate_generation_arguments(arguments)
        except ValidationError as exc:
            logger.warning("Validation error in %s: %s", TOOL_NAME, exc)
            return ToolResponse.failure(format_validation_error(exc, TOOL_NAME))

        try:
            result = await self._service.generate(request, on_log=self._log_sink)
        except ProviderError as exc:
            logger.error("Provider error in %s: %s", TOOL_NAME, exc)
            return ToolResponse.failure(format_provider_error(exc))
        except Exception as exc:
            logger.error("Unexpected error in %s: %s", TOOL_NAME, exc, exc_info=True)
            return ToolResponse.failure(format_service_error(exc))

        return ToolResponse.success(json.dumps(result.to_payload(), indent=2))


__all__ = [
    "IMAGE_TOOL_DEFINITION",
    "IMAGE_TOOL_INPUT_SCHEMA",
    "ImageToolHandler",
    "TOOL_DESCRIPTION",
    "TOOL_NAME",
    "list_tools",
]
