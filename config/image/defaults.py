"""Image generation configuration defaults."""

from __future__ import annotations

from typing import Literal, Tuple

ImageSize = Literal[
    "square_hd",
    "square",
    "portrait_4_3",
    "portrait_16_9",
    "landscape_4_3",
    "landscape_16_9",
]

# Order matters: error messages and the tool schema list sizes in this order
IMAGE_SIZES: Tuple[str, ...] = (
    "square_hd",
    "square",
    "portrait_4_3",
    "portrait_16_9",
    "landscape_4_3",
    "landscape_16_9",
)

DEFAULT_IMAGE_SIZE = "landscape_4_3"
DEFAULT_NUM_INFERENCE_STEPS = 28
DEFAULT_GUIDANCE_SCALE = 3.5
DEFAULT_NUM_IMAGES = 1
MAX_NUM_IMAGES = 5
DEFAULT_ENABLE_SAFETY_CHECKER = True

# Local persistence
OUTPUT_SUBDIR = "fal_ai"
IMAGE_FILE_EXTENSION = "png"
FILENAME_PROMPT_CHARS = 30

EXAMPLE_PROMPT = "A cute cat, sitting and looking at the camera, highly detailed, photorealistic."
MODELS_DOCUMENTATION_URL = "https://fal.ai/models"

__all__ = [
    "ImageSize",
    "IMAGE_SIZES",
    "DEFAULT_IMAGE_SIZE",
    "DEFAULT_NUM_INFERENCE_STEPS",
    "DEFAULT_GUIDANCE_SCALE",
    "DEFAULT_NUM_IMAGES",
    "MAX_NUM_IMAGES",
    "DEFAULT_ENABLE_SAFETY_CHECKER",
    "OUTPUT_SUBDIR",
    "IMAGE_FILE_EXTENSION",
    "FILENAME_PROMPT_CHARS",
    "EXAMPLE_PROMPT",
    "MODELS_DOCUMENTATION_URL",
]
