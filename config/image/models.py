"""Recommended fal.ai text-to-image models and descriptions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional


@dataclass(frozen=True)
class SupportedModel:
    """A recommended fal.ai endpoint surfaced to tool callers."""

    id: str
    name: str
    description: str

    def label(self) -> str:
        return f"{self.name} ({self.id})"


# Recommended endpoints. Any other fal.ai endpoint id is still accepted.
SUPPORTED_MODELS: List[SupportedModel] = [
    SupportedModel(
        id="fal-ai/recraft-v3",
        name="Recraft V3",
        description="SOTA vector and brand-style image generator",
    ),
    SupportedModel(
        id="fal-ai/stable-diffusion-v35-large",
        name="Stable Diffusion 3.5 Large",
        description="High-quality, resource-efficient diffusion model",
    ),
    SupportedModel(
        id="fal-ai/flux-lora",
        name="FLUX.1 [dev] with LoRAs",
        description="Super fast FLUX.1 [dev] model with LoRA support",
    ),
    SupportedModel(
        id="fal-ai/flux-general",
        name="FLUX General",
        description="General-purpose text-to-image model",
    ),
    SupportedModel(
        id="fal-ai/kolors",
        name="Kolors",
        description="Model with vivid color and artistic style",
    ),
    SupportedModel(
        id="fal-ai/stable-cascade",
        name="Stable Cascade",
        description="Cascade-style diffusion model",
    ),
    SupportedModel(
        id="fal-ai/aura-flow",
        name="Aura Flow",
        description="Artistic flow-based image generator",
    ),
    SupportedModel(
        id="fal-ai/flux-pro/v1.1",
        name="FLUX Pro v1.1",
        description="Professional-grade FLUX model",
    ),
]

SUPPORTED_MODELS_BY_ID: Dict[str, SupportedModel] = {model.id: model for model in SUPPORTED_MODELS}

# Default selection when no model is provided
DEFAULT_MODEL_ID = SUPPORTED_MODELS[0].id


def find_supported_model(model_id: str) -> Optional[SupportedModel]:
    """Return the recommended model entry for ``model_id`` if there is one."""

    return SUPPORTED_MODELS_BY_ID.get(model_id)


def list_supported_models() -> List[SupportedModel]:
    """Return the recommended models in display order."""

    return list(SUPPORTED_MODELS)


def describe_supported_models(separator: str = ", ") -> str:
    """Render the recommended models as ``Name (id)`` labels."""

    return separator.join(model.label() for model in SUPPORTED_MODELS)


__all__ = [
    "SupportedModel",
    "SUPPORTED_MODELS",
    "SUPPORTED_MODELS_BY_ID",
    "DEFAULT_MODEL_ID",
    "find_supported_model",
    "list_supported_models",
    "describe_supported_models",
]
