"""Public pydantic schema exports for the MCP tool interface."""

from .image import GeneratedImage, GenerationRequest, GenerationResult
from .tools import TextContent, ToolResponse

__all__ = [
    "GenerationRequest",
    "GeneratedImage",
    "GenerationResult",
    "TextContent",
    "ToolResponse",
]
