"""Tool-call response envelope models."""

from __future__ import annotations

from typing import Any, Dict, List, Literal

from pydantic import BaseModel, ConfigDict, Field


class TextContent(BaseModel):
    """A single text block in a tool response."""

    type: Literal["text"] = "text"
    text: str


class ToolResponse(BaseModel):
    """Standard tool-call response wrapper."""

    model_config = ConfigDict(populate_by_name=True)

    content: List[TextContent] = Field(default_factory=list)
    is_error: bool = Field(default=False, alias="isError")

    @classmethod
    def success(cls, text: str) -> "ToolResponse":
        return cls(content=[TextContent(text=text)])

    @classmethod
    def failure(cls, text: str) -> "ToolResponse":
        return cls(content=[TextContent(text=text)], is_error=True)

    @property
    def text(self) -> str:
        return "\n".join(block.text for block in self.content)

    def to_payload(self) -> Dict[str, Any]:
        """Return the wire form (``isError`` omitted on success)."""

        payload = self.model_dump(by_alias=True)
        if not self.is_error:
            payload.pop("isError", None)
        return payload


__all__ = [
    "TextContent",
    "ToolResponse",
]
