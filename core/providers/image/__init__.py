"""Image provider implementations."""

from .fal import FalQueueClient

__all__ = [
    "FalQueueClient",
]
