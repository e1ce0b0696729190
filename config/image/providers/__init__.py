"""Image provider-specific configuration exports."""

from . import fal
from .fal import *  # noqa: F401,F403

__all__ = [
    "fal",
    *fal.__all__,
]
