"""API key loading for external providers."""

from __future__ import annotations

import os
from typing import Dict


def load_api_keys() -> Dict[str, str]:
    """Load API keys from the environment, empty when unset."""

    return {
        "fal": os.getenv("FAL_KEY", ""),
    }


__all__ = [
    "load_api_keys",
]
