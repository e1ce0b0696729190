"""fal.ai queue API configuration."""

from __future__ import annotations

DEFAULT_QUEUE_BASE_URL = "https://queue.fal.run"

POLL_INTERVAL_SECONDS = 1.0
REQUEST_TIMEOUT_SECONDS = 60.0
DOWNLOAD_TIMEOUT_SECONDS = 120.0

# Queue status values reported by GET {status_url}
STATUS_IN_QUEUE = "IN_QUEUE"
STATUS_IN_PROGRESS = "IN_PROGRESS"
STATUS_COMPLETED = "COMPLETED"

__all__ = [
    "DEFAULT_QUEUE_BASE_URL",
    "POLL_INTERVAL_SECONDS",
    "REQUEST_TIMEOUT_SECONDS",
    "DOWNLOAD_TIMEOUT_SECONDS",
    "STATUS_IN_QUEUE",
    "STATUS_IN_PROGRESS",
    "STATUS_COMPLETED",
]
