"""Test configuration helpers."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Explicitly opt-in to the async plugins we rely on, even when plugin
# auto-discovery is disabled via ``PYTEST_DISABLE_PLUGIN_AUTOLOAD``.
pytest_plugins = ("anyio", "pytest_asyncio")

# Ensure the repository root is importable so ``import core`` and the other
# top-level packages resolve when tests run from arbitrary directories.
PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from tests.helpers.fakes import FakeJobClient, FakeStorage  # noqa: E402


@pytest.fixture(autouse=True)
def isolate_fal_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep developer FAL_* variables from leaking into tests."""

    for key in (
        "FAL_KEY",
        "FAL_IMAGES_OUTPUT_DIR",
        "FAL_QUEUE_BASE_URL",
        "FAL_POLL_INTERVAL_SECONDS",
        "FAL_REQUEST_TIMEOUT_SECONDS",
        "FAL_DOWNLOAD_TIMEOUT_SECONDS",
        "FAL_MCP_LOG_LEVEL",
        "FAL_MCP_LOG_DIR",
    ):
        monkeypatch.delenv(key, raising=False)


@pytest.fixture
def fake_storage() -> FakeStorage:
    return FakeStorage()


@pytest.fixture
def job_client() -> FakeJobClient:
    return FakeJobClient()
