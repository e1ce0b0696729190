"""Resolve where generated images are written on the local machine."""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Optional

from config.image.defaults import OUTPUT_SUBDIR

logger = logging.getLogger(__name__)

_XDG_DOWNLOAD_DIR = re.compile(r'^\s*XDG_DOWNLOAD_DIR="(.*)"', re.MULTILINE)


def _user_dirs_download_dir(home: Path) -> Optional[Path]:
    """Return the download directory declared in ``~/.config/user-dirs.dirs``."""

    user_dirs = home / ".config" / "user-dirs.dirs"
    try:
        content = user_dirs.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        logger.debug("No usable user-dirs file at %s: %s", user_dirs, exc)
        return None

    match = _XDG_DOWNLOAD_DIR.search(content)
    if not match or not match.group(1):
        return None

    declared = match.group(1).replace("$HOME", str(home))
    if "\x00" in declared:
        logger.debug("Ignoring unusable XDG_DOWNLOAD_DIR in %s: %r", user_dirs, declared)
        return None
    return Path(declared)


def default_downloads_dir(home: Optional[Path] = None) -> Path:
    """Return the user's download directory, falling back to ``~/Downloads``."""

    home = Path(home) if home is not None else Path.home()
    return _user_dirs_download_dir(home) or home / "Downloads"


def resolve_output_dir(
    output_dir_override: Optional[str] = None,
    home: Optional[Path] = None,
) -> Path:
    """Return the absolute directory generated images are saved to.

    ``<override>/fal_ai`` when an override is configured, otherwise
    ``<downloads>/fal_ai``. Nothing is created here.
    """

    if output_dir_override:
        base = Path(output_dir_override).expanduser()
    else:
        base = default_downloads_dir(home)
    return (base / OUTPUT_SUBDIR).resolve()


__all__ = ["default_downloads_dir", "resolve_output_dir"]
