"""Tests for output directory resolution."""

from __future__ import annotations

from pathlib import Path

from features.image.output_paths import default_downloads_dir, resolve_output_dir


def _write_user_dirs(home: Path, content: str) -> None:
    config_dir = home / ".config"
    config_dir.mkdir(parents=True, exist_ok=True)
    (config_dir / "user-dirs.dirs").write_text(content, encoding="utf-8")


def test_override_takes_precedence(tmp_path):
    _write_user_dirs(tmp_path, 'XDG_DOWNLOAD_DIR="$HOME/Fetched"\n')

    resolved = resolve_output_dir(str(tmp_path / "custom"), home=tmp_path)

    assert resolved == (tmp_path / "custom" / "fal_ai").resolve()


def test_user_dirs_download_entry_expands_home(tmp_path):
    _write_user_dirs(
        tmp_path,
        '# written by xdg-user-dirs-update\nXDG_DESKTOP_DIR="$HOME/Desktop"\nXDG_DOWNLOAD_DIR="$HOME/Fetched"\n',
    )

    assert default_downloads_dir(tmp_path) == tmp_path / "Fetched"
    assert resolve_output_dir(home=tmp_path) == (tmp_path / "Fetched" / "fal_ai").resolve()


def test_falls_back_to_downloads_without_user_dirs(tmp_path):
    assert resolve_output_dir(home=tmp_path) == (tmp_path / "Downloads" / "fal_ai").resolve()


def test_falls_back_when_user_dirs_lacks_download_entry(tmp_path):
    _write_user_dirs(tmp_path, 'XDG_MUSIC_DIR="$HOME/Music"\nnot a valid line\n')

    assert default_downloads_dir(tmp_path) == tmp_path / "Downloads"


def test_resolution_is_stable_and_creates_nothing(tmp_path):
    first = resolve_output_dir(home=tmp_path)
    second = resolve_output_dir(home=tmp_path)

    assert first == second
    assert first.is_absolute()
    assert not first.exists()


def test_falls_back_when_user_dirs_is_a_directory(tmp_path):
    (tmp_path / ".config" / "user-dirs.dirs").mkdir(parents=True)

    assert resolve_output_dir(home=tmp_path) == (tmp_path / "Downloads" / "fal_ai").resolve()


def test_falls_back_when_user_dirs_is_not_utf8(tmp_path):
    config_dir = tmp_path / ".config"
    config_dir.mkdir()
    (config_dir / "user-dirs.dirs").write_bytes(b'XDG_DOWNLOAD_DIR="$HOME/\xff\xfe"\n')

    assert default_downloads_dir(tmp_path) == tmp_path / "Downloads"


def test_falls_back_when_download_entry_is_not_a_valid_path(tmp_path):
    _write_user_dirs(tmp_path, 'XDG_DOWNLOAD_DIR="\x00bad"\n')

    assert default_downloads_dir(tmp_path) == tmp_path / "Downloads"
    assert resolve_output_dir(home=tmp_path) == (tmp_path / "Downloads" / "fal_ai").resolve()
