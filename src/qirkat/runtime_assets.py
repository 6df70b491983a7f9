"""Helpers for locating runtime asset files."""

from __future__ import annotations

from pathlib import Path

_PACKAGE_ASSETS_DIR = Path(__file__).resolve().parent / "assets"


def assets_dir() -> Path:
    """Return the root directory for runtime assets."""
    return _PACKAGE_ASSETS_DIR


def asset_path(*parts: str) -> Path:
    """Build an absolute path inside the runtime assets directory."""
    return assets_dir().joinpath(*parts)


def read_asset_text(*parts: str) -> str | None:
    """Contents of a text asset, or ``None`` when it is not installed."""
    path = asset_path(*parts)
    if not path.is_file():
        return None
    return path.read_text(encoding="utf-8")
