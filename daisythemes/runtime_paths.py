"""Filesystem anchors for the installed package and the project config."""

from __future__ import annotations

from pathlib import Path


def package_root() -> Path:
    """Directory of the installed `daisythemes` package; node_modules lookups walk up from here."""
    return Path(__file__).resolve().parent


def default_config_path(cwd: Path | None = None) -> Path:
    return (cwd or Path.cwd()) / "daisythemes.yaml"
