"""Tests for daisythemes.themes.output."""

import json
from pathlib import Path

import pytest

from daisythemes.errors import DaisyThemesError, ErrorCode
from daisythemes.themes.output import render_themes_json, write_themes_json


def test_write_creates_parent_directories(tmp_path: Path) -> None:
    output = tmp_path / "nested" / "dir" / "themes.json"
    themes = {"forest": {"primary": "#1eb854", "depth": 0}}

    assert write_themes_json(themes, output) == output
    assert json.loads(output.read_text(encoding="utf-8")) == themes


def test_two_space_indent_and_theme_order() -> None:
    text = render_themes_json({"zeta": {"a": "1"}, "alpha": {"b": 2}})
    assert text.startswith('{\n  "zeta": {\n    "a": "1"\n  },')
    assert list(json.loads(text)) == ["zeta", "alpha"]
    assert not text.endswith("\n")


def test_non_ascii_kept_verbatim() -> None:
    assert "ü" in render_themes_json({"grün": {"name": "ü"}})


def test_write_failure_is_reported(tmp_path: Path) -> None:
    blocker = tmp_path / "blocker"
    blocker.write_text("a file, not a folder", encoding="utf-8")

    with pytest.raises(DaisyThemesError) as excinfo:
        write_themes_json({}, blocker / "themes.json")
    assert excinfo.value.code is ErrorCode.OUTPUT_WRITE_FAILED
