"""Write extracted themes as JSON."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Mapping

from daisythemes.errors import DaisyThemesError, ErrorCode
from daisythemes.themes.models import StyleMap


def render_themes_json(themes: Mapping[str, StyleMap]) -> str:
    """Serialize themes with two-space indentation, keeping theme order."""
    return json.dumps(themes, indent=2, ensure_ascii=False)


def write_themes_json(themes: Mapping[str, StyleMap], output: Path) -> Path:
    """Write *themes* to *output*, creating parent directories."""
    try:
        output.parent.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise DaisyThemesError(
            ErrorCode.OUTPUT_WRITE_FAILED,
            message=f"Error creating output directory: {exc}",
            path=output.parent,
        ) from exc
    try:
        output.write_text(render_themes_json(themes), encoding="utf-8")
    except OSError as exc:
        raise DaisyThemesError(
            ErrorCode.OUTPUT_WRITE_FAILED,
            message=f"Error writing output file: {exc}",
            path=output,
        ) from exc
    return output
