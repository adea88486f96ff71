"""Theme declarations inside a daisyUI stylesheet.

Two directive shapes are recognized::

    @plugin "daisyui" { themes: light --default, dark --prefersdark; }

    @plugin "daisyui/theme" {
      name: mytheme;
      color-scheme: dark;
      --color-primary: oklch(62.8% 0.25768 29.234);
    }

Anything else in the stylesheet is ignored. A block that does not match
simply contributes no themes; nothing here raises on malformed CSS.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Iterator

from daisythemes.errors import DaisyThemesError, ErrorCode
from daisythemes.themes.constants import (
    COLOR_SCHEME_KEY,
    COMMENT_MARKERS,
    THEME_NAME_KEY,
    VARIABLE_PREFIX,
)
from daisythemes.themes.models import ThemeRecord
from daisythemes.themes.styles import convert_styles

logger = logging.getLogger(__name__)

_REFERENCE_BLOCK_RE = re.compile(r"""@plugin\s+["']daisyui["']\s*\{[^}]*themes:\s*([^;]+);""")
_INLINE_BLOCK_RE = re.compile(r"""@plugin\s+["']daisyui/theme["']\s*\{(.*?)\}""", re.DOTALL)
_PROPERTY_RE = re.compile(r"^([^:]+):\s*([^;]+);?\s*$")
_FLAG_RE = re.compile(r"\s+--")


def iter_plugin_blocks(pattern: re.Pattern[str], css: str) -> Iterator[str]:
    """Yield the captured body of each non-overlapping *pattern* match."""
    for match in pattern.finditer(css):
        yield match.group(1)


def extract_theme_names(css: str) -> list[str]:
    """Return the unique theme names listed by ``@plugin "daisyui"`` blocks."""
    names: list[str] = []
    for themes_value in iter_plugin_blocks(_REFERENCE_BLOCK_RE, css):
        for item in themes_value.split(","):
            name = _FLAG_RE.split(item.strip(), maxsplit=1)[0].strip()
            if name:
                names.append(name)
    return list(dict.fromkeys(names))


def extract_inline_themes(css: str) -> list[ThemeRecord]:
    """Return the complete themes defined by ``@plugin "daisyui/theme"`` blocks."""
    themes: list[ThemeRecord] = []
    for body in iter_plugin_blocks(_INLINE_BLOCK_RE, css):
        record = _parse_inline_block(body)
        if record is not None:
            themes.append(record)
    return themes


def _parse_inline_block(body: str) -> ThemeRecord | None:
    theme_name = ""
    raw_styles: dict[str, str] = {}

    for line in body.split("\n"):
        stripped = line.strip()
        if not stripped or stripped.startswith(COMMENT_MARKERS):
            continue
        match = _PROPERTY_RE.match(stripped)
        if match is None:
            continue
        key = match.group(1).strip()
        value = match.group(2).strip()

        if key == THEME_NAME_KEY:
            theme_name = value
        elif key.startswith(VARIABLE_PREFIX):
            raw_styles[key] = value
        elif key == COLOR_SCHEME_KEY:
            raw_styles[COLOR_SCHEME_KEY] = value
        # default, prefersdark and other flags are not styles

    styles = convert_styles(raw_styles)
    if not theme_name or not styles:
        logger.debug(
            "dropping incomplete inline theme block (name=%r, properties=%d)",
            theme_name,
            len(styles),
        )
        return None
    return ThemeRecord(name=theme_name, styles=styles)


def read_css_file(css_path: Path) -> str:
    """Read a stylesheet, failing before any parsing when it is missing."""
    if not css_path.exists():
        raise DaisyThemesError(
            ErrorCode.CSS_FILE_NOT_FOUND,
            message=f"CSS file not found: {css_path}",
            path=css_path,
        )
    try:
        return css_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise DaisyThemesError(
            ErrorCode.CSS_READ_FAILED,
            message=f"Unable to read {css_path}: {exc}",
            path=css_path,
        ) from exc
