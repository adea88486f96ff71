"""Style key cleaning and color normalization."""

from __future__ import annotations

import logging
from typing import Mapping

from coloraide import Color

from daisythemes.themes.constants import COLOR_NOTATIONS, COLOR_VARIABLE_PREFIX, VARIABLE_PREFIX
from daisythemes.themes.models import StyleMap, StyleValue

logger = logging.getLogger(__name__)


def is_color_candidate(value: object) -> bool:
    """Return True when *value* is a string using a functional color notation."""
    return isinstance(value, str) and any(notation in value for notation in COLOR_NOTATIONS)


def to_hex(value: str) -> str | None:
    """Convert a CSS color string to ``#rrggbb``, or None when it is not a color."""
    try:
        color = Color(value)
    except (ValueError, TypeError):
        return None
    # Out-of-gamut channels are clamped rather than gamut mapped.
    return color.convert("srgb").to_string(hex=True, fit="clip", alpha=False)


def normalize_color(value: StyleValue) -> StyleValue:
    """Return the hex form of a functional color, else *value* unchanged."""
    if not is_color_candidate(value):
        return value
    try:
        hex_value = to_hex(value)
    except Exception as exc:
        logger.debug("color conversion failed for %r: %s", value, exc)
        return value
    return hex_value or value


def clean_key(key: str) -> str:
    """Strip the ``--color-`` or ``--`` prefix from a property name."""
    if key.startswith(COLOR_VARIABLE_PREFIX):
        return key[len(COLOR_VARIABLE_PREFIX):]
    if key.startswith(VARIABLE_PREFIX):
        return key[len(VARIABLE_PREFIX):]
    return key


def convert_styles(styles: Mapping[str, StyleValue]) -> StyleMap:
    """Clean every key and normalize every color value, keeping order."""
    return {clean_key(key): normalize_color(value) for key, value in styles.items()}
