"""Theme extraction constants."""

from __future__ import annotations

DEFAULT_PACKAGE_NAME = "daisyui"

COLOR_VARIABLE_PREFIX = "--color-"
VARIABLE_PREFIX = "--"
COLOR_SCHEME_KEY = "color-scheme"
THEME_NAME_KEY = "name"

COLOR_NOTATIONS: tuple[str, ...] = (
    "oklch(",
    "rgb(",
    "hsl(",
    "lch(",
)

COMMENT_MARKERS: tuple[str, ...] = (
    "//",
    "/*",
)

# Where a theme definition may live inside an installed package,
# in lookup order. "{name}" is replaced by the theme name.
THEME_LAYOUTS: tuple[tuple[str, ...], ...] = (
    ("theme", "{name}", "index.js"),
    ("dist", "theme", "{name}", "index.js"),
    ("src", "theming", "themes", "{name}.js"),
    ("dist", "themes", "{name}.js"),
)
