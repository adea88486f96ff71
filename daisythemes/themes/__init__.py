"""Theme extraction exports."""

from daisythemes.themes.css import extract_inline_themes, extract_theme_names, read_css_file
from daisythemes.themes.extractor import ThemeExtractor
from daisythemes.themes.models import (
    ExtractionError,
    ExtractionPlan,
    ExtractionResult,
    ThemeApi,
    ThemeOutcome,
    ThemeRecord,
)
from daisythemes.themes.output import write_themes_json
from daisythemes.themes.resolver import ThemeModuleResolver
from daisythemes.themes.styles import clean_key, convert_styles, normalize_color

__all__ = [
    "ExtractionError",
    "ExtractionPlan",
    "ExtractionResult",
    "ThemeApi",
    "ThemeExtractor",
    "ThemeModuleResolver",
    "ThemeOutcome",
    "ThemeRecord",
    "clean_key",
    "convert_styles",
    "extract_inline_themes",
    "extract_theme_names",
    "normalize_color",
    "read_css_file",
    "write_themes_json",
]
