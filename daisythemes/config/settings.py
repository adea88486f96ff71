"""Extractor settings from an optional YAML config file."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Mapping

import yaml

from daisythemes.errors import DaisyThemesError, ErrorCode
from daisythemes.runtime_paths import default_config_path
from daisythemes.themes.constants import DEFAULT_PACKAGE_NAME
from daisythemes.themes.modules import DEFAULT_NODE_BINARY

CONFIG_ENV_VAR = "DAISYTHEMES_CONFIG"

DEFAULT_OUTPUT = "./themes.json"
DEFAULT_CSS_PATH = "src/index.css"
_TRUE_STRINGS = frozenset({"1", "true", "yes", "on"})

_KNOWN_KEYS = {"themes", "output", "read_css", "css_path", "package", "node", "prefix", "log_file"}


def split_theme_list(raw: object) -> list[str]:
    """Turn a comma string or a list into trimmed, non-empty theme names."""
    if raw is None:
        return []
    if isinstance(raw, str):
        items = raw.split(",")
    elif isinstance(raw, (list, tuple)):
        items = [str(item) for item in raw if item is not None]
    else:
        return []
    return [item.strip() for item in items if item.strip()]


class ExtractorSettings:
    """Wraps a parsed config mapping with cleaned, defaulted accessors."""

    def __init__(self, values: Mapping[str, Any] | None = None, *, source: Path | None = None) -> None:
        self._values: dict[str, Any] = dict(values or {})
        self._source = source

    @classmethod
    def load(cls, config_path: Path | None = None, *, cwd: Path | None = None) -> ExtractorSettings:
        """Load settings from an explicit path, $DAISYTHEMES_CONFIG or the project file."""
        explicit = config_path
        if explicit is None:
            env_value = os.environ.get(CONFIG_ENV_VAR)
            if env_value:
                explicit = Path(os.path.expanduser(env_value))

        if explicit is not None:
            if not explicit.is_file():
                raise DaisyThemesError(
                    ErrorCode.CONFIG_MISSING,
                    message=f"Config file not found: {explicit}",
                    path=explicit,
                )
            return cls(_load_yaml(explicit), source=explicit)

        project_file = default_config_path(cwd)
        if project_file.is_file():
            return cls(_load_yaml(project_file), source=project_file)
        return cls()

    @property
    def source(self) -> Path | None:
        return self._source

    # -- themes --

    @property
    def themes(self) -> list[str]:
        return split_theme_list(self._values.get("themes"))

    @property
    def read_css(self) -> bool:
        raw = self._values.get("read_css", False)
        if isinstance(raw, bool):
            return raw
        if isinstance(raw, str):
            return raw.strip().lower() in _TRUE_STRINGS
        return False

    @property
    def css_path(self) -> str:
        return self._str("css_path", DEFAULT_CSS_PATH)

    # -- output --

    @property
    def output(self) -> str:
        return self._str("output", DEFAULT_OUTPUT)

    # -- resolution --

    @property
    def package(self) -> str:
        return self._str("package", DEFAULT_PACKAGE_NAME)

    @property
    def node(self) -> str:
        return self._str("node", DEFAULT_NODE_BINARY)

    @property
    def prefix(self) -> str:
        raw = self._values.get("prefix")
        return raw.strip() if isinstance(raw, str) else ""

    # -- logging --

    @property
    def log_file(self) -> Path | None:
        raw = self._values.get("log_file")
        if not isinstance(raw, str) or not raw.strip():
            return None
        return Path(os.path.expanduser(raw.strip()))

    # -- helpers --

    def _str(self, key: str, default: str) -> str:
        raw = self._values.get(key)
        value = (raw or "").strip() if isinstance(raw, str) else ""
        return value or default


def _load_yaml(path: Path) -> dict[str, Any]:
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise DaisyThemesError(
            ErrorCode.CONFIG_INVALID,
            message=f"Invalid YAML in {path}: {exc}",
            path=path,
        ) from exc
    except (OSError, UnicodeDecodeError) as exc:
        raise DaisyThemesError(
            ErrorCode.CONFIG_INVALID,
            message=f"Unable to read {path}: {exc}",
            path=path,
        ) from exc
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise DaisyThemesError(
            ErrorCode.CONFIG_INVALID,
            message=f"Expected a mapping in {path}",
            path=path,
        )
    unknown = sorted(str(key) for key in data if key not in _KNOWN_KEYS)
    if unknown:
        raise DaisyThemesError(
            ErrorCode.CONFIG_INVALID,
            message=f"{path}: unsupported keys found: {', '.join(unknown)}",
            path=path,
        )
    return data
