"""Resolve a theme name to the styles of its installed definition module."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Mapping

from daisythemes.errors import DaisyThemesError, ErrorCode
from daisythemes.themes.constants import DEFAULT_PACKAGE_NAME
from daisythemes.themes.locations import existing_candidate_paths
from daisythemes.themes.models import StyleMap, StyleValue, ThemeApi, ThemeFunction
from daisythemes.themes.modules import NodeModuleLoader, ThemeModuleLoader
from daisythemes.themes.styles import convert_styles

logger = logging.getLogger(__name__)


class ThemeModuleResolver:
    """Finds, loads and runs the first usable definition module for a theme."""

    def __init__(
        self,
        loader: ThemeModuleLoader | None = None,
        *,
        cwd: Path | None = None,
        install_root: Path | None = None,
        package_name: str = DEFAULT_PACKAGE_NAME,
        prefix: str = "",
    ) -> None:
        self._loader = loader or NodeModuleLoader(prefix=prefix)
        self._cwd = cwd
        self._install_root = install_root
        self._package_name = package_name
        self._prefix = prefix

    def candidates(self, theme_name: str) -> list[Path]:
        """Return the existing candidate module paths in lookup order."""
        return existing_candidate_paths(
            theme_name,
            cwd=self._cwd,
            install_root=self._install_root,
            package_name=self._package_name,
        )

    async def resolve(self, theme_name: str) -> StyleMap:
        """Return the cleaned styles of *theme_name* or raise THEME_NOT_FOUND."""
        candidates = self.candidates(theme_name)
        logger.debug("theme %r: %d candidate module(s)", theme_name, len(candidates))

        for path in candidates:
            try:
                module = await self._loader.load(path)
                theme = module.default
                if not callable(theme):
                    logger.debug("theme %r: %s has no callable default export", theme_name, path)
                    continue
                styles = self._collect(theme)
            except DaisyThemesError as exc:
                if exc.code is ErrorCode.NODE_UNAVAILABLE:
                    raise
                logger.debug("theme %r: candidate %s failed: %s", theme_name, path, exc)
                continue
            except Exception as exc:
                logger.debug("theme %r: candidate %s failed: %s", theme_name, path, exc)
                continue
            logger.info("extracted theme %r from %s", theme_name, path)
            return convert_styles(styles)

        raise DaisyThemesError(
            ErrorCode.THEME_NOT_FOUND,
            message=f"Could not import theme '{theme_name}' from any known path in node_modules",
            details={"theme": theme_name, "candidates": len(candidates)},
        )

    def _collect(self, theme: ThemeFunction) -> dict[str, StyleValue]:
        collected: dict[str, StyleValue] = {}

        def add_base(base: Mapping[str, StyleValue]) -> None:
            collected.update(base)

        theme(ThemeApi(add_base=add_base, prefix=self._prefix))
        return collected
