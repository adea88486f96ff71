"""Candidate locations for installed theme definition modules.

Each package-root locator is independent; ``candidate_paths`` combines them
in ``PACKAGE_ROOT_LOCATORS`` order and expands every root with every entry of
``THEME_LAYOUTS``. That order is the lookup order the resolver follows.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Callable

from daisythemes.runtime_paths import package_root
from daisythemes.themes.constants import DEFAULT_PACKAGE_NAME, THEME_LAYOUTS

NODE_MODULES = "node_modules"


@dataclass(frozen=True, slots=True)
class SearchContext:
    """Inputs shared by every package-root locator."""

    cwd: Path
    install_root: Path
    package_name: str = DEFAULT_PACKAGE_NAME


PackageRootLocator = Callable[[SearchContext], Path | None]


def _cwd_package(context: SearchContext) -> Path | None:
    return context.cwd / NODE_MODULES / context.package_name


def _parent_package(context: SearchContext) -> Path | None:
    return Path(os.path.normpath(context.cwd / os.pardir)) / NODE_MODULES / context.package_name


def _project_package(context: SearchContext) -> Path | None:
    return find_installed_package(context.cwd, context.package_name)


def _install_package(context: SearchContext) -> Path | None:
    return find_installed_package(context.install_root, context.package_name)


PACKAGE_ROOT_LOCATORS: tuple[tuple[str, PackageRootLocator], ...] = (
    ("cwd", _cwd_package),
    ("parent", _parent_package),
    ("project", _project_package),
    ("install", _install_package),
)


def find_installed_package(start: Path, package_name: str) -> Path | None:
    """Walk up from *start* the way Node resolves ``<package>/package.json``."""
    start = start.resolve()
    for directory in (start, *start.parents):
        if directory.name == NODE_MODULES:
            continue
        manifest = directory / NODE_MODULES / package_name / "package.json"
        if manifest.is_file():
            return manifest.parent.resolve()
    return None


def layout_paths(package_dir: Path, theme_name: str) -> list[Path]:
    """Expand every installation layout under *package_dir* for *theme_name*."""
    return [
        package_dir.joinpath(*(part.format(name=theme_name) for part in layout))
        for layout in THEME_LAYOUTS
    ]


def candidate_paths(
    theme_name: str,
    *,
    cwd: Path | None = None,
    install_root: Path | None = None,
    package_name: str = DEFAULT_PACKAGE_NAME,
) -> list[Path]:
    """Return every possible theme module path, deduplicated, in lookup order."""
    context = SearchContext(
        cwd=cwd or Path.cwd(),
        install_root=install_root or package_root(),
        package_name=package_name,
    )
    paths: list[Path] = []
    for _label, locator in PACKAGE_ROOT_LOCATORS:
        package_dir = locator(context)
        if package_dir is not None:
            paths.extend(layout_paths(package_dir, theme_name))
    return list(dict.fromkeys(paths))


def existing_candidate_paths(
    theme_name: str,
    *,
    cwd: Path | None = None,
    install_root: Path | None = None,
    package_name: str = DEFAULT_PACKAGE_NAME,
) -> list[Path]:
    """Return the candidate paths that exist on disk, in lookup order."""
    paths = candidate_paths(
        theme_name,
        cwd=cwd,
        install_root=install_root,
        package_name=package_name,
    )
    return [path for path in paths if path.exists()]
