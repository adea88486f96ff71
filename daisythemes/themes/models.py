"""Theme extraction models."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Literal, Mapping, Protocol, Union

StyleScalar = Union[str, int, float]
StyleValue = Union[StyleScalar, Mapping[str, StyleScalar]]
StyleMap = dict[str, StyleValue]


@dataclass(frozen=True, slots=True)
class ThemeApi:
    """Capability handed to a theme definition function."""

    add_base: Callable[[Mapping[str, StyleValue]], None]
    prefix: str = ""


class ThemeFunction(Protocol):
    """A theme definition: reports its styles through ``api.add_base``."""

    def __call__(self, api: ThemeApi) -> None: ...


@dataclass(frozen=True, slots=True)
class ThemeModule:
    """A loaded theme module and its default export."""

    path: Path
    default: ThemeFunction | None = None


@dataclass(frozen=True, slots=True)
class ThemeRecord:
    """A named theme with at least one cleaned style entry."""

    name: str
    styles: StyleMap

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("ThemeRecord requires a non-empty name")
        if not self.styles:
            raise ValueError(f"ThemeRecord {self.name!r} requires at least one style")


@dataclass(frozen=True, slots=True)
class ExtractionError:
    """A theme that could not be extracted."""

    theme: str
    error: str


@dataclass(frozen=True, slots=True)
class ThemeOutcome:
    """Progress report for one processed theme."""

    name: str
    source: Literal["inline", "module"]
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass(slots=True)
class ExtractionPlan:
    """Ordered theme names plus the styles already defined inline."""

    names: list[str] = field(default_factory=list)
    referenced_names: list[str] = field(default_factory=list)
    inline: dict[str, StyleMap] = field(default_factory=dict)

    @property
    def inline_names(self) -> list[str]:
        return list(self.inline)


@dataclass(slots=True)
class ExtractionResult:
    """Themes extracted in one run, in resolution order."""

    themes: dict[str, StyleMap] = field(default_factory=dict)
    errors: list[ExtractionError] = field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.themes)

    @property
    def failed(self) -> int:
        return len(self.errors)
