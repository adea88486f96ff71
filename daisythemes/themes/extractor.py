"""Merge theme sources and extract every theme in one run."""

from __future__ import annotations

import logging
from typing import Callable, Iterable, Protocol

from daisythemes.errors import error_message
from daisythemes.themes.css import extract_inline_themes, extract_theme_names
from daisythemes.themes.models import (
    ExtractionError,
    ExtractionPlan,
    ExtractionResult,
    StyleMap,
    ThemeOutcome,
)
from daisythemes.themes.resolver import ThemeModuleResolver

logger = logging.getLogger(__name__)

OutcomeCallback = Callable[[ThemeOutcome], None]


class ThemeResolver(Protocol):
    async def resolve(self, theme_name: str) -> StyleMap: ...


class ThemeExtractor:
    """Collects theme names from all sources and resolves them in order."""

    def __init__(self, resolver: ThemeResolver | None = None) -> None:
        self._resolver = resolver or ThemeModuleResolver()

    def plan(self, theme_names: Iterable[str], *, read_css: bool = False, css: str = "") -> ExtractionPlan:
        """Merge explicit, referenced and inline theme names, first seen first."""
        plan = ExtractionPlan(names=list(dict.fromkeys(theme_names)))
        if not read_css:
            return plan

        plan.referenced_names = extract_theme_names(css)
        inline_themes = extract_inline_themes(css)
        for record in inline_themes:
            plan.inline[record.name] = record.styles

        plan.names = list(dict.fromkeys([*plan.names, *plan.referenced_names, *plan.inline_names]))
        logger.debug(
            "planned %d theme(s): %d referenced, %d inline",
            len(plan.names),
            len(plan.referenced_names),
            len(plan.inline),
        )
        return plan

    async def run(self, plan: ExtractionPlan, on_theme: OutcomeCallback | None = None) -> ExtractionResult:
        """Extract each planned theme sequentially; one failure never stops the run."""
        result = ExtractionResult()
        for name in plan.names:
            if name in plan.inline:
                result.themes[name] = plan.inline[name]
                outcome = ThemeOutcome(name=name, source="inline")
            else:
                try:
                    result.themes[name] = await self._resolver.resolve(name)
                except Exception as exc:
                    message = error_message(exc)
                    result.errors.append(ExtractionError(theme=name, error=message))
                    logger.info("skipping theme %r: %s", name, message)
                    outcome = ThemeOutcome(name=name, source="module", error=message)
                else:
                    outcome = ThemeOutcome(name=name, source="module")
            if on_theme is not None:
                on_theme(outcome)
        return result

    async def extract(
        self,
        theme_names: Iterable[str],
        *,
        read_css: bool = False,
        css: str = "",
        on_theme: OutcomeCallback | None = None,
    ) -> ExtractionResult:
        """Plan and run an extraction in one call."""
        plan = self.plan(theme_names, read_css=read_css, css=css)
        return await self.run(plan, on_theme=on_theme)
