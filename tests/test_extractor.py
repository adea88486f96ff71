"""Tests for daisythemes.themes.extractor."""

import asyncio

import pytest

from daisythemes.errors import DaisyThemesError, ErrorCode
from daisythemes.themes.extractor import ThemeExtractor
from daisythemes.themes.models import ExtractionError

CSS = """
@plugin "daisyui" {
  themes: light --default, dark --prefersdark;
};

@plugin "daisyui/theme" {
  name: mediumseagreen;
  color-scheme: light;
  --color-primary: #2ade76;
}
"""


class FakeResolver:
    """Returns canned styles and records the order of calls."""

    def __init__(self, failing: set[str] | None = None) -> None:
        self.failing = failing or set()
        self.calls: list[str] = []
        self.active = 0
        self.max_active = 0

    async def resolve(self, theme_name: str):
        self.calls.append(theme_name)
        self.active += 1
        self.max_active = max(self.max_active, self.active)
        try:
            await asyncio.sleep(0)
            if theme_name in self.failing:
                raise DaisyThemesError(
                    ErrorCode.THEME_NOT_FOUND,
                    message=f"Could not import theme '{theme_name}'",
                )
            return {"color-scheme": theme_name}
        finally:
            self.active -= 1


class TestPlan:
    def test_explicit_names_only(self):
        plan = ThemeExtractor(FakeResolver()).plan(["forest", "dark", "forest"])
        assert plan.names == ["forest", "dark"]
        assert plan.inline == {}

    def test_css_ignored_unless_requested(self):
        plan = ThemeExtractor(FakeResolver()).plan(["forest"], read_css=False, css=CSS)
        assert plan.names == ["forest"]
        assert plan.referenced_names == []

    def test_merge_order_explicit_referenced_inline(self):
        plan = ThemeExtractor(FakeResolver()).plan(["dark", "cupcake"], read_css=True, css=CSS)
        assert plan.names == ["dark", "cupcake", "light", "mediumseagreen"]
        assert plan.referenced_names == ["light", "dark"]
        assert plan.inline_names == ["mediumseagreen"]

    def test_css_only(self):
        plan = ThemeExtractor(FakeResolver()).plan([], read_css=True, css=CSS)
        assert plan.names == ["light", "dark", "mediumseagreen"]


@pytest.mark.asyncio
async def test_inline_styles_short_circuit_resolution():
    resolver = FakeResolver()
    result = await ThemeExtractor(resolver).extract([], read_css=True, css=CSS)

    assert list(result.themes) == ["light", "dark", "mediumseagreen"]
    assert resolver.calls == ["light", "dark"]
    assert result.themes["mediumseagreen"] == {"color-scheme": "light", "primary": "#2ade76"}
    assert result.errors == []


@pytest.mark.asyncio
async def test_one_failure_does_not_abort_run():
    resolver = FakeResolver(failing={"dark"})
    result = await ThemeExtractor(resolver).extract(["light", "dark", "forest"])

    assert list(result.themes) == ["light", "forest"]
    assert result.errors == [ExtractionError(theme="dark", error="Could not import theme 'dark'")]
    assert resolver.calls == ["light", "dark", "forest"]


@pytest.mark.asyncio
async def test_unexpected_resolver_exception_is_recorded():
    class ExplodingResolver:
        async def resolve(self, theme_name):
            raise ValueError("bad theme")

    result = await ThemeExtractor(ExplodingResolver()).extract(["light"])

    assert result.themes == {}
    assert result.errors == [ExtractionError(theme="light", error="bad theme")]


@pytest.mark.asyncio
async def test_resolution_is_sequential():
    resolver = FakeResolver()
    await ThemeExtractor(resolver).extract(["a", "b", "c", "d"])
    assert resolver.max_active == 1


@pytest.mark.asyncio
async def test_outcomes_reported_in_order():
    outcomes = []
    extractor = ThemeExtractor(FakeResolver(failing={"dark"}))
    await extractor.extract(["dark", "cupcake"], read_css=True, css=CSS, on_theme=outcomes.append)

    assert [(o.name, o.source, o.ok) for o in outcomes] == [
        ("dark", "module", False),
        ("cupcake", "module", True),
        ("light", "module", True),
        ("mediumseagreen", "inline", True),
    ]


@pytest.mark.asyncio
async def test_empty_run():
    result = await ThemeExtractor(FakeResolver()).extract([])
    assert result.total == 0
    assert result.failed == 0
