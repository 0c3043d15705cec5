"""Behaviour tests for building a content directory.

These scenarios drive ``page_build.feature``: a temporary content tree is
built with :class:`PageBuilder` and the written HTML is checked with
BeautifulSoup. They cover markdown heading anchors, shortcode markup inside
markdown, per-page failure isolation, and draft handling.
"""

from __future__ import annotations

from pathlib import Path

import pytest
from bs4 import BeautifulSoup
from pytest_bdd import given, parsers, scenarios, then, when

from studio_pages.builder import BuildReport, PageBuilder
from studio_pages.site import SiteTemplating

FEATURE_FILE = Path(__file__).resolve().parents[2] / "features" / "page_build.feature"
scenarios(FEATURE_FILE)


@pytest.fixture
def scenario_state() -> dict[str, object]:
    """Return a mutable dict used to share scenario state across BDD steps."""
    return {}


@given("a content directory with a markdown page using a section shortcode")
def given_content(tmp_path: Path, scenario_state: dict[str, object]) -> None:
    """Write a home page combining a heading and a marquee section."""
    content = tmp_path / "content"
    content.mkdir()
    (content / "index.md").write_text(
        "# Welcome\n\n"
        '{{ MarqueeSection({"messages": [{"text": "New season"}]}) }}\n',
        encoding="utf-8",
    )
    scenario_state["content"] = content
    scenario_state["output"] = tmp_path / "_site"


@given(parsers.parse('a page "{name}" calling "{source}"'))
def given_page_calling(
    scenario_state: dict[str, object], name: str, source: str
) -> None:
    """Add a page whose body is ``source``."""
    content: Path = scenario_state["content"]  # type: ignore[assignment]
    (content / name).write_text(f"{source}\n", encoding="utf-8")


@given(parsers.parse('a page "{name}" marked as a draft'))
def given_draft(scenario_state: dict[str, object], name: str) -> None:
    """Add a page with ``draft: true`` front matter."""
    content: Path = scenario_state["content"]  # type: ignore[assignment]
    (content / name).write_text(
        "---\ntitle: Later\ndraft: true\n---\nNot ready.\n", encoding="utf-8"
    )


@when("I build the site")
def when_build(scenario_state: dict[str, object]) -> None:
    """Run the builder over the scenario's content directory."""
    builder = PageBuilder(
        SiteTemplating(),
        scenario_state["content"],  # type: ignore[arg-type]
        scenario_state["output"],  # type: ignore[arg-type]
    )
    scenario_state["report"] = builder.build()


def _page(scenario_state: dict[str, object], name: str) -> BeautifulSoup:
    output: Path = scenario_state["output"]  # type: ignore[assignment]
    return BeautifulSoup((output / name).read_text(encoding="utf-8"), "html.parser")


@then(parsers.parse('the page "{name}" has a heading anchor linking to "{href}"'))
def then_heading_anchor(scenario_state: dict[str, object], name: str, href: str) -> None:
    """Verify the first heading carries a permalink anchor."""
    anchor = _page(scenario_state, name).select_one("h1 a.header-anchor")
    assert anchor is not None, "expected a header anchor inside the h1"
    assert anchor.get("href") == href, (
        f"expected anchor href {href!r}, got {anchor.get('href')!r}"
    )


@then(parsers.parse('the page "{name}" contains a "{selector}" element'))
def then_page_contains(
    scenario_state: dict[str, object], name: str, selector: str
) -> None:
    """Verify the written page has an element matching ``selector``."""
    assert _page(scenario_state, name).select_one(selector) is not None, (
        f"expected {selector!r} in {name}"
    )


@then(parsers.parse('the page "{name}" was written'))
def then_page_written(scenario_state: dict[str, object], name: str) -> None:
    """Verify ``name`` exists in the output directory."""
    output: Path = scenario_state["output"]  # type: ignore[assignment]
    assert (output / name).is_file(), f"expected {name} in the output directory"


@then(parsers.parse('the build reports a failure for "{name}" in "{component}"'))
def then_failure_reported(
    scenario_state: dict[str, object], name: str, component: str
) -> None:
    """Verify the report names the failing page and the shortcode."""
    report: BuildReport = scenario_state["report"]  # type: ignore[assignment]
    assert not report.ok, "expected the build to report a failure"
    failures = [(failure.page.name, failure.component) for failure in report.failures]
    assert failures == [(name, component)], f"unexpected failures {failures!r}"


@then(parsers.parse('no page was written for "{stem}"'))
def then_not_written(scenario_state: dict[str, object], stem: str) -> None:
    """Verify the draft produced no output and was recorded as skipped."""
    output: Path = scenario_state["output"]  # type: ignore[assignment]
    report: BuildReport = scenario_state["report"]  # type: ignore[assignment]
    assert not (output / stem).exists(), f"expected no output for {stem}"
    assert [path.stem for path in report.skipped] == [stem]
