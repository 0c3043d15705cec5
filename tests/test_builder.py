"""End-to-end tests for building a content directory into HTML pages.

The fixtures lay out a small site in a temporary directory: a markdown home
page using a section shortcode, tagged posts, a draft, and a plain HTML page
that lists tags with the collection filters. The builder's output is parsed
with BeautifulSoup so the assertions check structure.
"""

from __future__ import annotations

import logging
import textwrap
from pathlib import Path

import pytest
from bs4 import BeautifulSoup

from studio_pages.builder import PageBuilder, build_collections
from studio_pages.config import SiteConfig
from studio_pages.errors import PageBuildError
from studio_pages.site import SiteTemplating


def _write(path: Path, body: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(textwrap.dedent(body).lstrip(), encoding="utf-8")


@pytest.fixture
def content_dir(tmp_path: Path) -> Path:
    """Create a small content tree exercising shortcodes and collections."""
    root = tmp_path / "content"
    _write(
        root / "index.md",
        """
        ---
        title: Home
        ---
        # {{ title }}

        {{ MarqueeSection({"messages": [{"text": "Open daily"}]}) }}
        """,
    )
    _write(
        root / "posts" / "first.md",
        """
        ---
        title: First post
        date: 2024-06-21
        tags: [posts, news]
        ---
        ## Hello World

        Published {{ page.date | readableDate }}.
        """,
    )
    _write(
        root / "posts" / "second.md",
        """
        ---
        title: Second post
        date: 2024-07-01
        tags: posts
        ---
        Second.
        """,
    )
    _write(
        root / "posts" / "wip.md",
        """
        ---
        title: Work in progress
        draft: true
        ---
        Not yet.
        """,
    )
    _write(
        root / "tags.html",
        """
        ---
        permalink: /tags/
        ---
        <ul>
        {% for tag in collections.all | getAllTags | filterTagList %}
        <li>{{ tag }}</li>
        {% endfor %}
        </ul>
        <ol>
        {% for post in collections.posts %}
        <li data-date="{{ post.date | htmlDateString }}">{{ post.data.title }}</li>
        {% endfor %}
        </ol>
        """,
    )
    _write(root / "_includes" / "ignored.md", "ignored\n")
    return root


@pytest.fixture
def builder(content_dir: Path, tmp_path: Path) -> PageBuilder:
    """Return a builder writing into a temporary output directory."""
    return PageBuilder(SiteTemplating(SiteConfig()), content_dir, tmp_path / "_site")


def _soup(path: Path) -> BeautifulSoup:
    return BeautifulSoup(path.read_text(encoding="utf-8"), "html.parser")


def test_build_writes_pretty_urls(builder: PageBuilder) -> None:
    """Pages land at ``<slug>/index.html``; drafts and ``_`` paths are skipped."""
    report = builder.build()
    assert report.ok, f"expected a clean build, got {report.failures!r}"
    written = sorted(
        path.relative_to(builder.output_dir).as_posix() for path in report.written
    )
    assert written == [
        "index.html",
        "posts/first/index.html",
        "posts/second/index.html",
        "tags/index.html",
    ], f"unexpected outputs {written!r}"
    assert [path.name for path in report.skipped] == ["wip.md"]


def test_markdown_pages_render_shortcodes_and_anchors(builder: PageBuilder) -> None:
    """Shortcode markup survives markdown conversion and headings get anchors."""
    builder.build()
    home = _soup(builder.output_dir / "index.html")
    assert home.h1["id"] == "home", "expected the heading id from slugify"
    assert home.select_one(".marquee-slide .swiper-slide") is not None, (
        "expected the marquee shortcode's slide in the page"
    )
    post = _soup(builder.output_dir / "posts" / "first" / "index.html")
    assert post.h2.find("a", class_="header-anchor")["href"] == "#hello-world"
    assert "Published 21 June 2024." in post.get_text()


def test_collections_and_tag_filters(builder: PageBuilder) -> None:
    """Tag listings drop reserved tags and posts are ordered by date."""
    builder.build()
    page = _soup(builder.output_dir / "tags" / "index.html")
    tags = [li.get_text() for li in page.select("ul li")]
    assert tags == ["news"], f"expected only non-reserved tags, got {tags!r}"
    posts = [(li["data-date"], li.get_text()) for li in page.select("ol li")]
    assert posts == [
        ("2024-06-21", "First post"),
        ("2024-07-01", "Second post"),
    ], f"unexpected post collection {posts!r}"


def test_failing_page_is_reported_without_truncating_others(
    builder: PageBuilder, content_dir: Path, caplog: pytest.LogCaptureFixture
) -> None:
    """A missing required field fails only the page that used it."""
    _write(content_dir / "broken.md", "{{ ServicesSection({}) }}\n")
    with caplog.at_level(logging.ERROR, logger="studio_pages.builder"):
        report = builder.build()
    assert not report.ok, "expected the broken page to be reported"
    (failure,) = report.failures
    assert isinstance(failure, PageBuildError)
    assert failure.page == content_dir / "broken.md"
    assert failure.component == "ServicesSection", (
        f"expected the shortcode name in the failure, got {failure.component!r}"
    )
    assert "broken.md" in caplog.text and "ServicesSection" in caplog.text
    assert (builder.output_dir / "index.html").exists(), "expected other pages written"
    assert not (builder.output_dir / "broken" / "index.html").exists()


def test_invalid_front_matter_is_a_page_failure(
    builder: PageBuilder, content_dir: Path
) -> None:
    """Front matter that is not a mapping fails that page only."""
    _write(content_dir / "odd.md", "---\n- a\n- b\n---\nBody\n")
    report = builder.build()
    assert [failure.page.name for failure in report.failures] == ["odd.md"]
    assert len(report.written) == 4


def test_missing_content_directory(tmp_path: Path) -> None:
    """Building a directory that does not exist is an error."""
    builder = PageBuilder(SiteTemplating(), tmp_path / "nope", tmp_path / "_site")
    with pytest.raises(FileNotFoundError):
        builder.build()


def test_layouts_wrap_page_content(tmp_path: Path) -> None:
    """A ``layout`` front matter key renders the page inside that template."""
    layouts = tmp_path / "layouts"
    _write(layouts / "base.html", "<main data-title=\"{{ title }}\">{{ content }}</main>\n")
    content = tmp_path / "content"
    _write(content / "about.md", "---\ntitle: About\nlayout: base.html\n---\nHi *there*\n")
    templating = SiteTemplating(layouts_dir=layouts)
    report = PageBuilder(templating, content, tmp_path / "_site").build()
    assert report.ok, f"unexpected failures {report.failures!r}"
    soup = _soup(tmp_path / "_site" / "about" / "index.html")
    assert soup.main["data-title"] == "About"
    assert soup.main.em.get_text() == "there", "expected unescaped page HTML in layout"


def test_build_collections_groups_by_tag(builder: PageBuilder) -> None:
    """``all`` holds every page and each tag gets its own list."""
    pages = [builder.load_page(path) for path in builder.discover()]
    collections = build_collections(page for page in pages if not page.draft)
    assert len(collections["all"]) == 4
    assert [page.data["title"] for page in collections["posts"]] == [
        "First post",
        "Second post",
    ]
    assert [page.data["title"] for page in collections["news"]] == ["First post"]
