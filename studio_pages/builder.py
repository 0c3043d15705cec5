"""Render a directory of content pages through the site templating facade.

Each ``.md`` or ``.html`` file under the content directory may start with a
``---`` delimited YAML front matter block. The body is rendered as a Jinja
template (filters, shortcodes, ``page``, ``collections`` and ``site`` are in
scope), markdown bodies are then converted to HTML with heading anchors, and
the result is written beneath the output directory using pretty URLs:
``about.md`` becomes ``about/index.html``.

A page that fails to render is reported and skipped; every other page is
still written.

Example
-------
>>> from pathlib import Path
>>> from studio_pages.builder import PageBuilder
>>> from studio_pages.site import SiteTemplating
>>> builder = PageBuilder(SiteTemplating(), Path("content"), Path("_site"))
>>> report = builder.build()  # doctest: +SKIP
>>> report.ok  # doctest: +SKIP
True
"""

from __future__ import annotations

import dataclasses as dc
import datetime as dt
import logging
import re
import typing as typ
from pathlib import Path

from markupsafe import Markup
from ruamel.yaml import YAML

from studio_pages.errors import PageBuildError
from studio_pages.filters import coerce_datetime

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from studio_pages.site import SiteTemplating

logger = logging.getLogger(__name__)

PAGE_SUFFIXES = (".md", ".html")
FRONT_MATTER_PATTERN = re.compile(
    r"\A---[ \t]*\r?\n(.*?)^---[ \t]*(?:\r?\n|\Z)", re.DOTALL | re.MULTILINE
)
ALL_COLLECTION = "all"


@dc.dataclass(slots=True)
class Page:
    """One content file, its front matter, and where it will be written."""

    source: Path
    body: str
    data: dict[str, typ.Any]
    url: str
    output_path: Path
    date: dt.datetime

    @property
    def tags(self) -> list[str]:
        """Return the page's tags as a list."""
        match self.data.get("tags"):
            case None:
                return []
            case str() as tag:
                return [tag]
            case list() | tuple() as tags:
                return [str(tag) for tag in tags]
            case other:
                return [str(other)]

    @property
    def is_markdown(self) -> bool:
        """Return True when the body is converted from markdown."""
        return self.source.suffix == ".md"

    @property
    def draft(self) -> bool:
        """Return True when the front matter marks the page as a draft."""
        return bool(self.data.get("draft", False))

    @property
    def file_slug(self) -> str:
        """Return the source file stem, or the parent directory name for ``index``."""
        if self.source.stem == "index" and self.source.parent.name:
            return self.source.parent.name
        return self.source.stem


@dc.dataclass(slots=True)
class BuildReport:
    """Outcome of a build: written files and per-page failures."""

    written: list[Path] = dc.field(default_factory=list)
    failures: list[PageBuildError] = dc.field(default_factory=list)
    skipped: list[Path] = dc.field(default_factory=list)

    @property
    def ok(self) -> bool:
        """Return True when every page rendered."""
        return not self.failures


class PageBuilder:
    """Discover, render, and write the pages under a content directory."""

    def __init__(
        self, templating: SiteTemplating, content_dir: Path, output_dir: Path
    ) -> None:
        """Initialize the builder.

        Parameters
        ----------
        templating : SiteTemplating
            Facade providing filters, shortcodes, and markdown rendering.
        content_dir : Path
            Directory scanned recursively for pages. Files and directories
            whose name starts with ``_`` are ignored.
        output_dir : Path
            Directory rendered pages are written to.
        """
        self.templating = templating
        self.content_dir = content_dir
        self.output_dir = output_dir
        self._yaml = YAML(typ="safe")
        self._yaml.version = (1, 2)

    def discover(self) -> list[Path]:
        """Return page sources in a stable order."""
        if not self.content_dir.is_dir():
            msg = f"Content directory '{self.content_dir}' not found."
            raise FileNotFoundError(msg)
        return sorted(
            path
            for path in self.content_dir.rglob("*")
            if path.is_file()
            and path.suffix in PAGE_SUFFIXES
            and not any(
                part.startswith("_")
                for part in path.relative_to(self.content_dir).parts
            )
        )

    def load_page(self, source: Path) -> Page:
        """Read ``source`` and split its front matter from the body.

        Raises
        ------
        TypeError
            If the front matter is not a mapping.
        YAMLError
            If the front matter cannot be parsed.
        """
        text = source.read_text(encoding="utf-8")
        data: dict[str, typ.Any] = {}
        body = text
        match = FRONT_MATTER_PATTERN.match(text)
        if match:
            loaded = self._yaml.load(match.group(1)) or {}
            if not isinstance(loaded, dict):
                msg = f"Front matter in '{source}' must be a mapping."
                raise TypeError(msg)
            data = dict(loaded)
            body = text[match.end() :]
        url, output_path = self._output_location(source, data.get("permalink"))
        return Page(
            source=source,
            body=body,
            data=data,
            url=url,
            output_path=output_path,
            date=self._page_date(source, data.get("date")),
        )

    def build(self) -> BuildReport:
        """Render every page and write the results.

        Returns
        -------
        BuildReport
            Paths written, pages skipped as drafts, and one
            :class:`~studio_pages.errors.PageBuildError` per failed page.
        """
        report = BuildReport()
        pages: list[Page] = []
        for source in self.discover():
            try:
                page = self.load_page(source)
            except Exception as exc:  # noqa: BLE001 - isolate each page
                self._record_failure(report, source, exc)
                continue
            if page.draft:
                logger.info("Skipping draft page %s", source)
                report.skipped.append(source)
                continue
            pages.append(page)

        collections = build_collections(pages)
        for page in pages:
            try:
                html = self.render_page(page, collections)
                page.output_path.parent.mkdir(parents=True, exist_ok=True)
                page.output_path.write_text(html, encoding="utf-8")
            except Exception as exc:  # noqa: BLE001 - isolate each page
                self._record_failure(report, page.source, exc)
                continue
            logger.debug("Rendered %s -> %s", page.source, page.output_path)
            report.written.append(page.output_path)
        return report

    def render_page(
        self, page: Page, collections: cabc.Mapping[str, list[Page]]
    ) -> str:
        """Return the final HTML for ``page``.

        The body is rendered as a template first so shortcodes can emit
        markup; markdown pages are converted afterwards. A ``layout`` front
        matter key wraps the result in that layout with ``content`` set.
        """
        context = {**page.data, "page": page, "collections": collections}
        rendered = self.templating.render_string(page.body, context)
        content = (
            self.templating.render_markdown(rendered)
            if page.is_markdown
            else Markup(rendered)
        )
        layout = page.data.get("layout")
        if not layout:
            return str(content)
        template = self.templating.env.get_template(str(layout))
        return template.render({**context, "content": content})

    def _output_location(self, source: Path, permalink: object) -> tuple[str, Path]:
        """Return the page URL and output path for ``source``."""
        if isinstance(permalink, str) and permalink.strip():
            url = "/" + permalink.strip().lstrip("/")
        else:
            relative = source.relative_to(self.content_dir).with_suffix("")
            parts = list(relative.parts)
            if parts[-1] == "index":
                parts.pop()
            url = "/" + "".join(f"{part}/" for part in parts)
        target = url.lstrip("/")
        if not target or target.endswith("/"):
            target = f"{target}index.html"
        return url, self.output_dir / target

    @staticmethod
    def _page_date(source: Path, value: object) -> dt.datetime:
        """Return the front matter date, falling back to the file's mtime."""
        if value is None:
            return dt.datetime.fromtimestamp(source.stat().st_mtime, tz=dt.UTC)
        return coerce_datetime(value)

    @staticmethod
    def _record_failure(report: BuildReport, source: Path, exc: Exception) -> None:
        failure = PageBuildError(source, exc)
        logger.error("%s", failure)
        report.failures.append(failure)


def build_collections(pages: cabc.Iterable[Page]) -> dict[str, list[Page]]:
    """Group ``pages`` into ``all`` plus one collection per tag, oldest first."""
    ordered = sorted(pages, key=lambda page: (page.date, str(page.source)))
    collections: dict[str, list[Page]] = {ALL_COLLECTION: list(ordered)}
    for page in ordered:
        for tag in page.tags:
            collections.setdefault(tag, []).append(page)
    return collections


__all__ = ["BuildReport", "Page", "PageBuilder", "build_collections"]
