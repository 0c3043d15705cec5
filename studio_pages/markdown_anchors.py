"""Heading anchors for rendered markdown, slugged by the shared ``slugify`` filter."""

from __future__ import annotations

import collections.abc as cabc
import functools
import html
import typing as typ

from markdown.extensions import Extension
from markdown.extensions.toc import render_inner_html, strip_tags
from markdown.treeprocessors import Treeprocessor

from studio_pages._constants import (
    ANCHOR_CLASS,
    ANCHOR_LEVELS,
    ANCHOR_PLACEMENT,
    ANCHOR_SYMBOL,
)

if typ.TYPE_CHECKING:
    from xml.etree.ElementTree import Element

    from markdown import Markdown

    from studio_pages.config import AnchorConfig
    from studio_pages.filters import FilterLibrary
else:  # pragma: no cover - type-checking fallback
    Markdown = typ.Any
    Element = typ.Any
    AnchorConfig = typ.Any
    FilterLibrary = typ.Any

Slugify = cabc.Callable[[str], str]
HEADING_TAGS = {f"h{level}": level for level in range(1, 7)}
PLACEMENTS = ("after", "before")
FALLBACK_SLUG = "section"


def bind_heading_anchors(
    filters: FilterLibrary, settings: AnchorConfig | None = None
) -> HeadingAnchorExtension:
    """Return an anchor extension that slugs headings with the ``slugify`` filter.

    Parameters
    ----------
    filters : FilterLibrary
        Library whose ``slugify`` entry page templates also use, so a
        hand-written ``#{{ title | slugify }}`` link always matches the
        generated heading id. The entry is looked up on every heading, so
        replacing the filter later changes heading ids too.
    settings : AnchorConfig, optional
        Levels, placement, class, symbol, and ``aria-hidden`` choice. Defaults
        to anchors after the text on levels 1-4.

    Raises
    ------
    UnknownFilterError
        If ``filters`` has no ``slugify`` entry.
    """
    filters.get("slugify")
    slugify = functools.partial(filters.apply, "slugify")
    if settings is None:
        return HeadingAnchorExtension(slugify)
    return HeadingAnchorExtension(
        slugify,
        levels=settings.levels,
        placement=settings.placement,
        css_class=settings.css_class,
        symbol=settings.symbol,
        aria_hidden=settings.aria_hidden,
    )


class HeadingAnchorExtension(Extension):
    """Give headings a stable ``id`` and a permalink anchor.

    Every heading whose level is in ``levels`` receives an ``id`` derived from
    its text (unique within the document), ``tabindex="-1"``, and an
    ``<a class="header-anchor" href="#id">#</a>`` permalink placed after (or
    before) the heading text.
    """

    def __init__(  # noqa: PLR0913
        self,
        slugify: Slugify,
        *,
        levels: cabc.Iterable[int] = ANCHOR_LEVELS,
        placement: str = ANCHOR_PLACEMENT,
        css_class: str = ANCHOR_CLASS,
        symbol: str = ANCHOR_SYMBOL,
        aria_hidden: bool = False,
    ) -> None:
        if placement not in PLACEMENTS:
            msg = f"Anchor placement must be one of {PLACEMENTS}, got '{placement}'."
            raise ValueError(msg)
        self.slugify = slugify
        self.levels = frozenset(levels)
        self.placement = placement
        self.css_class = css_class
        self.symbol = symbol
        self.aria_hidden = aria_hidden

    def extendMarkdown(self, md: Markdown) -> None:  # type: ignore[override]  # noqa: N802
        """Register the heading-anchor treeprocessor after inline parsing."""
        processor = HeadingAnchorTreeprocessor(md, self)
        md.treeprocessors.register(processor, "studio_heading_anchors", 5)


class HeadingAnchorTreeprocessor(Treeprocessor):
    """Assign ids and permalinks to headings in the parsed document."""

    def __init__(self, md: Markdown, extension: HeadingAnchorExtension) -> None:
        super().__init__(md)
        self.extension = extension

    def run(self, root: Element) -> Element:
        """Anchor each eligible heading, in document order."""
        used: set[str] = {
            element.get("id", "") for element in root.iter() if element.get("id")
        }
        for element in root.iter():
            level = HEADING_TAGS.get(element.tag)
            if level is None or level not in self.extension.levels:
                continue
            slug = element.get("id")
            if not slug:
                base = self.extension.slugify(self._text(element)) or FALLBACK_SLUG
                slug = unique_slug(base, used)
                element.set("id", slug)
            element.set("tabindex", "-1")
            self._attach_permalink(element, slug)
        return root

    def _text(self, element: Element) -> str:
        return html.unescape(strip_tags(render_inner_html(element, self.md)))

    def _attach_permalink(self, heading: Element, slug: str) -> None:
        anchor = heading.makeelement(
            "a", {"class": self.extension.css_class, "href": f"#{slug}"}
        )
        if self.extension.aria_hidden:
            anchor.set("aria-hidden", "true")
        anchor.text = self.extension.symbol
        if self.extension.placement == "before":
            anchor.tail = f" {heading.text or ''}"
            heading.text = None
            heading.insert(0, anchor)
            return
        children = list(heading)
        if children:
            children[-1].tail = f"{children[-1].tail or ''} "
        else:
            heading.text = f"{heading.text or ''} "
        heading.append(anchor)


def unique_slug(slug: str, used: set[str]) -> str:
    """Return ``slug``, or ``slug-1``, ``slug-2``... when already taken.

    The returned value is added to ``used``.
    """
    candidate = slug
    counter = 1
    while candidate in used:
        candidate = f"{slug}-{counter}"
        counter += 1
    used.add(candidate)
    return candidate


__all__ = [
    "FALLBACK_SLUG",
    "HeadingAnchorExtension",
    "HeadingAnchorTreeprocessor",
    "bind_heading_anchors",
    "unique_slug",
]
