"""Templating facade shared by every page of a build.

:class:`SiteTemplating` is created once per build. It owns the Jinja
environment pages render in, the filter library, the shortcode registry,
and the markdown renderer whose heading anchors use the same ``slugify``
filter as the templates.

Examples
--------
>>> site = SiteTemplating()
>>> site.render_string("{{ 'Hello World' | slugify }}")
'hello-world'
>>> site.add_shortcode("year", lambda: "2024")
>>> site.render_string("(c) {{ year() }}")
'(c) 2024'
"""

from __future__ import annotations

import typing as typ

from jinja2 import Environment, FileSystemLoader
from markupsafe import Markup

from studio_pages.config import SiteConfig
from studio_pages.filters import default_filters
from studio_pages.markdown_anchors import bind_heading_anchors
from studio_pages.renderer import MarkdownRenderer
from studio_pages.shortcodes import SectionTemplates, ShortcodeRegistry
from studio_pages.shortcodes.sections import builtin_definitions, current_build_date

if typ.TYPE_CHECKING:
    import collections.abc as cabc
    from pathlib import Path

    from studio_pages.filters import Filter, FilterLibrary
    from studio_pages.shortcodes.registry import Shortcode


class SiteTemplating:
    """Filters, shortcodes, and markdown rendering for one site build."""

    def __init__(
        self,
        config: SiteConfig | None = None,
        *,
        layouts_dir: Path | None = None,
    ) -> None:
        """Build the environment and register the built-in filters and shortcodes.

        Parameters
        ----------
        config : SiteConfig, optional
            Site settings; defaults to :class:`SiteConfig` defaults.
        layouts_dir : Path, optional
            Directory of page layouts that templates may ``extends`` or
            ``include``. Page bodies themselves are rendered from strings.
        """
        self.config = config or SiteConfig()
        loader = FileSystemLoader(str(layouts_dir)) if layouts_dir else None
        self.env = Environment(
            loader=loader,
            autoescape=self.config.autoescape,
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self.filters: FilterLibrary = default_filters(
            date_format=self.config.date_format, timezone=self.config.timezone
        )
        self.sections = SectionTemplates(autoescape=self.config.autoescape)
        self.shortcodes = ShortcodeRegistry()
        self.shortcodes.add_shortcode("currentBuildDate", current_build_date)
        for definition in builtin_definitions(self.sections):
            self.shortcodes.add_shortcode(definition.name, definition)
        self.markdown = MarkdownRenderer(
            bind_heading_anchors(self.filters, self.config.anchors)
        )
        self.filters.install(self.env)
        self.shortcodes.install(self.env)
        self.env.globals["site"] = self.config.data

    def add_filter(self, name: str, function: Filter) -> None:
        """Register ``function`` as filter ``name`` for subsequent renders."""
        self.filters.add_filter(name, function)
        self.filters.install(self.env)

    def add_shortcode(self, name: str, shortcode: Shortcode) -> None:
        """Register ``shortcode`` under ``name`` for subsequent renders."""
        self.shortcodes.add_shortcode(name, shortcode)
        self.shortcodes.install(self.env)

    def shortcode(self, name: str, *args: typ.Any, **kwargs: typ.Any) -> Markup:
        """Render shortcode ``name`` directly, outside any template."""
        return self.shortcodes.render(name, *args, **kwargs)

    def render_string(
        self, source: str, context: cabc.Mapping[str, typ.Any] | None = None
    ) -> str:
        """Render ``source`` as a page template with ``context``."""
        template = self.env.from_string(source)
        return template.render(dict(context or {}))

    def render_markdown(self, text: str) -> Markup:
        """Convert markdown ``text`` into HTML with heading anchors."""
        return Markup(self.markdown.markdown(text))


__all__ = ["SiteTemplating"]
