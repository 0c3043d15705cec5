"""Jinja environment holding the bundled section templates."""

from __future__ import annotations

import typing as typ
from pathlib import Path

from jinja2 import Environment, FileSystemLoader
from markupsafe import Markup

from .composer import TEMPLATE_FILTERS

if typ.TYPE_CHECKING:
    import collections.abc as cabc

DEFAULT_TEMPLATES_DIR = Path(__file__).resolve().parents[1] / "templates" / "shortcodes"


class SectionTemplates:
    """Load and render the per-shortcode ``.jinja`` templates.

    Each template renders the outer section from the normalized
    configuration and may define an ``item`` macro (and further macros for
    nested lists) that :func:`~studio_pages.shortcodes.composer.compose`
    applies to every item record.
    """

    def __init__(
        self, *, templates_dir: Path | None = None, autoescape: bool = True
    ) -> None:
        """Initialize the loader and register the shared template filters.

        Parameters
        ----------
        templates_dir : Path, optional
            Directory containing section templates. Defaults to the package's
            ``templates/shortcodes`` directory.
        autoescape : bool, optional
            Escape interpolated configuration values. Defaults to ``True``.
        """
        self.templates_dir = templates_dir or DEFAULT_TEMPLATES_DIR
        self.env = Environment(
            loader=FileSystemLoader(str(self.templates_dir)),
            autoescape=autoescape,
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
        )
        self.env.filters.update(TEMPLATE_FILTERS)

    def render(
        self, name: str, config: cabc.Mapping[str, typ.Any], **extra: typ.Any
    ) -> Markup:
        """Render template ``name`` with ``config`` plus ``extra`` context."""
        template = self.env.get_template(name)
        return Markup(template.render(config, **extra))

    def macro(self, name: str, macro: str = "item") -> cabc.Callable[..., str]:
        """Return macro ``macro`` defined in template ``name``."""
        module = self.env.get_template(name).module
        return getattr(module, macro)


__all__ = ["DEFAULT_TEMPLATES_DIR", "SectionTemplates"]
