"""Shortcodes: named section renderers invoked from page templates.

A shortcode turns a loosely shaped configuration mapping into an HTML
fragment. :class:`ShortcodeRegistry` resolves names, validates required and
list-valued fields, and merges defaults before handing the configuration to
the section's render function.

Examples
--------
>>> from studio_pages.shortcodes import SectionTemplates, ShortcodeRegistry
>>> from studio_pages.shortcodes.sections import builtin_definitions
>>> registry = ShortcodeRegistry(builtin_definitions(SectionTemplates()))
>>> "<section" in registry.render("bannerSlider", {})
True
"""

from .composer import Position, compose
from .models import ShortcodeDefinition
from .normalizer import missing_fields, normalize
from .registry import ShortcodeCall, ShortcodeRegistry
from .templating import SectionTemplates

__all__ = [
    "Position",
    "SectionTemplates",
    "ShortcodeCall",
    "ShortcodeDefinition",
    "ShortcodeRegistry",
    "compose",
    "missing_fields",
    "normalize",
]
