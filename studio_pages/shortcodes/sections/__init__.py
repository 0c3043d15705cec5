"""Built-in section shortcodes and their registration order."""

from __future__ import annotations

import typing as typ

from . import forms, galleries, hero, listings, sliders
from .meta import current_build_date

if typ.TYPE_CHECKING:
    from studio_pages.shortcodes.models import ShortcodeDefinition
    from studio_pages.shortcodes.templating import SectionTemplates

SECTION_MODULES = (hero, listings, sliders, galleries, forms)


def builtin_definitions(templates: SectionTemplates) -> list[ShortcodeDefinition]:
    """Return every built-in section shortcode bound to ``templates``."""
    definitions: list[ShortcodeDefinition] = []
    for module in SECTION_MODULES:
        definitions.extend(module.build_definitions(templates))
    return definitions


__all__ = ["SECTION_MODULES", "builtin_definitions", "current_build_date"]
