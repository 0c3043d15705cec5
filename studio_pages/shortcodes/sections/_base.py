"""Shared rendering steps for the section shortcodes."""

from __future__ import annotations

import collections.abc as cabc
import functools
import logging
import typing as typ

from studio_pages.shortcodes.composer import compose

if typ.TYPE_CHECKING:
    from markupsafe import Markup

    from studio_pages.shortcodes.templating import SectionTemplates

logger = logging.getLogger(__name__)


def compose_field(
    templates: SectionTemplates,
    template: str,
    items: cabc.Sequence[typ.Any],
    *,
    macro: str = "item",
    item_defaults: cabc.Mapping[str, typ.Any] | None = None,
    **macro_kwargs: typ.Any,
) -> Markup:
    """Render ``items`` through ``macro`` from ``template`` and join them."""
    render_item = templates.macro(template, macro)
    if macro_kwargs:
        render_item = functools.partial(render_item, **macro_kwargs)
    return compose(items, render_item, defaults=item_defaults)


def render_list_section(
    templates: SectionTemplates,
    template: str,
    config: cabc.Mapping[str, typ.Any],
    *,
    field: str,
    html_name: str,
    item_defaults: cabc.Mapping[str, typ.Any] | None = None,
) -> Markup:
    """Render a section whose body is one composed list field."""
    items_html = compose_field(
        templates, template, config[field], item_defaults=item_defaults
    )
    return templates.render(template, config, **{html_name: items_html})


def nested_items(
    owner: str, record: cabc.Mapping[str, typ.Any], field: str
) -> list[typ.Any]:
    """Return the nested list ``record[field]``, or an empty list when it is not one."""
    value = record.get(field)
    if isinstance(value, (list, tuple)):
        return list(value)
    if value is not None:
        logger.warning(
            "Invalid nested '%s' provided to '%s'. Expected a list, got %s.",
            field,
            owner,
            type(value).__name__,
        )
    return []


__all__ = ["compose_field", "nested_items", "render_list_section"]
