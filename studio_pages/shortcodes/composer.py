"""Compose repeated markup blocks from item records.

Every list-rendering shortcode funnels its items through :func:`compose`,
which renders each record with a per-item template and joins the results in
input order. The helpers below cover the small text transformations the
section templates share; they are also installed as Jinja filters so the
templates can honour the environment's autoescape setting.
"""

from __future__ import annotations

import collections.abc as cabc
import dataclasses as dc
import re
import typing as typ

from jinja2 import pass_eval_context
from markupsafe import Markup, escape

from studio_pages._constants import STAR_ICON

from .normalizer import normalize

if typ.TYPE_CHECKING:
    from jinja2.nodes import EvalContext

WHITESPACE_RUN = re.compile(r"\s+")
WHITESPACE_CHAR = re.compile(r"\s")
LINE_BREAK = "<br>"


@dc.dataclass(frozen=True, slots=True)
class Position:
    """Where an item sits within the sequence being composed.

    Attributes
    ----------
    index : int
        Zero-based offset of the item.
    total : int
        Number of items in the sequence.
    """

    index: int
    total: int

    @property
    def number(self) -> int:
        """Return the 1-based position."""
        return self.index + 1

    @property
    def first(self) -> bool:
        """Return True for the first item."""
        return self.index == 0

    @property
    def last(self) -> bool:
        """Return True for the final item; separators are dropped here."""
        return self.index == self.total - 1

    @property
    def label(self) -> str:
        """Return the slider-style ``"n / total"`` label."""
        return f"{self.number} / {self.total}"


ItemRenderer = cabc.Callable[[typ.Any, Position], str]


def compose(
    items: cabc.Sequence[typ.Any],
    render_item: ItemRenderer,
    *,
    defaults: cabc.Mapping[str, typ.Any] | None = None,
) -> Markup:
    """Render ``items`` one by one and join the fragments without separators.

    Parameters
    ----------
    items : Sequence
        Item records in display order; the order is never changed.
    render_item : Callable[[Any, Position], str]
        Per-item template, usually a Jinja macro.
    defaults : Mapping[str, Any], optional
        Per-item defaults merged into every mapping item before rendering.

    Returns
    -------
    Markup
        The concatenated fragments, marked safe for further templating.
    """
    total = len(items)
    parts: list[str] = []
    for index, item in enumerate(items):
        record = item
        if defaults is not None and isinstance(item, cabc.Mapping):
            record = normalize(defaults, item)
        parts.append(str(render_item(record, Position(index, total))))
    return Markup("".join(parts))


def wrap_first_space(text: object, marker: str = LINE_BREAK) -> str:
    """Replace only the first space in ``text`` with ``marker``.

    >>> wrap_first_space("Genuine positive feedback.")
    'Genuine<br>positive feedback.'
    """
    return str(text).replace(" ", marker, 1)


def star_icons(count: object, icon: str = STAR_ICON) -> Markup:
    """Return ``icon`` repeated ``count`` times; non-positive counts yield nothing.

    >>> str(star_icons(2, "*"))
    '**'
    >>> str(star_icons(-1, "*"))
    ''
    """
    try:
        repeat = int(count)  # type: ignore[call-overload]
    except (TypeError, ValueError):
        repeat = 0
    return Markup(icon * max(repeat, 0))


def tel_href(number: object) -> str:
    """Return a ``tel:`` link target with all whitespace removed.

    >>> tel_href("+1 234 567 8910")
    'tel:+12345678910'
    """
    return f"tel:{WHITESPACE_RUN.sub('', str(number))}"


def dom_id(text: object) -> str:
    """Turn a display name into an element id by dashing every whitespace char.

    >>> dom_id("Premium plan")
    'Premium-plan'
    """
    return WHITESPACE_CHAR.sub("-", str(text))


@pass_eval_context
def first_space_break_filter(eval_ctx: EvalContext, value: object) -> str:
    """Jinja filter form of :func:`wrap_first_space` that respects autoescape."""
    if not eval_ctx.autoescape:
        return wrap_first_space(value)
    return Markup(wrap_first_space(escape(value), LINE_BREAK))


TEMPLATE_FILTERS: dict[str, cabc.Callable[..., typ.Any]] = {
    "first_space_break": first_space_break_filter,
    "stars": star_icons,
    "tel_href": tel_href,
    "dom_id": dom_id,
}


__all__ = [
    "TEMPLATE_FILTERS",
    "ItemRenderer",
    "Position",
    "compose",
    "dom_id",
    "first_space_break_filter",
    "star_icons",
    "tel_href",
    "wrap_first_space",
]
