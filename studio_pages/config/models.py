"""Typed dataclasses describing studio site configuration."""

from __future__ import annotations

import dataclasses as dc
import typing as typ
from pathlib import Path

from studio_pages._constants import (
    ANCHOR_CLASS,
    ANCHOR_LEVELS,
    ANCHOR_PLACEMENT,
    ANCHOR_SYMBOL,
    DEFAULT_DATE_FORMAT,
    DEFAULT_TIMEZONE,
)


class SiteConfigError(ValueError):
    """Raised when the site configuration is invalid or incomplete."""


@dc.dataclass(slots=True)
class AnchorConfig:
    """How markdown headings receive permalink anchors."""

    levels: tuple[int, ...] = ANCHOR_LEVELS
    placement: str = ANCHOR_PLACEMENT
    css_class: str = ANCHOR_CLASS
    symbol: str = ANCHOR_SYMBOL
    aria_hidden: bool = False


@dc.dataclass(slots=True)
class SiteConfig:
    """Build-wide settings for templating and page output.

    Attributes
    ----------
    timezone : str
        IANA zone ``readableDate`` uses when a template passes none.
    date_format : str
        Luxon-style pattern ``readableDate`` uses when a template passes none.
    autoescape : bool
        Whether page and section templates escape interpolated values.
    content_dir : Path
        Directory scanned for ``.md`` and ``.html`` pages.
    output_dir : Path
        Directory rendered pages are written to.
    anchors : AnchorConfig
        Heading anchor settings for markdown pages.
    data : dict
        Global data exposed to page templates as ``site``.
    """

    timezone: str = DEFAULT_TIMEZONE
    date_format: str = DEFAULT_DATE_FORMAT
    autoescape: bool = True
    content_dir: Path = Path("content")
    output_dir: Path = Path("_site")
    anchors: AnchorConfig = dc.field(default_factory=AnchorConfig)
    data: dict[str, typ.Any] = dc.field(default_factory=dict)


__all__ = ["AnchorConfig", "SiteConfig", "SiteConfigError"]
