"""Load site configuration YAML into typed dataclasses."""

from __future__ import annotations

import typing as typ
from pathlib import Path

from ruamel.yaml import YAML

from .models import AnchorConfig, SiteConfig, SiteConfigError

ANCHOR_PLACEMENTS = ("after", "before")
HEADING_LEVELS = range(1, 7)


def load_site_config(path: Path) -> SiteConfig:
    """Load the YAML file describing templating defaults and anchor settings.

    Parameters
    ----------
    path : Path
        Filesystem path to the YAML configuration file (for example,
        ``config/site.yaml``).

    Returns
    -------
    SiteConfig
        Parsed configuration; every key is optional and falls back to the
        :class:`SiteConfig` defaults.

    Raises
    ------
    FileNotFoundError
        If the configuration file does not exist at ``path``.
    SiteConfigError
        If a section is not a mapping or a value is out of range.
    YAMLError
        If the YAML content cannot be parsed by the underlying loader.

    Examples
    --------
    >>> from pathlib import Path
    >>> from studio_pages.config import load_site_config
    >>> config = load_site_config(Path("config/site.yaml"))  # doctest: +SKIP
    >>> config.anchors.levels  # doctest: +SKIP
    (1, 2, 3, 4)
    """
    if not path.exists():
        msg = f"Configuration file '{path}' not found."
        raise FileNotFoundError(msg)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    with path.open("r", encoding="utf-8") as handle:
        loaded = loader.load(handle) or {}
    raw = _mapping(loaded, "top level")
    return build_site_config(raw)


def build_site_config(raw: typ.Mapping[str, typ.Any]) -> SiteConfig:
    """Build a :class:`SiteConfig` from an already parsed mapping."""
    defaults = _mapping(raw.get("defaults"), "defaults")
    fallback = SiteConfig()
    return SiteConfig(
        timezone=str(defaults.get("timezone", fallback.timezone)),
        date_format=str(defaults.get("date_format", fallback.date_format)),
        autoescape=bool(defaults.get("autoescape", fallback.autoescape)),
        content_dir=Path(defaults.get("content_dir", fallback.content_dir)),
        output_dir=Path(defaults.get("output_dir", fallback.output_dir)),
        anchors=_build_anchor_config(_mapping(raw.get("anchors"), "anchors")),
        data=dict(_mapping(raw.get("data"), "data")),
    )


def _build_anchor_config(payload: typ.Mapping[str, typ.Any]) -> AnchorConfig:
    """Build the anchor settings, validating levels and placement."""
    fallback = AnchorConfig()
    levels_raw = payload.get("levels", fallback.levels)
    match levels_raw:
        case list() | tuple():
            levels = tuple(levels_raw)
        case int():
            levels = (levels_raw,)
        case _:
            msg = "anchors.levels must be a list of heading levels."
            raise SiteConfigError(msg)
    invalid = [level for level in levels if level not in HEADING_LEVELS]
    if invalid:
        msg = f"anchors.levels must be between 1 and 6, got {invalid}."
        raise SiteConfigError(msg)

    placement = payload.get("placement", fallback.placement)
    if placement not in ANCHOR_PLACEMENTS:
        msg = f"anchors.placement must be one of {ANCHOR_PLACEMENTS}, got '{placement}'."
        raise SiteConfigError(msg)

    return AnchorConfig(
        levels=levels,
        placement=placement,
        css_class=str(payload.get("css_class", fallback.css_class)),
        symbol=str(payload.get("symbol", fallback.symbol)),
        aria_hidden=bool(payload.get("aria_hidden", fallback.aria_hidden)),
    )


def _mapping(value: object, section: str) -> typ.Mapping[str, typ.Any]:
    """Return ``value`` as a mapping, treating ``None`` as empty."""
    match value:
        case None:
            return {}
        case dict():
            return value
        case _:
            msg = f"Section '{section}' must be a mapping, got {type(value).__name__}."
            raise SiteConfigError(msg)


__all__ = ["build_site_config", "load_site_config"]
