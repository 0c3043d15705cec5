"""Template filters for dates, collection slicing, tags, and slugs.

Every filter is a pure function of its arguments. :class:`FilterLibrary`
keys them by the camelCase names page templates use, e.g.
``{{ page.date | readableDate }}`` or ``{{ collections.all | getAllTags }}``.

Examples
--------
>>> import datetime as dt
>>> html_date_string(dt.datetime(2024, 6, 21, tzinfo=dt.UTC))
'2024-06-21'
>>> head([1, 2, 3, 4], -2)
[3, 4]
>>> filter_tag_list(["all", "posts", "featured"])
['featured']
>>> slugify("Tips & Tricks: Don't Panic")
'tips-and-tricks-dont-panic'
"""

from __future__ import annotations

import calendar
import collections.abc as cabc
import datetime as dt
import functools
import logging
import re
import typing as typ
import unicodedata
import zoneinfo

from studio_pages._constants import DEFAULT_DATE_FORMAT, DEFAULT_TIMEZONE, RESERVED_TAGS
from studio_pages.errors import FilterArgumentError, UnknownFilterError

if typ.TYPE_CHECKING:
    from jinja2 import Environment

logger = logging.getLogger(__name__)

Filter = cabc.Callable[..., typ.Any]

DATE_TOKEN_PATTERN = re.compile(
    r"'(?P<literal>[^']*)'"
    r"|(?P<token>yyyy|yy|LLLL|LLL|LL|L|MMMM|MMM|MM|M|dd|d|cccc|ccc|EEEE|EEE"
    r"|HH|H|hh|h|mm|m|ss|s|a|ZZ|Z|z)"
)
SLUG_REPLACEMENTS = (("&", " and "), ("'", ""), ("’", ""))
NON_ALPHANUMERIC = re.compile(r"[^a-z0-9]+")


def coerce_datetime(value: object) -> dt.datetime:
    """Return ``value`` as an aware UTC datetime.

    Raises
    ------
    FilterArgumentError
        If ``value`` is not a datetime, date, or ISO-8601 string.
    """
    match value:
        case dt.datetime():
            parsed = value
        case dt.date():
            parsed = dt.datetime(value.year, value.month, value.day)
        case str() as text:
            sanitized = text.strip()
            if sanitized.endswith("Z"):
                sanitized = sanitized[:-1] + "+00:00"
            try:
                parsed = dt.datetime.fromisoformat(sanitized)
            except ValueError:
                msg = f"Cannot interpret {text!r} as a date."
                raise FilterArgumentError(msg) from None
        case _:
            msg = f"Expected a date, got {type(value).__name__}."
            raise FilterArgumentError(msg)
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=dt.UTC)
    return parsed.astimezone(dt.UTC)


def _resolve_zone(zone: str | None) -> dt.tzinfo:
    """Return the tzinfo for IANA name ``zone`` (``utc`` in any case is UTC)."""
    name = zone or DEFAULT_TIMEZONE
    if name.upper() == "UTC":
        return dt.UTC
    try:
        return zoneinfo.ZoneInfo(name)
    except (zoneinfo.ZoneInfoNotFoundError, ValueError):
        msg = f"Unknown time zone '{name}'."
        raise FilterArgumentError(msg) from None


def _format_offset(moment: dt.datetime, *, narrow: bool) -> str:
    offset = moment.utcoffset() or dt.timedelta()
    sign = "-" if offset < dt.timedelta() else "+"
    minutes = abs(int(offset.total_seconds())) // 60
    hours, minutes = divmod(minutes, 60)
    if narrow:
        return f"{sign}{hours}" if not minutes else f"{sign}{hours}:{minutes:02d}"
    return f"{sign}{hours:02d}:{minutes:02d}"


def _format_token(token: str, moment: dt.datetime) -> str:  # noqa: C901, PLR0911
    """Render one Luxon formatting token for ``moment``."""
    hour12 = moment.hour % 12 or 12
    match token:
        case "yyyy":
            return f"{moment.year:04d}"
        case "yy":
            return f"{moment.year % 100:02d}"
        case "LLLL" | "MMMM":
            return calendar.month_name[moment.month]
        case "LLL" | "MMM":
            return calendar.month_abbr[moment.month]
        case "LL" | "MM":
            return f"{moment.month:02d}"
        case "L" | "M":
            return str(moment.month)
        case "dd":
            return f"{moment.day:02d}"
        case "d":
            return str(moment.day)
        case "cccc" | "EEEE":
            return calendar.day_name[moment.weekday()]
        case "ccc" | "EEE":
            return calendar.day_abbr[moment.weekday()]
        case "HH":
            return f"{moment.hour:02d}"
        case "H":
            return str(moment.hour)
        case "hh":
            return f"{hour12:02d}"
        case "h":
            return str(hour12)
        case "mm":
            return f"{moment.minute:02d}"
        case "m":
            return str(moment.minute)
        case "ss":
            return f"{moment.second:02d}"
        case "s":
            return str(moment.second)
        case "a":
            return "AM" if moment.hour < 12 else "PM"  # noqa: PLR2004
        case "ZZ":
            return _format_offset(moment, narrow=False)
        case "Z":
            return _format_offset(moment, narrow=True)
        case "z":
            return str(getattr(moment.tzinfo, "key", None) or moment.tzname() or "UTC")
        case _:  # pragma: no cover - pattern only yields known tokens
            return token


def format_date(moment: dt.datetime, pattern: str) -> str:
    """Format ``moment`` using Luxon-style ``pattern`` tokens.

    Text inside single quotes is copied verbatim; any character that is not a
    recognised token is also copied as-is.
    """

    def _replace(match: re.Match[str]) -> str:
        literal = match.group("literal")
        if literal is not None:
            return literal
        return _format_token(match.group("token"), moment)

    return DATE_TOKEN_PATTERN.sub(_replace, pattern)


def readable_date(
    value: object, date_format: str | None = None, zone: str | None = None
) -> str:
    """Return ``value`` formatted for display, e.g. ``21 June 2024``.

    Parameters
    ----------
    value : datetime, date, or str
        Instant to format. Naive values are treated as UTC.
    date_format : str, optional
        Luxon-style token pattern. Defaults to ``dd LLLL yyyy``.
    zone : str, optional
        IANA zone the instant is displayed in. Defaults to UTC.

    Raises
    ------
    FilterArgumentError
        If ``value`` is not a date or ``zone`` is not a known zone.
    """
    moment = coerce_datetime(value).astimezone(_resolve_zone(zone))
    return format_date(moment, date_format or DEFAULT_DATE_FORMAT)


def html_date_string(value: object) -> str:
    """Return the ``YYYY-MM-DD`` UTC date used in ``<time datetime>``."""
    return format_date(coerce_datetime(value), "yyyy-LL-dd")


def head(sequence: object, n: int) -> list[typ.Any]:
    """Return the first ``n`` items, or the last ``abs(n)`` when ``n`` is negative.

    Anything other than a non-empty list or tuple yields an empty list.
    """
    if not isinstance(sequence, (list, tuple)) or not sequence:
        return []
    if n < 0:
        return list(sequence[n:])
    return list(sequence[:n])


def minimum(*numbers: typ.Any) -> typ.Any:
    """Return the smallest argument.

    Raises
    ------
    FilterArgumentError
        If called without arguments.
    """
    if not numbers:
        msg = "min requires at least one value."
        raise FilterArgumentError(msg)
    return min(numbers)


def _record_tags(record: object) -> object:
    """Return the ``tags`` of a page record, looking inside ``data`` first."""
    data = record.get("data") if isinstance(record, cabc.Mapping) else None
    if data is None:
        data = getattr(record, "data", None)
    for source in (data, record):
        if source is None:
            continue
        if isinstance(source, cabc.Mapping):
            if "tags" in source:
                return source["tags"]
        elif hasattr(source, "tags"):
            return source.tags
    return None


def get_all_tags(records: cabc.Iterable[object]) -> list[str]:
    """Return every tag used by ``records`` once, in first-seen order."""
    seen: dict[str, None] = {}
    for record in records or ():
        tags = _record_tags(record)
        if not tags:
            continue
        if isinstance(tags, str):
            tags = [tags]
        for tag in tags:
            seen.setdefault(tag, None)
    return list(seen)


def filter_tag_list(tags: cabc.Iterable[str] | None) -> list[str]:
    """Drop the reserved collection tags (``all``, ``nav``, ``post``, ``posts``)."""
    return [tag for tag in tags or () if tag not in RESERVED_TAGS]


def slugify(text: object) -> str:
    """Return a URL-safe slug for ``text``.

    Non-ASCII letters are transliterated, ``&`` becomes ``and``, apostrophes
    are dropped, and every other run of non-alphanumerics collapses to ``-``.
    """
    value = str(text)
    for needle, replacement in SLUG_REPLACEMENTS:
        value = value.replace(needle, replacement)
    ascii_text = (
        unicodedata.normalize("NFKD", value).encode("ascii", "ignore").decode("ascii")
    )
    return NON_ALPHANUMERIC.sub("-", ascii_text.lower()).strip("-")


class FilterLibrary:
    """Name-indexed collection of template filters; the last registration wins."""

    def __init__(self, filters: cabc.Mapping[str, Filter] | None = None) -> None:
        self._filters: dict[str, Filter] = {}
        for name, function in (filters or {}).items():
            self.add_filter(name, function)

    def add_filter(self, name: str, function: Filter) -> None:
        """Register ``function`` under ``name``."""
        if name in self._filters:
            logger.debug("Replacing filter '%s'", name)
        self._filters[name] = function

    def get(self, name: str) -> Filter:
        """Return the filter registered under ``name``.

        Raises
        ------
        UnknownFilterError
            If nothing is registered under ``name``.
        """
        try:
            return self._filters[name]
        except KeyError:
            raise UnknownFilterError(name) from None

    def apply(self, name: str, value: object, *args: typ.Any) -> typ.Any:
        """Call filter ``name`` with ``value`` and ``args``."""
        function = self.get(name)
        try:
            return function(value, *args)
        except Exception as exc:
            if getattr(exc, "component", None) is None:
                exc.component = name  # type: ignore[attr-defined]
            raise

    def __contains__(self, name: object) -> bool:
        return name in self._filters

    def names(self) -> list[str]:
        """Return registered filter names in registration order."""
        return list(self._filters)

    def install(self, env: Environment) -> None:
        """Register every filter on ``env``, resolved by name at call time."""
        for name in self._filters:
            env.filters[name] = functools.partial(self.apply, name)


def default_filters(
    *, date_format: str | None = None, timezone: str | None = None
) -> FilterLibrary:
    """Return a library holding the built-in filters.

    ``date_format`` and ``timezone`` replace the ``readableDate`` defaults
    when a site configures its own.
    """

    def _readable_date(
        value: object, fmt: str | None = None, zone: str | None = None
    ) -> str:
        return readable_date(value, fmt or date_format, zone or timezone)

    return FilterLibrary(
        {
            "readableDate": _readable_date,
            "htmlDateString": html_date_string,
            "head": head,
            "min": minimum,
            "getAllTags": get_all_tags,
            "filterTagList": filter_tag_list,
            "slugify": slugify,
        }
    )


__all__ = [
    "FilterLibrary",
    "coerce_datetime",
    "default_filters",
    "filter_tag_list",
    "format_date",
    "get_all_tags",
    "head",
    "html_date_string",
    "minimum",
    "readable_date",
    "slugify",
]
