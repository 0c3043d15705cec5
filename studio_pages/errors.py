"""Exception hierarchy raised by the templating core.

Shortcode and filter errors subclass the builtin exception a caller would
naturally catch (``KeyError`` for unknown names, ``ValueError`` for bad
arguments) so template engines that already handle those keep working.
"""

from __future__ import annotations

import typing as typ

if typ.TYPE_CHECKING:
    from pathlib import Path


class StudioPagesError(Exception):
    """Base class for every error raised by studio_pages."""


class ShortcodeError(StudioPagesError):
    """Raised when a shortcode cannot be resolved or invoked."""


class UnknownShortcodeError(ShortcodeError, KeyError):
    """Raised when no shortcode is registered under the requested name."""

    def __init__(self, name: str, known: typ.Iterable[str] = ()) -> None:
        self.name = name
        available = ", ".join(sorted(known)) or "none"
        super().__init__(f"Unknown shortcode '{name}'. Known shortcodes: {available}")

    def __str__(self) -> str:
        return str(self.args[0])


class MissingFieldError(ShortcodeError, ValueError):
    """Raised when a shortcode is invoked without one of its required fields."""

    def __init__(self, shortcode: str, fields: typ.Sequence[str]) -> None:
        self.shortcode = shortcode
        self.fields = tuple(fields)
        joined = ", ".join(f"'{field}'" for field in self.fields)
        super().__init__(f"Shortcode '{shortcode}' requires {joined}.")


class FilterError(StudioPagesError):
    """Raised when a filter cannot be resolved or applied."""


class UnknownFilterError(FilterError, KeyError):
    """Raised when no filter is registered under the requested name."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Unknown filter '{name}'.")

    def __str__(self) -> str:
        return str(self.args[0])


class FilterArgumentError(FilterError, ValueError):
    """Raised when a filter receives arguments it cannot work with."""


class PageBuildError(StudioPagesError):
    """Raised when a single page fails to render.

    Attributes
    ----------
    page : Path
        Source file of the page that failed.
    component : str or None
        Shortcode or filter name involved in the failure, when known.
    """

    def __init__(self, page: Path, cause: BaseException) -> None:
        self.page = page
        self.component = _component_name(cause)
        self.cause = cause
        where = f" in '{self.component}'" if self.component else ""
        super().__init__(f"Failed to build page '{page}'{where}: {cause}")


def _component_name(cause: BaseException) -> str | None:
    """Return the shortcode or filter name carried by ``cause``, if any."""
    match cause:
        case MissingFieldError(shortcode=name):
            return name
        case UnknownShortcodeError(name=name) | UnknownFilterError(name=name):
            return name
        case _:
            return getattr(cause, "component", None)


__all__ = [
    "FilterArgumentError",
    "FilterError",
    "MissingFieldError",
    "PageBuildError",
    "ShortcodeError",
    "StudioPagesError",
    "UnknownFilterError",
    "UnknownShortcodeError",
]
