"""Name-based registry of shortcodes and their shared invocation pipeline.

Every call goes through the same steps: bind positional or mapping input to
field names, fail fast on missing required fields, reject list fields that
are not lists (logged, empty fragment), normalize against the declared
defaults, then hand the configuration to the shortcode's render function.

Example
-------
>>> registry = ShortcodeRegistry()
>>> registry.add_shortcode("hello", lambda name="world": f"hello {name}")
>>> registry.render("hello", "site")
Markup('hello site')
"""

from __future__ import annotations

import collections.abc as cabc
import logging
import typing as typ

from markupsafe import Markup

from studio_pages.errors import MissingFieldError, ShortcodeError, UnknownShortcodeError

from .models import ShortcodeDefinition
from .normalizer import missing_fields, normalize

if typ.TYPE_CHECKING:
    from jinja2 import Environment

logger = logging.getLogger(__name__)

Shortcode = ShortcodeDefinition | cabc.Callable[..., str]
LIST_TYPES = (list, tuple)


class ShortcodeRegistry:
    """Mapping from shortcode name to definition; the last registration wins."""

    def __init__(self, definitions: cabc.Iterable[ShortcodeDefinition] = ()) -> None:
        self._entries: dict[str, Shortcode] = {}
        for definition in definitions:
            self.add_shortcode(definition.name, definition)

    def add_shortcode(self, name: str, shortcode: Shortcode) -> None:
        """Register ``shortcode`` under ``name``, replacing any earlier entry."""
        if name in self._entries:
            logger.debug("Replacing shortcode '%s'", name)
        self._entries[name] = shortcode

    def get(self, name: str) -> Shortcode:
        """Return the entry registered under ``name``.

        Raises
        ------
        UnknownShortcodeError
            If nothing is registered under ``name``.
        """
        try:
            return self._entries[name]
        except KeyError:
            raise UnknownShortcodeError(name, self._entries) from None

    def __contains__(self, name: object) -> bool:
        return name in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def names(self) -> list[str]:
        """Return registered names in registration order."""
        return list(self._entries)

    def definitions(self) -> list[ShortcodeDefinition]:
        """Return the registered entries that carry a full definition."""
        return [
            entry
            for entry in self._entries.values()
            if isinstance(entry, ShortcodeDefinition)
        ]

    def render(self, name: str, *args: typ.Any, **kwargs: typ.Any) -> Markup:
        """Invoke the shortcode ``name`` and return its markup.

        Parameters
        ----------
        name : str
            Registered shortcode name.
        *args : Any
            Either one configuration mapping or values for the shortcode's
            positional fields.
        **kwargs : Any
            Field values that override anything passed positionally.

        Returns
        -------
        Markup
            Rendered fragment; empty when a list field fails its type guard.

        Raises
        ------
        UnknownShortcodeError
            If ``name`` is not registered.
        MissingFieldError
            If a required field is absent.
        """
        entry = self.get(name)
        try:
            match entry:
                case ShortcodeDefinition() as definition:
                    return Markup(_invoke(definition, args, kwargs))
                case _:
                    return Markup(entry(*args, **kwargs))
        except Exception as exc:
            if getattr(exc, "component", None) is None:
                exc.component = name  # type: ignore[attr-defined]
            raise

    def install(self, env: Environment) -> None:
        """Expose every registered shortcode as a Jinja global."""
        for name in self._entries:
            env.globals[name] = ShortcodeCall(self, name)


class ShortcodeCall:
    """Callable Jinja global that resolves its shortcode at call time."""

    __slots__ = ("name", "registry")

    def __init__(self, registry: ShortcodeRegistry, name: str) -> None:
        self.registry = registry
        self.name = name

    def __call__(self, *args: typ.Any, **kwargs: typ.Any) -> Markup:
        return self.registry.render(self.name, *args, **kwargs)

    def __repr__(self) -> str:
        return f"<shortcode {self.name!r}>"


def bind_arguments(
    definition: ShortcodeDefinition,
    args: cabc.Sequence[typ.Any],
    kwargs: cabc.Mapping[str, typ.Any],
) -> dict[str, typ.Any]:
    """Map positional, mapping, and keyword input onto field names."""
    match args:
        case []:
            supplied: dict[str, typ.Any] = {}
        case [cabc.Mapping() as config]:
            supplied = dict(config)
        case _ if len(args) <= len(definition.positional):
            supplied = dict(zip(definition.positional, args, strict=False))
        case _:
            msg = (
                f"Shortcode '{definition.name}' accepts at most "
                f"{len(definition.positional)} positional arguments, got {len(args)}."
            )
            raise ShortcodeError(msg)
    supplied.update(kwargs)
    return supplied


def _invoke(
    definition: ShortcodeDefinition,
    args: cabc.Sequence[typ.Any],
    kwargs: cabc.Mapping[str, typ.Any],
) -> str:
    """Run the shared validation pipeline and render ``definition``."""
    supplied = bind_arguments(definition, args, kwargs)
    missing = missing_fields(definition.required, supplied)
    if missing:
        raise MissingFieldError(definition.name, missing)
    config = normalize(definition.defaults, supplied)
    for field in definition.list_fields:
        value = config.get(field)
        if value is not None and not isinstance(value, LIST_TYPES):
            logger.warning(
                "Invalid '%s' provided to '%s'. Expected a list, got %s.",
                field,
                definition.name,
                type(value).__name__,
            )
            return ""
    return definition.render(config)


__all__ = ["ShortcodeCall", "ShortcodeRegistry", "bind_arguments"]
