"""Dataclasses describing registered shortcodes."""

from __future__ import annotations

import collections.abc as cabc
import dataclasses as dc
import typing as typ

ConfigShape = dict[str, typ.Any]
RenderFn = cabc.Callable[[ConfigShape], str]


@dc.dataclass(frozen=True, slots=True)
class ShortcodeDefinition:
    """A named section renderer together with its configuration contract.

    Attributes
    ----------
    name : str
        Name used to invoke the shortcode from page templates.
    render : Callable[[dict[str, Any]], str]
        Receives the normalized configuration and returns markup.
    defaults : Mapping[str, Any]
        Default value for every optional field.
    required : tuple[str, ...]
        Fields the caller must supply; invocation fails fast without them.
    list_fields : tuple[str, ...]
        Fields that must hold a list of item records when present.
    positional : tuple[str, ...]
        Field names bound, in order, to positional invocation arguments.
    """

    name: str
    render: RenderFn
    defaults: cabc.Mapping[str, typ.Any] = dc.field(default_factory=dict)
    required: tuple[str, ...] = ()
    list_fields: tuple[str, ...] = ()
    positional: tuple[str, ...] = ()

    @property
    def fully_defaulted(self) -> bool:
        """Return True when an empty configuration renders without error."""
        return not self.required


__all__ = ["ConfigShape", "RenderFn", "ShortcodeDefinition"]
