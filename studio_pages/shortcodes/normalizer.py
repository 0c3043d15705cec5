"""Merge caller-supplied shortcode configuration with declared defaults.

A field counts as supplied when its key is present and its value is not
``None``; anything else falls back to the default. Explicit empty
collections are kept so callers can ask for zero items.

Examples
--------
>>> normalize({"title": "Welcome", "steps": []}, {"steps": None, "extra": 1})
{'title': 'Welcome', 'steps': [], 'extra': 1}
>>> normalize({"items": ["a"]}, {"items": []})
{'items': []}
"""

from __future__ import annotations

import copy
import typing as typ

if typ.TYPE_CHECKING:
    import collections.abc as cabc


def is_supplied(supplied: cabc.Mapping[str, typ.Any], key: str) -> bool:
    """Return True when ``key`` carries a caller value other than ``None``."""
    return supplied.get(key) is not None


def normalize(
    defaults: cabc.Mapping[str, typ.Any],
    supplied: cabc.Mapping[str, typ.Any] | None,
) -> dict[str, typ.Any]:
    """Return a complete configuration built from ``defaults`` and ``supplied``.

    Parameters
    ----------
    defaults : Mapping[str, Any]
        Declared default value for every optional field.
    supplied : Mapping[str, Any] or None
        Partial configuration from the caller. Keys unknown to ``defaults``
        are passed through untouched.

    Returns
    -------
    dict[str, Any]
        A new mapping; defaults that are mutable containers are deep-copied
        so renders never share state.
    """
    provided = supplied or {}
    merged: dict[str, typ.Any] = {}
    for key, default in defaults.items():
        if is_supplied(provided, key):
            merged[key] = provided[key]
        else:
            merged[key] = copy.deepcopy(default)
    for key, value in provided.items():
        if key not in defaults:
            merged[key] = value
    return merged


def missing_fields(
    required: cabc.Iterable[str],
    supplied: cabc.Mapping[str, typ.Any] | None,
) -> list[str]:
    """Return the required field names absent from ``supplied``, in order."""
    provided = supplied or {}
    return [field for field in required if not is_supplied(provided, field)]


__all__ = ["is_supplied", "missing_fields", "normalize"]
