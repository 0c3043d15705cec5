"""Shortcodes that expose build metadata rather than page sections."""

from __future__ import annotations

import datetime as dt


def current_build_date() -> str:
    """Return the current instant as an ISO-8601 UTC timestamp.

    Mirrors ``Date.prototype.toISOString``: millisecond precision with a
    ``Z`` suffix, e.g. ``2024-06-21T09:30:00.000Z``.
    """
    now = dt.datetime.now(dt.UTC)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


__all__ = ["current_build_date"]
