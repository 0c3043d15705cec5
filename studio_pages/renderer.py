"""Render page markdown into HTML with heading anchors."""

from __future__ import annotations

import typing as typ

from markdown import Markdown

if typ.TYPE_CHECKING:
    from markdown.extensions import Extension
else:  # pragma: no cover - type-checking fallback
    Extension = typ.Any

BASE_EXTENSIONS: tuple[str, ...] = ("fenced_code", "tables", "sane_lists", "attr_list")


class MarkdownRenderer:
    """Convert markdown to HTML using a fixed extension set."""

    def __init__(self, anchor_extension: Extension | None = None) -> None:
        """Initialize a renderer with an optional heading-anchor extension.

        Parameters
        ----------
        anchor_extension : Extension, optional
            Extension that assigns heading ids and permalinks; pass ``None``
            to leave headings untouched.
        """
        self._anchor_extension = anchor_extension

    def markdown(self, text: str) -> str:
        """Render markdown into HTML using the configured extensions."""
        if not text.strip():
            return ""
        extensions: list[Extension | str] = list(BASE_EXTENSIONS)
        if self._anchor_extension:
            extensions.append(self._anchor_extension)
        md = Markdown(extensions=extensions, output_format="html")
        return md.convert(text)


__all__ = ["MarkdownRenderer"]
