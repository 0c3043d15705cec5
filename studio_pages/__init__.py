"""Build-time templating for studio marketing pages.

The package provides named section shortcodes, page filters, and markdown
heading anchors, plus the ``pages`` console command that renders a content
directory with them.

Exports
-------
- ``SiteTemplating``: filters, shortcodes, and markdown for one build.
- ``app``: Cyclopts application behind the ``pages`` command.
- ``main``: Convenience function that invokes the Cyclopts app.

Examples
--------
>>> from studio_pages import SiteTemplating
>>> site = SiteTemplating()
>>> "ServicesSection" in site.shortcodes
True
>>> from studio_pages import main
>>> main()  # doctest: +SKIP
"""

from __future__ import annotations

from .cli import app, main
from .site import SiteTemplating

__all__ = ["SiteTemplating", "app", "main"]
