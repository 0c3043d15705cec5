"""Load and validate the YAML settings for a studio site build.

The settings file (``config/site.yaml`` by default) sets the
``readableDate`` defaults, the escaping policy, the content and output
directories, heading-anchor options, and global template data. Every key is
optional; :func:`load_site_config` returns a :class:`SiteConfig` with the
defaults filled in.

Examples
--------
>>> from pathlib import Path
>>> from studio_pages.config import load_site_config
>>> site = load_site_config(Path("config/site.yaml"))  # doctest: +SKIP
>>> site.timezone  # doctest: +SKIP
'UTC'
"""

from .loader import build_site_config, load_site_config
from .models import AnchorConfig, SiteConfig, SiteConfigError

DEFAULT_CONFIG_PATH = "config/site.yaml"

__all__ = [
    "DEFAULT_CONFIG_PATH",
    "AnchorConfig",
    "SiteConfig",
    "SiteConfigError",
    "build_site_config",
    "load_site_config",
]
