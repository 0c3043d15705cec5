"""Common literal values used across studio_pages.

These constants keep placeholder assets, reserved tag names, and markdown
anchor settings centralized so section templates, filters, and tests can
import the same values without drifting. Intended for internal use within the
studio_pages package.

Examples
--------
>>> from studio_pages import _constants
>>> _constants.PLACEHOLDER_IMAGE.format(size="600x400")
'https://via.placeholder.com/600x400'
>>> "posts" in _constants.RESERVED_TAGS
True
"""

PLACEHOLDER_IMAGE = "https://via.placeholder.com/{size}"
PLACEHOLDER_LINK = "#"

RESERVED_TAGS = frozenset({"all", "nav", "post", "posts"})

DEFAULT_DATE_FORMAT = "dd LLLL yyyy"
DEFAULT_TIMEZONE = "UTC"

ANCHOR_LEVELS = (1, 2, 3, 4)
ANCHOR_PLACEMENT = "after"
ANCHOR_CLASS = "header-anchor"
ANCHOR_SYMBOL = "#"

STAR_ICON = '<i class="bi bi-star-fill"></i>'


def placeholder_image(size: str) -> str:
    """Return the placeholder image URL for a ``WIDTHxHEIGHT`` size."""
    return PLACEHOLDER_IMAGE.format(size=size)
