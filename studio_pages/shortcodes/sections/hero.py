"""Hero-style sections whose every field has a default.

These shortcodes are safe to invoke with an empty configuration: the
rendered fragment then shows only placeholder copy and imagery.
"""

from __future__ import annotations

import typing as typ

from studio_pages._constants import PLACEHOLDER_LINK, STAR_ICON, placeholder_image
from studio_pages.shortcodes.models import ShortcodeDefinition

if typ.TYPE_CHECKING:
    from studio_pages.shortcodes.templating import SectionTemplates

BANNER_SLIDER_DEFAULTS: dict[str, typ.Any] = {
    "backgroundImage": placeholder_image("1920x1100"),
    "leftImage": placeholder_image("600x400"),
    "rightImage": placeholder_image("600x400"),
    "mainTitle": "Beauty Studio",
    "subTitle": "A salon is an establishment dealing with natural cosmetic treatments.",
    "buttonLink": PLACEHOLDER_LINK,
    "buttonText": "Book Appointment",
}

FEATURE_SECTION_DEFAULTS: dict[str, typ.Any] = {
    "leftImageUrl": placeholder_image("95x125"),
    "badgeText": "wow awesome!",
    "awardTitle": "Best beauty salon",
    "awardYear": "2023",
    "description": "Multi award winning beauty salon services.",
    "discountText": "Get 20% off on bridal makeup",
    "discountLink": PLACEHOLDER_LINK,
}

FEATURED_SECTION_DEFAULTS: dict[str, typ.Any] = {
    "mainImageUrl": placeholder_image("960x630"),
    "title": "Explore Our Services",
    "description": "Detailed overview of our services and commitments.",
    "primaryLink": PLACEHOLDER_LINK,
    "primaryButtonText": "Learn More",
    "secondaryUrl": PLACEHOLDER_LINK,
    "secondaryButtonText": "Watch Video",
}

# Field order doubles as the positional argument order.
STATS_BOX_DEFAULTS: dict[str, typ.Any] = {
    "rating": "4.98",
    "feedback": "98",
    "patients": "200",
    "ratingText": "4.98 rating.",
    "feedbackText": "Genuine positive feedback.",
    "patientsText": "Daily patients consulted.",
    "stars": 5,
}

DYNAMIC_MEDIA_DEFAULTS: dict[str, typ.Any] = {
    "mainImage": placeholder_image("435x559"),
    "iconImage": placeholder_image("58x51"),
    "secondaryImage": placeholder_image("336x430"),
    "badgeImage": "images/demo-medical-home-07.png",
    "sectionTitle": "About medcare hospital",
    "header": "Welcome to our medcare hospital.",
    "description": (
        "We value each and every human life placed in our hands and constantly "
        "work towards meeting the expectations of our customers and stake holders."
    ),
    "reviewCount": "722+",
    "reviewText": "5 star reviews from our satisfied people.",
    "stars": 5,
    "primaryLink": "demo-medical-about.html",
    "primaryButtonText": "About hospital",
    "secondaryLink": "demo-medical-timetable.html",
    "secondaryButtonText": "Check timetable",
}


def build_definitions(templates: SectionTemplates) -> list[ShortcodeDefinition]:
    """Return the hero section shortcodes bound to ``templates``."""

    def banner_slider(config: dict[str, typ.Any]) -> str:
        return templates.render("banner_slider.jinja", config)

    def feature_section(config: dict[str, typ.Any]) -> str:
        return templates.render("feature_section.jinja", config)

    def featured_section(config: dict[str, typ.Any]) -> str:
        return templates.render("featured_section.jinja", config)

    def stats_box(config: dict[str, typ.Any]) -> str:
        return templates.render("stats_box.jinja", config, star_icon=STAR_ICON)

    def dynamic_media(config: dict[str, typ.Any]) -> str:
        return templates.render(
            "dynamic_media_section.jinja", config, star_icon=STAR_ICON
        )

    return [
        ShortcodeDefinition(
            "bannerSlider", banner_slider, defaults=BANNER_SLIDER_DEFAULTS
        ),
        ShortcodeDefinition(
            "featureSection", feature_section, defaults=FEATURE_SECTION_DEFAULTS
        ),
        ShortcodeDefinition(
            "featuredSection", featured_section, defaults=FEATURED_SECTION_DEFAULTS
        ),
        ShortcodeDefinition(
            "statsBox",
            stats_box,
            defaults=STATS_BOX_DEFAULTS,
            positional=tuple(STATS_BOX_DEFAULTS),
        ),
        ShortcodeDefinition(
            "DynamicMediaSection", dynamic_media, defaults=DYNAMIC_MEDIA_DEFAULTS
        ),
    ]


__all__ = [
    "BANNER_SLIDER_DEFAULTS",
    "DYNAMIC_MEDIA_DEFAULTS",
    "FEATURED_SECTION_DEFAULTS",
    "FEATURE_SECTION_DEFAULTS",
    "STATS_BOX_DEFAULTS",
    "build_definitions",
]
