"""Carousel-style sections: marquee ticker, testimonials, beauty tips."""

from __future__ import annotations

import typing as typ

from studio_pages._constants import PLACEHOLDER_LINK, STAR_ICON, placeholder_image
from studio_pages.shortcodes.models import ShortcodeDefinition

from ._base import compose_field, render_list_section

if typ.TYPE_CHECKING:
    from studio_pages.shortcodes.templating import SectionTemplates

MESSAGE_DEFAULTS: dict[str, typ.Any] = {"text": ""}

TESTIMONIAL_SECTION_DEFAULTS: dict[str, typ.Any] = {
    "title": "What our clients say",
}
TESTIMONIAL_DEFAULTS: dict[str, typ.Any] = {"name": "", "review": "", "rating": 0}

BEAUTY_TIPS_DEFAULTS: dict[str, typ.Any] = {"title": "Natural beauty tips"}
TIP_DEFAULTS: dict[str, typ.Any] = {"title": "", "description": ""}

IMAGE_AND_TEXT_DEFAULTS: dict[str, typ.Any] = {
    "mainImage": placeholder_image("600x600"),
    "featureIcon": placeholder_image("60x60"),
    "featureText": "",
    "headerIcon": "",
    "headerText": "",
}
TEXT_SLIDE_DEFAULTS: dict[str, typ.Any] = {"title": "", "text": ""}

SERVICE_SLIDER_DEFAULTS: dict[str, typ.Any] = {
    "backgroundPatternImage": placeholder_image("350x350"),
    "mainTitle": "",
    "subTitle": "",
    "description": "",
    "linkUrl": PLACEHOLDER_LINK,
    "linkText": "",
}
SERVICE_SLIDE_DEFAULTS: dict[str, typ.Any] = {
    "iconUrl": placeholder_image("50x50"),
    "title": "",
    "text": "",
    "detailUrl": PLACEHOLDER_LINK,
    "linkText": "Know more",
}


def build_definitions(templates: SectionTemplates) -> list[ShortcodeDefinition]:
    """Return the slider shortcodes bound to ``templates``."""

    def marquee(config: dict[str, typ.Any]) -> str:
        return render_list_section(
            templates,
            "marquee_section.jinja",
            config,
            field="messages",
            html_name="messages_html",
            item_defaults=MESSAGE_DEFAULTS,
        )

    def testimonials(config: dict[str, typ.Any]) -> str:
        template = "testimonial_section.jinja"
        testimonials_html = compose_field(
            templates,
            template,
            config["testimonials"],
            item_defaults=TESTIMONIAL_DEFAULTS,
            star_icon=STAR_ICON,
        )
        return templates.render(template, config, testimonials_html=testimonials_html)

    def beauty_tips(config: dict[str, typ.Any]) -> str:
        return render_list_section(
            templates,
            "beauty_tips_slider.jinja",
            config,
            field="items",
            html_name="items_html",
            item_defaults=TIP_DEFAULTS,
        )

    def image_and_text(config: dict[str, typ.Any]) -> str:
        return render_list_section(
            templates,
            "image_and_text_section.jinja",
            config,
            field="slides",
            html_name="slides_html",
            item_defaults=TEXT_SLIDE_DEFAULTS,
        )

    def service_slider(config: dict[str, typ.Any]) -> str:
        return render_list_section(
            templates,
            "service_slider_section.jinja",
            config,
            field="slides",
            html_name="slides_html",
            item_defaults=SERVICE_SLIDE_DEFAULTS,
        )

    return [
        ShortcodeDefinition(
            "MarqueeSection",
            marquee,
            required=("messages",),
            list_fields=("messages",),
        ),
        ShortcodeDefinition(
            "TestimonialSection",
            testimonials,
            defaults=TESTIMONIAL_SECTION_DEFAULTS,
            required=("testimonials",),
            list_fields=("testimonials",),
        ),
        ShortcodeDefinition(
            "BeautyTipsSlider",
            beauty_tips,
            defaults=BEAUTY_TIPS_DEFAULTS,
            required=("items",),
            list_fields=("items",),
            positional=("items",),
        ),
        ShortcodeDefinition(
            "ImageAndTextSection",
            image_and_text,
            defaults=IMAGE_AND_TEXT_DEFAULTS,
            required=("slides",),
            list_fields=("slides",),
        ),
        ShortcodeDefinition(
            "ServiceSliderSection",
            service_slider,
            defaults=SERVICE_SLIDER_DEFAULTS,
            required=("slides",),
            list_fields=("slides",),
        ),
    ]


__all__ = [
    "SERVICE_SLIDE_DEFAULTS",
    "TESTIMONIAL_DEFAULTS",
    "TEXT_SLIDE_DEFAULTS",
    "build_definitions",
]
