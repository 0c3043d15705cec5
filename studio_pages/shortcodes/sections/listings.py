"""Grid and list sections built from item records.

Apart from ``processStepsSection``, every shortcode here requires its list
field: invoking one without it is a page-level error rather than an empty
section.
"""

from __future__ import annotations

import typing as typ

from studio_pages._constants import PLACEHOLDER_LINK, placeholder_image
from studio_pages.shortcodes.composer import compose
from studio_pages.shortcodes.models import ShortcodeDefinition

from ._base import compose_field, nested_items, render_list_section

if typ.TYPE_CHECKING:
    from studio_pages.shortcodes.templating import SectionTemplates

PROCESS_STEPS_DEFAULTS: dict[str, typ.Any] = {"steps": []}
STEP_DEFAULTS: dict[str, typ.Any] = {"number": "", "title": "", "description": ""}

SERVICES_DEFAULTS: dict[str, typ.Any] = {
    "headerText": "Beauty salon services",
    "headerSubText": "Makeup and hairstyles",
    "exploreLead": "Our flexible beauty salon pricing plans.",
    "exploreLink": PLACEHOLDER_LINK,
    "exploreText": "View all pricing plans",
    "learnMoreLink": PLACEHOLDER_LINK,
    "learnMoreText": "Learn More",
}
SERVICE_DEFAULTS: dict[str, typ.Any] = {
    "imageUrl": placeholder_image("755x510"),
    "link": PLACEHOLDER_LINK,
    "title": "",
    "description": "",
}

PRICING_DEFAULTS: dict[str, typ.Any] = {
    "headerText": "Beauty salon services",
    "headerSubText": "Makeup and hairstyles",
    "exploreLead": "Our flexible beauty salon pricing plans.",
    "exploreLink": PLACEHOLDER_LINK,
    "exploreText": "Explore package",
    "learnMoreLink": PLACEHOLDER_LINK,
    "learnMoreText": "Learn More",
}
PRICE_DEFAULTS: dict[str, typ.Any] = {
    "imageUrl": placeholder_image("100x105"),
    "title": "",
    "description": "",
    "price": "",
}

BENEFITS_DEFAULTS: dict[str, typ.Any] = {
    "headerText": "Open your body and soul to yoga",
    "headerSubText": "Still need some reasons to start practicing?",
    "primaryLink": PLACEHOLDER_LINK,
    "primaryButtonText": "Learn More",
}
BENEFIT_DEFAULTS: dict[str, typ.Any] = {
    "imageUrl": placeholder_image("100x100"),
    "title": "",
    "description": "",
}

CATEGORY_SHOWCASE_DEFAULTS: dict[str, typ.Any] = {
    "headline": "Explore our diverse categories.",
}
CATEGORY_DEFAULTS: dict[str, typ.Any] = {
    "icon": "",
    "title": "",
    "link": PLACEHOLDER_LINK,
}

DATA_ANALYTICS_DEFAULTS: dict[str, typ.Any] = {
    "backgroundImgUrl": placeholder_image("1920x1080"),
    "analysisImgUrl": placeholder_image("800x600"),
    "badgeText": "Flexible pricing",
    "title": "Tailored pricing plans for everyone.",
}
ANALYTICS_PLAN_DEFAULTS: dict[str, typ.Any] = {
    "planName": "",
    "description": "",
    "price": "",
    "pricePeriod": "",
    "linkUrl": PLACEHOLDER_LINK,
    "linkText": "Get started",
}

MENU_PRICE_DEFAULTS: dict[str, typ.Any] = {
    "backgroundImage": placeholder_image("1920x1080"),
}
MENU_TAB_DEFAULTS: dict[str, typ.Any] = {
    "id": "",
    "title": "",
    "icon": "",
    "items": [],
}
MENU_ENTRY_DEFAULTS: dict[str, typ.Any] = {
    "image": placeholder_image("150"),
    "title": "",
    "description": "",
    "price": "",
    "side": False,
}


def build_definitions(templates: SectionTemplates) -> list[ShortcodeDefinition]:
    """Return the listing section shortcodes bound to ``templates``."""

    def process_steps(config: dict[str, typ.Any]) -> str:
        return render_list_section(
            templates,
            "process_steps_section.jinja",
            config,
            field="steps",
            html_name="steps_html",
            item_defaults=STEP_DEFAULTS,
        )

    def services(config: dict[str, typ.Any]) -> str:
        return render_list_section(
            templates,
            "services_section.jinja",
            config,
            field="services",
            html_name="services_html",
            item_defaults=SERVICE_DEFAULTS,
        )

    def pricing(config: dict[str, typ.Any]) -> str:
        return render_list_section(
            templates,
            "pricing_section.jinja",
            config,
            field="pricing",
            html_name="pricing_html",
            item_defaults=PRICE_DEFAULTS,
        )

    def benefits(config: dict[str, typ.Any]) -> str:
        return render_list_section(
            templates,
            "benefits_section.jinja",
            config,
            field="benefits",
            html_name="benefits_html",
            item_defaults=BENEFIT_DEFAULTS,
        )

    def category_showcase(config: dict[str, typ.Any]) -> str:
        return render_list_section(
            templates,
            "category_showcase_section.jinja",
            config,
            field="categories",
            html_name="categories_html",
            item_defaults=CATEGORY_DEFAULTS,
        )

    def data_analytics(config: dict[str, typ.Any]) -> str:
        return render_list_section(
            templates,
            "data_analytics_section.jinja",
            config,
            field="pricing",
            html_name="pricing_html",
            item_defaults=ANALYTICS_PLAN_DEFAULTS,
        )

    def menu_price(config: dict[str, typ.Any]) -> str:
        template = "menu_price_section.jinja"
        tabs = config["tabs"]
        render_pane = templates.macro(template, "pane")

        def pane(tab: dict[str, typ.Any], position: typ.Any) -> str:
            entries_html = compose_field(
                templates,
                template,
                nested_items("MenuPriceSection", tab, "items"),
                macro="entry",
                item_defaults=MENU_ENTRY_DEFAULTS,
            )
            return render_pane(tab, position, entries_html)

        nav_html = compose_field(
            templates, template, tabs, macro="nav", item_defaults=MENU_TAB_DEFAULTS
        )
        panes_html = compose(tabs, pane, defaults=MENU_TAB_DEFAULTS)
        return templates.render(
            template, config, nav_html=nav_html, panes_html=panes_html
        )

    return [
        ShortcodeDefinition(
            "processStepsSection",
            process_steps,
            defaults=PROCESS_STEPS_DEFAULTS,
            list_fields=("steps",),
        ),
        ShortcodeDefinition(
            "ServicesSection",
            services,
            defaults=SERVICES_DEFAULTS,
            required=("services",),
            list_fields=("services",),
        ),
        ShortcodeDefinition(
            "PricingSection",
            pricing,
            defaults=PRICING_DEFAULTS,
            required=("pricing",),
            list_fields=("pricing",),
        ),
        ShortcodeDefinition(
            "BenefitsSection",
            benefits,
            defaults=BENEFITS_DEFAULTS,
            required=("benefits",),
            list_fields=("benefits",),
        ),
        ShortcodeDefinition(
            "CategoryShowcaseSection",
            category_showcase,
            defaults=CATEGORY_SHOWCASE_DEFAULTS,
            required=("categories",),
            list_fields=("categories",),
        ),
        ShortcodeDefinition(
            "DynamicDataAnalyticsSection",
            data_analytics,
            defaults=DATA_ANALYTICS_DEFAULTS,
            required=("pricing",),
            list_fields=("pricing",),
        ),
        ShortcodeDefinition(
            "MenuPriceSection",
            menu_price,
            defaults=MENU_PRICE_DEFAULTS,
            required=("tabs",),
            list_fields=("tabs",),
        ),
    ]


__all__ = [
    "BENEFITS_DEFAULTS",
    "MENU_TAB_DEFAULTS",
    "PROCESS_STEPS_DEFAULTS",
    "SERVICES_DEFAULTS",
    "SERVICE_DEFAULTS",
    "build_definitions",
]
