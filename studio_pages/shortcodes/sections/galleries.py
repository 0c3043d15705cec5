"""Image-led sections: portfolio grid, team wall, Instagram feed, brand showcase."""

from __future__ import annotations

import typing as typ

from studio_pages._constants import PLACEHOLDER_LINK, placeholder_image
from studio_pages.shortcodes.models import ShortcodeDefinition

from ._base import compose_field, render_list_section

if typ.TYPE_CHECKING:
    from studio_pages.shortcodes.templating import SectionTemplates

INSTAGRAM_PROFILE_URL = "https://www.instagram.com/{username}"

PROJECT_DEFAULTS: dict[str, typ.Any] = {
    "imageUrl": placeholder_image("500x300"),
    "category": "",
    "title": "",
    "description": "",
    "link": PLACEHOLDER_LINK,
}
TAB_DEFAULTS: dict[str, typ.Any] = {"filter": "*", "title": ""}

TEAM_MEMBER_DEFAULTS: dict[str, typ.Any] = {
    "defaultImg": placeholder_image("500"),
    "hoverImg": placeholder_image("500"),
    "socialLink": PLACEHOLDER_LINK,
    "socialIcon": "",
    "name": "",
    "designation": "",
}

INSTAGRAM_FEED_DEFAULTS: dict[str, typ.Any] = {"images": [], "username": ""}

SHOWCASE_DEFAULTS: dict[str, typ.Any] = {"headerText": "", "headerSubText": ""}
BANNER_DEFAULTS: dict[str, typ.Any] = {
    "imageUrl": placeholder_image("1160x640"),
    "tag": "",
    "title": "",
    "description": "",
    "link": PLACEHOLDER_LINK,
}
CLIENT_DEFAULTS: dict[str, typ.Any] = {
    "imageUrl": placeholder_image("225x110"),
    "link": PLACEHOLDER_LINK,
}


def build_definitions(templates: SectionTemplates) -> list[ShortcodeDefinition]:
    """Return the gallery shortcodes bound to ``templates``."""

    def project_showcase(config: dict[str, typ.Any]) -> str:
        template = "project_showcase_section.jinja"
        tabs_html = compose_field(
            templates, template, config["tabs"], macro="tab", item_defaults=TAB_DEFAULTS
        )
        projects_html = compose_field(
            templates, template, config["projects"], item_defaults=PROJECT_DEFAULTS
        )
        return templates.render(
            template, config, tabs_html=tabs_html, projects_html=projects_html
        )

    def team_showcase(config: dict[str, typ.Any]) -> str:
        return render_list_section(
            templates,
            "team_showcase_section.jinja",
            config,
            field="teamMembers",
            html_name="members_html",
            item_defaults=TEAM_MEMBER_DEFAULTS,
        )

    def instagram_feed(config: dict[str, typ.Any]) -> str:
        template = "instagram_feed.jinja"
        profile_url = INSTAGRAM_PROFILE_URL.format(username=config["username"])
        images_html = compose_field(
            templates, template, config["images"], profile_url=profile_url
        )
        return templates.render(
            template, config, images_html=images_html, profile_url=profile_url
        )

    def dynamic_showcase(config: dict[str, typ.Any]) -> str:
        template = "dynamic_showcase_section.jinja"
        banners_html = compose_field(
            templates,
            template,
            config["banners"],
            macro="banner",
            item_defaults=BANNER_DEFAULTS,
        )
        clients_html = compose_field(
            templates,
            template,
            config["clients"],
            macro="client",
            item_defaults=CLIENT_DEFAULTS,
        )
        return templates.render(
            template, config, banners_html=banners_html, clients_html=clients_html
        )

    return [
        ShortcodeDefinition(
            "ProjectShowcaseSection",
            project_showcase,
            required=("projects", "tabs"),
            list_fields=("projects", "tabs"),
        ),
        ShortcodeDefinition(
            "TeamShowcaseSection",
            team_showcase,
            required=("teamMembers",),
            list_fields=("teamMembers",),
        ),
        ShortcodeDefinition(
            "DynamicInstagramFeed",
            instagram_feed,
            defaults=INSTAGRAM_FEED_DEFAULTS,
            list_fields=("images",),
        ),
        ShortcodeDefinition(
            "DynamicShowcaseSection",
            dynamic_showcase,
            defaults=SHOWCASE_DEFAULTS,
            required=("banners", "clients"),
            list_fields=("banners", "clients"),
        ),
    ]


__all__ = [
    "BANNER_DEFAULTS",
    "CLIENT_DEFAULTS",
    "INSTAGRAM_PROFILE_URL",
    "PROJECT_DEFAULTS",
    "build_definitions",
]
