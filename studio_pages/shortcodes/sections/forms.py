"""Interactive sections: appointment request form and FAQ accordion."""

from __future__ import annotations

import typing as typ

from studio_pages._constants import placeholder_image
from studio_pages.shortcodes.models import ShortcodeDefinition

from ._base import render_list_section

if typ.TYPE_CHECKING:
    from studio_pages.shortcodes.templating import SectionTemplates

APPOINTMENT_REQUEST_DEFAULTS: dict[str, typ.Any] = {
    "title": "Request an appointment.",
    "description": (
        "Your information will be forwarded to a scheduling specialist "
        "who will contact you."
    ),
    "urgentContactImage": placeholder_image("112x68"),
    "backgroundImage": placeholder_image("448x434"),
    "contactNumber": "+1 234 567 8910",
    "formActionURL": "/submit/appointment",
    "selectPrompt": "Select doctor",
    "privacyNote": (
        "We are committed to protecting your privacy. We will never collect "
        "information about you without your explicit consent."
    ),
    "submitText": "Book appointment",
    "doctorOptions": [],
}
OPTION_DEFAULTS: dict[str, typ.Any] = {"value": "", "text": ""}

FAQ_BOX_DEFAULTS: dict[str, typ.Any] = {
    "title": "Frequently asked questions",
    "subtitle": "Basic information",
    "imageUrl": placeholder_image("250x150"),
}
QUESTION_DEFAULTS: dict[str, typ.Any] = {"question": "", "answer": ""}


def build_definitions(templates: SectionTemplates) -> list[ShortcodeDefinition]:
    """Return the form shortcodes bound to ``templates``."""

    def appointment_request(config: dict[str, typ.Any]) -> str:
        return render_list_section(
            templates,
            "appointment_request_section.jinja",
            config,
            field="doctorOptions",
            html_name="options_html",
            item_defaults=OPTION_DEFAULTS,
        )

    def faq_box(config: dict[str, typ.Any]) -> str:
        return render_list_section(
            templates,
            "faq_box_section.jinja",
            config,
            field="questions",
            html_name="questions_html",
            item_defaults=QUESTION_DEFAULTS,
        )

    return [
        ShortcodeDefinition(
            "AppointmentRequestSection",
            appointment_request,
            defaults=APPOINTMENT_REQUEST_DEFAULTS,
            list_fields=("doctorOptions",),
        ),
        ShortcodeDefinition(
            "FaqBoxSection",
            faq_box,
            defaults=FAQ_BOX_DEFAULTS,
            required=("questions",),
            list_fields=("questions",),
        ),
    ]


__all__ = ["APPOINTMENT_REQUEST_DEFAULTS", "build_definitions"]
