"""Field layouts for the admin create/edit forms.

The forms post JSON to the /api endpoints; `kind` tells the page script how
to serialise each input (list fields are one entry per line).
"""

from dataclasses import dataclass
from typing import Any

from kedjora.models import Portfolio, Service, Testimonial
from kedjora.models.base import Base


@dataclass(frozen=True)
class FormField:
    name: str
    label: str
    kind: str = "text"  # text, textarea, list, checkbox, number, url
    required: bool = False
    default: Any = None
    help_text: str | None = None


@dataclass(frozen=True)
class EditableResource:
    """An admin table with new/edit/delete pages backed by one API collection."""

    path: str
    label: str
    model: type[Base]
    fields: tuple[FormField, ...]
    title_attr: str = "title"

    @property
    def api_path(self) -> str:
        return f"/{self.path}"

    @property
    def admin_path(self) -> str:
        return f"/admin/{self.path}"


SLUG_HELP = "Lowercase letters, digits and hyphens, e.g. web-development"
LIST_HELP = "One entry per line"

SERVICE_FIELDS = (
    FormField("title", "Title", required=True),
    FormField("slug", "Slug", required=True, help_text=SLUG_HELP),
    FormField("description", "Description", kind="textarea", required=True),
    FormField("features", "Features", kind="list", required=True, help_text=LIST_HELP),
    FormField("price", "Price"),
    FormField("image_url", "Image URL", kind="url"),
    FormField("is_popular", "Popular", kind="checkbox", default=False),
    FormField("is_active", "Active", kind="checkbox", default=True),
)

PORTFOLIO_FIELDS = (
    FormField("title", "Title", required=True),
    FormField("slug", "Slug", required=True, help_text=SLUG_HELP),
    FormField("description", "Description", kind="textarea", required=True),
    FormField("client_name", "Client"),
    FormField("service_type", "Service type", required=True),
    FormField("image_urls", "Image URLs", kind="list", required=True, help_text=LIST_HELP),
    FormField("technologies", "Technologies", kind="list", required=True, help_text=LIST_HELP),
    FormField("demo_url", "Demo URL", kind="url"),
    FormField("featured", "Featured", kind="checkbox", default=False),
)

TESTIMONIAL_FIELDS = (
    FormField("name", "Name", required=True),
    FormField("position", "Position"),
    FormField("company", "Company"),
    FormField("content", "Testimonial", kind="textarea", required=True),
    FormField("rating", "Rating (1-5)", kind="number", required=True, default=5),
    FormField("image_url", "Photo URL", kind="url"),
    FormField("featured", "Featured", kind="checkbox", default=False),
)

EDITABLE_RESOURCES = (
    EditableResource("services", "Service", Service, SERVICE_FIELDS),
    EditableResource("portfolio", "Portfolio item", Portfolio, PORTFOLIO_FIELDS),
    EditableResource("testimonials", "Testimonial", Testimonial, TESTIMONIAL_FIELDS, title_attr="name"),
)

# section key -> (heading, fields); the upsert replaces every column, so each
# form only shows the columns its public page reads.
SETTINGS_SECTIONS: dict[str, tuple[str, tuple[FormField, ...]]] = {
    "home": (
        "Home page hero",
        (
            FormField("title", "Hero title", required=True),
            FormField("subtitle", "Hero subtitle", kind="textarea"),
            FormField("button_text", "Button text"),
            FormField("button_link", "Button link"),
            FormField("image_url", "Image URL", kind="url"),
        ),
    ),
    "about": (
        "About page",
        (
            FormField("title", "Page title", required=True),
            FormField("subtitle", "Subtitle"),
            FormField("content", "Main content", kind="textarea"),
            FormField("image_url", "Image URL", kind="url"),
        ),
    ),
    "contact": (
        "Contact page",
        (
            FormField("title", "Page title", required=True),
            FormField("subtitle", "Subtitle"),
            FormField("content", "Address and contact details", kind="textarea"),
            FormField("button_link", "Map embed URL", kind="url"),
        ),
    ),
}


def initial_values(fields: tuple[FormField, ...], item: object | None = None) -> dict[str, Any]:
    """Values to prefill a form with: the stored row, or field defaults for a new one."""
    values: dict[str, Any] = {}
    for field in fields:
        value = getattr(item, field.name, None) if item is not None else field.default
        if field.kind == "list":
            value = "\n".join(value or [])
        elif field.kind == "checkbox":
            value = bool(value)
        values[field.name] = "" if value is None else value
    return values
