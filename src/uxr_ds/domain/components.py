"""View models for the packaged component templates.

Each model names the template it renders through ``template_name``; the
template sees the model as ``c``. Fields typed :data:`Html` hold trusted
markup and are inserted without escaping, so only pass them markup the
application produced itself.
"""

from __future__ import annotations

from typing import Annotated, ClassVar, Literal

from markupsafe import Markup
from pydantic import BaseModel, PlainSerializer, PlainValidator

from uxr_ds.domain.pagination import Pagination

Html = Annotated[
    Markup,
    PlainValidator(Markup),
    PlainSerializer(str, return_type=str),
]

FieldType = Literal["text", "email", "password", "select", "textarea"]


class ComponentModel(BaseModel):
    """Base for component view models: frozen, markup-aware."""

    model_config = {"frozen": True, "arbitrary_types_allowed": True}

    template_name: ClassVar[str] = ""


class Metric(BaseModel):
    model_config = {"frozen": True}

    id: str
    value: str
    label: str


class MetricsGrid(ComponentModel):
    template_name: ClassVar[str] = "metrics_grid.html"

    id: str
    metrics: tuple[Metric, ...] = ()


class Column(BaseModel):
    model_config = {"frozen": True}

    label: str
    width: str = ""


class DataTable(ComponentModel):
    """Table shell; the caller renders the ``<tr>`` rows."""

    template_name: ClassVar[str] = "data_table.html"

    id: str
    columns: tuple[Column, ...] = ()
    rows: Html = Markup("")


class Tab(ComponentModel):
    id: str
    label: str
    content: Html = Markup("")


class Tabs(ComponentModel):
    template_name: ClassVar[str] = "tabs.html"

    tabs: tuple[Tab, ...] = ()


class PageHeader(ComponentModel):
    template_name: ClassVar[str] = "page_header.html"

    title: str
    subtitle: str = ""
    actions: Html = Markup("")


class SelectOption(BaseModel):
    model_config = {"frozen": True}

    value: str
    label: str


class FormField(ComponentModel):
    template_name: ClassVar[str] = "form_field.html"

    id: str
    name: str
    label: str
    type: FieldType = "text"
    placeholder: str = ""
    required: bool = False
    options: tuple[SelectOption, ...] = ()


class Card(ComponentModel):
    """Card container.

    ``content``/``body`` and ``header_action``/``header_actions`` are
    aliases kept for older call sites; templates read :attr:`main` and
    :attr:`action`.
    """

    template_name: ClassVar[str] = "card.html"

    header: str = ""
    header_action: Html = Markup("")
    header_actions: Html = Markup("")
    body: Html = Markup("")
    content: Html = Markup("")
    elevated: bool = False
    css_class: str = ""

    @property
    def main(self) -> Markup:
        return self.content or self.body

    @property
    def action(self) -> Markup:
        return self.header_action or self.header_actions


class StatusBadge(ComponentModel):
    template_name: ClassVar[str] = "status_badge.html"

    status: str
    label: str = ""


class EmptyState(ComponentModel):
    template_name: ClassVar[str] = "empty_state.html"

    message: str
    action: str = ""
    action_url: str = ""


class ConfirmDialog(ComponentModel):
    """Native ``<dialog>`` confirmation."""

    template_name: ClassVar[str] = "confirm_dialog.html"

    id: str
    title: str
    message: str
    confirm_label: str = "Confirm"


class PopoverMenu(ComponentModel):
    """Dropdown built on the Popover API."""

    template_name: ClassVar[str] = "popover_menu.html"

    id: str
    label: str
    content: Html = Markup("")


# Pagination lives in its own module; it renders through pagination.html.
TEMPLATE_FOR_MODEL: dict[type[BaseModel], str] = {
    Pagination: "pagination.html",
}


def template_for(model: BaseModel) -> str:
    """Return the component template name that renders *model*.

    Raises:
        ValueError: If the model has no associated template.
    """
    name = getattr(model, "template_name", "") or TEMPLATE_FOR_MODEL.get(type(model), "")
    if not name:
        msg = f"No component template for {type(model).__name__}"
        raise ValueError(msg)
    return name


def model_for_template(name: str) -> type[BaseModel] | None:
    """Return the view model class rendered by template *name*, if any."""
    for model, template in TEMPLATE_FOR_MODEL.items():
        if template == name:
            return model
    for model in ComponentModel.__subclasses__():
        if model.template_name == name:
            return model
    return None
