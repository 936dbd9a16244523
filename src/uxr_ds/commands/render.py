"""Command: render a packaged (or overridden) component template."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

import click
from jinja2 import TemplateError, TemplateNotFound
from pydantic import ValidationError

from uxr_ds.commands._base import DsCommand
from uxr_ds.domain.components import model_for_template
from uxr_ds.domain.pagination import Pagination, build_pagination

if TYPE_CHECKING:
    from uxr_ds.commands._context import AppContext


def _parse_vars(pairs: tuple[str, ...]) -> dict[str, Any]:
    """Parse ``key=value`` pairs; values that are valid JSON are decoded."""
    context: dict[str, Any] = {}
    for pair in pairs:
        key, sep, raw = pair.partition("=")
        if not sep or not key:
            msg = f"Expected key=value, got {pair!r}"
            raise click.BadParameter(msg, param_hint="--var")
        try:
            context[key] = json.loads(raw)
        except json.JSONDecodeError:
            context[key] = raw
    return context


def _bind_component(name: str, context: dict[str, Any]) -> dict[str, Any]:
    """Validate a JSON object passed as ``c`` into the template's view model.

    A pagination object without ``page_numbers`` gets its window computed.

    Raises:
        ValidationError: If ``c`` does not fit the view model.
    """
    raw = context.get("c")
    model = model_for_template(name)
    if model is None or not isinstance(raw, dict):
        return context
    component = model.model_validate(raw)
    if isinstance(component, Pagination) and not component.page_numbers:
        component = build_pagination(component.current_page, component.total_pages)
    return {**context, "c": component}


@click.command(
    cls=DsCommand,
    examples="""\
  uxr-ds render empty_state.html --var 'c={"message": "No items yet"}'
  uxr-ds render status_badge.html --var 'c={"status": "pass", "label": "Healthy"}'
  uxr-ds render pagination.html --var 'c={"current_page": 5, "total_pages": 10}'""",
)
@click.argument("name")
@click.option("--var", "variables", multiple=True, help="Template variable as key=value.")
@click.pass_obj
def render(app: AppContext, name: str, variables: tuple[str, ...]) -> None:
    """Render component template NAME with the given variables.

    A JSON object passed as ``c`` to a packaged component is validated
    against that component's view model.
    """
    try:
        context = _bind_component(name, _parse_vars(variables))
    except ValidationError as exc:
        app.fail(f"Invalid component data for {name}: {exc}")
    try:
        output = app.env.get_template(name).render(**context)
    except TemplateNotFound:
        app.fail(f"No component template named {name!r}")
    except TemplateError as exc:
        app.fail(f"Template error in {name}: {exc}")
    app.emit({"name": name, "html": output}, output)
