"""Tests for component view models."""

import pytest
from markupsafe import Markup

from uxr_ds.domain.components import (
    Card,
    Column,
    DataTable,
    EmptyState,
    FormField,
    StatusBadge,
    Tab,
    model_for_template,
    template_for,
)
from uxr_ds.domain.pagination import Pagination, build_pagination


class TestHtmlFields:
    def test_plain_string_becomes_markup(self) -> None:
        table = DataTable(id="t", rows="<tr><td>1</td></tr>")
        assert isinstance(table.rows, Markup)
        assert table.rows == "<tr><td>1</td></tr>"

    def test_markup_kept(self) -> None:
        card = Card(body=Markup("<p>x</p>"))
        assert isinstance(card.body, Markup)

    def test_serializes_as_string(self) -> None:
        data = DataTable(id="t", columns=(Column(label="Name"),), rows="<tr></tr>").model_dump()
        assert data["rows"] == "<tr></tr>"


class TestCard:
    def test_content_preferred_over_body(self) -> None:
        card = Card(body="<p>body</p>", content="<p>content</p>")
        assert card.main == "<p>content</p>"

    def test_body_alias(self) -> None:
        assert Card(body="<p>body</p>").main == "<p>body</p>"

    def test_action_aliases(self) -> None:
        assert Card(header_actions="<a>x</a>").action == "<a>x</a>"
        assert Card(header_action="<a>y</a>", header_actions="<a>x</a>").action == "<a>y</a>"

    def test_frozen(self) -> None:
        card = Card(header="h")
        with pytest.raises(Exception):
            card.header = "other"  # type: ignore[misc]


class TestFormField:
    def test_default_type_is_text(self) -> None:
        assert FormField(id="e", name="email", label="Email").type == "text"

    def test_rejects_unknown_type(self) -> None:
        with pytest.raises(Exception):
            FormField(id="e", name="e", label="E", type="checkbox")


class TestTemplateFor:
    @pytest.mark.parametrize(
        "model,expected",
        [
            (StatusBadge(status="pass"), "status_badge.html"),
            (EmptyState(message="Nothing here"), "empty_state.html"),
            (Card(), "card.html"),
            (build_pagination(1, 3), "pagination.html"),
        ],
    )
    def test_known_models(self, model, expected: str) -> None:
        assert template_for(model) == expected

    def test_model_without_template(self) -> None:
        with pytest.raises(ValueError, match="No component template"):
            template_for(Tab(id="a", label="A"))


class TestModelForTemplate:
    @pytest.mark.parametrize(
        "name,expected",
        [
            ("card.html", Card),
            ("empty_state.html", EmptyState),
            ("data_table.html", DataTable),
            ("pagination.html", Pagination),
        ],
    )
    def test_known_templates(self, name: str, expected: type) -> None:
        assert model_for_template(name) is expected

    def test_unknown_template(self) -> None:
        assert model_for_template("hello.html") is None
