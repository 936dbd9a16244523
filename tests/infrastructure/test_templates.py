"""Tests for the shared Jinja2 environment and component rendering."""

from __future__ import annotations

from pathlib import Path

import pytest
from jinja2 import Environment

from uxr_ds.config.models import PluginsConfig, TemplatesConfig
from uxr_ds.config.settings import DsSettings
from uxr_ds.domain.components import (
    Card,
    DataTable,
    EmptyState,
    FormField,
    Metric,
    MetricsGrid,
    SelectOption,
    StatusBadge,
    Tab,
    Tabs,
)
from uxr_ds.domain.pagination import build_pagination
from uxr_ds.domain.timefmt import Clock
from uxr_ds.infrastructure.templates import (
    build_template_environment,
    collect_template_functions,
    render_component,
)


class TestBuildEnvironment:
    def test_helpers_installed(self, env: Environment) -> None:
        out = env.from_string("{{ formatNumber(1000) }} {{ truncate('hello world', 8) }}").render()
        assert out == "1,000 hello..."

    def test_autoescape_on_by_default(self, env: Environment) -> None:
        assert env.from_string("{{ x }}").render(x="<i>") == "&lt;i&gt;"

    def test_autoescape_configurable(self, _isolated_cwd: Path) -> None:
        settings = DsSettings.load(
            templates=TemplatesConfig(autoescape=False),
            plugins=PluginsConfig(enabled=False),
        )
        env = build_template_environment(settings)
        assert env.from_string("{{ x }}").render(x="<i>") == "<i>"

    def test_extra_funcs_override_shared(self, settings: DsSettings) -> None:
        env = build_template_environment(settings, extra_funcs={"formatNumber": lambda n: "N"})
        assert env.from_string("{{ formatNumber(5) }}").render() == "N"

    def test_packaged_component_loadable(self, env: Environment) -> None:
        assert env.get_template("card.html") is not None

    def test_override_dir_shadows_packaged(self, _isolated_cwd: Path) -> None:
        override = _isolated_cwd / "overrides"
        override.mkdir()
        (override / "card.html").write_text("custom {{ c.header }}")
        settings = DsSettings.load(
            templates=TemplatesConfig(override_dir=override),
            plugins=PluginsConfig(enabled=False),
        )
        env = build_template_environment(settings)
        assert render_component(env, Card(header="Hi")) == "custom Hi"
        # Components not overridden still come from the package.
        assert "empty-state" in render_component(env, EmptyState(message="none"))

    def test_default_settings_discovered(self, _isolated_cwd: Path) -> None:
        (_isolated_cwd / "uxr-ds.toml").write_text("[plugins]\nenabled = false\n")
        env = build_template_environment()
        assert "formatDate" in env.globals


class TestCollectTemplateFunctions:
    def test_layers(self, settings: DsSettings) -> None:
        funcs = collect_template_functions(settings, extra_funcs={"shout": str.upper})
        assert funcs["shout"]("a") == "A"
        assert "formatNumber" in funcs

    def test_local_plugin_functions_included(self, _isolated_cwd: Path) -> None:
        plugin_dir = _isolated_cwd / "plugins"
        plugin_dir.mkdir()
        (plugin_dir / "currency.py").write_text(
            "from uxr_ds.plugins import hookimpl\n"
            "\n"
            "class CurrencyPlugin:\n"
            "    @hookimpl\n"
            "    def register_template_functions(self):\n"
            "        return {'currency': lambda n: f'${n}'}\n"
        )
        settings = DsSettings.load(plugins=PluginsConfig(local_dir=plugin_dir))
        funcs = collect_template_functions(settings)
        assert funcs["currency"](5) == "$5"

    def test_clock_passed_through(self, settings: DsSettings, fixed_clock: Clock) -> None:
        funcs = collect_template_functions(settings, clock=fixed_clock)
        assert funcs["now"]() == fixed_clock()


class TestRenderComponents:
    def test_pagination_middle(self, env: Environment) -> None:
        html = render_component(env, build_pagination(5, 10))
        assert 'aria-current="page">5<' in html
        assert html.count("page-gap") == 2
        assert 'href="?page=4"' in html
        assert 'href="?page=10"' in html
        assert 'rel="prev"' in html and 'rel="next"' in html

    def test_pagination_first_page_disables_previous(self, env: Environment) -> None:
        html = render_component(env, build_pagination(1, 3))
        assert 'aria-disabled="true">Previous' in html
        assert "page-gap" not in html

    def test_single_page_renders_nothing(self, env: Environment) -> None:
        assert render_component(env, build_pagination(1, 1)).strip() == ""

    def test_card_markup_not_escaped(self, env: Environment) -> None:
        html = render_component(env, Card(header="<Title>", body="<p>body</p>", elevated=True))
        assert "<p>body</p>" in html
        assert "&lt;Title&gt;" in html
        assert "card-elevated" in html

    def test_status_badge_label_falls_back_to_status(self, env: Environment) -> None:
        assert ">pass<" in render_component(env, StatusBadge(status="pass"))
        assert ">Healthy<" in render_component(env, StatusBadge(status="pass", label="Healthy"))

    def test_status_badge_class(self, env: Environment) -> None:
        assert "badge-warn" in render_component(env, StatusBadge(status="WARN"))

    def test_metrics_grid(self, env: Environment) -> None:
        grid = MetricsGrid(id="m", metrics=(Metric(id="users", value="1,024", label="Users"),))
        html = render_component(env, grid)
        assert 'id="users"' in html
        assert "1,024" in html

    def test_data_table(self, env: Environment) -> None:
        table = DataTable(id="t", rows="<tr><td>row</td></tr>")
        assert "<tr><td>row</td></tr>" in render_component(env, table)

    def test_tabs_first_selected(self, env: Environment) -> None:
        tabs = Tabs(tabs=(Tab(id="a", label="A"), Tab(id="b", label="B")))
        html = render_component(env, tabs)
        assert 'data-tab="a" aria-selected="true"' in html
        assert 'data-tab="b" aria-selected="false"' in html
        assert 'id="panel-b" role="tabpanel" hidden' in html

    def test_select_field(self, env: Environment) -> None:
        field = FormField(
            id="f",
            name="f",
            label="Fruit",
            type="select",
            required=True,
            options=(SelectOption(value="a", label="Apple"),),
        )
        html = render_component(env, field)
        assert "<select" in html
        assert '<option value="a">Apple</option>' in html
        assert "required" in html

    def test_explicit_template_name(self, env: Environment) -> None:
        html = render_component(env, EmptyState(message="Nothing"), name="empty_state.html")
        assert "Nothing" in html

    def test_model_without_template_raises(self, env: Environment) -> None:
        with pytest.raises(ValueError):
            render_component(env, Tab(id="a", label="A"))
