"""Tests for the renderer factory."""

import pytest

from digest_renderer.currency import CurrencyFormatter
from digest_renderer.errors import RendererConfigError
from digest_renderer.renderers import (
    DEFAULT_BINDINGS,
    BestSellersRenderer,
    DebtorsRenderer,
    GenericRenderer,
    InvoicesRenderer,
    ModuleRenderer,
    OutcomingInvoicesRenderer,
    RendererFactory,
    RendererKind,
    resolve_renderer,
)
from digest_renderer.themes import WebTheme


class BrokenRenderer(ModuleRenderer):
    def __init__(self, theme, **kwargs):
        raise RuntimeError("cannot build")

    def render_success(self, module):
        return ""


@pytest.fixture
def factory() -> RendererFactory:
    return RendererFactory()


class TestCreateRenderer:
    def test_known_modules(self, factory: RendererFactory, web_theme: WebTheme):
        assert isinstance(factory.create_renderer("debtors", web_theme), DebtorsRenderer)
        assert isinstance(
            factory.create_renderer("outcoming_invoices", web_theme), OutcomingInvoicesRenderer
        )
        assert isinstance(factory.create_renderer("best_sellers", web_theme), BestSellersRenderer)

    def test_renderer_bound_to_theme(self, factory: RendererFactory, web_theme: WebTheme):
        assert factory.create_renderer("debtors", web_theme).theme is web_theme

    def test_unknown_module_falls_back_to_generic(
        self, factory: RendererFactory, web_theme: WebTheme
    ):
        renderer = factory.create_renderer("warehouse_stock", web_theme)

        assert type(renderer) is GenericRenderer
        assert renderer.get_module_name() == "warehouse_stock"
        assert "warehouse_stock" in renderer.render({"success": True, "data": {}})

    def test_formatter_passed_to_renderers(self, web_theme: WebTheme):
        factory = RendererFactory(formatter=CurrencyFormatter(currency="EUR"))

        assert factory.create_renderer("debtors", web_theme).formatter.currency == "EUR"
        assert factory.create_renderer("anything", web_theme).formatter.currency == "EUR"

    def test_instantiation_failure(self, factory: RendererFactory, web_theme: WebTheme):
        factory.register_renderer("debtors", BrokenRenderer)

        with pytest.raises(RendererConfigError, match="cannot build"):
            factory.create_renderer("debtors", web_theme)


class TestRegisterRenderer:
    def test_returns_factory(self, factory: RendererFactory):
        assert factory.register_renderer("x", RendererKind.GENERIC) is factory

    def test_last_registration_wins(self, factory: RendererFactory, web_theme: WebTheme):
        factory.register_renderer("sales", RendererKind.DEBTORS)
        factory.register_renderer("sales", RendererKind.INVOICES)

        assert type(factory.create_renderer("sales", web_theme)) is InvoicesRenderer

    def test_overrides_default(self, factory: RendererFactory, web_theme: WebTheme):
        factory.register_renderer("debtors", "generic")
        assert type(factory.create_renderer("debtors", web_theme)) is GenericRenderer

    def test_by_class(self, factory: RendererFactory, web_theme: WebTheme):
        factory.register_renderer("receivables", DebtorsRenderer)
        assert isinstance(factory.create_renderer("receivables", web_theme), DebtorsRenderer)

    def test_by_import_path(self, factory: RendererFactory, web_theme: WebTheme):
        factory.register_renderer(
            "receivables", "digest_renderer.renderers.debtors:DebtorsRenderer"
        )
        assert isinstance(factory.create_renderer("receivables", web_theme), DebtorsRenderer)

    @pytest.mark.parametrize(
        "identifier",
        [
            "nope",
            "no_such_package.module:Renderer",
            "digest_renderer.renderers.debtors:Missing",
            "digest_renderer.escaping:humanize",
            dict,
            42,
        ],
    )
    def test_unresolvable_identifier(self, factory: RendererFactory, identifier):
        with pytest.raises(RendererConfigError):
            factory.register_renderer("x", identifier)

        assert "x" not in factory.get_registered_renderers()


class TestRegisteredRenderers:
    def test_defaults(self, factory: RendererFactory):
        registered = factory.get_registered_renderers()

        assert set(registered) == set(DEFAULT_BINDINGS)
        assert registered["debtors"] is DebtorsRenderer

    def test_snapshot_is_read_only(self, factory: RendererFactory):
        registered = factory.get_registered_renderers()

        with pytest.raises(TypeError):
            registered["debtors"] = GenericRenderer  # type: ignore[index]

    def test_snapshot_not_affected_by_later_registration(self, factory: RendererFactory):
        registered = factory.get_registered_renderers()
        factory.register_renderer("sales", RendererKind.GENERIC)

        assert "sales" not in registered
        assert "sales" in factory.get_registered_renderers()


def test_resolve_renderer_kind_values():
    for kind in RendererKind:
        assert issubclass(resolve_renderer(kind.value), ModuleRenderer)
