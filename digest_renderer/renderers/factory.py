"""Maps module names to renderer classes."""

from collections.abc import Mapping
from enum import StrEnum
from importlib import import_module
from types import MappingProxyType

from digest_renderer.currency import CurrencyFormatter
from digest_renderer.errors import RendererConfigError
from digest_renderer.logging_config import get_logger
from digest_renderer.themes import Theme

from .base import ModuleRenderer
from .debtors import DebtorsRenderer
from .generic import (
    BestSellersRenderer,
    GenericRenderer,
    NewCustomersRenderer,
    WaitingPaymentsRenderer,
)
from .invoices import IncomingInvoicesRenderer, InvoicesRenderer, OutcomingInvoicesRenderer

logger = get_logger("factory")


class RendererKind(StrEnum):
    """Built-in renderer variants."""

    GENERIC = "generic"
    INVOICES = "invoices"
    OUTCOMING_INVOICES = "outcoming_invoices"
    INCOMING_INVOICES = "incoming_invoices"
    DEBTORS = "debtors"
    NEW_CUSTOMERS = "new_customers"
    BEST_SELLERS = "best_sellers"
    WAITING_PAYMENTS = "waiting_payments"


RENDERER_CLASSES: dict[RendererKind, type[ModuleRenderer]] = {
    RendererKind.GENERIC: GenericRenderer,
    RendererKind.INVOICES: InvoicesRenderer,
    RendererKind.OUTCOMING_INVOICES: OutcomingInvoicesRenderer,
    RendererKind.INCOMING_INVOICES: IncomingInvoicesRenderer,
    RendererKind.DEBTORS: DebtorsRenderer,
    RendererKind.NEW_CUSTOMERS: NewCustomersRenderer,
    RendererKind.BEST_SELLERS: BestSellersRenderer,
    RendererKind.WAITING_PAYMENTS: WaitingPaymentsRenderer,
}

# module name -> renderer variant
DEFAULT_BINDINGS: dict[str, RendererKind] = {
    "outcoming_invoices": RendererKind.OUTCOMING_INVOICES,
    "incoming_invoices": RendererKind.INCOMING_INVOICES,
    "debtors": RendererKind.DEBTORS,
    "new_customers": RendererKind.NEW_CUSTOMERS,
    "best_sellers": RendererKind.BEST_SELLERS,
    "waiting_payments": RendererKind.WAITING_PAYMENTS,
}

RendererId = RendererKind | str | type[ModuleRenderer]


def resolve_renderer(identifier: RendererId) -> type[ModuleRenderer]:
    """
    Resolve a renderer identifier to a class.

    Accepts a ``ModuleRenderer`` subclass, a ``RendererKind`` (or its value)
    or an import path of the form ``"package.module:ClassName"``.

    Raises:
        RendererConfigError: If the identifier cannot be resolved.
    """
    if isinstance(identifier, type):
        if issubclass(identifier, ModuleRenderer):
            return identifier
        raise RendererConfigError(f"{identifier.__name__} is not a ModuleRenderer subclass")

    if not isinstance(identifier, str):
        raise RendererConfigError(f"Invalid renderer identifier: {identifier!r}")

    if identifier in {kind.value for kind in RendererKind}:
        return RENDERER_CLASSES[RendererKind(identifier)]

    module_path, sep, class_name = identifier.partition(":")
    if not sep or not module_path or not class_name:
        raise RendererConfigError(f"Renderer class not found: {identifier}")

    try:
        renderer_class = getattr(import_module(module_path), class_name)
    except (ImportError, AttributeError) as e:
        raise RendererConfigError(f"Renderer class not found: {identifier}") from e

    if not isinstance(renderer_class, type) or not issubclass(renderer_class, ModuleRenderer):
        raise RendererConfigError(f"{identifier} is not a ModuleRenderer subclass")

    return renderer_class


class RendererFactory:
    """Creates the renderer for a module name; unknown names get the generic one."""

    def __init__(self, formatter: CurrencyFormatter | None = None):
        self.formatter = formatter or CurrencyFormatter()
        self._bindings: dict[str, type[ModuleRenderer]] = {
            name: RENDERER_CLASSES[kind] for name, kind in DEFAULT_BINDINGS.items()
        }

    def create_renderer(self, module_name: str, theme: Theme) -> ModuleRenderer:
        """
        Create a renderer bound to ``theme``.

        Raises:
            RendererConfigError: If a registered renderer cannot be instantiated.
        """
        renderer_class = self._bindings.get(module_name)

        if renderer_class is None:
            logger.debug(f"No renderer registered for '{module_name}', using generic")
            return GenericRenderer(theme, module_name, formatter=self.formatter)

        try:
            return renderer_class(theme, formatter=self.formatter)
        except Exception as e:
            raise RendererConfigError(
                f"Cannot create renderer {renderer_class.__name__} for '{module_name}': {e}"
            ) from e

    def register_renderer(self, module_name: str, renderer: RendererId) -> "RendererFactory":
        """Bind a module name to a renderer; the last registration wins."""
        self._bindings[module_name] = resolve_renderer(renderer)
        return self

    def get_registered_renderers(self) -> Mapping[str, type[ModuleRenderer]]:
        """Read-only snapshot of the current bindings."""
        return MappingProxyType(dict(self._bindings))
