"""
Module renderers.

One renderer per known module kind plus a generic fallback, all building
their output from theme primitives.
"""

from .base import ModuleRenderer
from .debtors import DebtorsRenderer
from .factory import (
    DEFAULT_BINDINGS,
    RENDERER_CLASSES,
    RendererFactory,
    RendererKind,
    resolve_renderer,
)
from .generic import (
    BestSellersRenderer,
    GenericRenderer,
    NewCustomersRenderer,
    WaitingPaymentsRenderer,
)
from .invoices import IncomingInvoicesRenderer, InvoicesRenderer, OutcomingInvoicesRenderer

__all__ = [
    "BestSellersRenderer",
    "DEFAULT_BINDINGS",
    "DebtorsRenderer",
    "GenericRenderer",
    "IncomingInvoicesRenderer",
    "InvoicesRenderer",
    "ModuleRenderer",
    "NewCustomersRenderer",
    "OutcomingInvoicesRenderer",
    "RENDERER_CLASSES",
    "RendererFactory",
    "RendererKind",
    "WaitingPaymentsRenderer",
    "resolve_renderer",
]
