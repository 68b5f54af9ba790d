"""
Digest renderer.

Turns structured business digests (invoices, debtors, sales modules)
into HTML using a pluggable theme and per-module renderers.
"""

from typing import Any

from .currency import CurrencyFormatter
from .errors import (
    DigestRendererError,
    DigestValidationError,
    RendererConfigError,
    ThemeNotFoundError,
)
from .renderer import DigestRenderer
from .renderers import ModuleRenderer, RendererFactory, RendererKind
from .themes import EmailTheme, Theme, WebTheme, get_theme

__all__ = [
    "CurrencyFormatter",
    "DigestRenderer",
    "DigestRendererError",
    "DigestValidationError",
    "EmailTheme",
    "ModuleRenderer",
    "RendererConfigError",
    "RendererFactory",
    "RendererKind",
    "Theme",
    "ThemeNotFoundError",
    "WebTheme",
    "get_theme",
    "render_digest",
]


def render_digest(digest_data: Any, **kwargs) -> str:
    """Convenience function to render a digest with a one-off renderer."""
    renderer = DigestRenderer(**kwargs)
    return renderer.render(digest_data)
