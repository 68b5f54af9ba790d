"""Built-in themes and lookup by name."""

from digest_renderer.errors import ThemeNotFoundError

from .base import TEMPLATE_DIR, Theme
from .email import EmailTheme
from .web import WebTheme

THEME_NAMES: tuple[str, ...] = ("web", "bootstrap", "default", "email")


def get_theme(name: str) -> Theme:
    """Create a built-in theme by name."""
    match name:
        case "web" | "bootstrap" | "default":
            return WebTheme()
        case "email":
            return EmailTheme()
        case _:
            raise ThemeNotFoundError(name)


__all__ = [
    "EmailTheme",
    "TEMPLATE_DIR",
    "THEME_NAMES",
    "Theme",
    "WebTheme",
    "get_theme",
]
