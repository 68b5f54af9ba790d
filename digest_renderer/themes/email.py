"""
Email theme.

Table-based layout and simple class selectors so the output survives email
clients that ignore CSS grid, flexbox and most of the ``<head>``.
"""

from .base import Theme


class EmailTheme(Theme):
    """Email-client-safe layout built from nested tables."""

    name = "email"
    table_class = "data-table"
    card_class = "module-card"
