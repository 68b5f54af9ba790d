"""Web page theme: card grid with an embedded stylesheet."""

from .base import Theme


class WebTheme(Theme):
    """Bootstrap-like layout for viewing a digest in a browser."""

    name = "web"
    table_class = "table table-striped"
    card_class = "card"
