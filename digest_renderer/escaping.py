"""HTML escaping and display helpers shared by themes and renderers."""

import json
from collections.abc import Mapping
from typing import Any

from markupsafe import Markup, escape


def escape_html(value: Any) -> str:
    """Escape text for safe embedding in HTML element content or attributes."""
    return str(escape(value))


def trusted(html: str) -> Markup:
    """Mark already-rendered markup so templates embed it without escaping."""
    return Markup(html)


def humanize(key: Any) -> str:
    """
    Turn a data key into a display label.

    Underscores become spaces and each word gets an upper-case first letter;
    the rest of each word is left alone so codes like ``CZK`` survive.
    """
    words = str(key).replace("_", " ").split(" ")
    return " ".join(word[:1].upper() + word[1:] for word in words)


def display_value(value: Any) -> str:
    """Convert an arbitrary data value into text for a summary or table cell."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Mapping | list | tuple):
        return json.dumps(value, ensure_ascii=False, separators=(",", ":"), default=str)
    return str(value)
