"""Base class for module renderers."""

import re
from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any

from digest_renderer.currency import CurrencyFormatter
from digest_renderer.models import ModuleData
from digest_renderer.themes import Theme

UNKNOWN_ERROR = "Unknown error occurred"

_CAMEL_BOUNDARY = re.compile(r"([a-z0-9])([A-Z])")


class ModuleRenderer(ABC):
    """
    Turns one digest module into an HTML fragment using theme primitives.

    Subclasses implement ``render_success``; declared failures
    (``success`` false) are handled here.
    """

    default_title: str | None = None

    def __init__(
        self,
        theme: Theme,
        module_name: str = "",
        formatter: CurrencyFormatter | None = None,
    ):
        self.theme = theme
        self.formatter = formatter or CurrencyFormatter()
        self._module_name = module_name

    def __repr__(self) -> str:
        return f"{type(self).__name__}(module_name={self.module_name!r}, theme={self.theme!r})"

    @property
    def module_name(self) -> str:
        return self.get_module_name()

    def get_module_name(self) -> str:
        """Configured name, or the class name without ``Renderer`` in snake_case."""
        if self._module_name:
            return self._module_name
        base = type(self).__name__.removesuffix("Renderer")
        return _CAMEL_BOUNDARY.sub(r"\1_\2", base).lower()

    def render(self, module_data: ModuleData | Mapping[str, Any]) -> str:
        """Render a module, or its error box when the module reports failure."""
        if not isinstance(module_data, ModuleData):
            if not module_data.get("success"):
                # the error box never looks at data
                module_data = {key: value for key, value in module_data.items() if key != "data"}
            module_data = ModuleData.model_validate(module_data)

        if not module_data.success:
            return self.render_error(module_data)

        return self.render_success(module_data)

    @abstractmethod
    def render_success(self, module: ModuleData) -> str:
        """HTML for a module that reported success."""

    def render_error(self, module: ModuleData) -> str:
        title = module.heading or self.get_module_name()
        message = (module.error.message if module.error else None) or UNKNOWN_ERROR
        return self.theme.render_error(title, message)

    def title_for(self, module: ModuleData) -> str:
        return module.heading or self.default_title or self.get_module_name()

    def format_currency(self, value: Any) -> str:
        return self.formatter.format(value)

    @staticmethod
    def join_currencies(currencies: list[str] | None) -> str:
        return ", ".join(currencies) if currencies is not None else "N/A"

    def currency_columns(self, totals: list[dict[str, Any]]) -> list[str]:
        """Currency codes across several ``{code: amount}`` maps, first-seen order."""
        codes: dict[str, None] = {}
        for mapping in totals:
            codes.update(dict.fromkeys(mapping))
        return list(codes)

    def currency_cell(self, totals: Mapping[str, Any], code: str) -> str:
        value = totals.get(code)
        return "-" if value is None else self.format_currency(value)
