"""Money formatting for invoice and debtor tables."""

from typing import Any

from digest_renderer.models import CurrencyAmount


class CurrencyFormatter:
    """
    Formats currency values using a fixed currency code and separators.

    Precedence for structured values: ``formatted`` verbatim, then
    ``amount`` followed by its currency (or the default code). Bare
    numbers get two decimals with the configured separators and the
    default currency code.
    """

    def __init__(
        self,
        currency: str = "CZK",
        decimal_separator: str = ",",
        thousands_separator: str = " ",
    ):
        self.currency = currency
        self.decimal_separator = decimal_separator
        self.thousands_separator = thousands_separator

    def format_number(self, value: float) -> str:
        """Two decimals with the configured separators, e.g. ``1 234,50``."""
        text = f"{float(value):,.2f}"
        whole, fraction = text.split(".")
        whole = whole.replace(",", self.thousands_separator)
        return f"{whole}{self.decimal_separator}{fraction}"

    def format(self, value: Any) -> str:
        """Format a plain number, a mapping or a ``CurrencyAmount``; ``None`` is zero."""
        if value is None:
            value = 0
        elif isinstance(value, dict):
            value = CurrencyAmount.model_validate(value)

        if isinstance(value, CurrencyAmount):
            if value.formatted is not None:
                return value.formatted
            currency = value.currency or self.currency
            if value.amount is None:
                return f"{self.format_number(0)} {currency}"
            return f"{value.amount} {currency}"

        return f"{self.format_number(float(value))} {self.currency}"
