"""
Data models for digest rendering.

The digest payload is produced elsewhere and arrives as plain mappings.
These models give the renderers typed access while staying lenient: a
missing or oddly shaped metadata field degrades to a placeholder instead
of failing the whole render.
"""

from datetime import date, datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _as_text(value: Any) -> Any:
    """Stringify dates and numbers so they can be shown as-is."""
    if isinstance(value, datetime | date):
        return value.isoformat()
    if isinstance(value, int | float) and not isinstance(value, bool):
        return str(value)
    return value


def _as_label(value: Any) -> str | None:
    """Any non-null value as display text."""
    if value is None or isinstance(value, str):
        return value
    return str(_as_text(value))


class _Lenient(BaseModel):
    model_config = ConfigDict(extra="allow")


# Digest metadata

class Company(_Lenient):
    name: str | None = None

    @field_validator("name", mode="before")
    @classmethod
    def _name_text(cls, value: Any) -> Any:
        return _as_text(value)


class Period(_Lenient):
    start: str | None = None
    end: str | None = None

    @field_validator("start", "end", mode="before")
    @classmethod
    def _date_text(cls, value: Any) -> Any:
        return _as_text(value)


class DigestMeta(_Lenient):
    """Header and footer information for one digest."""

    company: Company = Field(default_factory=Company)
    period: Period = Field(default_factory=Period)
    timestamp: str | None = None

    @field_validator("company", "period", mode="before")
    @classmethod
    def _mapping_or_empty(cls, value: Any) -> Any:
        return value if isinstance(value, dict) else {}

    @field_validator("timestamp", mode="before")
    @classmethod
    def _timestamp_text(cls, value: Any) -> Any:
        return _as_text(value)


# Modules

class ModuleError(_Lenient):
    message: str | None = None

    @field_validator("message", mode="before")
    @classmethod
    def _message_text(cls, value: Any) -> Any:
        return _as_label(value)


class ModuleData(_Lenient):
    """
    One named section of a digest, as reported by its producer.

    Only ``data`` feeds the success path, so it degrades to an empty mapping
    when it is not one; ``heading`` and ``error`` are coerced to text.
    """

    success: bool = False
    module_name: str | None = None
    heading: str | None = None
    error: ModuleError | None = None
    data: dict[str, Any] = Field(default_factory=dict)

    @field_validator("success", mode="before")
    @classmethod
    def _truthy(cls, value: Any) -> bool:
        return bool(value)

    @field_validator("module_name", "heading", mode="before")
    @classmethod
    def _label_text(cls, value: Any) -> Any:
        return _as_label(value)

    @field_validator("error", mode="before")
    @classmethod
    def _error_mapping(cls, value: Any) -> Any:
        if value is None or isinstance(value, dict | ModuleError):
            return value
        return {"message": value}

    @field_validator("data", mode="before")
    @classmethod
    def _data_mapping(cls, value: Any) -> Any:
        return value if isinstance(value, dict) else {}


class CurrencyAmount(_Lenient):
    """Structured money value; ``formatted`` wins over ``amount``."""

    amount: int | float | None = None
    currency: str | None = None
    formatted: str | None = None


# A null amount formats as zero in the default currency.
CurrencyValue = CurrencyAmount | int | float | None


def _currency_map(value: Any) -> Any:
    return {} if value is None else value


def _codes(value: Any) -> Any:
    if not isinstance(value, list):
        return value
    return [_as_label(code) for code in value if code is not None]


# Invoice modules
#
# Counts are optional; a null count renders as an empty cell.

class InvoiceSummary(_Lenient):
    total_count: int | None = 0
    active_count: int | None = 0
    cancelled_count: int | None = 0
    document_types_count: int | None = 0
    currencies: list[str] | None = None

    @field_validator("currencies", mode="before")
    @classmethod
    def _currency_codes(cls, value: Any) -> Any:
        return _codes(value)


class DocumentTypeStats(_Lenient):
    count: int | None = 0
    totals: dict[str, CurrencyValue] = Field(default_factory=dict)

    @field_validator("totals", mode="before")
    @classmethod
    def _totals_mapping(cls, value: Any) -> Any:
        return _currency_map(value)


class InvoicesData(_Lenient):
    summary: InvoiceSummary | None = None
    totals_by_currency: dict[str, CurrencyValue] | None = None
    by_document_type: dict[str, DocumentTypeStats] | None = None

    @field_validator("by_document_type", mode="before")
    @classmethod
    def _null_stats(cls, value: Any) -> Any:
        if isinstance(value, dict):
            return {name: {} if stats is None else stats for name, stats in value.items()}
        return value


# Debtors module

class DebtorSummary(_Lenient):
    total_debtors: int | None = 0
    total_invoices: int | None = 0
    currencies: list[str] | None = None

    @field_validator("currencies", mode="before")
    @classmethod
    def _currency_codes(cls, value: Any) -> Any:
        return _codes(value)


class Debtor(_Lenient):
    company: str | None = None
    invoices_count: int | None = 0
    overdue_days_max: int | None = 0
    total_amount: dict[str, CurrencyValue] = Field(default_factory=dict)

    @field_validator("company", mode="before")
    @classmethod
    def _company_text(cls, value: Any) -> Any:
        return _as_label(value)

    @field_validator("total_amount", mode="before")
    @classmethod
    def _amount_mapping(cls, value: Any) -> Any:
        return _currency_map(value)


class DebtorsData(_Lenient):
    summary: DebtorSummary | None = None
    totals_by_currency: dict[str, CurrencyValue] | None = None
    overdue_ranges: dict[str, int | str | None] | None = None
    top_debtors: list[Debtor] | None = None

    @field_validator("top_debtors", mode="before")
    @classmethod
    def _skip_null_rows(cls, value: Any) -> Any:
        if isinstance(value, list):
            return [debtor for debtor in value if debtor is not None]
        return value
