"""
Generic module renderer.

Used for any module without a dedicated renderer. Each field of the
module data is rendered by shape: lists of records become tables, other
mappings become summary boxes and scalars become ``label: value`` lines.
"""

from collections.abc import Mapping, Sequence
from typing import Any

from digest_renderer.escaping import humanize
from digest_renderer.models import ModuleData

from .base import ModuleRenderer


def is_table_data(value: Any) -> bool:
    """A non-empty sequence whose first item is a non-empty mapping."""
    if isinstance(value, str | bytes) or not isinstance(value, Sequence) or not value:
        return False
    first = value[0]
    return isinstance(first, Mapping) and bool(first)


class GenericRenderer(ModuleRenderer):
    """Shape-driven renderer for unknown modules."""

    def render_success(self, module: ModuleData) -> str:
        data = module.data
        parts: list[str] = []

        summary = data.get("summary")
        if summary is not None:
            if isinstance(summary, Mapping):
                parts.append(self.theme.render_summary("Summary", summary))
            else:
                parts.append(self.theme.render_field("Summary", summary))

        for key, value in data.items():
            if key == "summary":
                continue

            label = humanize(key)
            if is_table_data(value):
                parts.append(self.theme.render_heading(label))
                parts.append(self.render_records(value))
            elif isinstance(value, Mapping):
                parts.append(self.theme.render_summary(label, value))
            else:
                parts.append(self.theme.render_field(label, value))

        return self.theme.render_card(self.title_for(module), "".join(parts))

    def render_records(self, records: Sequence[Any]) -> str:
        """Table with the first record's keys as columns."""
        headers = list(records[0].keys())
        rows = [
            [record.get(header, "") for header in headers]
            for record in records
            if isinstance(record, Mapping)
        ]
        return self.theme.render_table(headers, rows)


class NewCustomersRenderer(GenericRenderer):
    default_title = "New Customers"


class BestSellersRenderer(GenericRenderer):
    default_title = "Best Sellers"


class WaitingPaymentsRenderer(GenericRenderer):
    default_title = "Waiting Payments"
