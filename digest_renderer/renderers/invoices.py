"""Renderers for the outgoing and incoming invoice modules."""

from digest_renderer.models import (
    CurrencyValue,
    DocumentTypeStats,
    InvoicesData,
    InvoiceSummary,
    ModuleData,
)

from .base import ModuleRenderer


class InvoicesRenderer(ModuleRenderer):
    """Summary, per-currency totals and document type breakdown."""

    default_title = "Invoices"

    def render_success(self, module: ModuleData) -> str:
        data = InvoicesData.model_validate(module.data)
        parts: list[str] = []

        if data.summary is not None:
            parts.append(self.render_summary(data.summary))

        if data.totals_by_currency is not None:
            parts.append(self.render_currency_totals(data.totals_by_currency))

        if data.by_document_type is not None:
            parts.append(self.render_document_types(data.by_document_type))

        return self.theme.render_card(self.title_for(module), "".join(parts))

    def render_summary(self, summary: InvoiceSummary) -> str:
        return self.theme.render_summary(
            "Invoice Summary",
            {
                "Total Invoices": summary.total_count,
                "Active Invoices": summary.active_count,
                "Cancelled Invoices": summary.cancelled_count,
                "Document Types": summary.document_types_count,
                "Currencies": self.join_currencies(summary.currencies),
            },
        )

    def render_currency_totals(self, totals: dict[str, CurrencyValue]) -> str:
        formatted = {code: self.format_currency(value) for code, value in totals.items()}
        return self.theme.render_heading("Totals by Currency") + self.theme.render_summary(
            "Currency Totals", formatted
        )

    def render_document_types(self, doc_types: dict[str, DocumentTypeStats]) -> str:
        currencies = self.currency_columns([stats.totals for stats in doc_types.values()])

        headers = ["Document Type", "Count"] + [f"Total ({code})" for code in currencies]
        rows = [
            [doc_type, stats.count] + [self.currency_cell(stats.totals, code) for code in currencies]
            for doc_type, stats in doc_types.items()
        ]

        return self.theme.render_heading("Breakdown by Document Type") + self.theme.render_table(
            headers, rows
        )


class OutcomingInvoicesRenderer(InvoicesRenderer):
    default_title = "Outcoming Invoices"


class IncomingInvoicesRenderer(InvoicesRenderer):
    default_title = "Incoming Invoices"
