"""Debtors module renderer."""

from digest_renderer.models import CurrencyValue, Debtor, DebtorsData, DebtorSummary, ModuleData

from .base import ModuleRenderer


class DebtorsRenderer(ModuleRenderer):
    """Outstanding receivables: totals, overdue buckets and the worst payers."""

    default_title = "Debtors"

    def render_success(self, module: ModuleData) -> str:
        data = DebtorsData.model_validate(module.data)
        parts: list[str] = []

        if data.summary is not None:
            parts.append(self.render_summary(data.summary))

        if data.totals_by_currency is not None:
            parts.append(self.render_currency_totals(data.totals_by_currency))

        if data.overdue_ranges is not None:
            parts.append(self.render_overdue_ranges(data.overdue_ranges))

        if data.top_debtors is not None:
            parts.append(self.render_top_debtors(data.top_debtors))

        return self.theme.render_card(self.title_for(module), "".join(parts))

    def render_summary(self, summary: DebtorSummary) -> str:
        return self.theme.render_summary(
            "Debtor Summary",
            {
                "Total Debtors": summary.total_debtors,
                "Total Invoices": summary.total_invoices,
                "Currencies": self.join_currencies(summary.currencies),
            },
        )

    def render_currency_totals(self, totals: dict[str, CurrencyValue]) -> str:
        formatted = {code: self.format_currency(value) for code, value in totals.items()}
        return self.theme.render_heading("Total Outstanding by Currency") + self.theme.render_summary(
            "Outstanding Amounts", formatted
        )

    def render_overdue_ranges(self, ranges: dict[str, int | str]) -> str:
        rows = [[f"{period} days", count] for period, count in ranges.items()]
        return self.theme.render_heading("Invoices by Overdue Period") + self.theme.render_table(
            ["Overdue Period", "Number of Invoices"], rows
        )

    def render_top_debtors(self, debtors: list[Debtor]) -> str:
        heading = self.theme.render_heading("Top Debtors")
        if not debtors:
            return heading + self.theme.render_note("No debtors data available")

        currencies = self.currency_columns([debtor.total_amount for debtor in debtors])

        headers = ["Company", "Invoices Count", "Max Overdue Days"]
        headers += [f"Amount ({code})" for code in currencies]

        rows = [
            [debtor.company or "Unknown", debtor.invoices_count, debtor.overdue_days_max]
            + [self.currency_cell(debtor.total_amount, code) for code in currencies]
            for debtor in debtors
        ]

        return heading + self.theme.render_table(headers, rows)
