"""Render a sample digest and print the HTML."""

import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from rich.console import Console

from digest_renderer import DigestRenderer
from digest_renderer.config import get_settings
from digest_renderer.logging_config import setup_logging


def create_sample_digest() -> dict:
    """Create a sample digest covering every built-in renderer."""
    return {
        "digest": {
            "company": {"name": "Vitex Software"},
            "period": {"start": "2026-10-01", "end": "2026-10-07"},
            "timestamp": "2026-10-08T06:00:00",
        },
        "modules": {
            "outcoming_invoices": {
                "success": True,
                "heading": "Issued Invoices",
                "data": {
                    "summary": {
                        "total_count": 42,
                        "active_count": 40,
                        "cancelled_count": 2,
                        "document_types_count": 2,
                        "currencies": ["CZK", "EUR"],
                    },
                    "totals_by_currency": {
                        "CZK": {"amount": 125000.5, "currency": "CZK"},
                        "EUR": {"formatted": "4 200,00 €"},
                    },
                    "by_document_type": {
                        "FAKTURA": {"count": 38, "totals": {"CZK": 120000.5, "EUR": 4200}},
                        "ZALOHA": {"count": 4, "totals": {"CZK": 5000}},
                    },
                },
            },
            "debtors": {
                "success": True,
                "data": {
                    "summary": {"total_debtors": 3, "total_invoices": 7, "currencies": ["CZK"]},
                    "totals_by_currency": {"CZK": 58300},
                    "overdue_ranges": {"1-30": 4, "31-60": 2, "90+": 1},
                    "top_debtors": [
                        {
                            "company": "ACME s.r.o.",
                            "invoices_count": 3,
                            "overdue_days_max": 95,
                            "total_amount": {"CZK": 31000},
                        },
                        {
                            "company": "Widgets a.s.",
                            "invoices_count": 2,
                            "overdue_days_max": 40,
                            "total_amount": {"CZK": 18300},
                        },
                    ],
                },
            },
            "best_sellers": {
                "success": True,
                "data": {
                    "products": [
                        {"code": "SUPPORT", "name": "Support hours", "sold": 120},
                        {"code": "HOSTING", "name": "Hosting", "sold": 36},
                    ],
                    "period_note": "Services only",
                },
            },
            "incoming_invoices": {
                "success": False,
                "error": {"message": "AbraFlexi connection refused"},
            },
        },
    }


def main() -> None:
    """Print the sample digest rendered with the requested theme."""
    settings = get_settings()
    setup_logging(settings.log_level)

    theme = sys.argv[1] if len(sys.argv) > 1 else settings.theme
    console = Console(stderr=True)

    renderer = DigestRenderer(theme=theme)
    html = renderer.render(create_sample_digest())

    console.print(f"Rendered with theme '{renderer.theme.get_name()}': {len(html)} chars")
    sys.stdout.write(html)


if __name__ == "__main__":
    main()
