"""Shared fixtures for renderer tests."""

import pytest

from digest_renderer.config import get_settings
from digest_renderer.themes import EmailTheme, WebTheme


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch: pytest.MonkeyPatch):
    """Keep environment overrides from leaking between tests."""
    for name in ("THEME", "CURRENCY", "DECIMAL_SEPARATOR", "THOUSANDS_SEPARATOR",
                 "CUSTOM_CSS", "TEMPLATE_PATH", "LOG_LEVEL"):
        monkeypatch.delenv(f"DIGEST_{name}", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture(params=[WebTheme, EmailTheme], ids=["web", "email"])
def theme(request):
    """Each built-in theme in turn."""
    return request.param()


@pytest.fixture
def web_theme() -> WebTheme:
    return WebTheme()


@pytest.fixture
def invoices_module() -> dict:
    return {
        "success": True,
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
    }


@pytest.fixture
def debtors_module() -> dict:
    return {
        "success": True,
        "heading": "Debtors Overview",
        "data": {
            "summary": {"total_debtors": 3, "total_invoices": 7, "currencies": ["CZK"]},
            "totals_by_currency": {"CZK": 58300},
            "overdue_ranges": {"1-30": 4, "31-60": 2},
            "top_debtors": [
                {
                    "company": "ACME s.r.o.",
                    "invoices_count": 3,
                    "overdue_days_max": 95,
                    "total_amount": {"CZK": 31000},
                },
                {
                    "invoices_count": 1,
                    "overdue_days_max": 12,
                    "total_amount": {"EUR": {"amount": 250, "currency": "EUR"}},
                },
            ],
        },
    }


@pytest.fixture
def sample_digest(invoices_module: dict, debtors_module: dict) -> dict:
    """A digest with two known modules, one generic and one failed module."""
    return {
        "digest": {
            "company": {"name": "Vitex Software"},
            "period": {"start": "2026-10-01", "end": "2026-10-07"},
            "timestamp": "2026-10-08T06:00:00",
        },
        "modules": {
            "outcoming_invoices": invoices_module,
            "debtors": debtors_module,
            "best_sellers": {
                "success": True,
                "data": {
                    "products": [
                        {"code": "SUPPORT", "name": "Support hours", "sold": 120},
                        {"code": "HOSTING", "name": "Hosting", "sold": 36},
                    ],
                },
            },
            "incoming_invoices": {
                "success": False,
                "heading": "Received Invoices",
                "error": {"message": "Connection refused"},
                "data": {"summary": {"total_count": 777}},
            },
        },
    }
