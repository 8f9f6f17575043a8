"""Tests for mizan.portfolio.report."""

from datetime import date

import pytest

from mizan.core.exceptions import ValidationError
from mizan.portfolio.models import Asset, AssetCategory
from mizan.portfolio.report import ExportFormat, export_report, format_money, generate_report


class TestFormatMoney:
    def test_two_decimals(self):
        assert format_money(37.5) == "$37.50"

    def test_custom_currency(self):
        assert format_money(1234.567, "€") == "€1234.57"


class TestGenerateReport:
    def test_empty(self):
        report = generate_report([])
        assert "Total Assets: 0" in report
        assert "Total Value: $0.00" in report

    def test_totals_include_crypto(self, aapl, btc):
        report = generate_report([aapl, btc])
        assert report.startswith("=== Portfolio Summary ===\n")
        assert "Total Assets: 2" in report
        assert "Total Value: $21500.00" in report

    def test_detail_lines_in_order(self, aapl, btc):
        lines = generate_report([btc, aapl]).splitlines()
        details = lines[lines.index("Assets Details:") + 1 :]
        assert details == [
            "- BTC: CRYPTO, Quantity: 0.50, Value: $20000.00",
            "- AAPL: STOCKS, Quantity: 10.00, Value: $1500.00",
        ]

    def test_currency(self, aapl):
        assert "Value: €1500.00" in generate_report([aapl], currency="€")


class TestExport:
    @pytest.mark.parametrize(
        ("text", "fmt", "filename"),
        [
            ("PDF", ExportFormat.PDF, "PortfolioReport.pdf"),
            (" excel ", ExportFormat.EXCEL, "PortfolioReport.excel"),
        ],
    )
    def test_formats(self, aapl, text, fmt, filename):
        exported = export_report([aapl], text)
        assert exported.fmt is fmt
        assert exported.filename == filename
        assert exported.content == generate_report([aapl])

    def test_enum_accepted(self, aapl):
        assert export_report([aapl], ExportFormat.PDF).filename == "PortfolioReport.pdf"

    def test_invalid_format(self, aapl):
        with pytest.raises(ValidationError, match="Invalid format"):
            export_report([aapl], "DOCX")

    def test_string_category_rendered_verbatim(self):
        asset = Asset("Coin", 1, "crypto", date(2023, 1, 1), 10.0)
        assert "- Coin: crypto," in generate_report([asset])
