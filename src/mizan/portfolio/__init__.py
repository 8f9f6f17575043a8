"""Portfolio tracking — assets, in-memory store, zakat, and reports."""

from .models import Asset, AssetCategory
from .report import ExportedReport, ExportFormat, export_report, format_money, generate_report
from .store import PortfolioStore
from .zakat import ZAKAT_RATE, StandardZakatCalculator, ZakatCalculator, calculate_zakat

__all__ = [
    "ZAKAT_RATE",
    "Asset",
    "AssetCategory",
    "ExportFormat",
    "ExportedReport",
    "PortfolioStore",
    "StandardZakatCalculator",
    "ZakatCalculator",
    "calculate_zakat",
    "export_report",
    "format_money",
    "generate_report",
]
