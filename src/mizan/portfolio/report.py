"""Plain-text portfolio report.

The "PDF" and "EXCEL" export formats are stand-ins: both produce the same
text body and only differ in the suggested filename. Nothing is written
to disk.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum

from mizan.core.exceptions import ValidationError

from .models import Asset

REPORT_BASENAME = "PortfolioReport"


class ExportFormat(Enum):
    """Report export formats offered to the user."""

    PDF = "PDF"
    EXCEL = "EXCEL"

    @classmethod
    def parse(cls, text: str) -> ExportFormat:
        """Parse user input case-insensitively."""
        key = text.strip().upper()
        try:
            return cls(key)
        except ValueError:
            raise ValidationError("Invalid format selected!") from None

    @property
    def filename(self) -> str:
        return f"{REPORT_BASENAME}.{self.value.lower()}"


@dataclass(frozen=True)
class ExportedReport:
    """Result of an export: the suggested filename and the report text."""

    filename: str
    content: str
    fmt: ExportFormat


def format_money(amount: float, currency: str = "$") -> str:
    """Render an amount with a currency symbol and 2 decimal places."""
    return f"{currency}{amount:.2f}"


def generate_report(assets: Sequence[Asset], currency: str = "$") -> str:
    """Build the portfolio summary text.

    Total value sums purchase prices across every asset, regardless of
    category.
    """
    total_value = sum((asset.purchase_price for asset in assets), 0.0)

    lines = [
        "=== Portfolio Summary ===",
        f"Total Assets: {len(assets)}",
        f"Total Value: {format_money(total_value, currency)}",
        "",
        "Assets Details:",
    ]
    for asset in assets:
        lines.append(
            f"- {asset.name}: {asset.category}, Quantity: {asset.quantity:.2f}, "
            f"Value: {format_money(asset.purchase_price, currency)}"
        )

    return "\n".join(lines) + "\n"


def export_report(
    assets: Sequence[Asset],
    fmt: ExportFormat | str,
    currency: str = "$",
) -> ExportedReport:
    """Generate the report for an export format (enum or user text)."""
    if isinstance(fmt, str):
        fmt = ExportFormat.parse(fmt)

    return ExportedReport(
        filename=fmt.filename,
        content=generate_report(assets, currency),
        fmt=fmt,
    )
