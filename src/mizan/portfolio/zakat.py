"""
Zakat Calculator — flat-rate annual obligatory charity on holdings.

Implements the standard rule used by the tracker:
- 2.5% of the recorded purchase price of every eligible holding
- Crypto holdings are excluded from the zakatable base
- Any other category (including values outside AssetCategory) is included

Amounts are returned unrounded; rounding to 2dp is a display concern.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Protocol, runtime_checkable

from loguru import logger

from .models import Asset, AssetCategory

# === Zakat Constants ===

ZAKAT_RATE = 0.025  # 2.5% - standard zakat rate on zakatable wealth

EXCLUDED_CATEGORIES = frozenset({AssetCategory.CRYPTO.value.casefold()})


def _category_name(category: AssetCategory | str) -> str:
    """Normalize a category (enum member or raw string) for comparison."""
    if isinstance(category, AssetCategory):
        category = category.value
    return str(category).casefold()


def is_zakatable(asset: Asset) -> bool:
    """True when the asset counts toward the zakatable base."""
    return _category_name(asset.category) not in EXCLUDED_CATEGORIES


def zakatable_total(assets: Iterable[Asset]) -> float:
    """Sum of purchase prices over zakatable assets."""
    return sum((asset.purchase_price for asset in assets if is_zakatable(asset)), 0.0)


def calculate_zakat(assets: Iterable[Asset], rate: float = ZAKAT_RATE) -> float:
    """Calculate zakat due on a snapshot of assets.

    Empty input yields 0.0.
    """
    base = zakatable_total(assets)
    zakat = base * rate

    logger.debug(f"Zakat: base ${base:,.2f} x {rate:.2%} = ${zakat:,.4f}")

    return zakat


@runtime_checkable
class ZakatCalculator(Protocol):
    """Interface for zakat calculation strategies."""

    def calculate_zakat(self, assets: Iterable[Asset]) -> float:
        """Return the total zakat due for the given assets."""
        ...


class StandardZakatCalculator:
    """Standard zakat strategy: flat rate, crypto excluded."""

    def __init__(self, rate: float = ZAKAT_RATE):
        if rate < 0:
            raise ValueError("Zakat rate must not be negative")
        self.rate = rate

    def calculate_zakat(self, assets: Iterable[Asset]) -> float:
        return calculate_zakat(assets, self.rate)
