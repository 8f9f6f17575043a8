"""Portfolio data models.

An ``Asset`` records one purchased holding. Values are immutable once
constructed; the add-asset flow validates inputs before building one
(see ``mizan.portfolio.validation``).
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from enum import Enum


class AssetCategory(str, Enum):
    """Closed set of asset categories the tracker accepts."""

    STOCKS = "STOCKS"
    REAL_ESTATE = "REAL_ESTATE"
    GOLD = "GOLD"
    CRYPTO = "CRYPTO"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Asset:
    """Individual holding in the portfolio.

    Attributes:
        name: User-supplied identifier. Not unique; removal matches on it.
        quantity: Units owned.
        category: Asset category.
        purchase_date: Calendar date of purchase.
        purchase_price: Total price paid. Quantity is never multiplied in.
    """

    name: str
    quantity: float
    category: AssetCategory
    purchase_date: date
    purchase_price: float
