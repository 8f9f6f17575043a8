"""Input parsing for the add-asset flow.

Each parser takes raw user text and returns a typed value, or raises
``ValidationError`` with the message shown to the user. An ``Asset`` is
only built once every field has parsed.
"""

from __future__ import annotations

import math
import re
from datetime import date

from mizan.core.exceptions import ValidationError

from .models import Asset, AssetCategory

_ISO_DATE = re.compile(r"^\d{4}-\d{2}-\d{2}$")

CATEGORY_CHOICES = "/".join(c.value for c in AssetCategory)


def parse_name(text: str) -> str:
    name = text.strip()
    if not name:
        raise ValidationError("Asset name cannot be empty!")
    return name


def _parse_positive(text: str, message: str) -> float:
    try:
        value = float(text.strip())
    except ValueError:
        raise ValidationError(message) from None
    if not math.isfinite(value) or value <= 0:
        raise ValidationError(message)
    return value


def parse_quantity(text: str) -> float:
    return _parse_positive(text, "Invalid quantity! Enter positive number.")


def parse_price(text: str) -> float:
    return _parse_positive(text, "Invalid price! Enter positive number.")


def parse_category(text: str) -> AssetCategory:
    """Parse a category name, case-insensitively."""
    key = text.strip().upper()
    try:
        return AssetCategory(key)
    except ValueError:
        raise ValidationError("Invalid asset type!") from None


def parse_purchase_date(text: str) -> date:
    """Parse an ISO ``YYYY-MM-DD`` date."""
    raw = text.strip()
    try:
        if not _ISO_DATE.match(raw):
            raise ValueError(raw)
        return date.fromisoformat(raw)
    except ValueError:
        raise ValidationError("Invalid date format! Use YYYY-MM-DD.") from None
