"""In-memory portfolio store.

Holds the authoritative, insertion-ordered list of assets for the current
user. Callers get copies when listing, never the live list.
"""

from __future__ import annotations

import threading

from loguru import logger

from .models import Asset


class PortfolioStore:
    """Ordered collection of assets with add / remove-by-name / list.

    Duplicate names are allowed. ``remove_asset`` deletes only the first
    match per call, so repeated lots of the same holding come off one at
    a time.
    """

    def __init__(self) -> None:
        self._assets: list[Asset] = []
        self._lock = threading.Lock()

    def add_asset(self, asset: Asset) -> None:
        """Append an asset. The store does not validate it."""
        with self._lock:
            self._assets.append(asset)
        logger.debug(f"Added asset {asset.name!r} ({asset.category}, {asset.purchase_price:,.2f})")

    def remove_asset(self, name: str) -> bool:
        """Remove the first asset whose name matches exactly.

        Returns:
            True if an asset was removed, False if none matched.
        """
        with self._lock:
            for index, asset in enumerate(self._assets):
                if asset.name == name:
                    del self._assets[index]
                    logger.debug(f"Removed asset {name!r} at position {index}")
                    return True

        logger.info(f"No asset named {name!r} to remove")
        return False

    def list_assets(self) -> list[Asset]:
        """Return a snapshot of the assets in insertion order."""
        with self._lock:
            return list(self._assets)

    def __len__(self) -> int:
        with self._lock:
            return len(self._assets)
