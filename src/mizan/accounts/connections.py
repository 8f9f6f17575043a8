"""Simulated bank and brokerage connections.

No network I/O happens here: a connection "succeeds" when the supplied
details have the right shape.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from loguru import logger

CARD_NUMBER_PATTERN = re.compile(r"^\d{16}$")
OTP_PATTERN = re.compile(r"^\d{6}$")

SUPPORTED_BROKERAGES = frozenset({"BINANCE", "THNDR"})
MIN_API_KEY_LENGTH = 20


@dataclass(frozen=True)
class ConnectionResult:
    """Outcome of a connection attempt."""

    connected: bool
    institution: str
    message: str


def connect_bank(bank_name: str, card_number: str, otp: str) -> ConnectionResult:
    """Connect a bank account given a 16-digit card number and 6-digit OTP."""
    bank_name = bank_name.strip()
    card_number = card_number.strip()
    otp = otp.strip()

    if CARD_NUMBER_PATTERN.match(card_number) and OTP_PATTERN.match(otp):
        # Only the last four digits ever reach the log
        logger.info(f"Connected bank {bank_name!r} (card ending {card_number[-4:]})")
        return ConnectionResult(True, bank_name, "Bank account connected successfully!")

    logger.info(f"Bank connection to {bank_name!r} rejected")
    return ConnectionResult(False, bank_name, "Invalid input! Connection failed.")


def connect_brokerage(
    platform: str,
    api_key: str,
    min_api_key_length: int = MIN_API_KEY_LENGTH,
) -> ConnectionResult:
    """Connect a brokerage / exchange account by platform name and API key."""
    platform = platform.strip().upper()
    api_key = api_key.strip()

    if platform in SUPPORTED_BROKERAGES and len(api_key) >= min_api_key_length:
        logger.info(f"Connected brokerage {platform}")
        return ConnectionResult(True, platform, "Stock account connected successfully!")

    logger.info(f"Brokerage connection to {platform!r} rejected")
    return ConnectionResult(False, platform, "Invalid credentials! Connection failed.")
