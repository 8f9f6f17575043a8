"""User registration, session state, and simulated account connections."""

from .connections import ConnectionResult, connect_bank, connect_brokerage
from .users import Session, UserRegistry

__all__ = [
    "ConnectionResult",
    "Session",
    "UserRegistry",
    "connect_bank",
    "connect_brokerage",
]
