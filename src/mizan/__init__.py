"""Mizan — single-user investment tracking with zakat calculation."""

__version__ = "0.1.0"
