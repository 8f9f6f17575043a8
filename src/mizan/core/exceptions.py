"""
Mizan exception hierarchy.

All mizan exceptions inherit from MizanError, making it easy for the
command layer to catch library-level errors while still distinguishing
specific failure modes.
"""


class MizanError(Exception):
    """Base exception class for all mizan errors."""


class ConfigurationError(MizanError):
    """Raised for configuration errors (unreadable file, invalid values)."""


class ValidationError(MizanError):
    """Raised when user-supplied input fails validation.

    The message is user-facing and is printed verbatim by the menu.
    """


class AuthenticationError(MizanError):
    """Raised for authentication errors."""
