"""Core infrastructure — config, exceptions, logging."""
