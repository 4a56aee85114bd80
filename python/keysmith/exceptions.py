"""
Custom exceptions for Keysmith.
"""


class KeysmithException(Exception):
    """Base exception for Keysmith."""

    pass


class ConfigError(KeysmithException, ValueError):
    """Password configuration cannot produce a password."""

    pass


class InvalidLengthError(ConfigError):
    """Requested password length is less than 1."""

    pass


class NoClassSelectedError(ConfigError):
    """No character class is enabled."""

    pass


class EmptyPoolError(ConfigError):
    """Every enabled character class was emptied by exclusion filtering."""

    pass


class ClipboardError(KeysmithException):
    """Clipboard copy failed."""

    pass
