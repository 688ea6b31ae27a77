class CivilTimeError(Exception):
    """Base error."""

class CivilRangeError(CivilTimeError, OverflowError):
    """Raised when a result leaves the documented 64-bit range (strict mode only)."""

class ConfigError(CivilTimeError, ValueError):
    """Raised when a CIVILTIME_* setting cannot be parsed."""
