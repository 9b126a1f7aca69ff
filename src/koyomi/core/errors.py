class KoyomiError(Exception):
    """Base error."""

class InputError(KoyomiError, ValueError):
    """Raised for malformed date components (e.g. month outside 1..12)."""

class NotFoundError(KoyomiError, LookupError):
    """Raised when a solar term or Rokuyo label is not recognized."""
