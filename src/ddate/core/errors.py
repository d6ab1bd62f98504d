class DdateError(Exception):
    """Base error."""

class InvalidInputError(DdateError, ValueError):
    """Raised when a civil date component lies outside its valid range."""
