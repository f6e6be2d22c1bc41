# =============================================================================
# Scheme Errors
# =============================================================================
# Errors raised by the adapter itself. Failures coming from an injected
# cursor or collector are never wrapped and propagate unchanged.
# =============================================================================

__all__ = [
    "SchemeError",
    "SchemeConfigurationError",
    "SplitStateError",
]


class SchemeError(Exception):
    """Base class for errors raised by the scheme adapter."""


class SchemeConfigurationError(SchemeError, ValueError):
    """
    Missing or invalid connection settings (host, port or resource).

    Raised when a split is prepared against settings that cannot be
    validated. Never retried by the adapter.
    """


class SplitStateError(SchemeError, RuntimeError):
    """A split lifecycle method was called out of order."""
