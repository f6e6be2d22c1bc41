# =============================================================================
# Value Reader / Writer Registration
# =============================================================================
# Set-if-absent registration of reader and writer factories in job settings.
# =============================================================================

import logging
from typing import Callable, Optional

from ..models import JobSettings, SettingKeys
from .base import ValueReader, ValueWriter

__all__ = [
    "factory_name",
    "set_value_reader_if_not_set",
    "set_value_writer_if_not_set",
]

logger = logging.getLogger(__name__)


def factory_name(factory: Callable) -> str:
    """Dotted name of a factory, for logs."""
    module = getattr(factory, "__module__", None) or "<unknown>"
    qualname = getattr(factory, "__qualname__", None) or type(factory).__name__
    return f"{module}.{qualname}"


def _set_if_not_set(
    settings: JobSettings,
    key: str,
    factory: Callable,
    kind: str,
    log: Optional[logging.Logger],
) -> bool:
    log = log or logger
    if settings.set_if_absent(key, factory):
        log.debug(f"Registered default {kind} [{factory_name(factory)}]")
        return True

    log.debug(f"Using pre-defined {kind} [{factory_name(settings.get(key))}]")
    return False


def set_value_reader_if_not_set(
    settings: JobSettings,
    factory: Callable[[], ValueReader],
    log: Optional[logging.Logger] = None,
) -> bool:
    """
    Register a value reader factory unless one is already registered.

    Returns:
        True if the factory was registered, False if a reader was already set
    """
    return _set_if_not_set(settings, SettingKeys.VALUE_READER, factory, "value reader", log)


def set_value_writer_if_not_set(
    settings: JobSettings,
    factory: Callable[[], ValueWriter],
    log: Optional[logging.Logger] = None,
) -> bool:
    """
    Register a value writer factory unless one is already registered.

    Returns:
        True if the factory was registered, False if a writer was already set
    """
    return _set_if_not_set(settings, SettingKeys.VALUE_WRITER, factory, "value writer", log)
