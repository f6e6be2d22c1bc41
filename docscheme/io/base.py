# =============================================================================
# Record Cursor and Collector Interfaces
# =============================================================================
# Boundary contracts for the injected reader (source side) and writer
# (sink side) of a split.
# =============================================================================

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Dict, Optional

if TYPE_CHECKING:
    from ..models import TupleEntry
    from ..scheme.context import SplitContext

__all__ = ["KeyHolder", "RecordCursor", "Collector"]


class KeyHolder:
    """Mutable holder for the id of the current document, reused across reads."""

    __slots__ = ("value",)

    def __init__(self, value: Optional[str] = None) -> None:
        self.value = value

    def set(self, value: Optional[str]) -> None:
        self.value = value

    def __str__(self) -> str:
        return "" if self.value is None else str(self.value)

    def __repr__(self) -> str:
        return f"KeyHolder({self.value!r})"


class RecordCursor(ABC):
    """
    Reader producing documents one at a time for a single split.

    The key and value holders are created once per split and filled in
    place by each call to advance().
    """

    def create_key_holder(self) -> KeyHolder:
        return KeyHolder()

    def create_value_holder(self) -> Dict[str, Any]:
        return {}

    @abstractmethod
    def advance(self, key: KeyHolder, value: Dict[str, Any]) -> bool:
        """
        Load the next document into the given holders.

        Args:
            key: Key holder to overwrite with the document id
            value: Value holder to clear and refill with the document

        Returns:
            False once the split is exhausted, True otherwise
        """
        pass

    def close(self) -> None:
        pass

    def __enter__(self):
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()


class Collector(ABC):
    """Writer accepting outgoing tuple entries for a single split."""

    @abstractmethod
    def collect(self, entry: "TupleEntry", context: "SplitContext") -> None:
        """
        Hand one outgoing tuple to the writer.

        Args:
            entry: Outgoing tuple entry
            context: Sink split context carrying the resolved field names
        """
        pass

    def close(self) -> None:
        pass

    def __enter__(self):
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
