# =============================================================================
# Base Classes for Value Readers and Writers
# =============================================================================
# Abstract base classes for converting values at the store boundary.
# =============================================================================

from abc import ABC, abstractmethod
from typing import Any, Dict, Mapping, Sequence

from ..models import TupleEntry

__all__ = ["ValueReader", "ValueWriter"]


class ValueReader(ABC):
    """
    Base class for value readers.

    A value reader turns values coming out of the document store into
    values the pipeline can hold in a tuple.
    """

    @abstractmethod
    def read_value(self, value: Any) -> Any:
        """
        Convert a single store value.

        Args:
            value: Raw value as returned by the store driver

        Returns:
            Pipeline-side value
        """
        pass

    def read(self, document: Mapping[str, Any]) -> Dict[str, Any]:
        """Convert every value of a document, keeping its key order."""
        return {key: self.read_value(value) for key, value in document.items()}


class ValueWriter(ABC):
    """
    Base class for value writers.

    A value writer builds the document sent to the store from an outgoing
    tuple entry and the field names resolved for the split.
    """

    @abstractmethod
    def write(self, entry: TupleEntry, names: Sequence[str]) -> Dict[str, Any]:
        """
        Build a document from a tuple entry.

        Args:
            entry: Outgoing tuple entry
            names: Resolved output field names; empty means the writer
                   picks names itself

        Returns:
            Document ready for the store driver
        """
        pass
