"""Default value writer: tuple entries to store documents."""

from datetime import date, datetime, time
from decimal import Decimal
from typing import Any, Dict, List, Sequence

from bson import Decimal128

from ..models import TupleEntry
from .base import ValueWriter

__all__ = ["TupleValueWriter"]


class TupleValueWriter(ValueWriter):
    """
    Build a document from a tuple entry.

    Names come from the resolved split names when given. Otherwise the
    entry's own field names are used if its field set is defined, and
    positional names ("0", "1", ...) if it is not.
    """

    def write(self, entry: TupleEntry, names: Sequence[str]) -> Dict[str, Any]:
        values = entry.tuple
        keys = self._document_keys(entry, names)
        if len(keys) != len(values):
            raise ValueError(
                f"Tuple has {len(values)} value(s) but {len(keys)} field name(s): {keys}"
            )
        return {key: self.write_value(value) for key, value in zip(keys, values)}

    @staticmethod
    def _document_keys(entry: TupleEntry, names: Sequence[str]) -> List[str]:
        if names:
            return list(names)
        if entry.fields.is_defined:
            return [str(field) for field in entry.fields]
        return [str(position) for position in range(len(entry.tuple))]

    def write_value(self, value: Any) -> Any:
        """Convert a single pipeline value into a BSON-encodable one."""
        if isinstance(value, Decimal):
            return Decimal128(value)
        if isinstance(value, datetime):
            return value
        if isinstance(value, date):
            return datetime.combine(value, time.min)
        if isinstance(value, dict):
            return {str(key): self.write_value(item) for key, item in value.items()}
        if isinstance(value, (list, tuple, set, frozenset)):
            return [self.write_value(item) for item in value]
        return value
