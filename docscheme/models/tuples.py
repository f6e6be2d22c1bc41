"""Pipeline tuple entry: a value list addressed through a field set."""

from __future__ import annotations

from typing import Any, Iterable, List, Optional

from .fields import FieldId, FieldSet

__all__ = ["TupleEntry"]


class TupleEntry:
    """
    A single pipeline record.

    Values live in a plain list owned by the entry. When the field set is
    defined, values can be addressed by field identifier; otherwise the
    list is only positional and grows as values are appended.
    """

    def __init__(
        self,
        fields: FieldSet = FieldSet.UNKNOWN,
        values: Optional[Iterable[Any]] = None,
    ) -> None:
        self.fields = fields
        if values is not None:
            self._values: List[Any] = list(values)
        elif fields.is_defined:
            self._values = [None] * len(fields)
        else:
            self._values = []

    @property
    def tuple(self) -> List[Any]:
        """The underlying value list (mutable, not a copy)."""
        return self._values

    def set_object(self, field: FieldId, value: Any) -> None:
        position = self.fields.pos(field)
        if position >= len(self._values):
            self._values.extend([None] * (position + 1 - len(self._values)))
        self._values[position] = value

    def get_object(self, field: FieldId) -> Any:
        position = self.fields.pos(field)
        if position >= len(self._values):
            return None
        return self._values[position]

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"TupleEntry(fields={list(self.fields)!r}, values={self._values!r})"
