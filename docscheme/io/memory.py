"""In-memory record cursor and collector."""

from __future__ import annotations

from typing import Any, Dict, Iterable, List, Mapping, Optional

from ..serialization import PythonValueReader, TupleValueWriter, ValueReader, ValueWriter
from .base import Collector, KeyHolder, RecordCursor

__all__ = ["ListRecordCursor", "ListCollector"]


class ListRecordCursor(RecordCursor):
    """
    Cursor over a list of documents held in memory.

    The document "_id" (or its position when absent) becomes the key; the
    remaining entries are converted by the value reader into the value
    holder.
    """

    def __init__(
        self,
        documents: Iterable[Mapping[str, Any]],
        reader: Optional[ValueReader] = None,
    ) -> None:
        self._documents = list(documents)
        self._reader = reader or PythonValueReader()
        self._position = 0

    @property
    def position(self) -> int:
        """Number of documents handed out so far."""
        return self._position

    def advance(self, key: KeyHolder, value: Dict[str, Any]) -> bool:
        if self._position >= len(self._documents):
            return False

        document = dict(self._documents[self._position])
        key.set(str(document.pop("_id", self._position)))
        value.clear()
        value.update(self._reader.read(document))
        self._position += 1
        return True


class ListCollector(Collector):
    """Collector keeping every written document in a list."""

    def __init__(self, writer: Optional[ValueWriter] = None) -> None:
        self._writer = writer or TupleValueWriter()
        self.documents: List[Dict[str, Any]] = []
        self.closed = False

    def collect(self, entry, context) -> None:
        self.documents.append(self._writer.write(entry, context.field_names))

    def close(self) -> None:
        self.closed = True
