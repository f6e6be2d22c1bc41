"""Record cursors and collectors: the injected I/O side of a split."""

from .base import Collector, KeyHolder, RecordCursor
from .memory import ListCollector, ListRecordCursor

__all__ = [
    "Collector",
    "KeyHolder",
    "RecordCursor",
    "ListCollector",
    "ListRecordCursor",
]
