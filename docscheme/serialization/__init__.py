# =============================================================================
# Serialization Library
# =============================================================================
# Value readers and writers used at the document store boundary.
# =============================================================================

"""
Serialization library for the scheme adapter.

This library provides:
- ValueReader / ValueWriter: base classes
- PythonValueReader: default reader (BSON values to Python values)
- TupleValueWriter: default writer (tuple entries to documents)
- set_value_reader_if_not_set / set_value_writer_if_not_set: idempotent registration
"""

from .base import ValueReader, ValueWriter
from .readers import PythonValueReader
from .writers import TupleValueWriter
from .registry import (
    factory_name,
    set_value_reader_if_not_set,
    set_value_writer_if_not_set,
)

__all__ = [
    "ValueReader",
    "ValueWriter",
    "PythonValueReader",
    "TupleValueWriter",
    "factory_name",
    "set_value_reader_if_not_set",
    "set_value_writer_if_not_set",
]
