"""Default value reader: BSON values to plain Python values."""

from typing import Any

from bson import Decimal128, ObjectId

from .base import ValueReader

__all__ = ["PythonValueReader"]


class PythonValueReader(ValueReader):
    """
    Convert BSON-specific values into plain Python values.

    - ObjectId → str
    - Decimal128 → Decimal
    - dicts and lists are converted recursively
    Everything else is returned unchanged.
    """

    def read_value(self, value: Any) -> Any:
        if isinstance(value, ObjectId):
            return str(value)
        if isinstance(value, Decimal128):
            return value.to_decimal()
        if isinstance(value, dict):
            return {key: self.read_value(item) for key, item in value.items()}
        if isinstance(value, list):
            return [self.read_value(item) for item in value]
        return value
