# =============================================================================
# Unit Tests: Value Readers and Writers
# =============================================================================

from datetime import date, datetime
from decimal import Decimal

import pytest
from bson import Decimal128, ObjectId

from docscheme.models import FieldSet, TupleEntry
from docscheme.serialization import PythonValueReader, TupleValueWriter, factory_name


# =============================================================================
# Test: PythonValueReader
# =============================================================================

def test_reader_converts_bson_values():
    oid = ObjectId()
    reader = PythonValueReader()

    document = reader.read(
        {"ref": oid, "price": Decimal128("9.99"), "tags": [oid], "nested": {"ref": oid}}
    )

    assert document == {
        "ref": str(oid),
        "price": Decimal("9.99"),
        "tags": [str(oid)],
        "nested": {"ref": str(oid)},
    }


def test_reader_keeps_key_order_and_plain_values():
    document = PythonValueReader().read({"b": 1, "a": "x", "c": None})

    assert list(document) == ["b", "a", "c"]
    assert list(document.values()) == [1, "x", None]


# =============================================================================
# Test: TupleValueWriter
# =============================================================================

def test_writer_uses_resolved_names():
    entry = TupleEntry(FieldSet.of("id", "name"), [1, "alpha"])

    document = TupleValueWriter().write(entry, ["doc_id", "label"])

    assert document == {"doc_id": 1, "label": "alpha"}


def test_writer_falls_back_to_entry_field_names():
    entry = TupleEntry(FieldSet.of("id", 1), [1, "alpha"])

    assert TupleValueWriter().write(entry, []) == {"id": 1, "1": "alpha"}


def test_writer_uses_positional_names_for_undefined_fields():
    entry = TupleEntry(FieldSet.UNKNOWN, ["a", "b"])

    assert TupleValueWriter().write(entry, []) == {"0": "a", "1": "b"}


def test_writer_converts_values():
    entry = TupleEntry(
        FieldSet.of("price", "day", "tags", "meta"),
        [Decimal("1.50"), date(2024, 1, 2), ("x", "y"), {"seen": {1, 2}}],
    )

    document = TupleValueWriter().write(entry, [])

    assert document["price"] == Decimal128("1.50")
    assert document["day"] == datetime(2024, 1, 2)
    assert document["tags"] == ["x", "y"]
    assert sorted(document["meta"]["seen"]) == [1, 2]


def test_writer_rejects_name_count_mismatch():
    entry = TupleEntry(FieldSet.UNKNOWN, [1, 2, 3])

    with pytest.raises(ValueError, match="3 value"):
        TupleValueWriter().write(entry, ["a", "b"])


def test_factory_name():
    assert factory_name(TupleValueWriter) == "docscheme.serialization.writers.TupleValueWriter"
