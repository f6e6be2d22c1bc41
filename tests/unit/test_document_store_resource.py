"""
Unit tests for DocumentStoreResource.

Uses mongomock to exercise MongoDB cursors and collectors without a live service.
"""

import mongomock
import pytest

from docscheme.models import FieldSet, JobSettings, TupleEntry
from docscheme.scheme import DocumentScheme, SplitContext
from services.dagster.scheme_pipelines.resources import DocumentStoreResource
from services.dagster.scheme_pipelines.resources.document_store_resource import (
    MongoCollector,
    MongoRecordCursor,
)


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def mongomock_client():
    """In-memory MongoDB client for tests."""
    return mongomock.MongoClient()


@pytest.fixture
def store(monkeypatch, mongomock_client):
    """DocumentStoreResource configured to use the mongomock client."""
    monkeypatch.setattr(
        "services.dagster.scheme_pipelines.resources.document_store_resource.MongoClient",
        lambda *args, **kwargs: mongomock_client,
    )
    return DocumentStoreResource(connection_string="mongodb://localhost:27017", batch_size=2)


@pytest.fixture
def items(mongomock_client, three_documents):
    collection = mongomock_client["catalog"]["items"]
    collection.insert_many([dict(doc) for doc in three_documents])
    return collection


def _config(store, resource="catalog/items", fields=None, sink=False):
    scheme = DocumentScheme(
        "localhost",
        27017,
        resource,
        fields,
        input_format=store.open_cursor,
        output_format=store.open_collector,
    )
    settings = JobSettings()
    if sink:
        scheme.sink_conf_init(settings)
    else:
        scheme.source_conf_init(settings)
    return settings.snapshot()


# =============================================================================
# Tests: cursor
# =============================================================================


def test_open_cursor_reads_documents_in_id_order(store, items):
    cursor = _config(store).open_input()
    key, value = cursor.create_key_holder(), cursor.create_value_holder()

    keys = []
    while cursor.advance(key, value):
        keys.append(key.value)
        assert "_id" not in value
    cursor.close()

    assert isinstance(cursor, MongoRecordCursor)
    assert keys == ["doc-1", "doc-2", "doc-3"]


def test_cursor_projects_published_fields(store, items):
    cursor = _config(store, fields=FieldSet.of("name")).open_input()
    key, value = cursor.create_key_holder(), cursor.create_value_holder()

    cursor.advance(key, value)

    assert value == {"name": "alpha"}


def test_cursor_skip_and_limit_select_a_split(store, items):
    cursor = _config(store).open_input(skip=1, limit=1)
    key, value = cursor.create_key_holder(), cursor.create_value_holder()

    assert cursor.advance(key, value) is True
    assert key.value == "doc-2"
    assert cursor.advance(key, value) is False


def test_resource_without_database_uses_default(store, mongomock_client):
    mongomock_client["docstore"]["plain"].insert_one({"_id": "x", "v": 1})
    cursor = _config(store, resource="plain").open_input()
    key, value = cursor.create_key_holder(), cursor.create_value_holder()

    assert cursor.advance(key, value) is True
    assert value == {"v": 1}


# =============================================================================
# Tests: collector
# =============================================================================


def test_collector_batches_and_flushes_on_close(store, mongomock_client):
    fields = FieldSet.of("id", "name")
    collector = _config(store, resource="catalog/out", fields=fields, sink=True).open_output()
    context = SplitContext.for_sink(["id", "name"])
    out = mongomock_client["catalog"]["out"]

    assert isinstance(collector, MongoCollector)
    for row in ([1, "a"], [2, "b"], [3, "c"]):
        collector.collect(TupleEntry(fields, row), context)

    # batch_size=2: one batch written, one document still buffered
    assert out.count_documents({}) == 2

    collector.close()

    assert out.count_documents({}) == 3
    assert collector.written == 3
    assert sorted(doc["name"] for doc in out.find()) == ["a", "b", "c"]


def test_collector_close_without_writes_is_harmless(store, mongomock_client):
    collector = _config(store, resource="catalog/empty", sink=True).open_output()

    collector.close()

    assert mongomock_client["catalog"]["empty"].count_documents({}) == 0


def test_client_from_target_when_no_connection_string(monkeypatch, mongomock_client):
    calls = []

    def fake_client(*args, **kwargs):
        calls.append(kwargs)
        return mongomock_client

    monkeypatch.setattr(
        "services.dagster.scheme_pipelines.resources.document_store_resource.MongoClient",
        fake_client,
    )
    store = DocumentStoreResource()

    _config(store).open_input()
    _config(store).open_input()

    assert calls == [{"host": ["localhost"], "port": 27017}]
