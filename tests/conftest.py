"""
Shared pytest fixtures for scheme tests.

Provides reusable documents, field sets and initialized settings.
"""

import pytest

from docscheme.io import ListCollector, ListRecordCursor
from docscheme.models import FieldSet, JobSettings, TupleEntry
from docscheme.scheme import DocumentScheme, SinkCall, SourceCall


# =============================================================================
# Document Fixtures
# =============================================================================

@pytest.fixture
def three_documents():
    """Three documents as stored, each with an _id."""
    return [
        {"_id": "doc-1", "id": 1, "name": "alpha", "score": 0.5},
        {"_id": "doc-2", "id": 2, "name": "beta", "score": 0.7},
        {"_id": "doc-3", "id": 3, "name": "gamma", "score": 0.9},
    ]


@pytest.fixture
def id_name_fields():
    """Defined field set ["id", "name"]."""
    return FieldSet.of("id", "name")


# =============================================================================
# Scheme Fixtures
# =============================================================================

@pytest.fixture
def scheme(id_name_fields):
    """Scheme with static ["id", "name"] fields."""
    return DocumentScheme("localhost", 27017, "catalog/items", id_name_fields)


@pytest.fixture
def wildcard_scheme():
    """Scheme without static fields."""
    return DocumentScheme("localhost", 27017, "catalog/items")


@pytest.fixture
def source_settings(scheme):
    """Job settings initialized for source splits of `scheme`."""
    settings = JobSettings()
    scheme.source_conf_init(settings)
    return settings


@pytest.fixture
def sink_settings(scheme):
    """Job settings initialized for sink splits of `scheme`."""
    settings = JobSettings()
    scheme.sink_conf_init(settings)
    return settings


@pytest.fixture
def source_call(three_documents, id_name_fields):
    """Unprepared source call over the three documents."""
    return SourceCall(
        input=ListRecordCursor(three_documents),
        incoming_entry=TupleEntry(id_name_fields),
    )


@pytest.fixture
def sink_call(id_name_fields):
    """Unprepared sink call writing to an in-memory collector."""
    return SinkCall(output=ListCollector(), outgoing_entry=TupleEntry(id_name_fields))
