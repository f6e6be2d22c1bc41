"""Dagster Resources - External Service Connections."""

from .document_store_resource import DocumentStoreResource, MongoCollector, MongoRecordCursor

__all__ = [
    "DocumentStoreResource",
    "MongoCollector",
    "MongoRecordCursor",
]
