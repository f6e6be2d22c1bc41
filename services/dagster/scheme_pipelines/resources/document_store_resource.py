"""Document Store Resource - MongoDB-backed record cursors and collectors."""

from __future__ import annotations

from functools import cached_property
from typing import Any, Dict, Iterable, Optional

from dagster import ConfigurableResource
from pydantic import Field
from pymongo import ASCENDING, MongoClient
from pymongo.collection import Collection

from docscheme.io import Collector, KeyHolder, RecordCursor
from docscheme.models import SchemeConfig, StoreTarget
from docscheme.serialization import ValueReader, ValueWriter

__all__ = ["DocumentStoreResource", "MongoRecordCursor", "MongoCollector"]


class MongoRecordCursor(RecordCursor):
    """
    Record cursor over one MongoDB collection.

    Documents are read in _id order. The _id goes to the key holder and is
    stripped from the document placed in the value holder.
    """

    def __init__(
        self,
        collection: Collection,
        reader: ValueReader,
        *,
        fields: Iterable[str] = (),
        query: Optional[Dict[str, Any]] = None,
        skip: int = 0,
        limit: int = 0,
    ) -> None:
        projection = {name: 1 for name in fields} or None
        self._reader = reader
        self._cursor = (
            collection.find(query or {}, projection)
            .sort("_id", ASCENDING)
            .skip(skip)
            .limit(limit)
        )

    def advance(self, key: KeyHolder, value: Dict[str, Any]) -> bool:
        document = next(self._cursor, None)
        if document is None:
            return False

        key.set(str(document.pop("_id", "")))
        value.clear()
        value.update(self._reader.read(document))
        return True

    def close(self) -> None:
        self._cursor.close()


class MongoCollector(Collector):
    """
    Collector inserting documents into one MongoDB collection.

    Documents are buffered and written with insert_many every
    `batch_size` tuples; close() flushes the remainder.
    """

    def __init__(self, collection: Collection, writer: ValueWriter, batch_size: int = 500) -> None:
        self._collection = collection
        self._writer = writer
        self._batch_size = max(1, batch_size)
        self._buffer: list = []
        self.written = 0

    def collect(self, entry, context) -> None:
        self._buffer.append(self._writer.write(entry, context.field_names))
        if len(self._buffer) >= self._batch_size:
            self.flush()

    def flush(self) -> None:
        if not self._buffer:
            return
        self._collection.insert_many(self._buffer, ordered=True)
        self.written += len(self._buffer)
        self._buffer = []

    def close(self) -> None:
        self.flush()


class DocumentStoreResource(ConfigurableResource):
    """
    Dagster resource opening record cursors and collectors on MongoDB.

    Its open_cursor / open_collector methods are the input and output
    formats bound into the job settings of a DocumentScheme. When no
    connection string is configured, the client connects to the hosts and
    port published in the job settings.
    """

    connection_string: Optional[str] = Field(None, description="MongoDB connection URI")
    database: str = Field("docstore", description="Database used when the resource path names none")
    batch_size: int = Field(500, description="Documents per insert_many call")

    @cached_property
    def _clients(self) -> Dict[str, MongoClient]:
        return {}

    def _get_client(self, target: StoreTarget) -> MongoClient:
        if self.connection_string:
            key = self.connection_string
        else:
            key = f"{target.nodes}:{target.port}"

        client = self._clients.get(key)
        if client is None:
            if self.connection_string:
                client = MongoClient(self.connection_string)
            else:
                client = MongoClient(host=target.hosts, port=target.port)
            self._clients[key] = client
        return client

    def _get_collection(self, target: StoreTarget) -> Collection:
        database = target.database or self.database
        return self._get_client(target)[database][target.collection]

    def open_cursor(
        self,
        config: SchemeConfig,
        *,
        query: Optional[Dict[str, Any]] = None,
        skip: int = 0,
        limit: int = 0,
    ) -> MongoRecordCursor:
        """
        Open a cursor for one source split.

        Args:
            config: Job settings snapshot
            query: Optional filter applied to the collection
            skip: Documents to skip (start of the split)
            limit: Maximum documents to read (0 = no limit)
        """
        return MongoRecordCursor(
            self._get_collection(config.target),
            config.new_value_reader(),
            fields=config.target_fields,
            query=query,
            skip=skip,
            limit=limit,
        )

    def open_collector(self, config: SchemeConfig) -> MongoCollector:
        """Open a collector for one sink split."""
        return MongoCollector(
            self._get_collection(config.target),
            config.new_value_writer(),
            batch_size=self.batch_size,
        )
