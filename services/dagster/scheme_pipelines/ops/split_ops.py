# =============================================================================
# Split Ops - Document store to tuples and back
# =============================================================================
# Drives a DocumentScheme over one source split (documents → rows) and one
# sink split (rows → documents).
# =============================================================================

from typing import Any, Dict, List, Optional

from dagster import Config, OpExecutionContext, op
from pydantic import Field

from docscheme.io import Collector, RecordCursor
from docscheme.models import DocumentStoreSettings, FieldSet, JobSettings, TupleEntry
from docscheme.scheme import DocumentScheme, SinkCall, SourceCall, resolve_names

__all__ = [
    "ReadSplitConfig",
    "WriteSplitConfig",
    "run_source_split",
    "run_sink_split",
    "read_documents_op",
    "write_documents_op",
]


class ReadSplitConfig(Config):
    """Run config for a source split."""

    resource: str = Field(..., description="Resource to read: 'collection' or 'database/collection'")
    host: Optional[str] = Field(None, description="Store host(s); DOCSTORE_HOST when omitted")
    port: Optional[int] = Field(None, description="Store port; DOCSTORE_PORT when omitted")
    fields: List[str] = Field(default=[], description="Fields to read; all when empty")
    skip: int = Field(0, ge=0, description="Documents to skip (start of the split)")
    limit: int = Field(0, ge=0, description="Maximum documents to read (0 = no limit)")


class WriteSplitConfig(Config):
    """Run config for a sink split."""

    resource: str = Field(..., description="Resource to write: 'collection' or 'database/collection'")
    host: Optional[str] = Field(None, description="Store host(s); DOCSTORE_HOST when omitted")
    port: Optional[int] = Field(None, description="Store port; DOCSTORE_PORT when omitted")
    fields: List[str] = Field(default=[], description="Sink fields for rows that carry no names")


def _field_set(names: List[str]) -> Optional[FieldSet]:
    return FieldSet.of(*names) if names else None


def run_source_split(
    scheme: DocumentScheme,
    settings: JobSettings,
    log,
    cursor: Optional[RecordCursor] = None,
    row_fields: Optional[List[List[str]]] = None,
    **open_kwargs: Any,
) -> List[List[Any]]:
    """
    Read every document of one source split into rows.

    This function is extracted for easier unit testing without Dagster context.

    Args:
        scheme: Scheme whose source_conf_init already ran on `settings`
        settings: Job settings
        log: Logger instance (context.log)
        cursor: Record cursor to read from; opened through the bound input
                format when omitted
        row_fields: When given, receives the keys of each document read, in
                    the order of the values of its row (for schemes
                    without defined source fields)
        **open_kwargs: Extra arguments for the input format (skip, limit, ...)

    Returns:
        One value list per document, in read order

    Raises:
        SchemeConfigurationError: If the settings are invalid
    """
    if cursor is None:
        cursor = settings.snapshot().open_input(**open_kwargs)

    call = SourceCall(input=cursor, incoming_entry=TupleEntry(scheme.source_fields))
    rows: List[List[Any]] = []
    try:
        scheme.prepare_source(settings, call)
        while True:
            call.incoming_entry = TupleEntry(scheme.source_fields)
            if not scheme.read_next(call):
                break
            rows.append(list(call.incoming_entry.tuple))
            if row_fields is not None:
                row_fields.append([str(name) for name in call.context.value_holder])
    finally:
        scheme.cleanup_source(call)
        cursor.close()

    log.info(f"Read {len(rows)} document(s) from {scheme.resource}")
    return rows


def run_sink_split(
    scheme: DocumentScheme,
    settings: JobSettings,
    rows: List[List[Any]],
    fields: Optional[FieldSet],
    log,
    collector: Optional[Collector] = None,
    row_fields: Optional[List[List[str]]] = None,
) -> int:
    """
    Write rows to one sink split.

    The collector is only closed (and so flushed) once every row was
    handed over; a failing write leaves nothing to flush.

    Args:
        scheme: Scheme whose sink_conf_init already ran on `settings`
        settings: Job settings
        rows: Value lists to write
        fields: Field set of the rows, or None when unknown
        log: Logger instance (context.log)
        collector: Collector to write to; opened through the bound output
                   format when omitted
        row_fields: Per-row field names, one list per row; each row is then
                    written under its own names instead of `fields`

    Returns:
        Number of rows written

    Raises:
        ValueError: If `row_fields` and `rows` differ in length
    """
    if row_fields is not None and len(row_fields) != len(rows):
        raise ValueError(
            f"Got {len(row_fields)} field name list(s) for {len(rows)} row(s)"
        )
    if collector is None:
        collector = settings.snapshot().open_output()

    fields = fields or FieldSet.UNKNOWN
    call = SinkCall(output=collector, outgoing_entry=TupleEntry(fields))
    written = 0
    try:
        scheme.prepare_sink(settings, call)
        for index, row in enumerate(rows):
            row_set = FieldSet.of(*row_fields[index]) if row_fields is not None else fields
            call.outgoing_entry = TupleEntry(row_set, row)
            scheme.write_next(call)
            written += 1
        collector.close()
    finally:
        scheme.cleanup_sink(call)

    log.info(f"Wrote {written} document(s) to {scheme.resource}")
    return written


def _build_scheme(config, store, fields: Optional[FieldSet]) -> DocumentScheme:
    env = DocumentStoreSettings()
    return DocumentScheme(
        config.host or env.host,
        config.port or env.port,
        config.resource,
        fields,
        input_format=store.open_cursor,
        output_format=store.open_collector,
    )


@op(required_resource_keys={"document_store"})
def read_documents_op(context: OpExecutionContext, config: ReadSplitConfig) -> Dict[str, Any]:
    """
    Read one split of a document store resource into rows.

    Returns:
        Dict with:
        - fields: resolved field names (empty when the documents' own keys were used)
        - rows: one value list per document
        - row_fields: each document's own keys, only when no fields were configured
    """
    scheme = _build_scheme(config, context.resources.document_store, _field_set(config.fields))
    settings = JobSettings()
    scheme.source_conf_init(settings)

    context.log.info(
        f"Reading split of {config.resource}: skip={config.skip}, limit={config.limit}"
    )
    row_fields = None if scheme.source_fields.is_defined else []
    rows = run_source_split(
        scheme, settings, context.log, row_fields=row_fields, skip=config.skip, limit=config.limit
    )

    split: Dict[str, Any] = {"fields": resolve_names(scheme.source_fields), "rows": rows}
    if row_fields is not None:
        split["row_fields"] = row_fields
    return split


@op(required_resource_keys={"document_store"})
def write_documents_op(
    context: OpExecutionContext, config: WriteSplitConfig, split: Dict[str, Any]
) -> int:
    """
    Write rows produced by read_documents_op into a document store resource.

    Row field names from the upstream split take precedence; the configured
    sink fields apply to rows that arrive without names.
    """
    row_fields = split.get("row_fields")
    sink_fields = _field_set(config.fields)
    if row_fields is not None and sink_fields is not None:
        context.log.warning(
            f"Ignoring configured sink fields {config.fields}: rows carry their own names"
        )
        sink_fields = None

    scheme = _build_scheme(config, context.resources.document_store, sink_fields)
    settings = JobSettings()
    scheme.sink_conf_init(settings)

    return run_sink_split(
        scheme,
        settings,
        split["rows"],
        _field_set(split.get("fields", [])),
        context.log,
        row_fields=row_fields,
    )
