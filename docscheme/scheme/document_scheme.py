# =============================================================================
# Document Scheme
# =============================================================================
# Maps document store records to pipeline tuples (source splits) and hands
# pipeline tuples to the store writer (sink splits).
# =============================================================================

"""
DocumentScheme: the adapter between a tuple pipeline and a document store.

Lifecycle per split:
- source: prepare_source → read_next (until False) → cleanup_source
- sink:   prepare_sink → write_next (per tuple) → cleanup_sink

Cleanup without a prior prepare is a no-op. Reads and writes outside a
prepared split raise SplitStateError. Errors raised by the cursor or the
collector are never caught here.
"""

from __future__ import annotations

import logging
from typing import Callable, Optional

from ..errors import SplitStateError
from ..models import FieldSet, JobSettings
from .base import Scheme, SinkCall, SourceCall
from .conf_init import init_sink_settings, init_source_settings
from .context import SplitContext, SplitKind
from .resolver import resolve_names

__all__ = ["DocumentScheme"]

logger = logging.getLogger(__name__)


class DocumentScheme(Scheme):
    """
    Scheme reading from and writing to one document store resource.

    Attributes:
        host: Store host(s), comma-separated
        port: Store port
        resource: Target resource path ("collection" or "database/collection")
        source_fields: Static fields of tuples produced by source splits
        sink_fields: Static fields used when an outgoing tuple has none
    """

    def __init__(
        self,
        host: str,
        port: int,
        resource: str,
        fields: Optional[FieldSet] = None,
        *,
        input_format: Optional[Callable] = None,
        output_format: Optional[Callable] = None,
    ) -> None:
        self.host = host
        self.port = port
        self.resource = resource
        self.input_format = input_format
        self.output_format = output_format
        if fields is not None:
            self.source_fields = fields
            self.sink_fields = fields

    def __repr__(self) -> str:
        return f"DocumentScheme(host={self.host!r}, port={self.port!r}, resource={self.resource!r})"

    # ------------------------------------------------------------------
    # Conf-init
    # ------------------------------------------------------------------

    def source_conf_init(self, settings: JobSettings) -> None:
        init_source_settings(
            settings,
            self.host,
            self.port,
            self.resource,
            self.source_fields,
            input_format=self.input_format,
        )

    def sink_conf_init(self, settings: JobSettings) -> None:
        init_sink_settings(
            settings,
            self.host,
            self.port,
            self.resource,
            self.sink_fields,
            output_format=self.output_format,
        )

    # ------------------------------------------------------------------
    # Source splits
    # ------------------------------------------------------------------

    def prepare_source(self, settings: JobSettings, call: SourceCall) -> None:
        self._check_unprepared(call.context)
        config = settings.snapshot()

        call.context = SplitContext.for_source(
            call.input.create_key_holder(),
            call.input.create_value_holder(),
            config,
        )
        logger.debug(
            f"Prepared source split for {config.target.resource}: "
            f"fields={list(config.target_fields) or 'auto'}"
        )

    def read_next(self, call: SourceCall) -> bool:
        """
        Read the next document into the incoming tuple entry.

        Returns:
            True if a document was read, False once the cursor is exhausted
        """
        context = self._live_context(call.context, SplitKind.SOURCE)
        if context.exhausted:
            return False

        if not call.input.advance(context.key_holder, context.value_holder):
            context.exhausted = True
            return False

        entry = call.incoming_entry
        document = context.value_holder

        if entry.fields.is_defined:
            # Coercion to declared types is left to the pipeline
            for field in entry.fields:
                entry.set_object(field, document.get(str(field)))
        else:
            entry.tuple.extend(document.values())

        return True

    def cleanup_source(self, call: SourceCall) -> None:
        self._release(call, SplitKind.SOURCE)

    # ------------------------------------------------------------------
    # Sink splits
    # ------------------------------------------------------------------

    def prepare_sink(self, settings: JobSettings, call: SinkCall) -> None:
        self._check_unprepared(call.context)
        config = settings.snapshot()

        entry_fields = call.outgoing_entry.fields
        fields = entry_fields if entry_fields.is_defined else self.sink_fields
        call.context = SplitContext.for_sink(resolve_names(fields), config)
        logger.debug(
            f"Prepared sink split for {config.target.resource}: fields={call.context.field_names or 'auto'}"
        )

    def write_next(self, call: SinkCall) -> None:
        context = self._live_context(call.context, SplitKind.SINK)
        call.output.collect(call.outgoing_entry, context)

    def cleanup_sink(self, call: SinkCall) -> None:
        self._release(call, SplitKind.SINK)

    # ------------------------------------------------------------------
    # Lifecycle helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _check_unprepared(context: Optional[SplitContext]) -> None:
        if context is not None and context.is_live:
            raise SplitStateError(f"{context.kind.value} split is already prepared")

    @staticmethod
    def _live_context(context: Optional[SplitContext], kind: SplitKind) -> SplitContext:
        if context is None or not context.is_live:
            raise SplitStateError(f"{kind.value} split is not prepared (or was cleaned up)")
        if context.kind != kind:
            raise SplitStateError(
                f"Expected a {kind.value} split context, got {context.kind.value}"
            )
        return context

    @staticmethod
    def _release(call, kind: SplitKind) -> None:
        context = call.context
        if context is None:
            return
        if context.kind != kind:
            raise SplitStateError(
                f"Cannot clean up a {context.kind.value} split as {kind.value}"
            )
        context.release()
        call.context = None
