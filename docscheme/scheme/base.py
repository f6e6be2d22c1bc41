# =============================================================================
# Scheme Interface
# =============================================================================
# The capability set a host engine drives for each split, plus the call
# objects carrying a split's collaborators and context.
# =============================================================================

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

from ..io import Collector, RecordCursor
from ..models import FieldSet, JobSettings, TupleEntry
from .context import SplitContext

__all__ = ["Scheme", "SourceCall", "SinkCall"]


@dataclass
class SourceCall:
    """
    Source split handle.

    Attributes:
        input: Record cursor owned by this split
        incoming_entry: Tuple entry the next read fills in
        context: Split context, set by prepare_source
    """

    input: RecordCursor
    incoming_entry: TupleEntry
    context: Optional[SplitContext] = None


@dataclass
class SinkCall:
    """
    Sink split handle.

    Attributes:
        output: Collector owned by this split
        outgoing_entry: Tuple entry the next write hands to the collector
        context: Split context, set by prepare_sink
    """

    output: Collector
    outgoing_entry: TupleEntry
    context: Optional[SplitContext] = None


class Scheme(ABC):
    """
    Base class for schemes.

    A split is either a source split (prepare_source, read_next until it
    returns False, cleanup_source) or a sink split (prepare_sink,
    write_next per tuple, cleanup_sink). The matching conf-init hook runs
    once before either loop starts.
    """

    source_fields: FieldSet = FieldSet.UNKNOWN
    sink_fields: FieldSet = FieldSet.ALL

    @abstractmethod
    def source_conf_init(self, settings: JobSettings) -> None:
        pass

    @abstractmethod
    def sink_conf_init(self, settings: JobSettings) -> None:
        pass

    @abstractmethod
    def prepare_source(self, settings: JobSettings, call: SourceCall) -> None:
        pass

    @abstractmethod
    def read_next(self, call: SourceCall) -> bool:
        pass

    @abstractmethod
    def cleanup_source(self, call: SourceCall) -> None:
        pass

    @abstractmethod
    def prepare_sink(self, settings: JobSettings, call: SinkCall) -> None:
        pass

    @abstractmethod
    def write_next(self, call: SinkCall) -> None:
        pass

    @abstractmethod
    def cleanup_sink(self, call: SinkCall) -> None:
        pass
