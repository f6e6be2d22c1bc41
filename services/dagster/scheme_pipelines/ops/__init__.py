"""Dagster Ops - Reusable Computation Units."""

from .split_ops import (
    ReadSplitConfig,
    WriteSplitConfig,
    read_documents_op,
    run_sink_split,
    run_source_split,
    write_documents_op,
)

__all__ = [
    "ReadSplitConfig",
    "WriteSplitConfig",
    "read_documents_op",
    "run_sink_split",
    "run_source_split",
    "write_documents_op",
]
