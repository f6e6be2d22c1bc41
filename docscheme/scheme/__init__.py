# =============================================================================
# Scheme Library
# =============================================================================
# Field resolution, split lifecycle and the document store scheme.
# =============================================================================

"""
Scheme library for the document store adapter.

This library provides:
- Scheme: interface a host engine drives per split
- SourceCall / SinkCall: per-split handles
- DocumentScheme: the document store implementation of Scheme
- SplitContext / SplitKind: per-split state
- resolve_names: field set to name list resolution
- init_source_settings / init_sink_settings: job settings initialization
"""

from .resolver import resolve_names
from .context import SplitContext, SplitKind
from .base import Scheme, SinkCall, SourceCall
from .conf_init import init_sink_settings, init_source_settings, init_target
from .document_scheme import DocumentScheme

__all__ = [
    "resolve_names",
    "SplitContext",
    "SplitKind",
    "Scheme",
    "SinkCall",
    "SourceCall",
    "init_sink_settings",
    "init_source_settings",
    "init_target",
    "DocumentScheme",
]
