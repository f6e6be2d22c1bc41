# =============================================================================
# Document Store Scheme Adapter
# =============================================================================
# Shared libraries that let a tuple-oriented pipeline read from and write to
# a remote document store, one split at a time.
# =============================================================================

"""
Document store scheme adapter.

Sub-packages:
- models: field sets, tuple entries, job settings and configuration models
- scheme: field resolution, split contexts and the DocumentScheme adapter
- serialization: default value readers and writers
- io: record cursor / collector interfaces and in-memory implementations
"""

__version__ = "0.1.0"
