# =============================================================================
# Data Models Library
# =============================================================================
# Field sets, tuple entries, job settings and configuration models.
# =============================================================================

"""
Data models for the scheme adapter.

This library provides:
- FieldSet / FieldKind: declared or wildcard tuple fields
- TupleEntry: a pipeline record addressed through a FieldSet
- JobSettings / SchemeConfig: per-job settings and their frozen snapshot
- Configuration models
"""

# Field models
from .fields import (
    FieldId,
    FieldKind,
    FieldSet,
)

# Tuple model
from .tuples import TupleEntry

# Configuration models
from .config import (
    DocumentStoreSettings,
    StoreTarget,
)

# Job settings
from .settings import (
    JobSettings,
    SchemeConfig,
    SettingKeys,
)

__all__ = [
    # Field models
    "FieldId",
    "FieldKind",
    "FieldSet",
    # Tuple model
    "TupleEntry",
    # Configuration models
    "DocumentStoreSettings",
    "StoreTarget",
    # Job settings
    "JobSettings",
    "SchemeConfig",
    "SettingKeys",
]
