"""Per-split state created at prepare time and released at cleanup."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional

from ..io import KeyHolder
from ..models import SchemeConfig

__all__ = ["SplitKind", "SplitContext"]


class SplitKind(str, Enum):
    SOURCE = "source"
    SINK = "sink"


@dataclass
class SplitContext:
    """
    Scratch state owned by the task running one split.

    Source splits hold a key holder and a value holder that the cursor
    refills on every read. Sink splits hold the resolved output names.
    Both keep the settings snapshot taken at prepare time in `config`.
    """

    kind: SplitKind
    key_holder: Optional[KeyHolder] = None
    value_holder: Optional[Dict[str, Any]] = None
    field_names: List[str] = field(default_factory=list)
    config: Optional[SchemeConfig] = None
    exhausted: bool = False
    released: bool = False

    @classmethod
    def for_source(
        cls,
        key_holder: KeyHolder,
        value_holder: Dict[str, Any],
        config: Optional[SchemeConfig] = None,
    ) -> "SplitContext":
        return cls(
            kind=SplitKind.SOURCE,
            key_holder=key_holder,
            value_holder=value_holder,
            config=config,
        )

    @classmethod
    def for_sink(
        cls, field_names: List[str], config: Optional[SchemeConfig] = None
    ) -> "SplitContext":
        return cls(kind=SplitKind.SINK, field_names=list(field_names), config=config)

    @property
    def is_live(self) -> bool:
        return not self.released

    def release(self) -> None:
        """Drop every holder so nothing stale survives the split."""
        self.key_holder = None
        self.value_holder = None
        self.field_names = []
        self.config = None
        self.released = True
