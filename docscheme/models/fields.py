# =============================================================================
# Field Sets
# =============================================================================
# Declared (or undeclared) columns of a pipeline tuple.
# =============================================================================

"""Field set model shared by the source and sink sides of a scheme."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Tuple, Union

__all__ = ["FieldKind", "FieldSet", "FieldId"]

FieldId = Union[str, int]


class FieldKind(str, Enum):
    """
    How much is known about a field set.

    Only DEFINED field sets carry a complete, ordered list of names. The
    remaining kinds are wildcard or partially known sets whose naming is
    deferred to the documents themselves.
    """

    DEFINED = "defined"
    UNKNOWN = "unknown"
    ALL = "all"
    RESULTS = "results"
    MERGED = "merged"


@dataclass(frozen=True)
class FieldSet:
    """
    Ordered set of field identifiers exposed by a tuple.

    Identifiers are either names (str) or positions (int). Their string
    form is what gets looked up in, or written to, a document.

    Attributes:
        names: Field identifiers in position order
        kind: Whether the set is fully defined or a wildcard
    """

    names: Tuple[FieldId, ...] = ()
    kind: FieldKind = FieldKind.DEFINED

    def __post_init__(self) -> None:
        object.__setattr__(self, "names", tuple(self.names))
        if self.kind == FieldKind.DEFINED and len(set(self.names)) != len(self.names):
            raise ValueError(f"Duplicate field identifiers in {list(self.names)}")

    @classmethod
    def of(cls, *names: FieldId) -> "FieldSet":
        """Build a fully defined field set from the given identifiers."""
        return cls(names=names)

    @property
    def is_defined(self) -> bool:
        return self.kind == FieldKind.DEFINED

    def __len__(self) -> int:
        return len(self.names)

    def __iter__(self) -> Iterator[FieldId]:
        return iter(self.names)

    def get(self, index: int) -> FieldId:
        return self.names[index]

    def pos(self, field: FieldId) -> int:
        """
        Resolve a field identifier to its tuple position.

        Named fields resolve to their declared position. Integer fields
        not declared by name are taken as positions (negative values count
        from the end).

        Raises:
            KeyError: If a named field is not part of this set
        """
        if field in self.names:
            return self.names.index(field)
        if isinstance(field, int):
            return field if field >= 0 else len(self.names) + field
        raise KeyError(f"Field {field!r} not found in {list(self.names)}")


FieldSet.UNKNOWN = FieldSet(kind=FieldKind.UNKNOWN)
FieldSet.ALL = FieldSet(kind=FieldKind.ALL)
