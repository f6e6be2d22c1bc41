"""Field name resolution for source and sink splits."""

from typing import List, Optional

from ..models import FieldSet

__all__ = ["resolve_names"]


def resolve_names(fields: Optional[FieldSet]) -> List[str]:
    """
    Resolve a field set into the ordered names written to / read from documents.

    Args:
        fields: Field set of the tuple, or None

    Returns:
        One string per declared field, in position order. An empty list when
        the field set is missing or not fully defined, meaning names are
        taken from the documents' own keys.
    """
    # Merged and other partially known sets fall back to the unknown case
    if fields is None or not fields.is_defined:
        return []

    return [str(fields.get(index)) for index in range(len(fields))]
