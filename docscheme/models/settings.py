# =============================================================================
# Job Settings
# =============================================================================
# Shared per-job key-value settings populated once before a split runs, and
# the immutable SchemeConfig snapshot both adapters consume.
# =============================================================================

"""
Job settings for the scheme adapter.

JobSettings is the mutable key-value object the conf-init step writes to.
SchemeConfig is the validated, frozen view of it that source and sink
splits read from.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, Mapping, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ..errors import SchemeConfigurationError
from .config import StoreTarget

__all__ = ["SettingKeys", "JobSettings", "SchemeConfig"]

logger = logging.getLogger(__name__)


class SettingKeys:
    """Keys understood by JobSettings."""

    NODES = "docstore.nodes"
    PORT = "docstore.port"
    RESOURCE = "docstore.resource"
    TARGET_FIELDS = "docstore.internal.target.fields"
    VALUE_READER = "docstore.value.reader"
    VALUE_WRITER = "docstore.value.writer"
    INPUT_FORMAT = "job.input.format"
    OUTPUT_FORMAT = "job.output.format"
    OUTPUT_DIR = "job.output.dir"


class SchemeConfig(BaseModel):
    """
    Immutable snapshot of a job's settings.

    Attributes:
        target: Validated connection target
        target_fields: Field names published for the split (may be empty)
        value_reader: Factory returning the value reader for the job
        value_writer: Factory returning the value writer for the job
        input_format: Factory opening a record cursor for a source split
        output_format: Factory opening a collector for a sink split
        output_dir: Output-directory marker (the target resource path)
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    target: StoreTarget
    target_fields: Tuple[str, ...] = ()
    value_reader: Optional[Callable[..., Any]] = None
    value_writer: Optional[Callable[..., Any]] = None
    input_format: Optional[Callable[..., Any]] = None
    output_format: Optional[Callable[..., Any]] = None
    output_dir: Optional[str] = Field(None, description="Output-directory marker")

    def new_value_reader(self):
        if self.value_reader is None:
            raise SchemeConfigurationError("No value reader registered for this job")
        return self.value_reader()

    def new_value_writer(self):
        if self.value_writer is None:
            raise SchemeConfigurationError("No value writer registered for this job")
        return self.value_writer()

    def open_input(self, **kwargs):
        """Open a record cursor through the bound input format."""
        if self.input_format is None:
            raise SchemeConfigurationError("No input format bound for this job")
        return self.input_format(self, **kwargs)

    def open_output(self, **kwargs):
        """Open a collector through the bound output format."""
        if self.output_format is None:
            raise SchemeConfigurationError("No output format bound for this job")
        return self.output_format(self, **kwargs)


class JobSettings:
    """
    Mutable per-job settings.

    Written once by the conf-init step, then treated as read-only. Plain
    dict operations keep concurrent re-initialization with identical values
    harmless (last writer wins).
    """

    def __init__(self, initial: Optional[Mapping[str, Any]] = None) -> None:
        self._values: Dict[str, Any] = dict(initial or {})

    def get(self, key: str, default: Any = None) -> Any:
        return self._values.get(key, default)

    def set(self, key: str, value: Any) -> "JobSettings":
        self._values[key] = value
        return self

    def set_if_absent(self, key: str, value: Any) -> bool:
        """
        Set a key only if it has no value yet.

        Returns:
            True if the value was stored, False if one was already present
        """
        if key in self._values:
            return False
        self._values[key] = value
        return True

    def __contains__(self, key: str) -> bool:
        return key in self._values

    def as_dict(self) -> Dict[str, Any]:
        return dict(self._values)

    def snapshot(self) -> SchemeConfig:
        """
        Validate the settings and freeze them into a SchemeConfig.

        Raises:
            SchemeConfigurationError: If host, port or resource is missing
                or invalid
        """
        target_fields = self.get(SettingKeys.TARGET_FIELDS) or ""
        try:
            return SchemeConfig(
                target=StoreTarget(
                    hosts=self.get(SettingKeys.NODES),
                    port=self.get(SettingKeys.PORT),
                    resource=self.get(SettingKeys.RESOURCE),
                ),
                target_fields=tuple(name for name in target_fields.split(",") if name),
                value_reader=self.get(SettingKeys.VALUE_READER),
                value_writer=self.get(SettingKeys.VALUE_WRITER),
                input_format=self.get(SettingKeys.INPUT_FORMAT),
                output_format=self.get(SettingKeys.OUTPUT_FORMAT),
                output_dir=self.get(SettingKeys.OUTPUT_DIR),
            )
        except ValidationError as e:
            logger.debug(f"Rejected job settings: {self._values}")
            raise SchemeConfigurationError(f"Invalid document store settings: {e}") from e
