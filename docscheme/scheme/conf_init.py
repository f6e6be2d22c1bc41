# =============================================================================
# Job Settings Initialization
# =============================================================================
# One-time, per-job publication of the connection target, field names,
# format bindings and default value reader / writer.
# =============================================================================

"""
Conf-init steps run before a source or sink split starts.

Both steps only write values that are identical for every split of a job,
so running them concurrently or more than once is harmless.
"""

import logging
from typing import Callable, Optional

from ..models import FieldSet, JobSettings, SettingKeys
from ..serialization import (
    PythonValueReader,
    TupleValueWriter,
    set_value_reader_if_not_set,
    set_value_writer_if_not_set,
)
from .resolver import resolve_names

__all__ = ["init_target", "init_source_settings", "init_sink_settings"]

logger = logging.getLogger(__name__)


def init_target(settings: JobSettings, hosts: str, port: int, resource: str) -> None:
    """Publish the connection target. Validation happens at prepare time."""
    settings.set(SettingKeys.NODES, hosts).set(SettingKeys.PORT, port).set(
        SettingKeys.RESOURCE, resource
    )


def init_source_settings(
    settings: JobSettings,
    hosts: str,
    port: int,
    resource: str,
    source_fields: Optional[FieldSet],
    input_format: Optional[Callable] = None,
) -> None:
    """
    Prepare job settings for source splits.

    Args:
        settings: Job settings to populate
        hosts: Store host(s), comma-separated
        port: Store port
        resource: Target resource path
        source_fields: Static source fields of the scheme
        input_format: Factory opening a record cursor, bound if given
    """
    init_target(settings, hosts, port, resource)
    if input_format is not None:
        settings.set(SettingKeys.INPUT_FORMAT, input_format)

    names = resolve_names(source_fields)
    settings.set(SettingKeys.TARGET_FIELDS, ",".join(names))
    set_value_reader_if_not_set(settings, PythonValueReader, logger)

    logger.info(
        f"Source settings initialized: hosts={hosts}, port={port}, "
        f"resource={resource}, fields={names or 'auto'}"
    )


def init_sink_settings(
    settings: JobSettings,
    hosts: str,
    port: int,
    resource: str,
    sink_fields: Optional[FieldSet],
    output_format: Optional[Callable] = None,
) -> None:
    """
    Prepare job settings for sink splits.

    Besides the target and the default value writer / reader, the
    output-directory marker is set to the resource path so the host job
    does not substitute a temporary output location.

    Args:
        settings: Job settings to populate
        hosts: Store host(s), comma-separated
        port: Store port
        resource: Target resource path
        sink_fields: Static sink fields of the scheme
        output_format: Factory opening a collector, bound if given
    """
    init_target(settings, hosts, port, resource)
    if output_format is not None:
        settings.set(SettingKeys.OUTPUT_FORMAT, output_format)

    set_value_writer_if_not_set(settings, TupleValueWriter, logger)
    set_value_reader_if_not_set(settings, PythonValueReader, logger)

    settings.set(SettingKeys.OUTPUT_DIR, resource)

    names = resolve_names(sink_fields)
    settings.set(SettingKeys.TARGET_FIELDS, ",".join(names))

    logger.info(
        f"Sink settings initialized: hosts={hosts}, port={port}, "
        f"resource={resource}, fields={names or 'auto'}"
    )
