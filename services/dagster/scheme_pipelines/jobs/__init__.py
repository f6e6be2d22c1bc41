"""Dagster Jobs - Executable Workflows."""

from .copy_documents_job import copy_documents_job

__all__ = ["copy_documents_job"]
