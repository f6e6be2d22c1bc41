"""Dagster pipelines driving DocumentScheme splits."""
