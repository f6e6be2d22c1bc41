"""Dagster Definitions - Repository Configuration.

Defines jobs and resources for the document store scheme pipelines.
"""

from dagster import Definitions, EnvVar

from .jobs import copy_documents_job
from .resources import DocumentStoreResource


defs = Definitions(
    jobs=[copy_documents_job],
    resources={
        "document_store": DocumentStoreResource(
            connection_string=EnvVar("MONGO_CONNECTION_STRING"),
            database="docstore",
        ),
    },
)
