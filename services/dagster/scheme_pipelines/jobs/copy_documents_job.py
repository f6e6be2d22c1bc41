"""Document copy job: one source split into one sink split."""

from dagster import job

from ..ops import read_documents_op, write_documents_op


@job(
    name="copy_documents_job",
    description="Reads one split of a document store resource and writes it to another resource",
)
def copy_documents_job():
    """
    Copy one split between document store resources.

    Pipeline flow:
    1. read_documents_op: Reads the configured split into rows
    2. write_documents_op: Writes the rows to the target resource
    """
    write_documents_op(read_documents_op())
