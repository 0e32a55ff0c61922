"""
Submission Persistence

Writes one validated submission with a fixed, parameterized insert.
"""
import logging

from django.db import DatabaseError, connection

from .constants import TABLE_COLUMNS

logger = logging.getLogger(__name__)


class SubmissionStorageError(Exception):
    """Raised when a validated submission could not be written."""
    pass


def _build_insert_statement(table, columns):
    placeholders = ', '.join(['%s'] * len(columns))
    return f"INSERT INTO {table} ({', '.join(columns)}) VALUES ({placeholders})"


INSERT_STATEMENTS = {
    table: _build_insert_statement(table, columns)
    for table, columns in TABLE_COLUMNS.items()
}


def get_insert_statement(table):
    """Return the insert template for ``table``."""
    try:
        return INSERT_STATEMENTS[table]
    except KeyError:
        raise ValueError(f"Unknown table: {table}")


def record_submission(table, parameters):
    """
    Insert one row into ``table``.

    Exactly one statement is executed; there is no retry, so a client that
    resends the same request gets a second row.

    Raises:
        SubmissionStorageError: If the database rejects or fails the insert.
    """
    statement = get_insert_statement(table)

    try:
        with connection.cursor() as cursor:
            cursor.execute(statement, list(parameters))
    except DatabaseError as e:
        logger.exception(f"Failed to record submission into {table}: {e}")
        raise SubmissionStorageError(str(e)) from e

    logger.info(f"Recorded submission into {table}")
