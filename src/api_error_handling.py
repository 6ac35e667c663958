import logging
from sqlalchemy.exc import OperationalError, ProgrammingError
from fastapi import HTTPException
from enum import Enum

#SQLite reports a missing table or column as an OperationalError
SCHEMA_ERROR_MARKERS = ("no such table", "no such column")

class DatabaseError(Enum):
    OPERATIONAL_ERROR = 1
    PROGRAMMING_ERROR = 2
    SCHEMA_ERROR = 3

def schema_error_exception(err):
    if isinstance(err, OperationalError) and any(marker in str(err.orig).lower() for marker in SCHEMA_ERROR_MARKERS):
        raise HTTPException(status_code=500, detail="Searchable table does not match the database schema")

def operational_error_exception(err):
    if isinstance(err, OperationalError):
        raise HTTPException(status_code=503, detail="Database unavailable")

def programming_error_exception(err):
    if isinstance(err, ProgrammingError):
        raise HTTPException(status_code=500, detail="Invalid search statement")

def handle_error(err, *types: DatabaseError):
    """
    Raises an HTTPException, checking for errors in the types list in order.
    Falls back to a generic 500 if none of them match.
    """

    logging.error(f"Database error: {err}")

    for error_type in types:
        if error_type == DatabaseError.SCHEMA_ERROR:
            schema_error_exception(err)
        elif error_type == DatabaseError.OPERATIONAL_ERROR:
            operational_error_exception(err)
        elif error_type == DatabaseError.PROGRAMMING_ERROR:
            programming_error_exception(err)

    raise HTTPException(status_code=500, detail="Database error")
