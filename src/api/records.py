from fastapi import APIRouter, HTTPException, Query, Request
from fastapi.responses import JSONResponse
from fastapi.encoders import jsonable_encoder
from src.api_error_handling import handle_error, DatabaseError as db_error
from src import filter as search_filter

from sqlalchemy.exc import DBAPIError

router = APIRouter(
    prefix="/search",
    tags=["search"],
)

@router.get("/{table_name}")
def search_records(request: Request,
                   table_name: str,
                   q: str | None = None,
                   limit: int = Query(50, ge=1, le=500),
                   offset: int = Query(0, ge=0)):
    """
    Searches every searchable column of a registered table for a substring.

    Parameters:
    - table_name (str): The registered table to search.
    - q (str): The value to search for. A blank value matches nothing.
    - limit (int): Maximum number of rows to return.
    - offset (int): Number of rows to skip.

    Returns:
    - The table name, the number of rows returned and the rows themselves.

    Raises:
    - HTTPException 404: If the table isn't registered as searchable.
    - HTTPException 500/503: If there is a database error.
    """

    searchable = request.app.state.searchable_tables.get(table_name)
    if searchable is None:
        raise HTTPException(status_code=404, detail=f"{table_name} is not searchable")

    try:
        with request.app.state.engine.connect() as conn:
            rows = search_filter.search(conn, searchable, q, limit=limit, offset=offset)

    except DBAPIError as error:
        handle_error(error, db_error.SCHEMA_ERROR, db_error.OPERATIONAL_ERROR, db_error.PROGRAMMING_ERROR)

    results = [dict(row) for row in rows]
    return JSONResponse(
        status_code=200,
        content=jsonable_encoder({"table": table_name, "count": len(results), "results": results}),
    )
