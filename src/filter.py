import logging
import sqlalchemy

def apply_search(statement, predicate):
    """
    Adds a search predicate to the WHERE clause of a select.
    An empty predicate matches no rows, it never means "no filter".
    """
    if predicate.is_empty:
        return statement.where(sqlalchemy.false())

    return statement.where(sqlalchemy.text(predicate.expression).bindparams(**predicate.bindings))

def search(conn, searchable, query, limit=None, offset=None):
    """
    Runs a substring search over a registered table.

    Parameters:
    - conn: an open SQLAlchemy Connection.
    - searchable (SearchableTable): the table to search and its config.
    - query: the user's search value.
    - limit, offset: optional paging.

    Returns:
    - A list of row mappings, ordered by primary key.
    """

    predicate = searchable.build(query)
    if predicate.is_empty:
        logging.debug(f"Empty search on {searchable.name}, returning no rows")
        return []

    statement = apply_search(sqlalchemy.select(searchable.table), predicate)

    #Order by primary key so paging is stable
    statement = statement.order_by(*searchable.table.primary_key.columns)
    if limit is not None:
        statement = statement.limit(limit)
    if offset is not None:
        statement = statement.offset(offset)

    return [row for row in conn.execute(statement).mappings()]
