import sqlalchemy

def reflect_table(bind, name, metadata=None):
    if metadata is None:
        metadata = sqlalchemy.MetaData()
    return sqlalchemy.Table(name, metadata, autoload_with=bind)

def is_text_column(column):
    #Enum is a String subclass in SQLAlchemy but isn't free text.
    return isinstance(column.type, sqlalchemy.String) and not isinstance(column.type, sqlalchemy.Enum)

def searchable_column_names(table, fields=None):
    """
    Returns the names of the string and text columns of a table in declaration order.
    If fields is given, only columns named in it are kept. Names in fields that aren't columns are ignored.
    """
    allowed = None if fields is None else {str(field) for field in fields}

    return [
        column.name
        for column in table.columns
        if is_text_column(column) and (allowed is None or column.name in allowed)
    ]
