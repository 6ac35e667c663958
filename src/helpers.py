from collections.abc import Mapping
from src.api.search import is_blank

def field_value(record, field):
    if isinstance(record, Mapping):
        return record.get(field)
    return getattr(record, field, None)

def is_searchable(record, columns):
    """
    Returns True if the record has non-blank content in any searchable column.
    """
    return any(not is_blank(field_value(record, field)) for field in columns)

def search_data(record, columns):
    """
    Returns a dict of the record's searchable columns and their values.
    """
    return {field: field_value(record, field) for field in columns}
