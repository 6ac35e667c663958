from numbers import Number
from src.database_enum_types import Dialect
from src.global_models import SearchPredicate, EMPTY_PREDICATE

PARAM_PREFIX = "search_param_"

#Clause template, bind value template and whether the query is lowercased, per (dialect, case_sensitive).
#Each dialect lets the database fold case natively where it can, LOWER() is only used where it can't.
OPERATORS = {
    (Dialect.SQLite, True): ("{column} GLOB :{param}", "*{query}*", False),
    (Dialect.SQLite, False): ("LOWER({column}) LIKE :{param}", "%{query}%", True),
    (Dialect.PostgreSQL, True): ("{column} LIKE :{param}", "%{query}%", False),
    (Dialect.PostgreSQL, False): ("{column} ILIKE :{param}", "%{query}%", False),
    (Dialect.MySQL, True): ("{column} LIKE :{param} COLLATE utf8mb4_bin", "%{query}%", False),
    (Dialect.MySQL, False): ("{column} LIKE :{param} COLLATE utf8mb4_unicode_ci", "%{query}%", False),
    (Dialect.Generic, True): ("{column} LIKE :{param}", "%{query}%", False),
    (Dialect.Generic, False): ("LOWER({column}) LIKE :{param}", "%{query}%", True),
}

def is_blank(value):
    """
    Returns True if a search query should be treated as absent.

    None, False, empty and whitespace-only strings are blank.
    Numbers (zero included) and True are not, they are searched for by their string form (see search_text).
    """
    if value is None or value is False:
        return True
    if isinstance(value, str):
        return value.strip() == ""
    if isinstance(value, Number):
        return False
    return not value

def search_text(query):
    #Booleans are searched for as "true"/"false", like the stored text of a boolean.
    if isinstance(query, bool):
        return str(query).lower()
    return str(query)

#Generates the parameter binds for a SQL query and the search clauses for each column.
#quote is applied to table and column names, e.g. a dialect's identifier_preparer.quote.
def build_search_statements(columns, query, config, table_name=None, quote=None):
    clause_template, value_template, lowercase = OPERATORS.get(
        (config.dialect, config.case_sensitive), OPERATORS[(Dialect.Generic, config.case_sensitive)]
    )
    if quote is None:
        quote = str

    search_value = search_text(query)
    if lowercase:
        search_value = search_value.lower()

    search_clauses = []
    binds = {}
    for index, column_name in enumerate(columns):
        param = f"{PARAM_PREFIX}{index}"
        column = f"{quote(table_name)}.{quote(column_name)}" if table_name else quote(column_name)
        search_clauses.append(clause_template.format(column=column, param=param))
        binds[param] = value_template.format(query=search_value)

    return binds, search_clauses

def expand_search_statements(search_clauses):
    #Expand the search clauses into a single OR-ed expression that can be used in a WHERE clause.

    #If no search clauses were provided, return an empty string.
    if not search_clauses:
        return ""

    return "(" + " OR ".join(search_clauses) + ")"

def build_search_predicate(config, columns, query, table_name=None, quote=None):
    """
    Builds the substring search predicate for the given searchable columns.

    Parameters:
    - config (SearchConfig): case sensitivity and dialect of the table being searched.
    - columns (list[str]): searchable column names, already filtered to text columns and config.fields.
    - query: the user's search value.
    - table_name (str): optional table to qualify column names with.
    - quote: optional callable quoting table and column names for the dialect.

    Returns:
    - SearchPredicate with one OR-ed comparison and one bind per column,
      or EMPTY_PREDICATE if the query is blank or there are no columns.
    """

    if is_blank(query) or not columns:
        return EMPTY_PREDICATE

    binds, search_clauses = build_search_statements(columns, query, config, table_name, quote)
    return SearchPredicate(expression=expand_search_statements(search_clauses), bindings=binds)
