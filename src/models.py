from src import database as db
from src.api.search import build_search_predicate
from src.global_models import SearchConfig
from src.schemas import searchable_column_names

class SearchableTable:
    """
    A table registered for search along with its config and searchable columns.
    The columns are worked out once at registration.

    quote is the dialect's identifier quoting, so names in the predicate match the
    ones SQLAlchemy renders in FROM and ORDER BY. Without it names are used as is.
    """

    def __init__(self, table, config: SearchConfig, quote=None):
        self.table = table
        self.config = config
        self.quote = quote
        self.columns = searchable_column_names(table, config.fields)

    @property
    def name(self):
        return self.table.name

    def build(self, query):
        return build_search_predicate(self.config, self.columns, query, self.table.name, self.quote)

def register_searchable(registry, table, bind, fields=None, case_sensitive=None):
    """
    Registers a table as searchable in a caller-owned registry keyed by table name.

    The dialect and its identifier quoting are resolved from bind (an Engine or Connection) here, once.
    If case_sensitive is None, SEARCH_CASE_SENSITIVE decides.
    """
    if case_sensitive is None:
        case_sensitive = db.default_case_sensitive()

    config = SearchConfig(fields=fields, case_sensitive=case_sensitive, dialect=db.dialect_for(bind))
    searchable = SearchableTable(table, config, quote=db.identifier_quoter(bind))
    registry[searchable.name] = searchable
    return searchable
