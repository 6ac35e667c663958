from pydantic import BaseModel, ConfigDict, field_validator
from src.database_enum_types import Dialect
from typing import Optional

class SearchConfig(BaseModel):
    """
    Per-table search settings. Created once when a table is registered and never mutated.

    - fields: allow-list of column names, None means every searchable column.
    - case_sensitive: whether matching respects letter case.
    - dialect: the database dialect the generated SQL targets.
    """
    model_config = ConfigDict(frozen=True)

    fields: Optional[frozenset[str]] = None
    case_sensitive: bool = False
    dialect: Dialect = Dialect.Generic

    @field_validator("fields", mode="before")
    @classmethod
    def normalize_fields(cls, value):
        if value is None:
            return None
        return frozenset(str(field) for field in value)

class SearchPredicate(BaseModel):
    model_config = ConfigDict(frozen=True)

    expression: str
    bindings: dict[str, str]

    @property
    def is_empty(self):
        return False

class EmptyPredicate(BaseModel):
    """
    A search that must match no rows (blank query or nothing to search in).
    """
    model_config = ConfigDict(frozen=True)

    @property
    def is_empty(self):
        return True

EMPTY_PREDICATE = EmptyPredicate()
