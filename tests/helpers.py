"""Small builders shared by test modules."""

from src.database_enum_types import Dialect
from src.global_models import SearchConfig


def make_config(dialect: Dialect, case_sensitive: bool = False) -> SearchConfig:
    return SearchConfig(dialect=dialect, case_sensitive=case_sensitive)
