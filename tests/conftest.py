"""Shared test fixtures: an in-memory SQLite database with a ``test_models`` table."""

import pytest
import sqlalchemy
from sqlalchemy.pool import StaticPool


@pytest.fixture
def metadata() -> sqlalchemy.MetaData:
    return sqlalchemy.MetaData()


@pytest.fixture
def test_models(metadata: sqlalchemy.MetaData) -> sqlalchemy.Table:
    return sqlalchemy.Table(
        "test_models",
        metadata,
        sqlalchemy.Column("id", sqlalchemy.Integer, primary_key=True),
        sqlalchemy.Column("name", sqlalchemy.String(255)),
        sqlalchemy.Column("description", sqlalchemy.Text),
        sqlalchemy.Column("status", sqlalchemy.Enum("active", "archived", name="status")),
        sqlalchemy.Column("age", sqlalchemy.Integer),
        sqlalchemy.Column("created_at", sqlalchemy.DateTime),
    )


@pytest.fixture
def engine(metadata: sqlalchemy.MetaData, test_models: sqlalchemy.Table):
    # StaticPool keeps one connection so every thread sees the same in-memory database
    engine = sqlalchemy.create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def seed(engine, test_models):
    """Insert rows into ``test_models`` and return the engine."""

    def _seed(*rows: dict):
        with engine.begin() as conn:
            conn.execute(sqlalchemy.insert(test_models), list(rows))
        return engine

    return _seed


@pytest.fixture
def people(seed):
    return seed(
        {"name": "John Doe", "description": "Software developer", "age": 30},
        {"name": "Jane Smith", "description": "Product designer", "age": 28},
        {"name": "Bob Johnson", "description": "Data analyst", "age": 45},
    )
