"""Unit tests for the initial Alembic revision.

The revision is applied to an in-memory SQLite database and the resulting
schema is compared with the ORM metadata the application writes through.
"""

import importlib.util
from pathlib import Path

import pytest
from alembic.operations import Operations
from alembic.runtime.migration import MigrationContext
from sqlalchemy import create_engine, inspect

from mylife_companion.core.database import Base
from mylife_companion.core.database import entities  # noqa: F401

VERSIONS_DIR = Path(__file__).resolve().parents[5] / "alembic" / "versions"


def _load_revision(name: str):
    spec = importlib.util.spec_from_file_location(name, VERSIONS_DIR / f"{name}.py")
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


@pytest.fixture
def initial_revision():
    return _load_revision("20261019_000000_initial_schema")


@pytest.fixture
def sync_engine():
    engine = create_engine("sqlite://")
    try:
        yield engine
    finally:
        engine.dispose()


def _run(engine, fn) -> None:
    with engine.begin() as conn:
        context = MigrationContext.configure(conn)
        with Operations.context(context):
            fn()


class TestInitialSchema:
    def test_revision_is_the_root(self, initial_revision):
        assert initial_revision.revision == "20261019_000000"
        assert initial_revision.down_revision is None

    def test_upgrade_matches_orm_metadata(self, initial_revision, sync_engine):
        _run(sync_engine, initial_revision.upgrade)

        inspector = inspect(sync_engine)
        assert set(inspector.get_table_names()) == set(Base.metadata.tables)
        for name, table in Base.metadata.tables.items():
            columns = {column["name"]: column for column in inspector.get_columns(name)}
            assert set(columns) == set(table.columns.keys()), name
            for column in table.columns:
                assert columns[column.name]["nullable"] == column.nullable, f"{name}.{column.name}"

    def test_upgrade_creates_unique_login_indexes(self, initial_revision, sync_engine):
        _run(sync_engine, initial_revision.upgrade)

        indexes = {index["name"]: index for index in inspect(sync_engine).get_indexes("users")}
        assert indexes["ix_users_username"]["unique"]
        assert indexes["ix_users_email"]["unique"]

    def test_downgrade_drops_every_table(self, initial_revision, sync_engine):
        _run(sync_engine, initial_revision.upgrade)
        _run(sync_engine, initial_revision.downgrade)

        assert inspect(sync_engine).get_table_names() == []
