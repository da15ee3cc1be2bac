"""Shared pytest fixtures for db-introspector-gadget tests."""

import pytest
from unittest.mock import MagicMock

from db_introspector_gadget.database.models import ColumnMetadata


def make_connection(*results):
    """Create a DB-API connection mock whose cursor returns each result in turn."""
    connection = MagicMock()
    cursor = connection.cursor.return_value
    cursor.fetchall.side_effect = [list(r) for r in results]
    return connection


@pytest.fixture
def fake_connection():
    """Factory for DB-API connection mocks."""
    return make_connection


@pytest.fixture
def users_rows():
    """Postgres catalog rows for a simple users table."""
    return [
        ColumnMetadata(table_name="users", column_name="id", ordinal_position=1,
                       data_type="integer", is_nullable=False),
        ColumnMetadata(table_name="users", column_name="name", ordinal_position=2,
                       data_type="character varying", is_nullable=False),
        ColumnMetadata(table_name="users", column_name="email", ordinal_position=3,
                       data_type="character varying", is_nullable=False),
        ColumnMetadata(table_name="users", column_name="created_at", ordinal_position=4,
                       data_type="timestamp without time zone", is_nullable=False),
    ]


@pytest.fixture
def shop_rows():
    """MySQL catalog rows for two tables, one with an enum column."""
    return [
        ColumnMetadata(table_name="orders", column_name="id", ordinal_position=1,
                       data_type="int unsigned", is_nullable=False),
        ColumnMetadata(table_name="orders", column_name="status", ordinal_position=2,
                       data_type="enum('pending','shipped','cancelled')", is_nullable=False,
                       enum_variants=("pending", "shipped", "cancelled")),
        ColumnMetadata(table_name="orders", column_name="total", ordinal_position=3,
                       data_type="decimal(10,2)", is_nullable=False,
                       numeric_precision=10, numeric_scale=2),
        ColumnMetadata(table_name="orders", column_name="shipped_at", ordinal_position=4,
                       data_type="datetime", is_nullable=True),
        ColumnMetadata(table_name="products", column_name="id", ordinal_position=1,
                       data_type="int", is_nullable=False),
        ColumnMetadata(table_name="products", column_name="in_stock", ordinal_position=2,
                       data_type="tinyint(1)", is_nullable=False),
        ColumnMetadata(table_name="products", column_name="location", ordinal_position=3,
                       data_type="point", is_nullable=True),
    ]


@pytest.fixture
def users_postgres_catalog_rows():
    """Raw information_schema rows for the users table (Postgres column order)."""
    return [
        ("users", "id", 1, "integer", "pg_catalog", "int4", "NO", 32, 0),
        ("users", "name", 2, "character varying", "pg_catalog", "varchar", "NO", None, None),
        ("users", "email", 3, "character varying", "pg_catalog", "varchar", "NO", None, None),
        ("users", "created_at", 4, "timestamp without time zone", "pg_catalog", "timestamp", "NO", None, None),
    ]
