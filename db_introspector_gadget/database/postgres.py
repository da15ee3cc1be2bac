"""Postgres catalog reader."""

from typing import Any, Dict, List, Tuple

from .base import CatalogReader, parse_nullable
from .models import ColumnMetadata, Dialect

COLUMNS_QUERY = """
    SELECT
        c.table_name,
        c.column_name,
        c.ordinal_position,
        c.data_type,
        c.udt_schema,
        c.udt_name,
        c.is_nullable,
        c.numeric_precision,
        c.numeric_scale
    FROM information_schema.columns c
    JOIN information_schema.tables t
      ON t.table_schema = c.table_schema
      AND t.table_name = c.table_name
    WHERE c.table_schema = %s
      AND t.table_type = 'BASE TABLE'
    ORDER BY c.table_name, c.ordinal_position
"""

ENUM_LABELS_QUERY = """
    SELECT n.nspname, t.typname, e.enumlabel
    FROM pg_catalog.pg_type t
    JOIN pg_catalog.pg_enum e ON e.enumtypid = t.oid
    JOIN pg_catalog.pg_namespace n ON n.oid = t.typnamespace
    ORDER BY n.nspname, t.typname, e.enumsortorder
"""

SCHEMA_EXISTS_QUERY = """
    SELECT schema_name
    FROM information_schema.schemata
    WHERE schema_name = %s
"""

USER_DEFINED = "USER-DEFINED"


class PostgresCatalogReader(CatalogReader):
    """Client for reading Postgres ``information_schema`` column metadata."""

    dialect = Dialect.POSTGRES

    def _open_connection(self) -> Any:
        try:
            import psycopg2
        except ImportError:
            raise ImportError(
                "psycopg2 is required for Postgres connections. "
                "Install it with: pip install psycopg2-binary"
            )

        # libpq only understands the postgresql:// and postgres:// schemes
        return psycopg2.connect(self.connection_string)

    def _driver_errors(self) -> Tuple[type, ...]:
        import psycopg2
        return (psycopg2.Error,)

    def get_enum_labels(self) -> Dict[Tuple[str, str], Tuple[str, ...]]:
        """Map (schema, type name) to enum labels in sort order."""
        labels: Dict[Tuple[str, str], List[str]] = {}
        for schema_name, type_name, label in self._execute_query(ENUM_LABELS_QUERY):
            labels.setdefault((schema_name, type_name), []).append(label)
        return {key: tuple(values) for key, values in labels.items()}

    def fetch_columns(self, schema: str) -> List[ColumnMetadata]:
        result = self._execute_query(COLUMNS_QUERY, (schema,))
        if not result:
            return []

        enum_labels = self.get_enum_labels()

        columns = []
        for row in result:
            (table_name, column_name, position, data_type, udt_schema,
             udt_name, is_nullable, precision, scale) = row

            raw_type = data_type
            enum_variants = None
            if data_type == USER_DEFINED:
                raw_type = udt_name
                enum_variants = enum_labels.get((udt_schema, udt_name))

            columns.append(ColumnMetadata(
                table_name=table_name,
                column_name=column_name,
                ordinal_position=int(position),
                data_type=raw_type,
                is_nullable=parse_nullable(is_nullable, table_name, column_name),
                enum_variants=enum_variants,
                numeric_precision=precision,
                numeric_scale=scale,
            ))
        return columns

    def schema_exists(self, schema: str) -> bool:
        return bool(self._execute_query(SCHEMA_EXISTS_QUERY, (schema,)))
