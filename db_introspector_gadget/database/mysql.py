"""MySQL catalog reader."""

import re
from typing import Any, List, Optional, Tuple
from urllib.parse import unquote, urlparse

from .base import CatalogReader, parse_nullable
from .models import ColumnMetadata, Dialect

_ENUM_VARIANT = re.compile(r"'((?:[^']|'')*)'")

COLUMNS_QUERY = """
    SELECT
        c.TABLE_NAME,
        c.COLUMN_NAME,
        c.ORDINAL_POSITION,
        c.COLUMN_TYPE,
        c.IS_NULLABLE,
        c.NUMERIC_PRECISION,
        c.NUMERIC_SCALE
    FROM information_schema.COLUMNS c
    JOIN information_schema.TABLES t
      ON t.TABLE_SCHEMA = c.TABLE_SCHEMA
      AND t.TABLE_NAME = c.TABLE_NAME
    WHERE c.TABLE_SCHEMA = %s
      AND t.TABLE_TYPE = 'BASE TABLE'
    ORDER BY c.TABLE_NAME, c.ORDINAL_POSITION
"""

SCHEMA_EXISTS_QUERY = """
    SELECT SCHEMA_NAME
    FROM information_schema.SCHEMATA
    WHERE SCHEMA_NAME = %s
"""


def _text(value: Any) -> str:
    # Some server/driver combinations return information_schema text as bytes
    if isinstance(value, (bytes, bytearray)):
        return value.decode("utf-8")
    return value


def parse_enum_variants(column_type: str) -> Optional[Tuple[str, ...]]:
    """Extract variants from ``enum('a','b')``, in declaration order.

    Returns None for non-enum column types.
    """
    if not column_type.lower().startswith("enum("):
        return None
    body = column_type[column_type.index("(") + 1:column_type.rindex(")")]
    return tuple(v.replace("''", "'") for v in _ENUM_VARIANT.findall(body))


class MySQLCatalogReader(CatalogReader):
    """Client for reading MySQL ``information_schema`` column metadata."""

    dialect = Dialect.MYSQL

    def _open_connection(self) -> Any:
        try:
            import mysql.connector
        except ImportError:
            raise ImportError(
                "mysql-connector-python is required. "
                "Install it with: pip install mysql-connector-python"
            )

        url = urlparse(self.connection_string)
        return mysql.connector.connect(
            host=url.hostname or "localhost",
            port=url.port or 3306,
            user=unquote(url.username) if url.username else None,
            password=unquote(url.password) if url.password else None,
            database=url.path.lstrip("/") or None,
        )

    def _driver_errors(self) -> Tuple[type, ...]:
        import mysql.connector
        return (mysql.connector.Error,)

    def fetch_columns(self, schema: str) -> List[ColumnMetadata]:
        result = self._execute_query(COLUMNS_QUERY, (schema,))

        columns = []
        for row in result:
            table_name, column_name, position, column_type, is_nullable, precision, scale = row
            table_name = _text(table_name)
            column_name = _text(column_name)
            column_type = _text(column_type)
            columns.append(ColumnMetadata(
                table_name=table_name,
                column_name=column_name,
                ordinal_position=int(position),
                data_type=column_type,
                is_nullable=parse_nullable(_text(is_nullable), table_name, column_name),
                enum_variants=parse_enum_variants(column_type),
                numeric_precision=precision,
                numeric_scale=scale,
            ))
        return columns

    def schema_exists(self, schema: str) -> bool:
        return bool(self._execute_query(SCHEMA_EXISTS_QUERY, (schema,)))
