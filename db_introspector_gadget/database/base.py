"""Abstract base class for catalog readers."""

import logging
from abc import ABC, abstractmethod
from typing import Any, List, Optional, Sequence, Tuple

from ..errors import ConnectionError, IntrospectionError, SchemaNotFoundError
from .models import ColumnMetadata, Dialect

logger = logging.getLogger(__name__)


def parse_nullable(value: Any, table: str, column: str) -> bool:
    """Interpret an ``IS_NULLABLE`` catalog value."""
    if value == "YES":
        return True
    if value == "NO":
        return False
    raise IntrospectionError(
        f"Unexpected IS_NULLABLE value {value!r} for {table}.{column}",
        details={"table": table, "column": column, "value": value},
    )


class CatalogReader(ABC):
    """Reads raw column metadata for one schema from a database catalog.

    A reader either wraps a live DB-API connection handed to it, or opens
    one itself from a connection string. Only a connection the reader opened
    is closed by ``close()``.
    """

    dialect: Dialect

    def __init__(self, connection: Any = None, connection_string: Optional[str] = None):
        if connection is None and connection_string is None:
            raise ValueError("Either connection or connection_string is required")
        self.connection_string = connection_string
        self._connection = connection
        self._owns_connection = connection is None

    @abstractmethod
    def _open_connection(self) -> Any:
        """Open a DB-API connection from ``self.connection_string``."""
        pass

    @abstractmethod
    def _driver_errors(self) -> Tuple[type, ...]:
        """Exception classes raised by the driver for connection/query failures."""
        pass

    @abstractmethod
    def fetch_columns(self, schema: str) -> List[ColumnMetadata]:
        """Query the catalog for every base-table column in a schema.

        Args:
            schema: Schema (MySQL: database) name

        Returns:
            Rows ordered by table name, then ordinal position
        """
        pass

    @abstractmethod
    def schema_exists(self, schema: str) -> bool:
        """Check whether the catalog knows the schema."""
        pass

    def connect(self):
        """Return the live connection, opening it on first use."""
        if self._connection is not None:
            return self._connection

        try:
            self._connection = self._open_connection()
        except self._driver_errors() as e:
            raise ConnectionError(
                f"Unable to connect to database: {e}",
                details={"dialect": self.dialect.value},
            ) from e
        return self._connection

    def close(self):
        """Close the connection if this reader opened it."""
        if self._connection is not None and self._owns_connection:
            self._connection.close()
            self._connection = None

    def _execute_query(self, sql: str, params: Sequence[Any] = ()) -> List[tuple]:
        """Run one read-only catalog query and return all rows."""
        connection = self.connect()
        try:
            cursor = connection.cursor()
            try:
                cursor.execute(sql, tuple(params))
                return list(cursor.fetchall())
            finally:
                cursor.close()
        except self._driver_errors() as e:
            raise ConnectionError(
                f"Catalog query failed: {e}",
                details={"dialect": self.dialect.value},
            ) from e

    def read_columns(self, schema: str) -> List[ColumnMetadata]:
        """Read every base-table column row for a schema.

        An existing schema without tables yields an empty list.

        Raises:
            ConnectionError: if the catalog cannot be queried
            SchemaNotFoundError: if the catalog reports no such schema
        """
        rows = self.fetch_columns(schema)
        logger.debug("Read %d column rows from %s schema '%s'", len(rows), self.dialect.value, schema)

        if not rows and not self.schema_exists(schema):
            raise SchemaNotFoundError(schema)
        return rows

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
