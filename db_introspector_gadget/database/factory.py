"""Creates catalog readers from connection strings."""

from typing import Dict, Type

from ..errors import UnsupportedDialectError
from .base import CatalogReader
from .models import Dialect
from .mysql import MySQLCatalogReader
from .postgres import PostgresCatalogReader

SCHEME_DIALECTS: Dict[str, Dialect] = {
    "mysql": Dialect.MYSQL,
    "postgres": Dialect.POSTGRES,
    "postgresql": Dialect.POSTGRES,
}

READERS: Dict[Dialect, Type[CatalogReader]] = {
    Dialect.MYSQL: MySQLCatalogReader,
    Dialect.POSTGRES: PostgresCatalogReader,
}


def detect_dialect(connection_string: str) -> Dialect:
    """Determine the dialect from a connection string's scheme.

    Raises:
        UnsupportedDialectError: for anything but mysql:// and postgres(ql)://
    """
    scheme, separator, _ = connection_string.partition("://")
    dialect = SCHEME_DIALECTS.get(scheme.lower()) if separator else None
    if dialect is None:
        raise UnsupportedDialectError(connection_string)
    return dialect


def create_catalog_reader(connection_string: str) -> CatalogReader:
    """Create the reader for a connection string. No connection is opened yet."""
    dialect = detect_dialect(connection_string)
    return READERS[dialect](connection_string=connection_string)
