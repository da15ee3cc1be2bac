"""Database introspection module for db-introspector-gadget.

This module reads column metadata from MySQL and Postgres catalogs and
normalizes it into a dialect-independent schema model.
"""

from .models import (
    ColumnMetadata,
    ColumnDefinition,
    Dialect,
    Enumeration,
    OutputType,
    Primitive,
    PrimitiveKind,
    SchemaModel,
    TableDefinition,
    Unknown,
    UnknownTypeMapping,
)
from .base import CatalogReader
from .builder import SchemaModelBuilder, build_schema_model
from .type_mappers import TypeMapper, MySQLTypeMapper, PostgresTypeMapper, get_type_mapper, map_type
from .mysql import MySQLCatalogReader
from .postgres import PostgresCatalogReader
from .factory import create_catalog_reader, detect_dialect

__all__ = [
    # Data models
    "ColumnMetadata",
    "ColumnDefinition",
    "Dialect",
    "Enumeration",
    "OutputType",
    "Primitive",
    "PrimitiveKind",
    "SchemaModel",
    "TableDefinition",
    "Unknown",
    "UnknownTypeMapping",
    # Model building
    "SchemaModelBuilder",
    "build_schema_model",
    # Type mappers
    "TypeMapper",
    "MySQLTypeMapper",
    "PostgresTypeMapper",
    "get_type_mapper",
    "map_type",
    # Catalog readers
    "CatalogReader",
    "MySQLCatalogReader",
    "PostgresCatalogReader",
    "create_catalog_reader",
    "detect_dialect",
]
