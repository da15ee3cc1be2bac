"""Database-specific type mapping strategies."""

import re
from abc import ABC, abstractmethod
from typing import Dict, Optional, Sequence

from .models import Dialect, Enumeration, OutputType, Primitive, PrimitiveKind, Unknown

_PARAMETERS = re.compile(r"\([^)]*\)")
_WHITESPACE = re.compile(r"\s+")


def normalize_type_name(raw_type: str) -> str:
    """Lower-case a raw type name and strip its length/precision parameters.

    ``VARCHAR(255)`` becomes ``varchar`` and
    ``timestamp(6) with time zone`` becomes ``timestamp with time zone``.
    """
    stripped = _PARAMETERS.sub(" ", raw_type.lower())
    return _WHITESPACE.sub(" ", stripped).strip()


MYSQL_TYPES: Dict[str, PrimitiveKind] = {
    # String types
    "char": PrimitiveKind.STRING,
    "varchar": PrimitiveKind.STRING,
    "tinytext": PrimitiveKind.STRING,
    "text": PrimitiveKind.STRING,
    "mediumtext": PrimitiveKind.STRING,
    "longtext": PrimitiveKind.STRING,
    "enum": PrimitiveKind.STRING,
    "set": PrimitiveKind.STRING,

    # Integer types
    "tinyint": PrimitiveKind.INTEGER,
    "smallint": PrimitiveKind.INTEGER,
    "mediumint": PrimitiveKind.INTEGER,
    "int": PrimitiveKind.INTEGER,
    "integer": PrimitiveKind.INTEGER,
    "bigint": PrimitiveKind.INTEGER,
    "year": PrimitiveKind.INTEGER,

    # Floating point and fixed point
    "float": PrimitiveKind.FLOAT,
    "double": PrimitiveKind.FLOAT,
    "double precision": PrimitiveKind.FLOAT,
    "real": PrimitiveKind.FLOAT,
    "decimal": PrimitiveKind.DECIMAL,
    "numeric": PrimitiveKind.DECIMAL,

    # Boolean
    "bool": PrimitiveKind.BOOLEAN,
    "boolean": PrimitiveKind.BOOLEAN,

    # Date/Time types
    "date": PrimitiveKind.DATE,
    "datetime": PrimitiveKind.DATETIME,
    "timestamp": PrimitiveKind.DATETIME,
    "time": PrimitiveKind.TIME,

    # Binary types
    "binary": PrimitiveKind.BINARY,
    "varbinary": PrimitiveKind.BINARY,
    "tinyblob": PrimitiveKind.BINARY,
    "blob": PrimitiveKind.BINARY,
    "mediumblob": PrimitiveKind.BINARY,
    "longblob": PrimitiveKind.BINARY,
    "bit": PrimitiveKind.BINARY,

    "json": PrimitiveKind.JSON,
}


POSTGRES_TYPES: Dict[str, PrimitiveKind] = {
    # Integer types
    "smallint": PrimitiveKind.INTEGER,
    "integer": PrimitiveKind.INTEGER,
    "bigint": PrimitiveKind.INTEGER,
    "int2": PrimitiveKind.INTEGER,
    "int4": PrimitiveKind.INTEGER,
    "int8": PrimitiveKind.INTEGER,
    "smallserial": PrimitiveKind.INTEGER,
    "serial": PrimitiveKind.INTEGER,
    "bigserial": PrimitiveKind.INTEGER,

    # Floating point and fixed point
    "real": PrimitiveKind.FLOAT,
    "double precision": PrimitiveKind.FLOAT,
    "float4": PrimitiveKind.FLOAT,
    "float8": PrimitiveKind.FLOAT,
    "numeric": PrimitiveKind.DECIMAL,
    "decimal": PrimitiveKind.DECIMAL,
    "money": PrimitiveKind.DECIMAL,

    # String types
    "character varying": PrimitiveKind.STRING,
    "varchar": PrimitiveKind.STRING,
    "character": PrimitiveKind.STRING,
    "char": PrimitiveKind.STRING,
    "bpchar": PrimitiveKind.STRING,
    "text": PrimitiveKind.STRING,
    "citext": PrimitiveKind.STRING,
    "name": PrimitiveKind.STRING,
    "inet": PrimitiveKind.STRING,
    "cidr": PrimitiveKind.STRING,
    "macaddr": PrimitiveKind.STRING,
    "xml": PrimitiveKind.STRING,

    # Boolean
    "boolean": PrimitiveKind.BOOLEAN,
    "bool": PrimitiveKind.BOOLEAN,

    # Date/Time types
    "date": PrimitiveKind.DATE,
    "timestamp": PrimitiveKind.DATETIME,
    "timestamp without time zone": PrimitiveKind.DATETIME,
    "timestamp with time zone": PrimitiveKind.DATETIME,
    "timestamptz": PrimitiveKind.DATETIME,
    "time": PrimitiveKind.TIME,
    "time without time zone": PrimitiveKind.TIME,
    "time with time zone": PrimitiveKind.TIME,
    "timetz": PrimitiveKind.TIME,
    "interval": PrimitiveKind.TIMEDELTA,

    "bytea": PrimitiveKind.BINARY,
    "uuid": PrimitiveKind.UUID,
    "json": PrimitiveKind.JSON,
    "jsonb": PrimitiveKind.JSON,
}


class TypeMapper(ABC):
    """Abstract base class for database type mapping."""

    dialect: Dialect

    @abstractmethod
    def normalize(self, raw_type: str) -> str:
        """Reduce a raw catalog type name to a lookup key."""
        pass

    @abstractmethod
    def lookup(self, raw_type: str) -> Optional[PrimitiveKind]:
        """Return the primitive kind for a raw type, or None if unknown."""
        pass

    def to_output_type(
        self,
        raw_type: str,
        enum_variants: Optional[Sequence[str]] = None,
        enum_name: str = "",
    ) -> OutputType:
        """Convert a raw catalog type into an OutputType.

        Never raises: unrecognized types become ``Unknown``.
        """
        if enum_variants:
            return Enumeration(name=enum_name, variants=tuple(enum_variants))

        kind = self.lookup(raw_type)
        if kind is None:
            return Unknown()
        return Primitive(kind)


class MySQLTypeMapper(TypeMapper):
    """Type mapper for MySQL ``COLUMN_TYPE`` values."""

    dialect = Dialect.MYSQL

    _MODIFIERS = {"unsigned", "signed", "zerofill"}

    def normalize(self, raw_type: str) -> str:
        words = normalize_type_name(raw_type).split(" ")
        return " ".join(w for w in words if w not in self._MODIFIERS)

    def lookup(self, raw_type: str) -> Optional[PrimitiveKind]:
        normalized = self.normalize(raw_type)
        # tinyint(1) is MySQL's boolean
        if normalized == "tinyint" and re.match(r"^\s*tinyint\s*\(\s*1\s*\)", raw_type, re.IGNORECASE):
            return PrimitiveKind.BOOLEAN
        return MYSQL_TYPES.get(normalized)


class PostgresTypeMapper(TypeMapper):
    """Type mapper for Postgres ``data_type`` / ``udt_name`` values."""

    dialect = Dialect.POSTGRES

    def normalize(self, raw_type: str) -> str:
        return normalize_type_name(raw_type)

    def lookup(self, raw_type: str) -> Optional[PrimitiveKind]:
        return POSTGRES_TYPES.get(self.normalize(raw_type))


_MAPPERS: Dict[Dialect, TypeMapper] = {
    Dialect.MYSQL: MySQLTypeMapper(),
    Dialect.POSTGRES: PostgresTypeMapper(),
}


def get_type_mapper(dialect: Dialect) -> TypeMapper:
    """Return the type mapper for a dialect."""
    return _MAPPERS[Dialect(dialect)]


def map_type(
    raw_type: str,
    dialect: Dialect,
    enum_variants: Optional[Sequence[str]] = None,
    enum_name: str = "",
) -> OutputType:
    """Map a raw SQL type name to an OutputType for the given dialect."""
    return get_type_mapper(dialect).to_output_type(raw_type, enum_variants, enum_name)
