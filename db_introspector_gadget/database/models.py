"""Data models for schema introspection and the normalized type model."""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple, Union


class Dialect(str, Enum):
    """Supported database dialects."""
    MYSQL = "mysql"
    POSTGRES = "postgres"


class PrimitiveKind(str, Enum):
    """Dialect-independent scalar kinds a column can map to."""
    INTEGER = "integer"
    FLOAT = "float"
    STRING = "string"
    BOOLEAN = "boolean"
    DATE = "date"
    DATETIME = "datetime"
    TIME = "time"
    TIMEDELTA = "timedelta"
    BINARY = "binary"
    DECIMAL = "decimal"
    UUID = "uuid"
    JSON = "json"


@dataclass(frozen=True)
class ColumnMetadata:
    """A raw column row as reported by a dialect's catalog."""
    table_name: str
    column_name: str
    ordinal_position: int
    data_type: str
    is_nullable: bool = True
    enum_variants: Optional[Tuple[str, ...]] = None
    numeric_precision: Optional[int] = None
    numeric_scale: Optional[int] = None


@dataclass(frozen=True)
class Primitive:
    kind: PrimitiveKind


@dataclass(frozen=True)
class Enumeration:
    """A closed set of string values, in declaration order."""
    name: str
    variants: Tuple[str, ...]


@dataclass(frozen=True)
class Unknown:
    """A type with no known mapping; rendered as the permissive type."""


OutputType = Union[Primitive, Enumeration, Unknown]


@dataclass(frozen=True)
class UnknownTypeMapping:
    """Non-fatal record of a column whose raw type could not be mapped."""
    table_name: str
    column_name: str
    raw_type: str

    def __str__(self) -> str:
        return f"{self.table_name}.{self.column_name}: unknown type '{self.raw_type}'"


@dataclass
class ColumnDefinition:
    """A column with its normalized type."""
    name: str
    output_type: OutputType
    nullable: bool = False
    raw_type: str = ""


@dataclass
class TableDefinition:
    """A table and its columns in ordinal order."""
    name: str
    columns: List[ColumnDefinition] = field(default_factory=list)

    def get_column(self, name: str) -> Optional[ColumnDefinition]:
        for column in self.columns:
            if column.name == name:
                return column
        return None


@dataclass
class SchemaModel:
    """Ordered collection of table definitions for one schema."""
    tables: List[TableDefinition] = field(default_factory=list)

    def get_table(self, name: str) -> Optional[TableDefinition]:
        """Find a table by its catalog name."""
        for table in self.tables:
            if table.name == name:
                return table
        return None

    @property
    def unknown_type_mappings(self) -> List[UnknownTypeMapping]:
        """Columns that fell back to the permissive type, in model order."""
        return [
            UnknownTypeMapping(table.name, column.name, column.raw_type)
            for table in self.tables
            for column in table.columns
            if isinstance(column.output_type, Unknown)
        ]

    @property
    def enumerations(self) -> List[Enumeration]:
        """Enumeration types referenced by the model, in model order."""
        return [
            column.output_type
            for table in self.tables
            for column in table.columns
            if isinstance(column.output_type, Enumeration)
        ]

    @property
    def column_count(self) -> int:
        return sum(len(table.columns) for table in self.tables)
