"""Error types for db-introspector-gadget."""

from typing import Optional, Dict, Any


class IntrospectorError(Exception):
    """Base exception for introspection and generation errors."""

    def __init__(self, message: str, code: str = "INTROSPECTOR_ERROR", details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary for structured output."""
        return {
            "code": self.code,
            "message": self.message,
            "details": self.details,
        }


class ConnectionError(IntrospectorError):
    """Error connecting to the database or issuing a catalog query."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, code="CONNECTION_ERROR", details=details)


class UnsupportedDialectError(IntrospectorError):
    """Connection string does not name a supported database."""

    def __init__(self, connection_string: str):
        scheme = connection_string.split("://", 1)[0] if "://" in connection_string else connection_string
        super().__init__(
            f"Unsupported connection string scheme '{scheme}'. "
            "Use mysql://... or postgres://...",
            code="UNSUPPORTED_DIALECT",
            details={"scheme": scheme},
        )


class SchemaNotFoundError(IntrospectorError):
    """The catalog positively reports that the schema does not exist."""

    def __init__(self, schema: str):
        super().__init__(
            f"Schema not found: {schema}",
            code="SCHEMA_NOT_FOUND",
            details={"schema": schema},
        )
        self.schema = schema


class IntrospectionError(IntrospectorError):
    """Catalog returned rows that cannot be interpreted."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, code="INTROSPECTION_ERROR", details=details)


class DuplicateColumnError(IntrospectorError):
    """Two catalog rows report the same column at different positions."""

    def __init__(self, table: str, column: str, positions: tuple):
        super().__init__(
            f"Column '{column}' of table '{table}' reported at ordinal positions "
            f"{positions[0]} and {positions[1]}",
            code="DUPLICATE_COLUMN",
            details={"table": table, "column": column, "positions": list(positions)},
        )
        self.table = table
        self.column = column
        self.positions = positions


class NameCollisionError(IntrospectorError):
    """Two distinct source names sanitize to the same Python identifier."""

    def __init__(self, identifier: str, first: str, second: str, scope: str = "module"):
        super().__init__(
            f"{first} and {second} both map to identifier '{identifier}' ({scope})",
            code="NAME_COLLISION",
            details={"identifier": identifier, "names": [first, second], "scope": scope},
        )
        self.identifier = identifier
        self.names = (first, second)
