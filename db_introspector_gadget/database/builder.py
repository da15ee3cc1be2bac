"""Builds the dialect-independent schema model from raw catalog rows."""

import logging
from typing import Dict, Iterable

from ..errors import DuplicateColumnError
from .models import ColumnDefinition, ColumnMetadata, Dialect, SchemaModel, TableDefinition
from .type_mappers import get_type_mapper

logger = logging.getLogger(__name__)


def enumeration_source_name(table_name: str, column_name: str) -> str:
    """Source name of the enumeration type backing a column.

    The code generator turns ``users_status`` into ``UsersStatus``.
    """
    return f"{table_name}_{column_name}"


class SchemaModelBuilder:
    """Groups raw column rows by table and maps their types."""

    def __init__(self, dialect: Dialect):
        self.dialect = Dialect(dialect)
        self._type_mapper = get_type_mapper(self.dialect)

    def build(self, rows: Iterable[ColumnMetadata]) -> SchemaModel:
        """Build a SchemaModel from catalog rows.

        Tables keep first-seen order; columns are sorted by ordinal position.

        Raises:
            DuplicateColumnError: if a (table, column) pair appears at two
                different ordinal positions
        """
        grouped: Dict[str, Dict[str, ColumnMetadata]] = {}

        for row in rows:
            table_rows = grouped.setdefault(row.table_name, {})
            seen = table_rows.get(row.column_name)
            if seen is not None:
                if seen.ordinal_position != row.ordinal_position:
                    raise DuplicateColumnError(
                        row.table_name,
                        row.column_name,
                        (seen.ordinal_position, row.ordinal_position),
                    )
                logger.debug("Dropping repeated row for %s.%s", row.table_name, row.column_name)
                continue
            table_rows[row.column_name] = row

        model = SchemaModel()
        for table_name, table_rows in grouped.items():
            ordered = sorted(table_rows.values(), key=lambda r: r.ordinal_position)
            table = TableDefinition(
                name=table_name,
                columns=[self._to_column_definition(row) for row in ordered],
            )
            model.tables.append(table)

        logger.debug(
            "Built schema model with %d tables and %d columns",
            len(model.tables),
            model.column_count,
        )
        return model

    def _to_column_definition(self, row: ColumnMetadata) -> ColumnDefinition:
        output_type = self._type_mapper.to_output_type(
            row.data_type,
            enum_variants=row.enum_variants,
            enum_name=enumeration_source_name(row.table_name, row.column_name),
        )
        return ColumnDefinition(
            name=row.column_name,
            output_type=output_type,
            nullable=row.is_nullable,
            raw_type=row.data_type,
        )


def build_schema_model(rows: Iterable[ColumnMetadata], dialect: Dialect) -> SchemaModel:
    """Build a SchemaModel from catalog rows of the given dialect."""
    return SchemaModelBuilder(dialect).build(rows)
