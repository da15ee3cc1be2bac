"""TypedDict code generator for introspected schemas."""

import logging
from typing import Dict, List, Optional, Set, Tuple

from ..database.models import (
    ColumnDefinition,
    Enumeration,
    Primitive,
    PrimitiveKind,
    SchemaModel,
    TableDefinition,
)
from .naming import IdentifierRegistry, is_valid_field_name, to_class_name, to_field_name
from .syntax import DEFAULT_SYNTAX_VERSION, OutputSyntaxVersion

logger = logging.getLogger(__name__)

ANY = "Any"

# kind -> (type token, module to import)
PRIMITIVE_TOKENS: Dict[PrimitiveKind, Tuple[str, Optional[str]]] = {
    PrimitiveKind.INTEGER: ("int", None),
    PrimitiveKind.FLOAT: ("float", None),
    PrimitiveKind.STRING: ("str", None),
    PrimitiveKind.BOOLEAN: ("bool", None),
    PrimitiveKind.DATE: ("datetime.date", "datetime"),
    PrimitiveKind.DATETIME: ("datetime.datetime", "datetime"),
    PrimitiveKind.TIME: ("datetime.time", "datetime"),
    PrimitiveKind.TIMEDELTA: ("datetime.timedelta", "datetime"),
    PrimitiveKind.BINARY: ("bytes", None),
    PrimitiveKind.DECIMAL: ("decimal.Decimal", "decimal"),
    PrimitiveKind.UUID: ("uuid.UUID", "uuid"),
    PrimitiveKind.JSON: (ANY, None),
}


class ImportCollector:
    """Imports required by one generated module, deduplicated."""

    def __init__(self):
        self.modules: Set[str] = set()
        self.typing_names: Set[str] = set()

    def add_module(self, module: str) -> None:
        self.modules.add(module)

    def add_typing(self, name: str) -> None:
        self.typing_names.add(name)

    def render(self, version: OutputSyntaxVersion) -> str:
        """Render the import header for the given syntax version."""
        lines = [f"import {module}" for module in sorted(self.modules)]

        extension_names = sorted(self.typing_names & version.typing_extensions_names)
        typing_names = sorted(self.typing_names - version.typing_extensions_names)
        if typing_names:
            lines.append(f"from typing import {', '.join(typing_names)}")
        if extension_names:
            if lines:
                lines.append("")
            lines.append(f"from typing_extensions import {', '.join(extension_names)}")

        return "\n".join(lines)


class TypedDictGenerator:
    """Generates Python TypedDict source from a schema model.

    All state collected while generating (imports, claimed identifiers) is
    local to one ``generate()`` call, so one generator can be reused.
    """

    def __init__(
        self,
        model: SchemaModel,
        version: OutputSyntaxVersion = DEFAULT_SYNTAX_VERSION,
        preserve_column_names: bool = True,
    ):
        self.model = model
        self.version = OutputSyntaxVersion(version)
        self.preserve_column_names = preserve_column_names

    def generate(self) -> str:
        """Render the whole module.

        Raises:
            NameCollisionError: if two tables, enumerations or (when column
                names are sanitized) columns map to the same identifier
        """
        imports = ImportCollector()
        imports.add_typing("TypedDict")
        registry = IdentifierRegistry()

        blocks: List[str] = []
        for table in self.model.tables:
            blocks.extend(self.generate_table(table, imports, registry))

        header = imports.render(self.version)
        return "\n\n\n".join([header] + blocks) + "\n"

    def generate_table(
        self,
        table: TableDefinition,
        imports: ImportCollector,
        registry: IdentifierRegistry,
    ) -> List[str]:
        """Render a table's enumeration aliases (if any) and its record."""
        class_name = registry.register(to_class_name(table.name), f"table '{table.name}'")

        aliases: List[str] = []
        fields: List[Tuple[str, str]] = []
        field_registry = IdentifierRegistry(scope=f"columns of table '{table.name}'")

        for column in table.columns:
            if self.preserve_column_names:
                field_name = column.name
            else:
                field_name = field_registry.register(
                    to_field_name(column.name), f"column '{column.name}'"
                )

            if isinstance(column.output_type, Enumeration):
                alias_name = registry.register(
                    to_class_name(column.output_type.name),
                    f"enumeration '{table.name}.{column.name}'",
                )
                aliases.append(self.generate_enumeration(alias_name, column.output_type, imports))
                base_token = alias_name
            else:
                base_token = self._primitive_token(column, imports)

            fields.append((field_name, self._optional(base_token, column.nullable, imports)))

        use_class_syntax = self.version.supports_class_syntax and all(
            is_valid_field_name(name) for name, _ in fields
        )
        if use_class_syntax:
            record = self._class_syntax(class_name, fields)
        else:
            logger.debug("Using functional TypedDict syntax for table %s", table.name)
            record = self._functional_syntax(class_name, fields)

        blocks = []
        if aliases:
            blocks.append("\n".join(aliases))
        blocks.append(record)
        return blocks

    def generate_enumeration(
        self,
        alias_name: str,
        enumeration: Enumeration,
        imports: ImportCollector,
    ) -> str:
        """Render an enumeration as a Literal alias, variants in declared order."""
        imports.add_typing("Literal")
        variants = ", ".join(repr(v) for v in enumeration.variants)
        return f"{alias_name} = Literal[{variants}]"

    def _primitive_token(self, column: ColumnDefinition, imports: ImportCollector) -> str:
        if isinstance(column.output_type, Primitive):
            token, module = PRIMITIVE_TOKENS[column.output_type.kind]
        else:
            token, module = ANY, None

        if module:
            imports.add_module(module)
        if token == ANY:
            imports.add_typing(ANY)
        return token

    def _optional(self, token: str, nullable: bool, imports: ImportCollector) -> str:
        # Any already admits None
        if not nullable or token == ANY:
            return token
        if self.version.supports_union_operator:
            return f"{token} | None"
        imports.add_typing("Optional")
        return f"Optional[{token}]"

    @staticmethod
    def _class_syntax(class_name: str, fields: List[Tuple[str, str]]) -> str:
        lines = [f"class {class_name}(TypedDict):"]
        if not fields:
            lines.append("    pass")
        for name, token in fields:
            lines.append(f"    {name}: {token}")
        return "\n".join(lines)

    @staticmethod
    def _functional_syntax(class_name: str, fields: List[Tuple[str, str]]) -> str:
        if not fields:
            return f"{class_name} = TypedDict({class_name!r}, {{}})"
        lines = [f"{class_name} = TypedDict({class_name!r}, {{"]
        for name, token in fields:
            lines.append(f"    {name!r}: {token},")
        lines.append("})")
        return "\n".join(lines)


def render(
    model: SchemaModel,
    version: OutputSyntaxVersion = DEFAULT_SYNTAX_VERSION,
    preserve_column_names: bool = True,
) -> str:
    """Render a schema model as Python TypedDict source."""
    return TypedDictGenerator(model, version, preserve_column_names).generate()
