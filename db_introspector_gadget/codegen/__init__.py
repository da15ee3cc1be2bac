"""Python code generation module for db-introspector-gadget.

Renders a schema model as TypedDict definitions, one per table, with
Literal aliases for enumeration columns.
"""

from .generator import TypedDictGenerator, ImportCollector, render
from .naming import IdentifierRegistry, to_class_name, to_field_name
from .syntax import OutputSyntaxVersion, DEFAULT_SYNTAX_VERSION

__all__ = [
    "TypedDictGenerator",
    "ImportCollector",
    "render",
    "IdentifierRegistry",
    "to_class_name",
    "to_field_name",
    "OutputSyntaxVersion",
    "DEFAULT_SYNTAX_VERSION",
]
