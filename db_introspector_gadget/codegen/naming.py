"""Identifier sanitization for generated Python source.

Every rule here is deterministic, so regenerating from an unchanged schema
yields the same identifiers.
"""

import keyword
import re
from typing import Dict, Iterable

from ..errors import NameCollisionError

# Names bound by the generated module's own imports
GENERATED_MODULE_NAMES = frozenset({
    "Any",
    "Literal",
    "Optional",
    "TypedDict",
    "datetime",
    "decimal",
    "uuid",
})

_WORD_SEPARATORS = re.compile(r"[\W_]+")
# lower->Upper ("orderItems") and acronym->Word ("HTTPLogs")
_CASE_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])|(?<=[A-Z])(?=[A-Z][a-z])")
_NON_IDENTIFIER = re.compile(r"\W+")


def is_mangled_name(name: str) -> bool:
    """Whether a class-body name would be rewritten by private name mangling."""
    return name.startswith("__") and not name.endswith("__")


def is_valid_field_name(name: str) -> bool:
    """Whether a column name can be written as a class-body field as-is."""
    return name.isidentifier() and not keyword.iskeyword(name) and not is_mangled_name(name)


def _finish_identifier(candidate: str, reserved: Iterable[str] = ()) -> str:
    if not candidate:
        return "_"
    if candidate[0].isdigit():
        candidate = f"_{candidate}"
    if keyword.iskeyword(candidate) or candidate in reserved:
        candidate = f"{candidate}_"
    return candidate


def to_class_name(name: str) -> str:
    """Convert a table name to a PascalCase class identifier.

    ``user_accounts`` -> ``UserAccounts``, ``orderItems`` -> ``OrderItems``,
    ``HTTPLogs`` -> ``HttpLogs``, ``2fa_codes`` -> ``_2faCodes``,
    ``none`` -> ``None_``.
    """
    parts = []
    for chunk in _WORD_SEPARATORS.split(name):
        parts.extend(_CASE_BOUNDARY.split(chunk))
    candidate = "".join(part.lower().capitalize() for part in parts if part)
    return _finish_identifier(candidate, GENERATED_MODULE_NAMES)


def to_field_name(name: str) -> str:
    """Convert a column name to a valid field identifier, keeping its case."""
    candidate = _NON_IDENTIFIER.sub("_", name)
    if is_mangled_name(candidate):
        candidate = "_" + candidate.lstrip("_")
    return _finish_identifier(candidate)


class IdentifierRegistry:
    """Tracks identifiers already handed out within one namespace."""

    def __init__(self, scope: str = "module"):
        self.scope = scope
        self._owners: Dict[str, str] = {}

    def register(self, identifier: str, source_name: str) -> str:
        """Claim an identifier for a source name.

        Raises:
            NameCollisionError: if a different source name already claimed it
        """
        owner = self._owners.get(identifier)
        if owner is not None and owner != source_name:
            raise NameCollisionError(identifier, owner, source_name, scope=self.scope)
        self._owners[identifier] = source_name
        return identifier
