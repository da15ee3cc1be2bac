"""Output syntax versions for generated Python source."""

from enum import Enum
from typing import FrozenSet


class OutputSyntaxVersion(str, Enum):
    """Minimum Python version the generated file must run on."""
    PY36 = "3.6"
    PY38 = "3.8"
    PY310 = "3.10"

    @property
    def supports_class_syntax(self) -> bool:
        """Whether ``class X(TypedDict):`` bodies are emitted."""
        return self is not OutputSyntaxVersion.PY36

    @property
    def supports_union_operator(self) -> bool:
        """Whether ``T | None`` is valid at runtime."""
        return self is OutputSyntaxVersion.PY310

    @property
    def typing_extensions_names(self) -> FrozenSet[str]:
        """Names that must come from typing_extensions instead of typing."""
        if self is OutputSyntaxVersion.PY36:
            return frozenset({"Literal", "TypedDict"})
        return frozenset()


DEFAULT_SYNTAX_VERSION = OutputSyntaxVersion.PY38
