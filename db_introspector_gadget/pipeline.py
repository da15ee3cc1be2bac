"""Reader -> model builder -> generator pipeline."""

import logging
import os
import stat
import tempfile
from dataclasses import dataclass
from pathlib import Path
from typing import Union

from .codegen import DEFAULT_SYNTAX_VERSION, OutputSyntaxVersion, render
from .database import CatalogReader, SchemaModel, build_schema_model

logger = logging.getLogger(__name__)

DEFAULT_OUTPUT_FILENAME = "table_types.py"


@dataclass
class GenerationResult:
    """Outcome of one generation run."""
    model: SchemaModel
    source: str


def generate_table_types(
    reader: CatalogReader,
    schema: str,
    version: OutputSyntaxVersion = DEFAULT_SYNTAX_VERSION,
    preserve_column_names: bool = True,
) -> GenerationResult:
    """Introspect a schema and render its TypedDict source.

    Stops at the first fatal error; nothing is returned partially.
    """
    rows = reader.read_columns(schema)
    model = build_schema_model(rows, reader.dialect)
    source = render(model, version, preserve_column_names)
    logger.debug("Rendered %d tables for schema '%s'", len(model.tables), schema)
    return GenerationResult(model=model, source=source)


def _default_file_mode() -> int:
    """Mode a plain ``open(path, "w")`` would create, honoring the umask."""
    umask = os.umask(0)
    os.umask(umask)
    return 0o666 & ~umask


def write_source(source: str, output_path: Union[str, Path]) -> Path:
    """Write source text as UTF-8, replacing the destination atomically.

    An existing destination keeps its permissions; a new one gets the
    umask-derived default rather than mkstemp's owner-only mode.
    """
    path = Path(output_path)
    directory = path.parent if str(path.parent) else Path(".")
    if path.exists():
        mode = stat.S_IMODE(path.stat().st_mode)
    else:
        mode = _default_file_mode()

    fd, tmp_name = tempfile.mkstemp(dir=directory, prefix=f".{path.name}.", suffix=".tmp")
    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="\n") as f:
            f.write(source)
        os.chmod(tmp_name, mode)
        os.replace(tmp_name, path)
    except BaseException:
        os.unlink(tmp_name)
        raise
    return path


def write_table_types(
    reader: CatalogReader,
    schema: str,
    output_path: Union[str, Path] = DEFAULT_OUTPUT_FILENAME,
    version: OutputSyntaxVersion = DEFAULT_SYNTAX_VERSION,
    preserve_column_names: bool = True,
) -> GenerationResult:
    """Generate table types for a schema and write them to ``output_path``.

    The file is only written once rendering has fully succeeded.
    """
    result = generate_table_types(reader, schema, version, preserve_column_names)
    write_source(result.source, output_path)
    logger.debug("Wrote %s", output_path)
    return result
