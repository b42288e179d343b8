"""
Core SprocGenerator class tying metadata, generators and output together.
"""

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from .backend import MetadataBackend
from .classes import ClassGenerator
from .config import GenerationOptions
from .models import TableInfo, require_columns
from .procedures import ProcedureGenerator
from .sinks import OutputSink

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GeneratedCode:
    """Procedure script and record class generated for one table."""

    table_name: str
    procedures: str
    record_class: str


def generate_code(table: TableInfo, options: GenerationOptions | None = None) -> GeneratedCode:
    """
    Generate the procedure script and record class for a table.

    Args:
        table: Table metadata
        options: Generation options (defaults when None)

    Returns:
        GeneratedCode with both artifacts

    Raises:
        EmptySchemaError: If the table has no usable columns
    """
    require_columns(table)
    options = options or GenerationOptions()

    return GeneratedCode(
        table_name=table.name,
        procedures=ProcedureGenerator(options).generate(table),
        record_class=ClassGenerator(options).generate(table),
    )


class SprocGenerator:
    """
    Main class for generating stored procedures and record classes.

    Reads table metadata from a backend and hands the generated code to a sink.
    """

    def __init__(
        self,
        backend: MetadataBackend,
        sink: OutputSink | None = None,
        options: GenerationOptions | None = None,
    ):
        self.backend = backend
        self.sink = sink
        self.options = options or GenerationOptions()

    def generate(self, table_name: str) -> GeneratedCode:
        """
        Generate code for a table without writing it anywhere.

        Raises:
            MetadataUnavailableError: If the table metadata cannot be read
            EmptySchemaError: If the table has no usable columns
        """
        table = self.backend.get_table_info(table_name)
        if table.identity_column is None:
            logger.warning("Table %s has no identity column; update, delete and select are not keyed", table_name)
        return generate_code(table, self.options)

    def process_table(self, table_name: str) -> GeneratedCode:
        """Generate code for a table and write it to the sink."""
        code = self.generate(table_name)
        if self.sink is not None:
            self.sink.write(code.table_name, code.procedures, code.record_class)
        logger.info("Generated procedures and class for %s", table_name)
        return code

    def process_tables(self, table_names: Iterable[str]) -> list[GeneratedCode]:
        return [self.process_table(name) for name in table_names]

    def close(self) -> None:
        """Close the backend."""
        self.backend.close()

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.close()
