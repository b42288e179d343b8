"""
Output sinks for generated procedure and class source.
"""

import logging
import sys
from abc import ABC, abstractmethod
from pathlib import Path
from typing import TextIO

from .exceptions import OutputError

logger = logging.getLogger(__name__)


class OutputSink(ABC):
    """Destination for the two generated artifacts of a table."""

    @abstractmethod
    def write(self, table_name: str, procedures: str, record_class: str) -> None:
        """
        Persist or display generated source.

        Args:
            table_name: Name of the table the code was generated for
            procedures: T-SQL procedure script
            record_class: C# class source

        Raises:
            OutputError: If the output cannot be written
        """
        pass


class DirectorySink(OutputSink):
    """Writes CREATE_<table>.sql and <table>.cs files into a directory."""

    def __init__(
        self,
        output_dir: str | Path,
        sql_pattern: str = "CREATE_{table}.sql",
        class_pattern: str = "{table}.cs",
    ):
        self.output_dir = Path(output_dir)
        self.sql_pattern = sql_pattern
        self.class_pattern = class_pattern

    def paths(self, table_name: str) -> tuple[Path, Path]:
        """Return the procedure and class file paths for a table."""
        return (
            self.output_dir / self.sql_pattern.format(table=table_name),
            self.output_dir / self.class_pattern.format(table=table_name),
        )

    def write(self, table_name: str, procedures: str, record_class: str) -> None:
        sql_path, class_path = self.paths(table_name)
        try:
            self.output_dir.mkdir(parents=True, exist_ok=True)
            sql_path.write_text(procedures, encoding="utf-8")
            class_path.write_text(record_class, encoding="utf-8")
        except OSError as e:
            raise OutputError(f"Cannot write generated code for '{table_name}' to {self.output_dir}. Error: {e}")
        logger.info("Wrote %s and %s", sql_path, class_path)


class StreamSink(OutputSink):
    """Writes both artifacts to a text stream, stdout by default."""

    def __init__(self, stream: TextIO | None = None):
        self.stream = stream if stream is not None else sys.stdout

    def write(self, table_name: str, procedures: str, record_class: str) -> None:
        self.stream.write(procedures)
        self.stream.write("\n")
        self.stream.write(record_class)
        self.stream.write("\n")
