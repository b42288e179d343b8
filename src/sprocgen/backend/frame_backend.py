"""
In-memory backend reading table metadata from a catalog extract.
"""

import logging
from pathlib import Path

import pandas as pd

from ..exceptions import MetadataUnavailableError
from ..models import TableInfo
from .base import MetadataBackend, table_from_frame

logger = logging.getLogger(__name__)


class DataFrameBackend(MetadataBackend):
    """
    Backend implementation over a pandas DataFrame of catalog rows.

    The frame has the same columns as the SQL Server catalog query, so an
    extract saved to CSV can be used to generate code without a connection.
    """

    def __init__(self, catalog: pd.DataFrame):
        self._catalog = catalog

    @classmethod
    def from_csv(cls, csv_path: str | Path) -> "DataFrameBackend":
        """
        Create a backend from a CSV catalog extract.

        Args:
            csv_path: Path to the CSV file

        Raises:
            MetadataUnavailableError: If the file cannot be read
        """
        try:
            catalog = pd.read_csv(csv_path)
        except (OSError, pd.errors.ParserError, pd.errors.EmptyDataError) as e:
            raise MetadataUnavailableError(f"Cannot read catalog file: {csv_path}. Error: {e}")
        logger.debug("Loaded %d catalog rows from %s", len(catalog), csv_path)
        return cls(catalog)

    def get_tables(self) -> list[str]:
        if "table_name" not in self._catalog.columns:
            return []
        return sorted(self._catalog["table_name"].dropna().astype(str).unique().tolist())

    def get_table_info(self, table_name: str) -> TableInfo:
        if "table_name" not in self._catalog.columns:
            raise MetadataUnavailableError("Catalog data has no table_name column")

        rows = self._catalog[self._catalog["table_name"] == table_name]
        return table_from_frame(table_name, rows)

    def close(self) -> None:
        """Nothing to release for an in-memory catalog."""
        pass
