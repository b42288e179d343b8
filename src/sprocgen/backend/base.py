"""
Abstract base class for table metadata backends.
"""

from abc import ABC, abstractmethod

import pandas as pd

from ..exceptions import MetadataUnavailableError, TableNotFoundError
from ..models import ColumnInfo, TableInfo

CATALOG_COLUMNS = [
    "table_name",
    "column_name",
    "data_type",
    "max_length",
    "precision",
    "column_id",
    "is_identity",
    "is_computed",
]


def table_from_frame(table_name: str, frame: pd.DataFrame) -> TableInfo:
    """
    Build a TableInfo from catalog rows.

    Args:
        table_name: Name of the table
        frame: Catalog rows with the CATALOG_COLUMNS columns, one row per column

    Returns:
        TableInfo with columns ordered by column_id

    Raises:
        TableNotFoundError: If there are no rows for the table
        MetadataUnavailableError: If a catalog row is malformed
    """
    missing = [name for name in CATALOG_COLUMNS if name not in frame.columns]
    if missing:
        raise MetadataUnavailableError(f"Catalog data is missing columns: {', '.join(missing)}")

    if frame.empty:
        raise TableNotFoundError(f"Table '{table_name}' not found")

    if frame[CATALOG_COLUMNS].isna().any().any():
        raise MetadataUnavailableError(f"Catalog data for table '{table_name}' has missing values")

    columns = []
    try:
        for row in frame.sort_values("column_id").itertuples(index=False):
            columns.append(
                ColumnInfo(
                    name=str(row.column_name),
                    data_type=str(row.data_type),
                    max_length=int(row.max_length),
                    precision=int(row.precision),
                    position=int(row.column_id),
                    is_identity=bool(row.is_identity),
                    is_computed=bool(row.is_computed),
                )
            )
    except (TypeError, ValueError) as e:
        raise MetadataUnavailableError(f"Malformed catalog row for table '{table_name}': {e}")

    return TableInfo(name=table_name, columns=columns)


class MetadataBackend(ABC):
    """
    Abstract base class for table metadata backends.

    All backend implementations must inherit from this class and implement
    all abstract methods.
    """

    @abstractmethod
    def get_tables(self) -> list[str]:
        """
        Get list of all user tables.

        Returns:
            List of table names
        """
        pass

    @abstractmethod
    def get_table_info(self, table_name: str) -> TableInfo:
        """
        Get the ordered column metadata of a table.

        Args:
            table_name: Name of the table

        Returns:
            TableInfo object with column details

        Raises:
            TableNotFoundError: If table doesn't exist
            MetadataUnavailableError: If the metadata cannot be read
        """
        pass

    @abstractmethod
    def close(self) -> None:
        """Release any resources held by the backend."""
        pass

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.close()
