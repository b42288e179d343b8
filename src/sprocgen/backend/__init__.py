"""
Backend module for reading table metadata.

This module provides metadata backends for a live SQL Server catalog and for
catalog extracts held in memory or on disk, with a unified interface through
the MetadataBackend base class.
"""

from pathlib import Path

import pandas as pd

from ..config import ConnectionConfig
from .base import MetadataBackend
from .frame_backend import DataFrameBackend
from .sqlserver_backend import SqlServerBackend

__all__ = [
    "MetadataBackend",
    "DataFrameBackend",
    "SqlServerBackend",
    "create_backend",
]


def create_backend(source: ConnectionConfig | pd.DataFrame | str | Path) -> MetadataBackend:
    """
    Create the appropriate backend for a metadata source.

    Args:
        source: Connection settings, a catalog DataFrame, or a path to a CSV catalog extract

    Returns:
        An instance of the appropriate backend class

    Raises:
        DatabaseConnectionError: If the database cannot be reached
        MetadataUnavailableError: If a catalog file cannot be read
    """
    if isinstance(source, ConnectionConfig):
        return SqlServerBackend(source)
    if isinstance(source, pd.DataFrame):
        return DataFrameBackend(source)
    return DataFrameBackend.from_csv(source)
