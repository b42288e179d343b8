"""
SQL Server backend reading table metadata from the system catalog.
"""

import logging

import pandas as pd
from sqlalchemy import Engine, create_engine, text
from sqlalchemy.engine import URL
from sqlalchemy.exc import SQLAlchemyError

from ..config import ConnectionConfig
from ..exceptions import DatabaseConnectionError, MetadataUnavailableError, TableNotFoundError
from ..models import TableInfo
from .base import MetadataBackend, table_from_frame

logger = logging.getLogger(__name__)

TABLES_SQL = """
select a.name as table_name
from sys.objects a
where a.type = 'U'
order by a.name
"""

# sys.columns.max_length is in bytes; procedure parameters are declared in
# characters for the n-types and as (precision, scale) for decimals
COLUMNS_SQL = """
select a.name as table_name, b.name as column_name, c.name as data_type,
    case
        when c.name in ('nchar', 'nvarchar') and b.max_length > 0 then b.max_length / 2
        when c.name in ('decimal', 'numeric') then b.precision
        else b.max_length
    end as max_length,
    case
        when c.name in ('decimal', 'numeric') then b.scale
        else b.precision
    end as [precision],
    b.column_id, b.is_identity, b.is_computed
from sys.objects a join sys.columns b
    on b.object_id = a.object_id
    join sys.types c
        on c.user_type_id = b.user_type_id
where a.type = 'U'
and a.name = :table_name
order by a.name, b.column_id
"""


class SqlServerBackend(MetadataBackend):
    """Backend implementation using pyodbc through a SQLAlchemy engine."""

    def __init__(self, config: ConnectionConfig, engine: Engine | None = None):
        """
        Initialize the backend with connection settings.

        Args:
            config: Connection settings for the server and database
            engine: Existing engine to use instead of creating one

        Raises:
            DatabaseConnectionError: If connection fails
        """
        self.config = config
        self._engine = engine if engine is not None else self._create_engine()
        self._tables_cache: list[str] | None = None

    def _create_engine(self) -> Engine:
        """Create and return a SQLAlchemy engine."""
        try:
            connection_url = URL.create(
                "mssql+pyodbc",
                query={"odbc_connect": self.config.odbc_connect_string()}
            )
            engine = create_engine(connection_url)
            # Test the connection to ensure it's valid
            with engine.connect():
                pass
            logger.info("Connected to %s/%s", self.config.server, self.config.database)
            return engine
        except ImportError as e:
            raise DatabaseConnectionError(f"pyodbc cannot be loaded: {e}")
        except SQLAlchemyError as e:
            self._check_driver()
            raise DatabaseConnectionError(
                f"Cannot connect to {self.config.server}/{self.config.database}. Error: {e}"
            )

    def _check_driver(self) -> None:
        """Check if a SQL Server ODBC driver is available and provide installation instructions."""
        # pyodbc needs the unixODBC shared library at import time
        import pyodbc

        available_drivers = pyodbc.drivers()
        sql_server_drivers = [d for d in available_drivers if "SQL Server" in d]

        if not sql_server_drivers:
            raise DatabaseConnectionError(
                "SQL Server ODBC driver not found.\n\n"
                "To read table metadata, install the Microsoft ODBC Driver for SQL Server:\n"
                "  https://learn.microsoft.com/sql/connect/odbc/download-odbc-driver-for-sql-server\n\n"
                f"Available ODBC drivers on your system: "
                f"{', '.join(available_drivers) if available_drivers else 'None'}"
            )

    def _read(self, sql: str, **params) -> pd.DataFrame:
        if self._engine is None:
            raise DatabaseConnectionError("Backend is closed")
        try:
            with self._engine.connect() as conn:
                return pd.read_sql(text(sql), conn, params=params)
        except SQLAlchemyError as e:
            raise MetadataUnavailableError(f"Catalog query failed. Error: {e}")

    def get_tables(self) -> list[str]:
        """
        Get list of all user tables in the database.

        Returns:
            List of table names
        """
        if self._tables_cache is None:
            frame = self._read(TABLES_SQL)
            self._tables_cache = frame["table_name"].astype(str).tolist()
        return self._tables_cache.copy()

    def get_table_info(self, table_name: str) -> TableInfo:
        """
        Get the ordered column metadata of a table.

        Args:
            table_name: Name of the table

        Returns:
            TableInfo object with column details

        Raises:
            TableNotFoundError: If table doesn't exist
            MetadataUnavailableError: If the catalog query fails
        """
        frame = self._read(COLUMNS_SQL, table_name=table_name)
        if frame.empty:
            raise TableNotFoundError(f"Table '{table_name}' not found in {self.config.database}")

        logger.debug("Read %d columns for table %s", len(frame), table_name)
        return table_from_frame(table_name, frame)

    def close(self) -> None:
        """Dispose the engine."""
        if self._engine is not None:
            self._engine.dispose()
            self._engine = None
