"""
Configuration structures for metadata backends and code generation.
"""

import os
from dataclasses import dataclass

DEFAULT_DRIVER = "ODBC Driver 18 for SQL Server"
DEFAULT_PORT = 1433


@dataclass(frozen=True)
class ConnectionConfig:
    """Connection settings for a SQL Server catalog."""

    server: str
    database: str
    user: str | None = None
    password: str | None = None
    port: int = DEFAULT_PORT
    driver: str = DEFAULT_DRIVER
    trusted_connection: bool = False

    @classmethod
    def from_env(cls, **overrides) -> "ConnectionConfig":
        """
        Build a configuration from SPROCGEN_* environment variables.

        Args:
            **overrides: Values that take precedence over the environment.
                         None values are ignored.

        Returns:
            ConnectionConfig instance
        """
        values = {
            "server": os.environ.get("SPROCGEN_SERVER", "localhost"),
            "database": os.environ.get("SPROCGEN_DATABASE", "master"),
            "user": os.environ.get("SPROCGEN_USER"),
            "password": os.environ.get("SPROCGEN_PASSWORD"),
            "port": int(os.environ.get("SPROCGEN_PORT", DEFAULT_PORT)),
            "driver": os.environ.get("SPROCGEN_DRIVER", DEFAULT_DRIVER),
        }
        values.update({key: value for key, value in overrides.items() if value is not None})
        return cls(**values)

    def odbc_connect_string(self) -> str:
        """Return the ODBC connection string for this configuration."""
        conn_str = (
            f"DRIVER={{{self.driver}}};"
            f"SERVER={self.server},{self.port};"
            f"DATABASE={self.database};"
        )
        if self.trusted_connection or not self.user:
            conn_str += "Trusted_Connection=yes;"
        else:
            conn_str += f"UID={self.user};PWD={self.password or ''};"
        return conn_str


@dataclass(frozen=True)
class GenerationOptions:
    """
    Options that shape the generated procedure and class text.

    Attributes:
        procedure_prefix: Prefix of every generated procedure name
        database: Database name used for the USE header and the connection lookup
        server: Server name mentioned in the class documentation
        namespace: Namespace of the generated class (defaults to the database name)
        connection_factory: Method called in the generated class to obtain a connection
    """

    procedure_prefix: str = "stp"
    database: str | None = None
    server: str | None = None
    namespace: str | None = None
    connection_factory: str = "Database.getSqlConnection"

    @property
    def class_namespace(self) -> str:
        return self.namespace or self.database or "Generated"
