"""
Exception classes for sprocgen operations.
"""


class SprocGenError(Exception):
    """Base exception for sprocgen operations."""

    pass


class SchemaError(SprocGenError):
    """Exception raised when a table schema cannot be used for generation."""

    pass


class EmptySchemaError(SchemaError):
    """Exception raised when a table has no columns to generate code for."""

    pass


class MetadataUnavailableError(SprocGenError):
    """Exception raised when table metadata cannot be obtained."""

    pass


class DatabaseConnectionError(MetadataUnavailableError):
    """Exception raised when database connection fails."""

    pass


class TableNotFoundError(MetadataUnavailableError):
    """Exception raised when a requested table is not found."""

    pass


class OutputError(SprocGenError):
    """Exception raised when generated code cannot be written."""

    pass
