"""
sprocgen - CRUD stored procedure and record class generator

This library reads the column metadata of a SQL Server table and generates
insert, update, delete and select stored procedures together with a C# class
that calls them.
"""

from .backend import DataFrameBackend, MetadataBackend, SqlServerBackend, create_backend
from .classes import ClassGenerator
from .config import ConnectionConfig, GenerationOptions
from .core import GeneratedCode, SprocGenerator, generate_code
from .exceptions import (
    DatabaseConnectionError,
    EmptySchemaError,
    MetadataUnavailableError,
    OutputError,
    SchemaError,
    SprocGenError,
    TableNotFoundError,
)
from .models import ColumnInfo, TableInfo
from .procedures import Operation, ProcedureGenerator, procedure_name
from .sinks import DirectorySink, OutputSink, StreamSink

__version__ = "0.1.0"
__all__ = [
    "SprocGenerator",
    "generate_code",
    "GeneratedCode",
    "ProcedureGenerator",
    "ClassGenerator",
    "Operation",
    "procedure_name",
    "ColumnInfo",
    "TableInfo",
    "ConnectionConfig",
    "GenerationOptions",
    "MetadataBackend",
    "DataFrameBackend",
    "SqlServerBackend",
    "create_backend",
    "OutputSink",
    "DirectorySink",
    "StreamSink",
    "SprocGenError",
    "SchemaError",
    "EmptySchemaError",
    "MetadataUnavailableError",
    "DatabaseConnectionError",
    "TableNotFoundError",
    "OutputError",
]
