"""
Shared pytest fixtures and configuration for sprocgen tests.
"""

import pandas as pd
import pytest

from sprocgen import ColumnInfo, DataFrameBackend, GenerationOptions, TableInfo
from sprocgen.backend.base import CATALOG_COLUMNS

WIDGETS_ROWS = [
    ("Widgets", "id", "int", 4, 10, 1, True, False),
    ("Widgets", "name", "varchar", 50, 0, 2, False, False),
    ("Widgets", "price", "decimal", 10, 2, 3, False, False),
    ("Widgets", "total", "int", 4, 10, 4, False, True),
]

EMPLOYEE_ROWS = [
    ("Employee", "employeeID", "int", 4, 10, 1, True, False),
    ("Employee", "firstName", "nvarchar", 100, 0, 2, False, False),
    ("Employee", "hired", "datetime", 8, 23, 3, False, False),
    ("Employee", "active", "bit", 1, 1, 4, False, False),
    ("Employee", "hourlyWage", "decimal", 10, 3, 5, False, False),
    ("Employee", "notes", "text", 16, 0, 6, False, False),
    ("Employee", "badge", "uniqueidentifier", 16, 0, 7, False, False),
]


@pytest.fixture
def widgets_table():
    """The Widgets table: identity id, two writable columns and a computed total."""
    return TableInfo(
        name="Widgets",
        columns=[
            ColumnInfo("id", "int", 4, 10, 1, is_identity=True),
            ColumnInfo("name", "varchar", 50, 0, 2),
            ColumnInfo("price", "decimal", 10, 2, 3),
            ColumnInfo("total", "int", 4, 10, 4, is_computed=True),
        ],
    )


@pytest.fixture
def keyless_table():
    """A table without an identity column."""
    return TableInfo(
        name="AuditLog",
        columns=[
            ColumnInfo("message", "varchar", 200, 0, 1),
            ColumnInfo("logged", "datetime", 8, 23, 2),
        ],
    )


@pytest.fixture
def widgets_rows():
    """Catalog rows for the Widgets table in column order."""
    return list(WIDGETS_ROWS)


@pytest.fixture
def catalog_frame():
    """Catalog rows for the Widgets and Employee tables, shuffled out of column order."""
    rows = list(reversed(WIDGETS_ROWS)) + EMPLOYEE_ROWS
    return pd.DataFrame(rows, columns=CATALOG_COLUMNS)


@pytest.fixture
def frame_backend(catalog_frame):
    """DataFrameBackend over the test catalog."""
    return DataFrameBackend(catalog_frame)


@pytest.fixture
def options():
    """Generation options naming a database and server."""
    return GenerationOptions(database="Internal", server="fecsql03")
