"""
Tests for schema validation, error handling and configuration.
"""

import pytest

from sprocgen import (
    ClassGenerator,
    ColumnInfo,
    ConnectionConfig,
    DatabaseConnectionError,
    EmptySchemaError,
    MetadataUnavailableError,
    OutputError,
    SchemaError,
    SprocGenError,
    TableInfo,
    TableNotFoundError,
    generate_code,
)


class TestSchemaModel:
    """Test table model invariants and derived columns."""

    def test_identity_column(self, widgets_table):
        assert widgets_table.identity_column.name == "id"

    def test_no_identity(self, keyless_table):
        assert keyless_table.identity_column is None

    def test_two_identity_columns(self):
        with pytest.raises(SchemaError):
            TableInfo(
                name="Broken",
                columns=[ColumnInfo("a", "int", is_identity=True), ColumnInfo("b", "int", is_identity=True)],
            )

    def test_writable_columns(self, widgets_table):
        assert [col.name for col in widgets_table.writable_columns] == ["name", "price"]
        assert [col.name for col in widgets_table.keyed_columns] == ["id", "name", "price"]

    def test_computed_identity_is_not_written(self):
        """Test a computed identity is never written but still keys update, delete and select."""
        table = TableInfo(
            name="Ledger",
            columns=[
                ColumnInfo("entryID", "int", is_identity=True, is_computed=True),
                ColumnInfo("amount", "decimal", 12, 2),
            ],
        )
        code = generate_code(table)
        assert "INSERT INTO Ledger (amount)" in code.procedures
        assert "SET amount = @amount\n" in code.procedures
        assert "WHERE entryID = @entryID" in code.procedures
        assert "\t@entryID int ,\n\t@amount decimal(12, 2) \nAS" in code.procedures
        assert "entryID =" not in ClassGenerator().constructor(table)
        assert [col.name for col in table.keyed_columns] == ["entryID", "amount"]

    def test_columns_are_immutable(self, widgets_table):
        with pytest.raises(AttributeError):
            widgets_table.columns[0].name = "other"
        assert isinstance(widgets_table.columns, tuple)


class TestEmptySchema:
    """Test tables that cannot be generated."""

    def test_no_columns(self):
        with pytest.raises(EmptySchemaError):
            generate_code(TableInfo(name="Empty", columns=[]))

    def test_only_identity_and_computed(self):
        table = TableInfo(
            name="Counters",
            columns=[ColumnInfo("id", "int", is_identity=True), ColumnInfo("doubled", "int", is_computed=True)],
        )
        with pytest.raises(EmptySchemaError):
            generate_code(table)


class TestExceptionHierarchy:
    """Test exception classes share the package base."""

    @pytest.mark.parametrize(
        "error",
        [SchemaError, EmptySchemaError, MetadataUnavailableError, DatabaseConnectionError, TableNotFoundError, OutputError],
    )
    def test_base_class(self, error):
        assert issubclass(error, SprocGenError)

    def test_metadata_errors(self):
        assert issubclass(DatabaseConnectionError, MetadataUnavailableError)
        assert issubclass(TableNotFoundError, MetadataUnavailableError)
        assert issubclass(EmptySchemaError, SchemaError)


class TestConnectionConfig:
    """Test connection settings."""

    def test_sql_login(self):
        config = ConnectionConfig(server="fecsql03", database="Internal", user="SPWebProg", password="secret")
        assert config.odbc_connect_string() == (
            "DRIVER={ODBC Driver 18 for SQL Server};"
            "SERVER=fecsql03,1433;"
            "DATABASE=Internal;"
            "UID=SPWebProg;PWD=secret;"
        )

    def test_trusted_connection(self):
        config = ConnectionConfig(server="fecsql03", database="Internal")
        assert config.odbc_connect_string().endswith("Trusted_Connection=yes;")

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv("SPROCGEN_SERVER", "envserver")
        monkeypatch.setenv("SPROCGEN_DATABASE", "EnvDb")
        monkeypatch.setenv("SPROCGEN_PORT", "14330")

        config = ConnectionConfig.from_env(database="Override", user=None)

        assert config.server == "envserver"
        assert config.database == "Override"
        assert config.port == 14330
