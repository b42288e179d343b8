"""
Stored procedure generation for SQL Server tables.
"""

from enum import Enum

from .config import GenerationOptions
from .models import ColumnInfo, TableInfo, require_columns
from .type_mapper import parameter_declaration


class Operation(Enum):
    """Generated procedures and their name suffixes."""

    INSERT = "ins"
    UPDATE = "upd"
    DELETE = "del"
    SELECT = "sel"


SECTION_TITLES = {
    Operation.INSERT: "INSERT",
    Operation.UPDATE: "UPDATE",
    Operation.DELETE: "DELETE",
    Operation.SELECT: "READ",
}

BATCH_SEPARATOR = "GO"


def procedure_name(table_name: str, operation: Operation, prefix: str = "stp") -> str:
    """Return the procedure name for a table operation, e.g. stp_Widgets_ins."""
    return f"{prefix}_{table_name}_{operation.value}"


def drop_statement(name: str) -> str:
    """Return a guard that drops the procedure if it already exists."""
    return f"IF OBJECT_ID('{name}', 'P') IS NOT NULL\n\tDROP PROCEDURE {name}\n{BATCH_SEPARATOR}"


def where_clause(table: TableInfo) -> str:
    """Return the WHERE clause matching the identity column, or an empty string."""
    identity = table.identity_column
    if identity is None:
        return ""
    return f"WHERE {identity.name} = @{identity.name}"


def _parameter_lines(columns: list[ColumnInfo]) -> list[str]:
    return [f"\t{parameter_declaration(col)} " for col in columns]


class ProcedureGenerator:
    """
    Generates insert, update, delete and select procedures for a table.

    Each procedure is preceded by a drop guard so the script can be run again
    against a database that already has the procedures.
    """

    def __init__(self, options: GenerationOptions | None = None):
        self.options = options or GenerationOptions()

    def name(self, table: TableInfo, operation: Operation) -> str:
        return procedure_name(table.name, operation, self.options.procedure_prefix)

    def generate(self, table: TableInfo) -> str:
        """
        Generate the complete procedure script for a table.

        Args:
            table: Table to generate procedures for

        Returns:
            T-SQL script with the insert, update, delete and select procedures

        Raises:
            EmptySchemaError: If the table has no usable columns
        """
        require_columns(table)

        sections = []
        if self.options.database:
            sections.append(f"USE {self.options.database}\n{BATCH_SEPARATOR}\n")

        builders = {
            Operation.INSERT: self.generate_insert,
            Operation.UPDATE: self.generate_update,
            Operation.DELETE: self.generate_delete,
            Operation.SELECT: self.generate_select,
        }
        for operation, build in builders.items():
            sections.append(f"\n-- ******** {SECTION_TITLES[operation]} ********\n")
            sections.append(build(table))

        return "".join(sections)

    def _procedure(self, table: TableInfo, operation: Operation, parameters: list[str], body: list[str]) -> str:
        name = self.name(table, operation)
        lines = [drop_statement(name), f"CREATE PROCEDURE {name}"]
        if parameters:
            lines.append(",\n".join(parameters))
        lines.append("AS")
        lines.extend(line for line in body if line)
        lines.append(BATCH_SEPARATOR)
        return "\n".join(lines) + "\n"

    def generate_insert(self, table: TableInfo) -> str:
        """Generate the insert procedure; the identity is returned as an OUTPUT parameter."""
        columns = table.writable_columns
        identity = table.identity_column

        parameters = _parameter_lines(columns)
        identity_assignment = ""
        if identity is not None:
            parameters.append(f"\t{parameter_declaration(identity)} OUTPUT")
            identity_assignment = f"SET @{identity.name} = SCOPE_IDENTITY()"

        field_list = ", ".join(col.name for col in columns)
        value_list = ", ".join(f"@{col.name}" for col in columns)

        body = [
            f"INSERT INTO {table.name} ({field_list})",
            f"VALUES ({value_list})",
            identity_assignment,
        ]
        return self._procedure(table, Operation.INSERT, parameters, body)

    def generate_update(self, table: TableInfo) -> str:
        """Generate the update procedure keyed on the identity column."""
        parameters = _parameter_lines(table.keyed_columns)
        assignments = ", ".join(f"{col.name} = @{col.name}" for col in table.writable_columns)

        body = [
            f"UPDATE {table.name}",
            f"SET {assignments}",
            where_clause(table),
        ]
        return self._procedure(table, Operation.UPDATE, parameters, body)

    def generate_delete(self, table: TableInfo) -> str:
        """Generate the delete procedure keyed on the identity column."""
        identity = table.identity_column
        parameters = _parameter_lines([identity]) if identity is not None else []

        body = [
            f"DELETE FROM {table.name}",
            where_clause(table),
        ]
        return self._procedure(table, Operation.DELETE, parameters, body)

    def generate_select(self, table: TableInfo) -> str:
        """Generate the select procedure returning the writable columns of one row."""
        identity = table.identity_column
        parameters = _parameter_lines([identity]) if identity is not None else []
        field_list = ", ".join(col.name for col in table.writable_columns)

        body = [
            f"SELECT {field_list}",
            f"FROM {table.name}",
            where_clause(table),
        ]
        return self._procedure(table, Operation.SELECT, parameters, body)
