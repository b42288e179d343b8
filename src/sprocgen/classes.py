"""
C# record-access class generation.

The generated class has one property per column and methods that call the
procedures produced by ProcedureGenerator.
"""

from .config import GenerationOptions
from .models import TableInfo, require_columns
from .procedures import Operation, procedure_name
from .type_mapper import class_type, default_literal, row_conversion, value_conversion

USINGS = (
    "System",
    "System.Collections.Generic",
    "System.Data",
    "System.Data.SqlClient",
)


def pp(tabs: int, text: str) -> str:
    """Indent text with the given number of tabs."""
    return "\t" * tabs + text


def function_doc(tabs: int, description: str) -> list[str]:
    """Return the XML summary comment lines that precede a member."""
    lines = [pp(tabs, "/// <summary>")]
    lines.extend(pp(tabs, f"/// {line}") for line in description.splitlines())
    lines.append(pp(tabs, "/// </summary>"))
    lines.append(pp(tabs, "/// <returns></returns>"))
    return lines


class ClassGenerator:
    """Generates a C# class that reads and writes one table row through stored procedures."""

    def __init__(self, options: GenerationOptions | None = None):
        self.options = options or GenerationOptions()

    def procedure(self, table: TableInfo, operation: Operation) -> str:
        return procedure_name(table.name, operation, self.options.procedure_prefix)

    def generate(self, table: TableInfo) -> str:
        """
        Generate the complete class source for a table.

        Args:
            table: Table to generate the class for

        Returns:
            C# source text

        Raises:
            EmptySchemaError: If the table has no usable columns
        """
        require_columns(table)

        parts = [
            self.header(table),
            self.properties(table),
            self.constructor(table),
            self.save(table),
            self.insert(table),
            self.update(table),
            self.add_parameters(table),
            self.delete(table),
            self.load(table),
            self.load_from_row(table),
            self.footer(),
        ]
        return "\n".join(parts)

    def header(self, table: TableInfo) -> str:
        lines = [f"using {name};" for name in USINGS]
        lines.append("")
        lines.append(f"namespace {self.options.class_namespace} {{")

        description = f"this class is used for all common functionality for a record in the\n{table.name} table"
        if self.options.database:
            description += f" in the {self.options.database} database"
        if self.options.server:
            description += f" on the {self.options.server} server"
        lines.extend(function_doc(1, description))

        lines.append(pp(1, f"public class {table.name}"))
        lines.append(pp(1, "{"))
        return "\n".join(lines) + "\n"

    def properties(self, table: TableInfo) -> str:
        lines = [pp(2, f"public {class_type(col)} {col.name} {{ get; set; }}") for col in table.columns]
        return "\n".join(lines) + "\n"

    def constructor(self, table: TableInfo) -> str:
        """Constructor giving every writable property a non-null default."""
        lines = [pp(2, f"public {table.name}()"), pp(2, "{")]
        lines.extend(pp(3, f"{col.name} = {default_literal(col)};") for col in table.writable_columns)
        lines.append(pp(2, "}"))
        return "\n".join(lines) + "\n"

    def key_type(self, table: TableInfo) -> str:
        """C# type returned by Save(), Insert() and Update(): the identity type, or int without one."""
        identity = table.identity_column
        return class_type(identity) if identity is not None else "int"

    def _declare_result(self, table: TableInfo) -> str:
        identity = table.identity_column
        initial = default_literal(identity) if identity is not None else "0"
        return pp(3, f"{self.key_type(table)} iReturn = {initial};")

    def save(self, table: TableInfo) -> str:
        """Save() updates when the identity is set and inserts otherwise."""
        identity = table.identity_column

        lines = function_doc(2, "Save() will decide to call insert or update for you.")
        lines += [pp(2, f"public {self.key_type(table)} Save()"), pp(2, "{")]
        if identity is None:
            lines.append(pp(3, "return Insert();"))
        else:
            lines += [
                self._declare_result(table),
                pp(3, f"if ({identity.name} > 0)"),
                pp(3, "{"),
                pp(4, "Update();"),
                pp(4, f"iReturn = {identity.name};"),
                pp(3, "}"),
                pp(3, "else"),
                pp(4, "iReturn = Insert();"),
                pp(3, "return iReturn;"),
            ]
        lines.append(pp(2, "}"))
        return "\n".join(lines) + "\n"

    def _open_command(self, table: TableInfo, operation: Operation) -> list[str]:
        return [
            pp(3, "using (SqlConnection conn = getConnection())"),
            pp(3, "{"),
            pp(4, "conn.Open();"),
            pp(4, f'SqlCommand cmd = new SqlCommand("{self.procedure(table, operation)}", conn);'),
            pp(4, "cmd.CommandType = CommandType.StoredProcedure;"),
            "",
        ]

    def insert(self, table: TableInfo) -> str:
        identity = table.identity_column

        lines = [pp(2, f"private {self.key_type(table)} Insert()"), pp(2, "{"), self._declare_result(table)]
        lines += self._open_command(table, Operation.INSERT)
        lines.append(pp(4, "addParameters(cmd, false);"))
        if identity is not None:
            lines += [
                pp(4, f'SqlParameter identity = new SqlParameter("@{identity.name}", {identity.name});'),
                pp(4, "identity.Direction = ParameterDirection.Output;"),
                pp(4, "cmd.Parameters.Add(identity);"),
            ]
        lines += ["", pp(4, "cmd.ExecuteNonQuery();")]
        if identity is not None:
            lines += [
                pp(4, f"{identity.name} = {value_conversion(identity, 'identity.Value')};"),
                pp(4, f"iReturn = {identity.name};"),
            ]
        lines += [pp(3, "}"), pp(3, "return iReturn;"), pp(2, "}")]
        return "\n".join(lines) + "\n"

    def update(self, table: TableInfo) -> str:
        identity = table.identity_column

        lines = [pp(2, f"private {self.key_type(table)} Update()"), pp(2, "{")]
        lines += self._open_command(table, Operation.UPDATE)
        lines += [
            pp(4, "addParameters(cmd, true);"),
            "",
            pp(4, "cmd.ExecuteNonQuery();"),
            pp(3, "}"),
            pp(3, f"return {identity.name if identity is not None else 0};"),
            pp(2, "}"),
        ]
        return "\n".join(lines) + "\n"

    def add_parameters(self, table: TableInfo) -> str:
        """Parameter binding shared by Insert() and Update(); only updates bind the identity."""
        identity = table.identity_column

        lines = [pp(2, "private void addParameters(SqlCommand cmd, bool isUpdate = false)"), pp(2, "{")]
        if identity is not None:
            lines += [
                pp(3, "if (isUpdate)"),
                pp(4, f'cmd.Parameters.AddWithValue("@{identity.name}", {identity.name});'),
            ]
        lines.extend(
            pp(3, f'cmd.Parameters.AddWithValue("@{col.name}", {col.name});') for col in table.writable_columns
        )
        lines.append(pp(2, "}"))
        return "\n".join(lines) + "\n"

    def _bind_identity(self, table: TableInfo) -> list[str]:
        identity = table.identity_column
        if identity is None:
            return []
        return [pp(4, f'cmd.Parameters.AddWithValue("@{identity.name}", {identity.name});')]

    def delete(self, table: TableInfo) -> str:
        lines = [pp(2, "public void Delete()"), pp(2, "{")]
        lines += self._open_command(table, Operation.DELETE)
        lines += self._bind_identity(table)
        lines += [pp(4, "cmd.ExecuteNonQuery();"), pp(3, "}"), pp(2, "}")]
        return "\n".join(lines) + "\n"

    def load(self, table: TableInfo) -> str:
        """Load() selects the row matching the identity and reports whether it was found."""
        lines = [pp(2, "public bool Load()"), pp(2, "{"), pp(3, "bool bResult = false;")]
        lines += self._open_command(table, Operation.SELECT)
        lines += self._bind_identity(table)
        lines += [
            "",
            pp(4, "DataTable dt = new DataTable();"),
            pp(4, "dt.Load(cmd.ExecuteReader());"),
            pp(4, "if (dt.Rows.Count > 0)"),
            pp(5, "bResult = loadFromRow(dt.Rows[0]);"),
            pp(3, "}"),
            pp(3, "return bResult;"),
            pp(2, "}"),
        ]
        return "\n".join(lines) + "\n"

    def load_from_row(self, table: TableInfo) -> str:
        lines = [pp(2, "public bool loadFromRow(DataRow row)"), pp(2, "{"), pp(3, "bool bResult = false;"), ""]
        for col in table.columns:
            assignment = f"{col.name} = {row_conversion(col)};"
            if col.is_writable:
                lines.append(pp(3, assignment))
            else:
                # the select procedure only returns writable columns
                lines.append(pp(3, f'if (row.Table.Columns.Contains("{col.name}"))'))
                lines.append(pp(4, assignment))
        lines += ["", pp(3, "bResult = true;"), pp(3, "return bResult;"), pp(2, "}")]
        return "\n".join(lines) + "\n"

    def footer(self) -> str:
        database = self.options.database or self.options.class_namespace
        lines = [
            pp(2, "public SqlConnection getConnection()"),
            pp(2, "{"),
            pp(3, f'SqlConnection conn = {self.options.connection_factory}("{database}");'),
            pp(3, "return conn;"),
            pp(2, "}"),
            pp(1, "}"),
            "}",
        ]
        return "\n".join(lines) + "\n"
