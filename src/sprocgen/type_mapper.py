"""
Mapping from SQL Server column types to procedure and class text.

Every supported kind of column has a single entry in TYPE_SPECS. Catalog type
names that are not listed resolve to DataKind.FALLBACK, which behaves like the
character family.
"""

from dataclasses import dataclass
from enum import Enum

from .models import ColumnInfo


class DataKind(Enum):
    """Kinds of column data that drive code generation."""

    CHARACTER = "character"
    TEXT = "text"
    INTEGER = "integer"
    BIGINT = "bigint"
    DECIMAL = "decimal"
    FLOAT = "float"
    BOOLEAN = "boolean"
    DATETIME = "datetime"
    FALLBACK = "fallback"


class SizeForm(Enum):
    """How the parameter size suffix is rendered."""

    NONE = "none"
    LENGTH = "length"
    LENGTH_PRECISION = "length_precision"


@dataclass(frozen=True)
class TypeSpec:
    """Generation rules for one DataKind."""

    size_form: SizeForm
    class_type: str
    default_literal: str
    # formatted with the C# expression being converted
    conversion: str


_STRING_SPEC = TypeSpec(SizeForm.LENGTH, "string", "string.Empty", '{value}.ToString()')

TYPE_SPECS: dict[DataKind, TypeSpec] = {
    DataKind.CHARACTER: _STRING_SPEC,
    DataKind.TEXT: TypeSpec(SizeForm.NONE, "string", "string.Empty", '{value}.ToString()'),
    DataKind.INTEGER: TypeSpec(SizeForm.NONE, "int", "0", 'Convert.ToInt32({value})'),
    DataKind.BIGINT: TypeSpec(SizeForm.NONE, "long", "0", 'Convert.ToInt64({value})'),
    DataKind.DECIMAL: TypeSpec(SizeForm.LENGTH_PRECISION, "decimal", "0.0m", 'Convert.ToDecimal({value})'),
    DataKind.FLOAT: TypeSpec(SizeForm.LENGTH_PRECISION, "double", "0.0", 'Convert.ToDouble({value})'),
    DataKind.BOOLEAN: TypeSpec(SizeForm.NONE, "bool", "false", 'Convert.ToBoolean({value})'),
    DataKind.DATETIME: TypeSpec(
        SizeForm.NONE, "DateTime", "new DateTime(1900, 1, 1)", 'Convert.ToDateTime({value})'
    ),
    DataKind.FALLBACK: _STRING_SPEC,
}

SQL_TYPE_KINDS: dict[str, DataKind] = {
    "char": DataKind.CHARACTER,
    "varchar": DataKind.CHARACTER,
    "nchar": DataKind.CHARACTER,
    "nvarchar": DataKind.CHARACTER,
    "text": DataKind.TEXT,
    "ntext": DataKind.TEXT,
    "tinyint": DataKind.INTEGER,
    "smallint": DataKind.INTEGER,
    "int": DataKind.INTEGER,
    "bigint": DataKind.BIGINT,
    "decimal": DataKind.DECIMAL,
    "numeric": DataKind.DECIMAL,
    "float": DataKind.FLOAT,
    "bit": DataKind.BOOLEAN,
    "date": DataKind.DATETIME,
    "datetime": DataKind.DATETIME,
    "datetime2": DataKind.DATETIME,
    "smalldatetime": DataKind.DATETIME,
}

# sys.columns reports (max) types with a length of -1
MAX_LENGTH = -1


def data_kind(column: ColumnInfo) -> DataKind:
    """Resolve the DataKind of a column, falling back for unknown types."""
    return SQL_TYPE_KINDS.get(column.data_type.lower(), DataKind.FALLBACK)


def type_spec(column: ColumnInfo) -> TypeSpec:
    return TYPE_SPECS[data_kind(column)]


def size_suffix(column: ColumnInfo) -> str:
    """
    Get the size suffix of a procedure parameter.

    Args:
        column: Column to describe

    Returns:
        "(max_length)", "(max_length, precision)" or an empty string
    """
    size_form = type_spec(column).size_form
    length = "max" if column.max_length == MAX_LENGTH else str(column.max_length)

    if size_form is SizeForm.LENGTH:
        return f"({length})"
    if size_form is SizeForm.LENGTH_PRECISION:
        return f"({length}, {column.precision})"
    return ""


def parameter_declaration(column: ColumnInfo) -> str:
    """
    Get the procedure parameter declaration for a column.

    Example: @hourlyWage decimal(10, 3)
    """
    return f"@{column.name} {column.data_type}{size_suffix(column)}"


def class_type(column: ColumnInfo) -> str:
    """Get the C# property type for a column."""
    return type_spec(column).class_type


def default_literal(column: ColumnInfo) -> str:
    """Get the C# initializer used by the generated constructor."""
    return type_spec(column).default_literal


def value_conversion(column: ColumnInfo, value: str) -> str:
    """Get the C# expression converting an object value to the property type."""
    return type_spec(column).conversion.format(value=value)


def row_conversion(column: ColumnInfo) -> str:
    """Get the C# expression converting a DataRow cell to the property type."""
    return value_conversion(column, f'row["{column.name}"]')
