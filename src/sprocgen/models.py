"""
Data models for table schema structures.
"""

from dataclasses import dataclass

from .exceptions import EmptySchemaError, SchemaError


@dataclass(frozen=True)
class ColumnInfo:
    """Information about a database column."""

    name: str
    data_type: str
    max_length: int = 0
    precision: int = 0
    position: int = 0
    is_identity: bool = False
    is_computed: bool = False

    @property
    def is_writable(self) -> bool:
        """Whether client code supplies a value for this column."""
        return not (self.is_identity or self.is_computed)


@dataclass(frozen=True)
class TableInfo:
    """Information about a database table."""

    name: str
    columns: tuple[ColumnInfo, ...]

    def __post_init__(self):
        object.__setattr__(self, "columns", tuple(self.columns))

        identities = [col.name for col in self.columns if col.is_identity]
        if len(identities) > 1:
            raise SchemaError(f"Table '{self.name}' has more than one identity column: {', '.join(identities)}")

    @property
    def identity_column(self) -> ColumnInfo | None:
        """The identity column, or None when the table has none."""
        for col in self.columns:
            if col.is_identity:
                return col
        return None

    @property
    def writable_columns(self) -> list[ColumnInfo]:
        """Columns that are neither identity nor computed, in table order."""
        return [col for col in self.columns if col.is_writable]

    @property
    def keyed_columns(self) -> list[ColumnInfo]:
        """The identity column plus the writable columns, in table order."""
        return [col for col in self.columns if col.is_identity or col.is_writable]


def require_columns(table: TableInfo) -> None:
    """
    Check that a table has something to generate code for.

    Raises:
        EmptySchemaError: If the table has no columns, or only identity and computed columns
    """
    if not table.columns:
        raise EmptySchemaError(f"Table '{table.name}' has no columns")
    if not table.writable_columns:
        raise EmptySchemaError(f"Table '{table.name}' has no columns that can be inserted or updated")
