"""
Column information abstraction over document fields.
"""
import logging
from typing import Any, Self

import pandas as pd

from docmeta.adapters.type_mapping import TypeResolver, is_numeric, type_name
from docmeta.document import DocumentLike
from docmeta.exceptions import ColumnIndexError
from docmeta.types import NULLABLE_UNKNOWN, NativeType, SqlType

logger = logging.getLogger(__name__)

_resolver = TypeResolver()


def value_class_name(value: Any) -> str | None:
    """Fully qualified class name of a value, None for a null value.
    """
    if value is None:
        return None
    cls = type(value)
    return f'{cls.__module__}.{cls.__qualname__}'


class Column:
    """Representation of a result set column derived from a document field

    Technical implementation details:
    - Snapshots the field name, declared NativeType and resolved SqlType
    - Keeps the runtime value class name for ``column_class_name`` queries
    - Nullability is never known for schema-flexible records
    - Signed-ness is approximated by whether the declared type is numeric
    """

    def __init__(self,
                 name: str,
                 sql_type: SqlType,
                 native_type: NativeType | None = None,
                 class_name: str | None = None,
                 nullable: int = NULLABLE_UNKNOWN,
                 signed: bool = False):
        """
        Initialize column information

        Args:
            name: Field name of the column
            sql_type: Resolved relational type code
            native_type: Declared NativeType, None for schema-less fields
            class_name: Qualified class name of the current value
            nullable: One of the nullability constants
            signed: Whether the column holds signed numbers
        """
        self.name = name
        self.sql_type = sql_type
        self.native_type = native_type
        self.class_name = class_name
        self.nullable = nullable
        self.signed = signed

    @property
    def type_name(self) -> str | None:
        return type_name(self.native_type)

    @classmethod
    def from_document(cls, document: DocumentLike, column: int,
                      resolver: TypeResolver | None = None) -> Self:
        """Create a Column for a 1-based column of a document.

        Args:
            document: Document the column belongs to
            column: 1-based column index
            resolver: Optional TypeResolver (module default otherwise)

        Returns
            Column instance
        """
        resolver = resolver or _resolver
        names = document.field_names()
        if column < 1 or column > len(names):
            raise ColumnIndexError(f'Column {column} out of range 1..{len(names)}')

        name = names[column - 1]
        native = document.field_type(name)
        return cls(
            name=name,
            sql_type=resolver.column_type(document, column),
            native_type=native,
            class_name=value_class_name(document.field_value(name)),
            signed=is_numeric(native),
        )

    def __repr__(self) -> str:
        return (f'Column(name={self.name!r}, sql_type={self.sql_type.name}, '
                f'type_name={self.type_name})')

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization.
        """
        return {
            'name': self.name,
            'sql_type': self.sql_type.name,
            'type_code': int(self.sql_type),
            'type_name': self.type_name,
            'class_name': self.class_name,
            'nullable': self.nullable,
            'signed': self.signed,
            }

    @staticmethod
    def get_names(columns: list[Self]) -> list[str]:
        """Get column names from a list of Column objects.
        """
        return [col.name for col in columns]

    @staticmethod
    def get_column_by_name(columns: list[Self], name: str) -> Self | None:
        """Find a column by name in a list of Column objects.
        """
        for col in columns:
            if col.name == name:
                return col
        return None

    @staticmethod
    def get_column_types_dict(columns: list[Self]) -> dict[str, dict[str, Any]]:
        """Get a dictionary of column types indexed by name.
        """
        return {col.name: col.to_dict() for col in columns}

    @staticmethod
    def get_types(columns: list[Self]) -> list[SqlType]:
        """Get resolved type codes for each column as a list.
        """
        return [col.sql_type for col in columns]


def columns_from_document(document: DocumentLike | None,
                          resolver: TypeResolver | None = None) -> list[Column]:
    """Create Column objects for every field of a document.

    Args:
        document: Current document, or None
        resolver: Optional TypeResolver

    Returns
        List of Column objects (empty without a document)
    """
    if document is None:
        return []

    return [Column.from_document(document, i, resolver)
            for i in range(1, document.field_count() + 1)]


def describe_columns(columns: list[Column]) -> pd.DataFrame:
    """Tabulate column metadata, one row per column.

    The per-column dictionaries are kept in ``df.attrs['column_types']``.
    """
    fields = ['name', 'sql_type', 'type_code', 'type_name', 'class_name', 'nullable', 'signed']
    df = pd.DataFrame.from_records([col.to_dict() for col in columns], columns=fields)
    df.attrs['column_types'] = Column.get_column_types_dict(columns)
    return df
