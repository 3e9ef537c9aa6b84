"""
Tabular column metadata for result sets of a schema-flexible document store.

Metadata can be queried either as:
- Module functions: docmeta.column_type(rs, 1)
- ResultSetMetaData methods: rs.metadata().column_type(1)

The module functions are facades over a fresh ResultSetMetaData.
"""
__version__ = '0.1.0'

from docmeta.adapters.column_info import Column, columns_from_document
from docmeta.adapters.column_info import describe_columns
from docmeta.adapters.type_mapping import TYPE_MAP, ScanResult, TypeResolver
from docmeta.adapters.type_mapping import get_sql_type, infer_from_value
from docmeta.adapters.type_mapping import is_numeric, resolve_type
from docmeta.adapters.type_mapping import resolve_value_type, scan_homogeneous
from docmeta.adapters.type_mapping import type_name
from docmeta.document import BinaryRecord, Document, RecordList
from docmeta.document import is_binary_record, is_sequence
from docmeta.exceptions import ColumnIndexError, ConfigurationError
from docmeta.exceptions import MetadataError, NoCurrentRowError
from docmeta.metadata import ResultSetMetaData
from docmeta.options import MetadataOptions
from docmeta.resultset import DocumentResultSet
from docmeta.types import NO_NULLS, NULLABLE, NULLABLE_UNKNOWN, NativeType
from docmeta.types import SqlType


def column_count(rs: DocumentResultSet) -> int:
    """Number of columns of the current document, 0 without one.
    """
    return rs.metadata().column_count()


def column_name(rs: DocumentResultSet, column: int) -> str | None:
    """Name of a 1-based column of the current document.
    """
    return rs.metadata().column_name(column)


def column_type(rs: DocumentResultSet, column: int) -> SqlType:
    """Relational type code of a 1-based column of the current document.
    """
    return rs.metadata().column_type(column)


def column_type_name(rs: DocumentResultSet, column: int) -> str | None:
    """Declared type name of a 1-based column, None for schema-less fields.
    """
    return rs.metadata().column_type_name(column)


def describe(rs: DocumentResultSet):
    """DataFrame describing every column of the current document.
    """
    return describe_columns(rs.metadata().columns())


__all__ = [
    'BinaryRecord',
    'Column',
    'ColumnIndexError',
    'ConfigurationError',
    'Document',
    'DocumentResultSet',
    'MetadataError',
    'MetadataOptions',
    'NO_NULLS',
    'NULLABLE',
    'NULLABLE_UNKNOWN',
    'NativeType',
    'NoCurrentRowError',
    'RecordList',
    'ResultSetMetaData',
    'ScanResult',
    'SqlType',
    'TYPE_MAP',
    'TypeResolver',
    'column_count',
    'column_name',
    'column_type',
    'column_type_name',
    'columns_from_document',
    'describe',
    'describe_columns',
    'get_sql_type',
    'infer_from_value',
    'is_binary_record',
    'is_numeric',
    'is_sequence',
    'resolve_type',
    'resolve_value_type',
    'scan_homogeneous',
    'type_name',
]
