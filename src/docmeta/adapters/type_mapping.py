"""
Type resolution system for document fields.

This module translates document store field types into relational type
codes. It combines information from several sources, in priority order:

1. The type declared on the document field
2. Raw binary records and record lists made only of them (BINARY, BLOB)
3. Configuration-based hints for undeclared fields
4. The class of the runtime value

Aggregate and link fields get a second look at the value so that binary
payloads surface as BINARY and BLOB instead of the generic object code.
"""
import datetime
import enum
import logging
import types
from collections.abc import Callable
from typing import Any

import numpy as np

from docmeta.config.type_mapping import TypeMappingConfig
from docmeta.document import DocumentLike, is_binary_record, is_sequence
from docmeta.exceptions import NoCurrentRowError
from docmeta.types import NativeType, SqlType

logger = logging.getLogger(__name__)

# Read-only after import; shared by every resolver without locking.
TYPE_MAP: types.MappingProxyType[NativeType, SqlType] = types.MappingProxyType({
    NativeType.STRING: SqlType.VARCHAR,
    NativeType.INTEGER: SqlType.INTEGER,
    NativeType.FLOAT: SqlType.FLOAT,
    NativeType.SHORT: SqlType.SMALLINT,
    NativeType.BOOLEAN: SqlType.BOOLEAN,
    NativeType.LONG: SqlType.BIGINT,
    NativeType.DOUBLE: SqlType.DECIMAL,
    NativeType.DATE: SqlType.DATE,
    NativeType.DATETIME: SqlType.TIMESTAMP,
    NativeType.BYTE: SqlType.TINYINT,
    NativeType.BINARY: SqlType.BINARY,
    # aggregates and links have no relational counterpart
    NativeType.EMBEDDED: SqlType.OBJECT,
    NativeType.EMBEDDEDLIST: SqlType.OBJECT,
    NativeType.EMBEDDEDMAP: SqlType.OBJECT,
    NativeType.EMBEDDEDSET: SqlType.OBJECT,
    NativeType.LINK: SqlType.OBJECT,
    NativeType.LINKLIST: SqlType.OBJECT,
    NativeType.LINKMAP: SqlType.OBJECT,
    NativeType.LINKSET: SqlType.OBJECT,
    NativeType.TRANSIENT: SqlType.NULL,
})

_unmapped = set(NativeType) - set(TYPE_MAP)
if _unmapped:
    raise RuntimeError(f'NativeType members without a SqlType: {sorted(map(str, _unmapped))}')

NUMERIC_TYPES = frozenset({
    NativeType.BYTE,
    NativeType.DOUBLE,
    NativeType.FLOAT,
    NativeType.INTEGER,
    NativeType.LONG,
    NativeType.SHORT,
})

RECORD_TYPES = frozenset({NativeType.EMBEDDED, NativeType.LINK})
LIST_TYPES = frozenset({NativeType.EMBEDDEDLIST, NativeType.LINKLIST})

INT32_MIN = -2**31
INT32_MAX = 2**31 - 1


class ScanResult(enum.Enum):
    """Outcome of a homogeneous sequence scan."""

    ALL_MATCH = 'all_match'
    MISMATCH = 'mismatch'
    NOT_A_SEQUENCE = 'not_a_sequence'


def get_sql_type(native: NativeType) -> SqlType:
    """Map a declared native type to its relational type code.
    """
    return TYPE_MAP[native]


def is_numeric(native: NativeType | None) -> bool:
    """Check if a declared native type is numeric (and therefore signed).
    """
    return native in NUMERIC_TYPES


def type_name(native: NativeType | None) -> str | None:
    """Human-readable name of a declared type, None for undeclared fields.
    """
    if native is None:
        return None
    return native.name


def scan_homogeneous(value: Any, predicate: Callable[[Any], bool]) -> ScanResult:
    """Check whether every element of a sequence satisfies ``predicate``.

    Scanning stops at the first element that fails. An empty sequence
    counts as ALL_MATCH.
    """
    if not is_sequence(value):
        return ScanResult.NOT_A_SEQUENCE
    for element in value:
        if not predicate(element):
            return ScanResult.MISMATCH
    return ScanResult.ALL_MATCH


def _is_int32(value: Any) -> bool:
    if isinstance(value, np.int32):
        return True
    return type(value) is int and INT32_MIN <= value <= INT32_MAX


def _is_int64(value: Any) -> bool:
    return isinstance(value, np.int64 | int)


# Order matters: bool is an int, numpy.float64 is a float, and an int that
# fits 32 bits must win over the 64-bit check.
VALUE_TYPE_CHECKS: tuple[tuple[Callable[[Any], bool], NativeType], ...] = (
    (lambda v: isinstance(v, bool | np.bool_), NativeType.BOOLEAN),
    (lambda v: isinstance(v, np.int8), NativeType.BYTE),
    (lambda v: isinstance(v, datetime.date | np.datetime64), NativeType.DATETIME),
    (lambda v: isinstance(v, float), NativeType.DOUBLE),
    (lambda v: isinstance(v, np.float32 | np.float16), NativeType.FLOAT),
    (_is_int32, NativeType.INTEGER),
    (_is_int64, NativeType.LONG),
    (lambda v: isinstance(v, np.int16), NativeType.SHORT),
    (lambda v: isinstance(v, str), NativeType.STRING),
)


def infer_from_value(value: Any) -> SqlType:
    """Guess a relational type code from the class of a runtime value.

    Returns the generic object code when no check matches.
    """
    for matcher, native in VALUE_TYPE_CHECKS:
        if matcher(value):
            return TYPE_MAP[native]
    return SqlType.OBJECT


def resolve_value_type(declared: NativeType | None, value: Any,
                       hint: NativeType | None = None) -> SqlType:
    """Resolve the relational type of a field from its declared type and value.

    Args:
        declared: Declared NativeType, or None for schema-less fields
        value: Runtime value of the field
        hint: Configured type standing in for value inference on schema-less
            fields; ignored when ``declared`` is set

    Returns
        SqlType for the field
    """
    if declared is None:
        if value is None:
            return SqlType.NULL
        if is_binary_record(value):
            return SqlType.BINARY
        if scan_homogeneous(value, is_binary_record) is ScanResult.ALL_MATCH:
            return SqlType.BLOB
        if hint is not None:
            return TYPE_MAP[hint]
        return infer_from_value(value)

    if declared in RECORD_TYPES:
        if value is None:
            return SqlType.NULL
        if is_binary_record(value):
            return SqlType.BINARY
        return TYPE_MAP[declared]

    if declared in LIST_TYPES:
        if value is None:
            return SqlType.NULL
        scan = scan_homogeneous(value, is_binary_record)
        if scan is ScanResult.ALL_MATCH:
            return SqlType.BLOB
        if scan is ScanResult.MISMATCH:
            return TYPE_MAP[declared]
        # a declared list holding something that is not a list
        return SqlType.OBJECT

    return TYPE_MAP[declared]


class TypeResolver:
    """
    Resolves the relational type code of a result set column.

    The resolver holds no per-document state; every call recomputes from
    the document it is given. Without a config no hints are consulted.
    """

    def __init__(self, config: TypeMappingConfig | None = None) -> None:
        self.config = config

    def hinted_type(self, document: DocumentLike, name: str) -> NativeType | None:
        """Configured type for an undeclared field, or None.

        Hints replace value inference only; they never count as a declared
        type.
        """
        if self.config is None or document.field_type(name) is not None:
            return None
        hinted = self.config.get_type_for_field(getattr(document, 'class_name', None), name)
        if hinted is not None:
            logger.debug(f'Configured type {hinted} available for undeclared field {name!r}')
        return hinted

    def column_type(self, document: DocumentLike | None, column: int) -> SqlType:
        """Resolve the relational type code for a 1-based column.

        Args:
            document: Current document of the result set
            column: 1-based column index

        Returns
            SqlType; NULL for a column outside the document's fields

        Raises
            NoCurrentRowError: if there is no current document
        """
        if document is None:
            raise NoCurrentRowError(f'Cannot resolve type of column {column}: no current document')

        names = document.field_names()
        if column < 1 or column > len(names):
            logger.debug(f'Column {column} out of range for {len(names)} fields')
            return SqlType.NULL

        name = names[column - 1]
        declared = document.field_type(name)
        sql_type = resolve_value_type(declared, document.field_value(name),
                                      self.hinted_type(document, name))
        logger.debug(f'Column {column} ({name!r}, declared={declared}) resolved to {sql_type.name}')
        return sql_type


_global_resolver: TypeResolver | None = None


def resolve_type(document: DocumentLike | None, column: int) -> SqlType:
    """
    Central function for column type resolution across the codebase.

    Creates a module-level TypeResolver on first use and delegates to its
    column_type method.
    """
    global _global_resolver
    if _global_resolver is None:
        _global_resolver = TypeResolver()
    return _global_resolver.column_type(document, column)
