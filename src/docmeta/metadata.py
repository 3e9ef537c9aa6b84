"""
Result set metadata over schema-flexible documents.

Answers the questions a tabular metadata consumer asks (column count,
names, type codes, signed-ness, writability) for the current document of
a result set. Type decisions are delegated to TypeResolver; everything
else is read straight off the document.
"""
import logging
from typing import Any, Protocol

from docmeta.adapters.column_info import Column, columns_from_document
from docmeta.adapters.column_info import value_class_name
from docmeta.adapters.type_mapping import TypeResolver, is_numeric, type_name
from docmeta.config.type_mapping import TypeMappingConfig
from docmeta.document import DocumentLike
from docmeta.exceptions import ColumnIndexError, NoCurrentRowError
from docmeta.options import MetadataOptions
from docmeta.types import NULLABLE_UNKNOWN, SqlType

logger = logging.getLogger(__name__)


class ResultSetLike(Protocol):
    """What the metadata needs from a result set."""

    def current_document(self) -> DocumentLike | None: ...

    def get_object(self, column: int) -> Any: ...


class ResultSetMetaData:
    """Column metadata for the current document of a result set.

    All column indexes are 1-based. Without a current document the
    accessors return neutral defaults (0 columns, None names) except
    ``column_type``, which raises NoCurrentRowError unless
    ``options.strict`` is False.
    """

    def __init__(self, result_set: ResultSetLike,
                 options: MetadataOptions | None = None) -> None:
        self.result_set = result_set
        self.options = options or MetadataOptions()
        config = None
        if self.options.type_mapping_file:
            config = TypeMappingConfig(self.options.type_mapping_file)
        self.resolver = TypeResolver(config)

    def _document(self) -> DocumentLike | None:
        return self.result_set.current_document()

    def _field_name(self, document: DocumentLike, column: int) -> str:
        names = document.field_names()
        if column < 1 or column > len(names):
            raise ColumnIndexError(f'Column {column} out of range 1..{len(names)}')
        return names[column - 1]

    def column_count(self) -> int:
        document = self._document()
        if document is None:
            return 0
        return document.field_count()

    def column_name(self, column: int) -> str | None:
        document = self._document()
        if document is None:
            return None
        return self._field_name(document, column)

    def column_label(self, column: int) -> str | None:
        """Label of a column; documents have no aliases so this is the name."""
        return self.column_name(column)

    def column_type(self, column: int) -> SqlType:
        """Relational type code of a column.

        Raises
            NoCurrentRowError: no current document and ``options.strict``
        """
        document = self._document()
        if document is None:
            if self.options.strict:
                raise NoCurrentRowError(f'Cannot resolve type of column {column}: no current document')
            logger.debug(f'No current document, column {column} reported as NULL')
            return SqlType.NULL
        return self.resolver.column_type(document, column)

    def column_type_name(self, column: int) -> str | None:
        """Declared type name of a column, None for schema-less fields."""
        document = self._document()
        if document is None:
            return None
        return type_name(document.field_type(self._field_name(document, column)))

    def column_class_name(self, column: int) -> str | None:
        return value_class_name(self.result_set.get_object(column))

    def is_signed(self, column: int) -> bool:
        document = self._document()
        if document is None:
            return False
        return is_numeric(document.field_type(self._field_name(document, column)))

    def schema_name(self, column: int) -> str | None:
        document = self._document()
        if document is None:
            return None
        return getattr(document, 'database_name', None)

    def table_name(self, column: int) -> str | None:
        document = self._document()
        if document is None:
            return None
        return getattr(document, 'class_name', None)

    def catalog_name(self, column: int) -> str:
        return self.options.catalog_name

    def columns(self) -> list[Column]:
        """Column objects for every field of the current document."""
        return columns_from_document(self._document(), self.resolver)

    # Documents carry no sizing information.

    def column_display_size(self, column: int) -> int:
        return 0

    def precision(self, column: int) -> int:
        return 0

    def scale(self, column: int) -> int:
        return 0

    def is_nullable(self, column: int) -> int:
        return NULLABLE_UNKNOWN

    # The metadata surface is read-only.

    def is_read_only(self, column: int) -> bool:
        return True

    def is_writable(self, column: int) -> bool:
        return False

    def is_definitely_writable(self, column: int) -> bool:
        return False

    def is_searchable(self, column: int) -> bool:
        return True

    def is_auto_increment(self, column: int) -> bool:
        return False

    def is_case_sensitive(self, column: int) -> bool:
        return False

    def is_currency(self, column: int) -> bool:
        return False
