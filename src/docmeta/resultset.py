"""
In-memory forward-only result set over documents.
"""
import logging
from collections.abc import Iterable, Iterator
from typing import Any

from docmeta.document import DocumentLike
from docmeta.metadata import ResultSetMetaData
from docmeta.options import MetadataOptions

logger = logging.getLogger(__name__)


class DocumentResultSet:
    """Forward cursor over a sequence of documents.

    Positioned before the first document until ``next()`` is called.
    """

    def __init__(self, documents: Iterable[DocumentLike],
                 options: MetadataOptions | None = None) -> None:
        self._documents = list(documents)
        self._position = -1
        self._closed = False
        self.options = options or MetadataOptions()

    def next(self) -> bool:
        """Advance to the next document, returning False past the end."""
        if self._closed:
            return False
        if self._position < len(self._documents):
            self._position += 1
        return self._position < len(self._documents)

    def current_document(self) -> DocumentLike | None:
        if self._closed or not 0 <= self._position < len(self._documents):
            return None
        return self._documents[self._position]

    def get_object(self, column: int) -> Any:
        """Value of a 1-based column in the current document, or None."""
        document = self.current_document()
        if document is None:
            return None
        names = document.field_names()
        if column < 1 or column > len(names):
            logger.debug(f'get_object: column {column} out of range 1..{len(names)}')
            return None
        return document.field_value(names[column - 1])

    def metadata(self) -> ResultSetMetaData:
        return ResultSetMetaData(self, self.options)

    def close(self) -> None:
        self._closed = True

    def __iter__(self) -> Iterator[DocumentLike]:
        while self.next():
            yield self.current_document()

    def __enter__(self) -> 'DocumentResultSet':
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        self.close()

    def __len__(self) -> int:
        return len(self._documents)
