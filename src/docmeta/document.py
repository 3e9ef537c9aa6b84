"""
Document store record abstractions consumed by the metadata layer.

The resolver only talks to documents through ``field_count``,
``field_names``, ``field_type`` and ``field_value``; any object offering
those four methods can stand in for ``Document``.
"""
import logging
from collections.abc import Iterable, Mapping
from typing import Any, Protocol

from docmeta.types import NativeType

logger = logging.getLogger(__name__)


class DocumentLike(Protocol):
    """Read-only accessor contract used by the resolver."""

    def field_count(self) -> int: ...

    def field_names(self) -> list[str]: ...

    def field_type(self, name: str) -> NativeType | None: ...

    def field_value(self, name: str) -> Any: ...


class BinaryRecord:
    """Raw bytes record stored outside the structured document graph.
    """

    def __init__(self, content: bytes = b'', rid: str | None = None) -> None:
        self.content = bytes(content)
        self.rid = rid

    def __len__(self) -> int:
        return len(self.content)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BinaryRecord):
            return NotImplemented
        return self.content == other.content and self.rid == other.rid

    def __hash__(self) -> int:
        return hash((self.content, self.rid))

    def __repr__(self) -> str:
        return f'BinaryRecord(rid={self.rid!r}, size={len(self.content)})'


class RecordList(list):
    """List of record references as returned for link-list fields."""

    def __repr__(self) -> str:
        return f'RecordList({list.__repr__(self)})'


def is_binary_record(value: Any) -> bool:
    """Check if a value is a raw binary record.
    """
    return isinstance(value, BinaryRecord)


def is_sequence(value: Any) -> bool:
    """Check if a value is a record collection that can be scanned.

    Plain lists and tuples are values, not record collections.
    """
    return isinstance(value, RecordList)


class Document:
    """Schema-flexible record with ordered fields.

    Fields may carry a declared NativeType; fields without one are
    schema-less and get their type inferred from the value.

    Args:
        fields: Field name to value mapping (insertion order is column order)
        types: Optional field name to declared NativeType mapping
        class_name: Schema class the document belongs to, if any
        database_name: Name of the database the document was read from
    """

    def __init__(self,
                 fields: Mapping[str, Any] | Iterable[tuple[str, Any]] | None = None,
                 types: Mapping[str, NativeType] | None = None,
                 class_name: str | None = None,
                 database_name: str | None = None) -> None:
        self._fields: dict[str, Any] = dict(fields or {})
        self._types: dict[str, NativeType] = {}
        self.class_name = class_name
        self.database_name = database_name
        for name, native in (types or {}).items():
            self.set_field_type(name, native)

    def field_count(self) -> int:
        return len(self._fields)

    def field_names(self) -> list[str]:
        return list(self._fields)

    def field_type(self, name: str) -> NativeType | None:
        return self._types.get(name)

    def field_value(self, name: str) -> Any:
        return self._fields.get(name)

    def set_field(self, name: str, value: Any, native: NativeType | None = None) -> None:
        """Set a field value, optionally declaring its type."""
        self._fields[name] = value
        if native is not None:
            self.set_field_type(name, native)

    def set_field_type(self, name: str, native: NativeType | str) -> None:
        if isinstance(native, str):
            native = NativeType.from_name(native)
        if name not in self._fields:
            logger.debug(f'Declaring type {native} for absent field {name!r}')
        self._types[name] = native

    def to_dict(self) -> dict[str, Any]:
        return dict(self._fields)

    def __repr__(self) -> str:
        return (f'Document(class_name={self.class_name!r}, '
                f'fields={self.field_names()!r})')
