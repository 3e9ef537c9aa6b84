"""
Type vocabularies shared across the metadata layer.

- NativeType: field types declared by the document store
- SqlType: relational type codes reported to metadata consumers
- Nullability constants for ``ResultSetMetaData.is_nullable``
"""
import enum

NO_NULLS = 0
NULLABLE = 1
NULLABLE_UNKNOWN = 2


class NativeType(enum.Enum):
    """Declared field type of a document store record.
    """

    BOOLEAN = 'boolean'
    INTEGER = 'integer'
    SHORT = 'short'
    LONG = 'long'
    FLOAT = 'float'
    DOUBLE = 'double'
    DATETIME = 'datetime'
    STRING = 'string'
    BINARY = 'binary'
    EMBEDDED = 'embedded'
    EMBEDDEDLIST = 'embeddedlist'
    EMBEDDEDSET = 'embeddedset'
    EMBEDDEDMAP = 'embeddedmap'
    LINK = 'link'
    LINKLIST = 'linklist'
    LINKSET = 'linkset'
    LINKMAP = 'linkmap'
    BYTE = 'byte'
    TRANSIENT = 'transient'
    DATE = 'date'

    @classmethod
    def from_name(cls, name: str) -> 'NativeType':
        """Parse a type name case-insensitively ('STRING', 'embeddedList').

        Raises ValueError for names outside the closed set.
        """
        try:
            return cls(name.strip().lower())
        except ValueError:
            raise ValueError(f'Unknown native type: {name!r}') from None

    def __str__(self) -> str:
        return self.name


class SqlType(enum.IntEnum):
    """Relational type codes, numerically equal to the JDBC ``java.sql.Types``
    constants.
    """

    BIGINT = -5
    BINARY = -2
    BLOB = 2004
    BOOLEAN = 16
    DATE = 91
    DECIMAL = 3
    FLOAT = 6
    INTEGER = 4
    NULL = 0
    OBJECT = 2000
    SMALLINT = 5
    TIMESTAMP = 93
    TINYINT = -6
    VARCHAR = 12
