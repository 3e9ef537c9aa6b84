"""
Metadata-specific exception classes.
"""


class MetadataError(Exception):
    """Base class for all docmeta errors.
    """


class NoCurrentRowError(MetadataError):
    """Column metadata requested while the result set has no current document.
    """


class ColumnIndexError(MetadataError, IndexError):
    """Column index outside ``1..column_count``.
    """


class ConfigurationError(MetadataError):
    """Invalid type mapping configuration.
    """
