"""
Configuration for type hints on schema-less fields.
"""
import json
import logging
import pathlib
import re

from docmeta.exceptions import ConfigurationError
from docmeta.types import NativeType

logger = logging.getLogger(__name__)


class TypeMappingConfig:
    """Configured NativeType hints for fields the store leaves undeclared.

    A hint only replaces value-class inference; binary payload detection
    still runs first and the hint is never reported as a declared type.

    File format::

        {
            "fields": {"Person.score": "double", "tags": "embeddedlist"},
            "patterns": {"_at$": "datetime"}
        }
    """

    def __init__(self, config_file=None):
        self._fields: dict[str, NativeType] = {}
        self._patterns: dict[str, NativeType] = {}

        if config_file:
            self.load_config(config_file)

    def load_config(self, config_file):
        """Load hints from a JSON file, merging with those already present.

        Nothing is merged unless the whole file is valid.
        """
        try:
            with pathlib.Path(config_file).open() as f:
                config = json.load(f)
            fields = {key.lower(): NativeType.from_name(type_name)
                      for key, type_name in config.get('fields', {}).items()}
            patterns = {}
            for pattern, type_name in config.get('patterns', {}).items():
                re.compile(pattern)
                patterns[pattern] = NativeType.from_name(type_name)
        except (OSError, ValueError, AttributeError, re.error) as e:
            logger.warning(f'Failed to load type mapping config: {e}')
            return

        self._fields.update(fields)
        self._patterns.update(patterns)
        logger.info(f'Loaded type mapping configuration from {config_file}')

    def get_type_for_field(self, class_name, field_name) -> NativeType | None:
        """Get the hinted type for a field, or None"""
        if class_name:
            key = f'{class_name.lower()}.{field_name.lower()}'
            if key in self._fields:
                return self._fields[key]

        if field_name.lower() in self._fields:
            return self._fields[field_name.lower()]

        for pattern, native in self._patterns.items():
            if re.search(pattern, field_name.lower()):
                return native

        return None

    def add_field_hint(self, class_name, field_name, native):
        """Add a hint for one field, scoped to a class when given"""
        if isinstance(native, str):
            try:
                native = NativeType.from_name(native)
            except ValueError as e:
                raise ConfigurationError(str(e)) from e
        key = f'{class_name.lower()}.{field_name.lower()}' if class_name else field_name.lower()
        self._fields[key] = native

    def add_pattern_hint(self, pattern, native):
        """Add a regex hint matched against lower-cased field names"""
        if isinstance(native, str):
            try:
                native = NativeType.from_name(native)
            except ValueError as e:
                raise ConfigurationError(str(e)) from e
        try:
            re.compile(pattern)
        except re.error as e:
            raise ConfigurationError(f'Invalid field pattern {pattern!r}: {e}') from e
        self._patterns[pattern] = native
