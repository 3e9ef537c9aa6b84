"""
Tests for configured type hints on schema-less fields.
"""
import json
import logging

import pytest
from docmeta.adapters.type_mapping import TypeResolver
from docmeta.config.type_mapping import TypeMappingConfig
from docmeta.document import BinaryRecord, Document, RecordList
from docmeta.exceptions import ConfigurationError
from docmeta.types import NativeType, SqlType


@pytest.fixture
def write_config(tmp_path):
    """Factory writing a JSON hint file and returning its path.
    """
    def factory(content, name='hints.json'):
        config_file = tmp_path / name
        config_file.write_text(content if isinstance(content, str) else json.dumps(content))
        return config_file

    return factory


def test_no_hints_without_file():
    assert TypeMappingConfig().get_type_for_field('Person', 'anything') is None


def test_no_implicit_config_search(tmp_path, monkeypatch):
    """A type_mapping.json in the working directory is never picked up"""
    (tmp_path / 'type_mapping.json').write_text(json.dumps({'fields': {'name': 'long'}}))
    monkeypatch.chdir(tmp_path)

    assert TypeMappingConfig().get_type_for_field(None, 'name') is None
    assert TypeResolver().column_type(Document({'name': 'Alice'}), 1) == SqlType.VARCHAR


def test_field_hints_scoped_by_class():
    """Class-scoped hints only apply to documents of that class"""
    config = TypeMappingConfig()
    config.add_field_hint('Person', 'birthday', 'date')

    assert config.get_type_for_field('Person', 'birthday') is NativeType.DATE
    assert config.get_type_for_field('person', 'BIRTHDAY') is NativeType.DATE
    assert config.get_type_for_field('Company', 'birthday') is None


def test_global_field_hint():
    config = TypeMappingConfig()
    config.add_field_hint(None, 'tags', NativeType.EMBEDDEDLIST)

    assert config.get_type_for_field(None, 'tags') is NativeType.EMBEDDEDLIST
    assert config.get_type_for_field('Any', 'tags') is NativeType.EMBEDDEDLIST


def test_pattern_hint():
    config = TypeMappingConfig()
    config.add_pattern_hint(r'_at$', 'datetime')

    assert config.get_type_for_field('Event', 'created_at') is NativeType.DATETIME
    assert config.get_type_for_field('Event', 'created') is None


def test_invalid_hints_raise():
    config = TypeMappingConfig()
    with pytest.raises(ConfigurationError):
        config.add_field_hint(None, 'tags', 'varchar')
    with pytest.raises(ConfigurationError):
        config.add_pattern_hint('(unclosed', 'string')


def test_load_config_file(write_config):
    config = TypeMappingConfig(write_config({
        'fields': {'Person.score': 'double'},
        'patterns': {'^is_': 'boolean'},
        }))

    assert config.get_type_for_field('Person', 'score') is NativeType.DOUBLE
    assert config.get_type_for_field('Person', 'is_active') is NativeType.BOOLEAN


def test_invalid_config_file_loads_nothing(write_config, caplog):
    """One bad entry rejects the whole file, earlier entries included"""
    config_file = write_config({
        'fields': {'a': 'string', 'x': 'nope'},
        'patterns': {'^b': 'long'},
        })

    with caplog.at_level(logging.WARNING):
        config = TypeMappingConfig(config_file)

    assert config.get_type_for_field(None, 'a') is None
    assert config.get_type_for_field(None, 'x') is None
    assert config.get_type_for_field(None, 'bar') is None
    assert 'Failed to load type mapping config' in caplog.text


def test_invalid_pattern_in_file_loads_nothing(write_config):
    config_file = write_config({'fields': {'a': 'string'}, 'patterns': {'(': 'long'}})
    assert TypeMappingConfig(config_file).get_type_for_field(None, 'a') is None


def test_failed_reload_keeps_previous_hints(write_config):
    config = TypeMappingConfig(write_config({'fields': {'a': 'short'}}, 'good.json'))
    config.load_config(write_config({'fields': {'a': 'string', 'b': 'nope'}}, 'bad.json'))

    assert config.get_type_for_field(None, 'a') is NativeType.SHORT
    assert config.get_type_for_field(None, 'b') is None


def test_hint_replaces_value_inference():
    config = TypeMappingConfig()
    config.add_field_hint('Item', 'code', 'long')
    resolver = TypeResolver(config)

    assert resolver.column_type(Document({'code': 7}, class_name='Item'), 1) == SqlType.BIGINT
    assert TypeResolver().column_type(Document({'code': 7}, class_name='Item'), 1) == SqlType.INTEGER


def test_hint_never_overrides_binary_detection():
    """Binary records and record lists of them keep BINARY and BLOB"""
    config = TypeMappingConfig()
    config.add_pattern_hint('^p', 'string')
    resolver = TypeResolver(config)

    photo = Document({'photo': BinaryRecord(b'x')})
    pages = Document({'pages': RecordList([BinaryRecord(b'a'), BinaryRecord(b'b')])})
    assert resolver.column_type(photo, 1) == SqlType.BINARY
    assert resolver.column_type(pages, 1) == SqlType.BLOB


def test_hint_on_null_value_is_null():
    config = TypeMappingConfig()
    config.add_field_hint(None, 'n', 'long')
    assert TypeResolver(config).column_type(Document({'n': None}), 1) == SqlType.NULL


def test_hint_ignored_for_declared_field():
    config = TypeMappingConfig()
    config.add_field_hint(None, 'score', 'string')
    document = Document({'score': 3}, types={'score': NativeType.INTEGER})

    assert TypeResolver(config).column_type(document, 1) == SqlType.INTEGER
    assert TypeResolver(config).hinted_type(document, 'score') is None


if __name__ == '__main__':
    __import__('pytest').main([__file__])
