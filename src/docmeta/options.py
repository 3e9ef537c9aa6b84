import pathlib
from dataclasses import dataclass

__all__ = ['MetadataOptions']


@dataclass
class MetadataOptions:
    """Options

    - catalog_name: value reported by ``catalog_name`` (default: '')
    - strict: raise NoCurrentRowError when a column type is requested
      without a current document; report SqlType.NULL otherwise (default: True)
    - type_mapping_file: JSON file with field type hints (default: search
      the standard locations)
    """
    catalog_name: str = ''
    strict: bool = True
    type_mapping_file: str = None

    def __post_init__(self):
        if self.catalog_name is None:
            raise ValueError('catalog_name must be a string, use "" for no catalog')
        if self.type_mapping_file is not None:
            path = pathlib.Path(self.type_mapping_file).expanduser()
            if not path.is_file():
                raise ValueError(f'type_mapping_file does not exist: {self.type_mapping_file}')
            self.type_mapping_file = str(path)
