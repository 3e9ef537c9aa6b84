import docmeta.adapters.type_mapping as tm
import pytest


@pytest.fixture(autouse=True)
def reset_global_resolver():
    """Start every test with a fresh module-level resolver."""
    tm._global_resolver = None
    yield
    tm._global_resolver = None


pytest_plugins = [
    'tests.fixtures.documents',
]
