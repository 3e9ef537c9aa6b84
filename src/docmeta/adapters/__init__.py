"""
Metadata adapters package.

This package provides the following components:

- column_info: Column metadata classes built from document fields
- type_mapping: NativeType to SqlType mapping and column type resolution

Type resolution principles:
1. A declared field type is trusted and looked up in the static TYPE_MAP
2. Embedded/link records and lists get a second look at the value to
   detect raw binary payloads (BINARY, BLOB)
3. Undeclared fields are typed from the class of their runtime value

Nothing here converts values; the adapters only describe them.
"""

from docmeta.adapters.column_info import *
from docmeta.adapters.type_mapping import *
