"""Format-specific readers for MARC records.

This package provides organized access to supported MARC serializations.
Each format module exposes a ``read()`` function yielding
:class:`marcdc.Record` objects. Decoding itself is delegated to pymarc.

Formats
-------
- **marc**: ISO 2709 binary MARC (standard interchange format)
- **marcxml**: MARC 21 XML (MARCXML slim schema)

Quick Start
-----------
>>> from marcdc.formats import marcxml
>>> for record in marcxml.read("records.xml"):
...     print(record['245']['a'])
"""

from . import marc, marcxml

__all__ = [
    "marc",
    "marcxml",
]
