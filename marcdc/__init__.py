"""
marcdc: MARC 21 to Dublin Core mapping.

This package maps bibliographic MARC records (leader, control fields and
data fields with coded subfields) onto Dublin Core elements. Decoding of
ISO 2709 and MARC-XML is delegated to pymarc; the records handed to the
mapping engine are immutable and expose a pymarc-compatible read API.

Example:
    >>> import marcdc
    >>> for record in marcdc.read("records.xml"):
    ...     dc = marcdc.convert(record)
    ...     print(dc.creators, dc.language, dc.type)
"""

import logging
import os
from typing import Any, Iterator, Optional, Union

from .converter import MarcToDublinCore, convert, convert_batch
from .dublin_core import DublinCore
from .errors import FetchError, MalformedSubfieldSelection, MarcDcError, NotFound, OutOfRange
from .record import ControlField, Field, Indicators, Leader, Record, Subfield

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

_EXTENSION_MAP = {
    'mrc': 'marc',
    'marc': 'marc',
    'xml': 'marcxml',
}

_FORMAT_ALIASES = {
    'mrc': 'marc',
    'xml': 'marcxml',
    'marc-xml': 'marcxml',
}


def read(path: Union[str, Any], format: Optional[str] = None) -> Iterator[Record]:
    """Read MARC records from a file, auto-detecting format from extension.

    Args:
        path: File path (str or pathlib.Path) to read from.
        format: Optional format override. If not specified, format is inferred
            from the file extension. Supported values:
            - "marc" or "mrc": ISO 2709 binary MARC
            - "marcxml" or "xml": MARC 21 XML

    Returns:
        An iterator over Record objects from the file.

    Raises:
        ValueError: If format cannot be determined or is unsupported.
        FileNotFoundError: If the file does not exist.

    Example:
        >>> for record in marcdc.read("data.mrc"):
        ...     print(record['245']['a'])
    """
    from .formats import marc, marcxml

    # Convert pathlib.Path to string if needed
    if hasattr(path, '__fspath__'):
        path = os.fspath(path)

    if format is None:
        _, ext = os.path.splitext(path)
        ext = ext.lower().lstrip('.')
        format = _EXTENSION_MAP.get(ext)
        if format is None:
            raise ValueError(
                f"Cannot determine format from extension '.{ext}'. "
                f"Supported extensions: {', '.join(sorted(_EXTENSION_MAP))}. "
                f"Use format= parameter to specify explicitly."
            )

    format = format.lower()
    format = _FORMAT_ALIASES.get(format, format)

    if not os.path.exists(path):
        raise FileNotFoundError(path)
    if format == 'marc':
        return marc.read(path)
    if format == 'marcxml':
        return marcxml.read(path)
    raise ValueError(
        f"Unsupported format '{format}'. Supported formats: marc, marcxml"
    )


__all__ = [
    # Record model
    "ControlField",
    "Field",
    "Indicators",
    "Leader",
    "Record",
    "Subfield",
    # Conversion
    "DublinCore",
    "MarcToDublinCore",
    "convert",
    "convert_batch",
    # Errors
    "FetchError",
    "MalformedSubfieldSelection",
    "MarcDcError",
    "NotFound",
    "OutOfRange",
    # Format-agnostic helpers
    "read",
]
