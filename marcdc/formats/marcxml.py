"""MARC 21 XML (MARCXML) format support.

Documents may hold a single ``<record>`` or a ``<collection>`` of records,
with or without the ``http://www.loc.gov/MARC21/slim`` namespace. Parsing
is done by ``pymarc.parse_xml_to_array``; each result is adapted into an
immutable :class:`marcdc.Record`.

Examples
--------
>>> from marcdc.formats import marcxml
>>> records = list(marcxml.read("sandburg.xml"))
>>> records[0]['245']['a']
'Arithmetic /'

>>> record = marcxml.loads(response.content)[0]
"""

import io
import logging
import os
from typing import BinaryIO, Iterator, List, Union

from pymarc import parse_xml_to_array

from ..record import Record

__all__ = ["read", "loads"]

logger = logging.getLogger(__name__)


def read(source: Union[str, os.PathLike, BinaryIO], strict: bool = False) -> Iterator[Record]:
    """Read MARC-XML records from a file path or binary file-like object.

    Args:
        source: File path or file-like object opened in binary mode.
        strict: Require the MARC21 slim namespace on elements.

    Returns:
        Iterator over Record objects, in document order.
    """
    if isinstance(source, os.PathLike):
        source = os.fspath(source)
    records = parse_xml_to_array(source, strict=strict)
    logger.debug("Parsed %d MARC-XML record(s)", len(records))
    return (Record.from_pymarc(record) for record in records)


def loads(data: Union[bytes, str], strict: bool = False) -> List[Record]:
    """Parse MARC-XML held in memory.

    Args:
        data: The XML document, as bytes or text.
        strict: Require the MARC21 slim namespace on elements.

    Returns:
        List of Record objects, in document order.
    """
    if isinstance(data, str):
        data = data.encode("utf-8")
    return list(read(io.BytesIO(data), strict=strict))
