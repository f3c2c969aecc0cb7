"""ISO 2709 binary MARC format support.

This is the baseline MARC format defined by ISO 2709, the standard
interchange format for bibliographic records used by library systems
worldwide. Records are decoded by ``pymarc.MARCReader`` and adapted into
immutable :class:`marcdc.Record` objects.

Examples
--------
Read records from a MARC file:

>>> from marcdc.formats import marc
>>> for record in marc.read("records.mrc"):
...     print(record['245']['a'])

Read from a file-like object, skipping records pymarc cannot decode:

>>> with open("records.mrc", "rb") as f:
...     for record in marc.read(f, permissive=True):
...         process(record)
"""

import logging
import os
from typing import BinaryIO, Iterator, Union

from pymarc import MARCReader

from ..record import Record

__all__ = ["read"]

logger = logging.getLogger(__name__)


def _records(reader: MARCReader, permissive: bool) -> Iterator[Record]:
    for position, record in enumerate(reader):
        if record is None:
            error = reader.current_exception
            if not permissive:
                raise error
            logger.warning("Skipping undecodable record at position %d: %s", position, error)
            continue
        yield Record.from_pymarc(record)


def read(source: Union[str, os.PathLike, BinaryIO], permissive: bool = False,
         to_unicode: bool = True, force_utf8: bool = False) -> Iterator[Record]:
    """Read MARC records from an ISO 2709 file or file-like object.

    Args:
        source: File path or file-like object opened in binary mode.
        permissive: Log and skip records pymarc fails to decode instead of
            raising the decoding error.
        to_unicode: Passed to pymarc; decode MARC-8 or UTF-8 into str.
        force_utf8: Passed to pymarc; treat every record as UTF-8.

    Returns:
        Iterator over Record objects.
    """
    if isinstance(source, (str, os.PathLike)):
        return _read_path(source, permissive, to_unicode, force_utf8)
    reader = MARCReader(source, to_unicode=to_unicode, force_utf8=force_utf8)
    return _records(reader, permissive)


def _read_path(path, permissive, to_unicode, force_utf8) -> Iterator[Record]:
    with open(path, "rb") as f:
        reader = MARCReader(f, to_unicode=to_unicode, force_utf8=force_utf8)
        yield from _records(reader, permissive)
