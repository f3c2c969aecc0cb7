"""
MARC record to Dublin Core conversion.

:class:`MarcToDublinCore` runs every mapping rule over one record and builds
a :class:`~marcdc.dublin_core.DublinCore` once all of them have finished. A
rule that cannot find or index its source data leaves its element ``None``;
the rest of the conversion carries on.

Example:
    >>> from marcdc import MarcToDublinCore, read
    >>> for record in read("records.xml"):
    ...     dc = MarcToDublinCore(record).convert()
    ...     print(dc.titles, dc.type)
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Iterable, List, Optional

from . import rules
from .accessor import FieldAccessor
from .dublin_core import DublinCore
from .errors import NotFound, OutOfRange
from .record import Record
from .type_derivation import record_type_string

logger = logging.getLogger(__name__)


class MarcToDublinCore:
    """Maps one MARC record onto Dublin Core elements."""

    def __init__(self, record: Record):
        self.record = record
        self.accessor = FieldAccessor(record)

    def convert(self) -> DublinCore:
        """Run all rules and return the assembled Dublin Core record."""
        values = {rule.attribute: rule.apply(self.accessor) for rule in rules.RULES}
        values['language'] = self._language()
        values['subjects'] = None
        values['type'] = record_type_string(self.accessor)
        return DublinCore(**values)

    def _language(self) -> Optional[str]:
        try:
            return rules.language(self.accessor)
        except (NotFound, OutOfRange) as exc:
            logger.debug("No language for record: %s", exc)
            return None


def convert(record: Record) -> DublinCore:
    """Convert a single record to Dublin Core."""
    return MarcToDublinCore(record).convert()


def convert_batch(records: Iterable[Record], max_workers: Optional[int] = None) -> List[DublinCore]:
    """Convert many records on a thread pool, preserving input order.

    Args:
        records: Records to convert.
        max_workers: Thread count; None lets the executor choose.

    Returns:
        One DublinCore per input record, in the same order.
    """
    records = list(records)
    if not records:
        return []
    with ThreadPoolExecutor(max_workers=max_workers) as executor:
        return list(executor.map(convert, records))
