"""
Field access primitives used by the mapping rules.

All lookups go through :class:`FieldAccessor`, which wraps one record and
reports missing or short data through the marcdc error taxonomy instead of
bare ``None`` returns or unqualified index errors.
"""

import string
from typing import List, Optional

from .errors import MalformedSubfieldSelection, NotFound, OutOfRange
from .record import Field, Record

SUBFIELD_CODE_CHARS = frozenset(string.ascii_lowercase + string.digits)
ALL_LETTER_CODES = string.ascii_lowercase


def validate_codes(codes: str) -> str:
    """Check that ``codes`` is a non-empty string of subfield codes.

    Raises:
        MalformedSubfieldSelection: If the selection is empty, not a string
            or contains characters outside ``[a-z0-9]``.
    """
    if not isinstance(codes, str) or not codes:
        raise MalformedSubfieldSelection(f"Subfield selection must be a non-empty string, got {codes!r}")
    invalid = sorted(set(codes) - SUBFIELD_CODE_CHARS)
    if invalid:
        raise MalformedSubfieldSelection(
            f"Invalid subfield codes {''.join(invalid)!r} in selection {codes!r}"
        )
    return codes


def concatenate_subfields(field: Field, codes: str, delimiter: str = ' ') -> str:
    """Join the values of the selected subfields of ``field``.

    Subfields are visited in stored order. Blank (whitespace-only) values
    contribute nothing, not even a delimiter. The result is stripped of
    leading and trailing delimiter and whitespace characters.

    Example:
        >>> f = Field('245', subfields=[('a', 'Arithmetic /'), ('c', 'Carl Sandburg')])
        >>> concatenate_subfields(f, 'ab')
        'Arithmetic /'
    """
    validate_codes(codes)
    values = [
        sf.value for sf in field.subfields
        if sf.code in codes and sf.value and not sf.value.isspace()
    ]
    return delimiter.join(values).strip(delimiter + string.whitespace)


class FieldAccessor:
    """Generic extraction primitives over one record."""

    def __init__(self, record: Record):
        self.record = record

    def control_field_data(self, tag: str) -> str:
        """Return the raw data of the control field ``tag``.

        Raises:
            NotFound: If the record has no such control field.
        """
        data = self.record.control_field(tag)
        if data is None:
            raise NotFound(tag)
        return data

    def control_field_slice(self, tag: str, start: int, end: int) -> str:
        """Return characters ``start`` to ``end`` (exclusive) of a control field.

        Raises:
            NotFound: If the control field is missing.
            OutOfRange: If the control field is shorter than ``end``.
        """
        data = self.control_field_data(tag)
        if start < 0 or len(data) < end:
            raise OutOfRange(f"control field {tag}", end - 1, len(data))
        return data[start:end]

    def data_fields_by_tag(self, tag: str) -> List[Field]:
        """All data fields with ``tag``, in record order."""
        return self.record.get_fields(tag)

    def leader_at(self, position: int) -> str:
        """Return the leader character at a 0-indexed position.

        Raises:
            OutOfRange: If the leader is shorter than ``position + 1``.
        """
        leader = self.record.leader
        if position < 0 or position >= len(leader):
            raise OutOfRange("leader", position, len(leader))
        return leader[position]

    def subfields_by_tag_and_codes(self, tag: str, codes: str) -> Optional[List[str]]:
        """One concatenated string per field with ``tag``.

        Returns None when no field has the tag. A field whose selected
        subfields are all blank contributes an empty string.
        """
        validate_codes(codes)
        fields = self.data_fields_by_tag(tag)
        if not fields:
            return None
        return [concatenate_subfields(field, codes, ' ') for field in fields]

    def publication_places(self) -> Optional[List[str]]:
        """260 $a: place of publication, distribution, etc."""
        return self.subfields_by_tag_and_codes('260', 'a')

    def edition_statements(self) -> Optional[List[str]]:
        """250 $a$b: edition statement and its remainder."""
        return self.subfields_by_tag_and_codes('250', 'ab')

    def system_control_numbers(self) -> List[str]:
        """035 system control numbers, de-duplicated in record order.

        Uses $a, falling back to $9 when $a is missing (LC records sometimes
        carry the number in $9 only).
        """
        numbers = []
        for field in self.data_fields_by_tag('035'):
            number = field.get('a')
            if number is None:
                number = field.get('9')
            if number is not None and number not in numbers:
                numbers.append(number)
        return numbers
