"""
Read-only MARC record model.

The classes here mirror the read side of the pymarc API (``record['245']``,
``record.get_fields('700')``, ``field.get_subfields('a', 'b')``) so code
written against pymarc reads the same against a marcdc record. Unlike pymarc
records they are immutable: the mapping engine only ever reads them.

Records come from an external decoder. Use :meth:`Record.from_pymarc` to
adapt a decoded ``pymarc.Record``, or build one directly in tests.
"""

from typing import Any, Dict, Iterable, Iterator, List, NamedTuple, Optional, Tuple, Union

CONTROL_TAGS = ('001', '002', '003', '004', '005', '006', '007', '008', '009')


class Subfield(NamedTuple):
    """A single coded subfield (code, value)."""

    code: str
    value: str


class Indicators(NamedTuple):
    """Field indicators (pymarc compatibility)."""

    ind1: str = ' '
    ind2: str = ' '


class ControlField:
    """MARC control field (001-009) with pymarc-compatible .value property."""

    __slots__ = ('_tag', '_value')

    def __init__(self, tag: str, value: str):
        """Create a new ControlField."""
        self._tag = tag
        self._value = value

    @property
    def tag(self) -> str:
        """Field tag."""
        return self._tag

    @property
    def value(self) -> str:
        """Raw control field data."""
        return self._value

    # pymarc calls this ``data``
    data = value

    def is_control_field(self) -> bool:
        return True

    def __eq__(self, other: Any) -> bool:
        """Compare control fields by tag and value."""
        if isinstance(other, ControlField):
            return self.tag == other.tag and self.value == other.value
        return False

    def __repr__(self) -> str:
        """String representation."""
        return f"ControlField(tag='{self.tag}', value='{self.value}')"

    def __hash__(self) -> int:
        """Hash based on tag and value."""
        return hash((self.tag, self.value))


class Field:
    """MARC data field: a tag, two indicators and ordered subfields."""

    __slots__ = ('_tag', '_indicators', '_subfields')

    def __init__(
        self,
        tag: str,
        indicators: Union[Indicators, Tuple[str, str], List[str]] = (' ', ' '),
        subfields: Optional[Iterable[Union[Subfield, Tuple[str, str]]]] = None,
    ):
        """Create a new Field.

        Args:
            tag: 3-character field tag.
            indicators: Pair of indicator characters.
            subfields: Optional iterable of Subfield objects or (code, value) pairs.
        """
        if len(indicators) != 2:
            raise ValueError("indicators must be a pair of [ind1, ind2]")
        self._tag = tag
        self._indicators = Indicators(*indicators)
        self._subfields = tuple(Subfield(*sf) for sf in (subfields or ()))

    @property
    def tag(self) -> str:
        """Field tag."""
        return self._tag

    @property
    def indicators(self) -> Indicators:
        """Indicators as a named pair."""
        return self._indicators

    @property
    def indicator1(self) -> str:
        """First indicator."""
        return self._indicators.ind1

    @property
    def indicator2(self) -> str:
        """Second indicator."""
        return self._indicators.ind2

    @property
    def subfields(self) -> Tuple[Subfield, ...]:
        """All subfields in stored order."""
        return self._subfields

    def is_control_field(self) -> bool:
        return False

    def subfields_by_code(self, code: str) -> List[str]:
        """Get subfield values by code."""
        return [sf.value for sf in self._subfields if sf.code == code]

    def get_subfields(self, *codes: str) -> List[str]:
        """Get all subfield values for given codes, in stored order.

        Example:
            field.get_subfields('a', 'b')  # 'a' and 'b' values as they occur
        """
        return [sf.value for sf in self._subfields if sf.code in codes]

    def get(self, code: str, default: Optional[str] = None) -> Optional[str]:
        """Get first subfield value by code or return default."""
        for sf in self._subfields:
            if sf.code == code:
                return sf.value
        return default

    def __getitem__(self, code: str) -> Optional[str]:
        """Get first subfield value by code; None if absent (pymarc behavior)."""
        return self.get(code)

    def __contains__(self, code: str) -> bool:
        """Check if subfield code exists in field."""
        return any(sf.code == code for sf in self._subfields)

    def __iter__(self) -> Iterator[Subfield]:
        return iter(self._subfields)

    def __eq__(self, other: Any) -> bool:
        """Compare fields by content."""
        if not isinstance(other, Field):
            return False
        return (self.tag == other.tag and
                self.indicators == other.indicators and
                self.subfields == other.subfields)

    def __hash__(self) -> int:
        return hash((self.tag, self.indicators, self.subfields))

    def __repr__(self) -> str:
        subfields = ''.join(f"${sf.code}{sf.value}" for sf in self._subfields)
        return f"Field('{self.tag}', '{self.indicator1}{self.indicator2}', '{subfields}')"


class Leader:
    """String-backed MARC leader with reference values for positions 6 and 7."""

    # MARC 21 Reference: Position 6 - Type of record
    RECORD_TYPE_VALUES = {
        'a': 'Language material',
        'c': 'Notated music',
        'd': 'Manuscript notated music',
        'e': 'Cartographic material',
        'f': 'Manuscript cartographic material',
        'g': 'Projected medium',
        'i': 'Nonmusical sound recording',
        'j': 'Musical sound recording',
        'k': 'Two-dimensional nonprojectable graphic',
        'm': 'Computer file',
        'o': 'Kit',
        'p': 'Mixed materials',
        'r': 'Three-dimensional artifact or naturally occurring object',
        't': 'Manuscript language material',
    }

    # MARC 21 Reference: Position 7 - Bibliographic level
    BIBLIOGRAPHIC_LEVEL_VALUES = {
        'a': 'Monographic component part',
        'b': 'Serial component part',
        'c': 'Collection',
        'd': 'Subunit',
        'i': 'Integrating resource',
        'm': 'Monograph/Item',
        's': 'Serial',
    }

    __slots__ = ('_value',)

    def __init__(self, value: str = ''):
        """Create a Leader from its raw character string (usually 24 chars)."""
        self._value = str(value)

    @classmethod
    def get_value_description(cls, position: int, value: str) -> Optional[str]:
        """Get description of a leader value, or None if undefined.

        Example:
            >>> Leader.get_value_description(6, 'a')
            'Language material'
        """
        position_map = {
            6: cls.RECORD_TYPE_VALUES,
            7: cls.BIBLIOGRAPHIC_LEVEL_VALUES,
        }
        values = position_map.get(position)
        if values is None:
            return None
        return values.get(value)

    @property
    def record_type(self) -> Optional[str]:
        """Position 6, or None when the leader is too short."""
        return self._value[6] if len(self._value) > 6 else None

    @property
    def bibliographic_level(self) -> Optional[str]:
        """Position 7, or None when the leader is too short."""
        return self._value[7] if len(self._value) > 7 else None

    def __getitem__(self, index: Union[int, slice]) -> str:
        return self._value[index]

    def __len__(self) -> int:
        return len(self._value)

    def __str__(self) -> str:
        return self._value

    def __repr__(self) -> str:
        return f"Leader('{self._value}')"

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, Leader):
            return self._value == other._value
        if isinstance(other, str):
            return self._value == other
        return False

    def __hash__(self) -> int:
        return hash(self._value)


class Record:
    """Immutable MARC record with a pymarc-compatible read API."""

    __slots__ = ('_leader', '_control_fields', '_fields')

    def __init__(
        self,
        leader: Union[Leader, str, None] = None,
        *,
        fields: Optional[Iterable[Union[ControlField, Field]]] = None,
    ):
        """Create a new Record.

        Args:
            leader: Leader object or raw leader string (defaults to empty).
            fields: Control and data fields, in record order. A repeated
                control field tag keeps its first occurrence.
        """
        if not isinstance(leader, Leader):
            leader = Leader(leader or '')
        control_fields: Dict[str, str] = {}
        data_fields = []
        for field in fields or ():
            if field.is_control_field():
                control_fields.setdefault(field.tag, field.value)
            else:
                data_fields.append(field)
        self._leader = leader
        self._control_fields = control_fields
        self._fields = tuple(data_fields)

    @classmethod
    def from_pymarc(cls, record: Any) -> 'Record':
        """Adapt a decoded ``pymarc.Record`` into an immutable marcdc Record.

        Args:
            record: A record produced by pymarc's MARCReader or XML parser.

        Returns:
            A new Record holding copies of the leader, control fields and
            data fields in their original order.
        """
        fields = []
        for field in record.fields:
            if field.is_control_field():
                fields.append(ControlField(field.tag, field.data or ''))
            else:
                indicators = tuple(field.indicators or (' ', ' '))
                fields.append(Field(
                    field.tag,
                    indicators=indicators,
                    subfields=[Subfield(sf.code, sf.value or '') for sf in field.subfields],
                ))
        return cls(str(record.leader or ''), fields=fields)

    @property
    def leader(self) -> Leader:
        """The record leader."""
        return self._leader

    def control_field(self, tag: str) -> Optional[str]:
        """Get a control field value, or None."""
        return self._control_fields.get(tag)

    def control_fields(self) -> List[ControlField]:
        """All control fields, ordered by tag."""
        return [ControlField(tag, value) for tag, value in sorted(self._control_fields.items())]

    def fields(self) -> List[Field]:
        """All data fields in record order."""
        return list(self._fields)

    def get_fields(self, *tags: str) -> List[Field]:
        """Get data fields with any of the given tags, in record order.

        If no tags are provided, returns all data fields.
        """
        if not tags:
            return list(self._fields)
        return [field for field in self._fields if field.tag in tags]

    def get_field(self, tag: str) -> Optional[Field]:
        """Get first data field with given tag."""
        for field in self._fields:
            if field.tag == tag:
                return field
        return None

    def __getitem__(self, tag: str) -> Union[ControlField, Field, None]:
        """Get first field with given tag (pymarc compatibility).

        For control fields (001-009), returns ControlField with .value property.
        Returns None if the field doesn't exist.
        """
        if tag in CONTROL_TAGS:
            value = self._control_fields.get(tag)
            return ControlField(tag, value) if value is not None else None
        return self.get_field(tag)

    def __contains__(self, tag: str) -> bool:
        """Check if a field with given tag exists in record."""
        return self[tag] is not None

    def __eq__(self, other: Any) -> bool:
        """Compare records by content."""
        if not isinstance(other, Record):
            return False
        return (self._leader == other._leader and
                self._control_fields == other._control_fields and
                self._fields == other._fields)

    def __hash__(self) -> int:
        return hash((self._leader, tuple(sorted(self._control_fields.items())), self._fields))

    def __repr__(self) -> str:
        return f"Record(leader='{self._leader}', fields={len(self._fields)})"
