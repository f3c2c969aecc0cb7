"""
Declarative MARC 21 to Dublin Core mapping rules.

Each Dublin Core attribute is described by a :class:`MappingRule`: the tags
it reads, the subfield codes selected from each tag, an optional prefix and
how the per-tag results are combined. The table follows the Library of
Congress MARC21slim2OAIDC stylesheet, with two deliberate differences:
520 and 521 are not repeated by the 5xx note scan, and 264 backs up 260 for
dates.

References:
    https://www.loc.gov/standards/marcxml/xslt/MARC21slim2OAIDC.xsl
    https://www.loc.gov/marc/bibliographic/
"""

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple

from .accessor import ALL_LETTER_CODES, FieldAccessor, validate_codes

ISBN_URN_PREFIX = 'URN:ISBN:'

# 506 terms of use, 530 additional physical form, 540 terms governing use,
# 546 language note; 520 and 521 are read explicitly ahead of the scan.
DESCRIPTION_EXCLUDED_TAGS = frozenset({506, 520, 521, 530, 540, 546})

# Control field 008 positions 35-37
LANGUAGE_START = 35
LANGUAGE_END = 38


class Combine(Enum):
    """How the results of a rule's tag selections are combined."""

    APPEND = 'append'
    FIRST_NON_EMPTY = 'first_non_empty'


@dataclass(frozen=True)
class TagSelection:
    """Subfields ``codes`` of every field tagged ``tag``, optionally prefixed."""

    tag: str
    codes: str
    prefix: str = ''

    def __post_init__(self):
        validate_codes(self.codes)

    def extract(self, accessor: FieldAccessor) -> Optional[List[str]]:
        values = accessor.subfields_by_tag_and_codes(self.tag, self.codes)
        if values is None or not self.prefix:
            return values
        return [self.prefix + value for value in values]


@dataclass(frozen=True)
class MappingRule:
    """A Dublin Core attribute and the tag selections that populate it."""

    attribute: str
    selections: Tuple[TagSelection, ...]
    combine: Combine = Combine.APPEND

    def apply(self, accessor: FieldAccessor) -> Optional[Tuple[str, ...]]:
        """Evaluate the rule; None when no selected tag is present.

        ``APPEND`` concatenates every present selection in table order.
        ``FIRST_NON_EMPTY`` returns the first selection holding at least one
        non-empty string; if none does, the last present selection is kept.
        """
        if self.combine is Combine.FIRST_NON_EMPTY:
            fallback = None
            for selection in self.selections:
                values = selection.extract(accessor)
                if values is None:
                    continue
                if any(values):
                    return tuple(values)
                fallback = values
            return tuple(fallback) if fallback is not None else None

        result = None
        for selection in self.selections:
            values = selection.extract(accessor)
            if values is not None:
                if result is None:
                    result = []
                result.extend(values)
        return tuple(result) if result else None


def _description_selections() -> Tuple[TagSelection, ...]:
    selections = [TagSelection('520', 'a'), TagSelection('521', 'a')]
    selections.extend(
        TagSelection(str(tag), 'a')
        for tag in range(500, 600)
        if tag not in DESCRIPTION_EXCLUDED_TAGS
    )
    return tuple(selections)


CREATORS = MappingRule('creators', tuple(
    TagSelection(tag, ALL_LETTER_CODES)
    for tag in ('100', '110', '111', '700', '710', '711', '720')
))

DATES = MappingRule(
    'dates',
    (TagSelection('260', 'c'), TagSelection('264', 'c')),
    Combine.FIRST_NON_EMPTY,
)

DESCRIPTIONS = MappingRule('descriptions', _description_selections())

IDENTIFIERS = MappingRule('identifiers', (
    TagSelection('856', 'u'),
    TagSelection('020', 'a', prefix=ISBN_URN_PREFIX),
))

PUBLISHERS = MappingRule('publishers', (TagSelection('260', 'ab'),))

TITLES = MappingRule('titles', (TagSelection('245', 'abfghk'),))

# 655 genre/form terms appended to the leader-derived type
GENRE_FORM = TagSelection('655', 'abcvxyz')

RULES = (CREATORS, DATES, DESCRIPTIONS, IDENTIFIERS, PUBLISHERS, TITLES)


def language(accessor: FieldAccessor) -> str:
    """Language code from control field 008, positions 35-37.

    Raises:
        NotFound: If the record has no 008.
        OutOfRange: If the 008 is shorter than 38 characters.
    """
    return accessor.control_field_slice('008', LANGUAGE_START, LANGUAGE_END)
