"""Dublin Core type from leader/06, leader/07 and 655 genre/form terms."""

import logging
from typing import Optional, Sequence

from .accessor import FieldAccessor
from .errors import OutOfRange
from .rules import GENRE_FORM

logger = logging.getLogger(__name__)

TYPE_OF_RECORD_POSITION = 6
BIBLIOGRAPHIC_LEVEL_POSITION = 7

MANUSCRIPT_RECORD_TYPES = frozenset('dfpt')

RECORD_TYPE_CATEGORIES = {
    'a': 'text',
    't': 'text',
    'e': 'cartographic',
    'f': 'cartographic',
    'c': 'notated music',
    'd': 'notated music',
    'i': 'sound recording',
    'j': 'sound recording',
    'k': 'still image',
    'g': 'moving image',
    'r': 'three dimensional object',
    'm': 'software, multimedia',
    'p': 'mixed material',
}


def derive_type(
    record_type: Optional[str],
    bibliographic_level: Optional[str],
    genre_terms: Optional[Sequence[str]] = None,
) -> str:
    """Build the type string.

    Tokens are concatenated without a delimiter, in this order:
    ``collection`` (level ``c``), ``manuscript`` (type d/f/p/t), the record
    type category, then the space-joined 655 terms. A ``None`` input just
    contributes no token.

    Example:
        >>> derive_type('t', 'c')
        'collectionmanuscripttext'
    """
    result = ''
    if bibliographic_level == 'c':
        result += 'collection'
    if record_type in MANUSCRIPT_RECORD_TYPES:
        result += 'manuscript'
    result += RECORD_TYPE_CATEGORIES.get(record_type, '')
    if genre_terms:
        result += ' '.join(genre_terms)
    return result


def _leader_or_none(accessor: FieldAccessor, position: int) -> Optional[str]:
    try:
        return accessor.leader_at(position)
    except OutOfRange as exc:
        logger.debug("Leader position unavailable for type: %s", exc)
        return None


def record_type_string(accessor: FieldAccessor) -> str:
    """Type for one record; never None, possibly empty."""
    return derive_type(
        _leader_or_none(accessor, TYPE_OF_RECORD_POSITION),
        _leader_or_none(accessor, BIBLIOGRAPHIC_LEVEL_POSITION),
        GENRE_FORM.extract(accessor),
    )
