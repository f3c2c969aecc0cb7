"""
Dublin Core metadata value object.

Each element is optional. Repeatable elements are tuples that preserve the
order in which the source record listed them; ``None`` means nothing in the
record contributed to the element, never an empty tuple.

See http://purl.org/dc/terms/ for element definitions.
"""

from dataclasses import dataclass, fields
from typing import Dict, Optional, Tuple, Union


@dataclass(frozen=True)
class DublinCore:
    """Normalized Dublin Core description of one bibliographic record."""

    creators: Optional[Tuple[str, ...]] = None
    dates: Optional[Tuple[str, ...]] = None
    descriptions: Optional[Tuple[str, ...]] = None
    identifiers: Optional[Tuple[str, ...]] = None
    language: Optional[str] = None
    publishers: Optional[Tuple[str, ...]] = None
    # Not mapped from 6xx yet; always None.
    subjects: Optional[Tuple[str, ...]] = None
    titles: Optional[Tuple[str, ...]] = None
    type: str = ''

    def __post_init__(self):
        for name in ('creators', 'dates', 'descriptions', 'identifiers',
                     'publishers', 'subjects', 'titles'):
            value = getattr(self, name)
            if value is None:
                continue
            if isinstance(value, str):
                raise TypeError(f"{name} must be a sequence of strings, not a string")
            value = tuple(value)
            if not value:
                raise ValueError(f"{name} must be None or non-empty")
            object.__setattr__(self, name, value)
        if self.type is None:
            raise ValueError("type is never None; use '' when nothing was derived")

    @property
    def title(self) -> Optional[str]:
        """First title, if any."""
        return self.titles[0] if self.titles else None

    def as_dict(self) -> Dict[str, Union[str, Tuple[str, ...], None]]:
        """Element name to value, in declaration order."""
        return {f.name: getattr(self, f.name) for f in fields(self)}
