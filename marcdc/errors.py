"""Exceptions raised by marcdc.

Every exception derives from :class:`MarcDcError`. The lookup errors also
subclass the matching builtin so pymarc-style code that catches ``KeyError``
or ``IndexError`` keeps working.
"""


class MarcDcError(Exception):
    """Base class for all marcdc errors."""


class NotFound(MarcDcError, KeyError):
    """A required control field is missing from the record."""

    def __init__(self, tag: str):
        super().__init__(tag)
        self.tag = tag

    def __str__(self) -> str:
        return f"No control field with tag '{self.tag}'"


class OutOfRange(MarcDcError, IndexError):
    """A leader or control field is shorter than a position a rule needs."""

    def __init__(self, what: str, position: int, length: int):
        super().__init__(what, position, length)
        self.what = what
        self.position = position
        self.length = length

    def __str__(self) -> str:
        return (
            f"Position {self.position} out of range for {self.what} "
            f"(length {self.length})"
        )


class MalformedSubfieldSelection(MarcDcError, ValueError):
    """A subfield code set is empty or holds characters that are not codes."""


class FetchError(MarcDcError):
    """A MARC-XML document could not be fetched or held no record."""

    def __init__(self, message: str, url: str = None, status_code: int = None):
        super().__init__(message)
        self.url = url
        self.status_code = status_code
