"""src/urivo/exceptions.py

Urivo Exceptions hierarchy.
"""

from enum import Enum
from typing import Dict, Optional, Type


class ParseErrorKind(Enum):
    """Closed set of reasons a URI can fail to parse."""

    MISSING_SCHEME = "missing scheme"
    INVALID_SCHEME = "invalid scheme"
    INVALID_PORT = "invalid port"
    INVALID_CHARACTER = "invalid character"
    INVALID_AUTHORITY = "invalid authority"


class UrivoError(Exception):
    """Base exception for all Urivo errors."""


class ParseError(UrivoError, ValueError):
    """
    Base exception for URI parse failures.

    Attributes:
        kind: Category of the failure.
        position: 0-based character offset of the first violation.
        text: The input that failed to parse.
    """

    kind: ParseErrorKind

    def __init__(self, text: str, position: int, detail: Optional[str] = None):
        self.text = text
        self.position = position
        self.detail = detail
        message = f"{self.kind.value} at position {position}"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)

    @classmethod
    def for_kind(
        cls, kind: ParseErrorKind, text: str, position: int, detail: Optional[str] = None
    ) -> "ParseError":
        """Create the concrete error class matching ``kind``."""
        return _ERRORS_BY_KIND[kind](text, position, detail)


class MissingSchemeError(ParseError):
    """No ``scheme ":"`` prefix was found."""

    kind = ParseErrorKind.MISSING_SCHEME


class InvalidSchemeError(ParseError):
    """The text before the first colon violates the scheme grammar."""

    kind = ParseErrorKind.INVALID_SCHEME


class InvalidPortError(ParseError):
    """Port is not made of digits or is outside 0-65535."""

    kind = ParseErrorKind.INVALID_PORT


class InvalidCharacterError(ParseError):
    """Whitespace or a control character where the grammar forbids it."""

    kind = ParseErrorKind.INVALID_CHARACTER


class InvalidAuthorityError(ParseError):
    """
    Malformed authority segment.
    Raised for unterminated IP literals, garbage after an IP literal, and
    empty hosts when strict authority parsing is enabled.
    """

    kind = ParseErrorKind.INVALID_AUTHORITY


class ComponentError(UrivoError, ValueError):
    """Components given field by field do not form a valid URI."""


_ERRORS_BY_KIND: Dict[ParseErrorKind, Type[ParseError]] = {
    ParseErrorKind.MISSING_SCHEME: MissingSchemeError,
    ParseErrorKind.INVALID_SCHEME: InvalidSchemeError,
    ParseErrorKind.INVALID_PORT: InvalidPortError,
    ParseErrorKind.INVALID_CHARACTER: InvalidCharacterError,
    ParseErrorKind.INVALID_AUTHORITY: InvalidAuthorityError,
}
