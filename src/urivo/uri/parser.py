"""src/urivo/uri/parser.py

RFC 3986 generic URI parser.
"""

from typing import NoReturn, Optional, Tuple

from urivo.exceptions import ParseError, ParseErrorKind
from urivo.uri.components import UriComponents
from urivo.utils.validators import (
    AUTHORITY_TERMINATORS,
    SCHEME_CHARS,
    is_forbidden_char,
    is_port_text,
    is_scheme,
    is_valid_port,
)

__all__ = ["UriParser", "parse", "is_uri"]


class UriParser:
    """
    Single-pass URI parser.

    Walks the input once, left to right:
    scheme -> authority (only after ``//``) -> path -> query -> fragment.
    The first grammar violation raises a ``ParseError`` subclass; no partial
    result is ever returned.

    Instances hold configuration only and can be shared between threads.
    """

    __slots__ = ("strict_authority",)

    def __init__(self, strict_authority: bool = False):
        self.strict_authority = strict_authority

    def parse(self, text: str) -> UriComponents:
        """
        Decompose ``text`` into its components.

        Args:
            text: The URI. Nothing is stripped or percent-decoded.

        Returns:
            UriComponents with a lowercase scheme.

        Raises:
            MissingSchemeError: No ``scheme ":"`` prefix.
            InvalidSchemeError: Scheme does not start with a letter.
            InvalidCharacterError: Whitespace or control character in the
                scheme or the authority.
            InvalidPortError: Port exceeds 65535, or is not numeric after an
                IP literal.
            InvalidAuthorityError: Malformed IP literal, or empty host in
                strict mode.
        """
        scheme, pos = self._parse_scheme(text)

        userinfo: Optional[str] = None
        host: Optional[str] = None
        port: Optional[int] = None
        if text.startswith("//", pos):
            pos += 2
            end = pos
            while end < len(text) and text[end] not in AUTHORITY_TERMINATORS:
                end += 1
            userinfo, host, port = self._parse_authority(text, pos, end)
            pos = end

        end = pos
        while end < len(text) and text[end] not in "?#":
            end += 1
        path = text[pos:end]
        pos = end

        query: Optional[str] = None
        if pos < len(text) and text[pos] == "?":
            end = text.find("#", pos)
            if end == -1:
                end = len(text)
            query = text[pos + 1 : end]
            pos = end

        fragment: Optional[str] = None
        if pos < len(text) and text[pos] == "#":
            fragment = text[pos + 1 :]

        return UriComponents(
            scheme=scheme,
            userinfo=userinfo,
            host=host,
            port=port,
            path=path,
            query=query,
            fragment=fragment,
        )

    def _parse_scheme(self, text: str) -> Tuple[str, int]:
        """Return the lowercase scheme and the index just past its colon."""
        pos = 0
        while pos < len(text) and text[pos] in SCHEME_CHARS:
            pos += 1

        if pos == len(text):
            _fail(ParseErrorKind.MISSING_SCHEME, text, pos, "no ':' found")
        char = text[pos]
        if char != ":":
            if is_forbidden_char(char):
                _fail(ParseErrorKind.INVALID_CHARACTER, text, pos, repr(char))
            _fail(
                ParseErrorKind.MISSING_SCHEME,
                text,
                pos,
                f"unexpected {char!r} before ':'",
            )
        if pos == 0:
            _fail(ParseErrorKind.MISSING_SCHEME, text, 0, "empty scheme")

        scheme = text[:pos]
        if not is_scheme(scheme):
            _fail(
                ParseErrorKind.INVALID_SCHEME,
                text,
                0,
                f"{scheme!r} must start with a letter",
            )
        return scheme.lower(), pos + 1

    def _parse_authority(
        self, text: str, start: int, end: int
    ) -> Tuple[Optional[str], str, Optional[int]]:
        """Split ``text[start:end]`` into userinfo, host and port."""
        for index in range(start, end):
            if is_forbidden_char(text[index]):
                _fail(ParseErrorKind.INVALID_CHARACTER, text, index, repr(text[index]))

        userinfo: Optional[str] = None
        at = text.rfind("@", start, end)
        if at != -1:
            userinfo = text[start:at]
            start = at + 1

        if start < end and text[start] == "[":
            close = text.find("]", start, end)
            if close == -1:
                _fail(
                    ParseErrorKind.INVALID_AUTHORITY,
                    text,
                    start,
                    "unterminated IP literal",
                )
            host_end = close + 1
            if host_end < end and text[host_end] != ":":
                _fail(
                    ParseErrorKind.INVALID_AUTHORITY,
                    text,
                    host_end,
                    "unexpected text after IP literal",
                )
            colon = host_end if host_end < end else -1
        else:
            colon = text.rfind(":", start, end)
            # A colon not followed solely by digits is part of the host.
            port_text = text[colon + 1 : end]
            if colon != -1 and port_text and not is_port_text(port_text):
                colon = -1
            host_end = end if colon == -1 else colon

        host = text[start:host_end]
        if not host and self.strict_authority:
            _fail(ParseErrorKind.INVALID_AUTHORITY, text, start, "empty host")

        port: Optional[int] = None
        if colon != -1:
            port = _parse_port(text, colon + 1, end)
        return userinfo, host, port


def _parse_port(text: str, start: int, end: int) -> Optional[int]:
    port_text = text[start:end]
    if not port_text:
        return None
    if not is_port_text(port_text):
        _fail(ParseErrorKind.INVALID_PORT, text, start, f"{port_text!r} is not numeric")
    port = int(port_text)
    if not is_valid_port(port):
        _fail(ParseErrorKind.INVALID_PORT, text, start, f"{port} is out of range")
    return port


def _fail(kind: ParseErrorKind, text: str, position: int, detail: str) -> NoReturn:
    raise ParseError.for_kind(kind, text, position, detail)


_DEFAULT_PARSER = UriParser()
_STRICT_PARSER = UriParser(strict_authority=True)


def parse(text: str, *, strict: bool = False) -> UriComponents:
    """
    Parse a URI with a shared parser.

    ``strict`` rejects empty hosts such as ``file:///etc/passwd``.
    """
    return (_STRICT_PARSER if strict else _DEFAULT_PARSER).parse(text)


def is_uri(text: str) -> bool:
    """Check if ``text`` parses as a URI."""
    try:
        parse(text)
    except ParseError:
        return False
    return True
