"""utils/validators.py

Character-class checks for Urivo.
"""

import string

MAX_PORT = 65535

SCHEME_CHARS = frozenset(string.ascii_letters + string.digits + "+-.")

# Characters that end the authority segment.
AUTHORITY_TERMINATORS = frozenset("/?#")


def is_scheme(value: str) -> bool:
    """Check ``value`` against ``ALPHA *( ALPHA / DIGIT / "+" / "-" / "." )``."""
    return (
        bool(value)
        and value[0] in string.ascii_letters
        and all(char in SCHEME_CHARS for char in value)
    )


def is_forbidden_char(char: str) -> bool:
    """Whitespace or a C0, DEL or C1 control character."""
    code = ord(char)
    return char.isspace() or code < 0x20 or 0x7F <= code <= 0x9F


def is_port_text(value: str) -> bool:
    """Only ASCII digits (``str.isdigit`` also accepts other scripts)."""
    return value.isascii() and value.isdigit()


def is_valid_port(port: int) -> bool:
    """Port number within 0-65535."""
    return 0 <= port <= MAX_PORT
