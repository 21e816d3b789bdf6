"""src/urivo/uri/components.py

Immutable record of the components of a parsed URI.
"""

import dataclasses
from typing import Any, Optional

from urivo.exceptions import ComponentError


@dataclasses.dataclass(frozen=True)
class UriComponents:
    """
    Components of a URI.

    Optional fields are ``None`` when their delimiter is absent from the URI
    and ``""`` when the delimiter is present but nothing follows it, so
    ``"x:?"`` has ``query == ""`` while ``"x:"`` has ``query is None``.

    Attributes:
        scheme: Lowercase scheme, always present.
        userinfo: Text before the last ``@`` of the authority.
        host: Host, ``""`` for an empty authority such as ``file:///``.
            IP literals keep their brackets.
        port: Port number, only present together with a host.
        path: Path, always present and possibly empty.
        query: Raw query, not decomposed into pairs.
        fragment: Raw fragment.
    """

    __slots__ = ("scheme", "userinfo", "host", "port", "path", "query", "fragment")

    scheme: str
    userinfo: Optional[str]
    host: Optional[str]
    port: Optional[int]
    path: str
    query: Optional[str]
    fragment: Optional[str]

    def __post_init__(self) -> None:
        if not self.scheme:
            raise ComponentError("scheme is required")
        if self.host is None:
            if self.port is not None:
                raise ComponentError("port requires a host")
            if self.userinfo is not None:
                raise ComponentError("userinfo requires a host")

    def __str__(self) -> str:
        # pylint: disable=import-outside-toplevel
        from urivo.uri.builder import to_string

        return to_string(self)

    @property
    def authority(self) -> Optional[str]:
        """``[userinfo "@"] host [":" port]``, or None without a host."""
        if self.host is None:
            return None
        result = self.host
        if self.userinfo is not None:
            result = f"{self.userinfo}@{result}"
        if self.port is not None:
            result = f"{result}:{self.port}"
        return result

    @property
    def username(self) -> Optional[str]:
        """Userinfo up to the first colon."""
        if self.userinfo is None:
            return None
        return self.userinfo.partition(":")[0]

    @property
    def password(self) -> Optional[str]:
        """Userinfo after the first colon, None if there is no colon."""
        if self.userinfo is None:
            return None
        _, colon, password = self.userinfo.partition(":")
        if not colon:
            return None
        return password

    def has_scheme(self, scheme: str) -> bool:
        """Case-insensitive scheme comparison."""
        return self.scheme.lower() == scheme.lower()

    def replace(self, **changes: Any) -> "UriComponents":
        """Return a copy with the given fields replaced."""
        return dataclasses.replace(self, **changes)
