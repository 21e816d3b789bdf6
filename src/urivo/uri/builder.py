"""src/urivo/uri/builder.py

Build URI strings from components.
"""

from typing import Optional

from urivo.exceptions import ComponentError
from urivo.uri.components import UriComponents
from urivo.utils.validators import (
    is_forbidden_char,
    is_port_text,
    is_scheme,
    is_valid_port,
)

__all__ = ["to_string", "build"]


def to_string(components: UriComponents) -> str:
    """
    Format components as
    ``scheme ":" ["//" authority] path ["?" query] ["#" fragment]``.

    Components are not validated again.
    """
    result = f"{components.scheme}:"
    authority = components.authority
    if authority is not None:
        result += f"//{authority}"
    result += components.path
    if components.query is not None:
        result += f"?{components.query}"
    if components.fragment is not None:
        result += f"#{components.fragment}"
    return result


def build(
    scheme: str,
    *,
    userinfo: Optional[str] = None,
    host: Optional[str] = None,
    port: Optional[int] = None,
    path: str = "",
    query: Optional[str] = None,
    fragment: Optional[str] = None,
) -> UriComponents:
    """
    Create UriComponents field by field.

    The scheme is checked against the scheme grammar and lowercased, the
    port must be within 0-65535. Delimiters that would move text into
    another component when the result is parsed again are rejected.

    Raises:
        ComponentError: If the fields cannot form a URI.
    """
    if not is_scheme(scheme):
        raise ComponentError(f"Invalid scheme: {scheme!r}")
    if port is not None and not is_valid_port(port):
        raise ComponentError(f"Port out of range: {port}")
    if host is not None and path and not path.startswith("/"):
        raise ComponentError("Path must be empty or start with '/' when a host is set")
    if host is None and path.startswith("//"):
        raise ComponentError("Path cannot start with '//' without a host")
    _check_chars("userinfo", userinfo, "/?#")
    _check_chars("host", host, "/?#@")
    _check_chars("path", path, "?#")
    _check_chars("query", query, "#")
    if host is not None:
        _check_host(host, port)

    return UriComponents(
        scheme=scheme.lower(),
        userinfo=userinfo,
        host=host,
        port=port,
        path=path,
        query=query,
        fragment=fragment,
    )


def _check_chars(name: str, value: Optional[str], delimiters: str) -> None:
    if value is None:
        return
    for char in value:
        if char in delimiters:
            raise ComponentError(f"{name.capitalize()} cannot contain {char!r}")
    if name in ("userinfo", "host") and any(is_forbidden_char(char) for char in value):
        raise ComponentError(f"{name.capitalize()} cannot contain whitespace or controls")


def _check_host(host: str, port: Optional[int]) -> None:
    if host.startswith("["):
        if not host.endswith("]") or "]" in host[:-1]:
            raise ComponentError(f"Malformed IP literal: {host!r}")
        return
    colon = host.rfind(":")
    if port is None and colon != -1:
        tail = host[colon + 1 :]
        # "host:80" or "host:" would be read back as a port.
        if not tail or is_port_text(tail):
            raise ComponentError(f"Host {host!r} would be parsed as host and port")
