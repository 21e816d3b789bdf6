"""src/urivo/uri/__init__.py

URI components, parser and builder.
"""

from urivo.uri.builder import build, to_string
from urivo.uri.components import UriComponents
from urivo.uri.parser import UriParser, is_uri, parse

__all__ = ["UriComponents", "UriParser", "build", "is_uri", "parse", "to_string"]
