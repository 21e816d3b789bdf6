import pytest

from urivo.uri.parser import UriParser


@pytest.fixture
def parser() -> UriParser:
    """Parser with default (lenient) authority handling."""
    return UriParser()


@pytest.fixture
def strict_parser() -> UriParser:
    """Parser that rejects empty hosts."""
    return UriParser(strict_authority=True)
