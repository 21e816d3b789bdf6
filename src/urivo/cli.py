"""src/urivo/cli.py

Command line front end: parse URIs and print their components.
"""

import argparse
import logging
import sys
from typing import List, Optional, TextIO

from urivo.exceptions import ParseError
from urivo.uri.components import UriComponents
from urivo.uri.parser import UriParser
from urivo.utils.serialization import to_dict, to_json
from urivo.version import __version__

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the ``urivo`` command."""
    parser = argparse.ArgumentParser(
        prog="urivo",
        description="Split URIs into their components.",
    )
    parser.add_argument("uris", nargs="+", metavar="URI", help="URI to parse")
    parser.add_argument(
        "--json",
        action="store_true",
        help="print one JSON object per URI",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="reject empty hosts such as file:///path",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="enable debug logging",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def _print_fields(components: UriComponents, out: TextIO) -> None:
    for name, value in to_dict(components).items():
        if value is not None:
            print(f"{name}: {value}", file=out)


def main(
    argv: Optional[List[str]] = None,
    stdout: Optional[TextIO] = None,
    stderr: Optional[TextIO] = None,
) -> int:
    """
    Run the command line interface.

    Returns:
        0 if every URI parsed, 1 otherwise. Usage errors exit with 2
        through argparse.
    """
    if stdout is None:
        stdout = sys.stdout
    if stderr is None:
        stderr = sys.stderr
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    uri_parser = UriParser(strict_authority=args.strict)
    status = 0
    printed = False
    for text in args.uris:
        logger.debug("Parsing %r (strict=%s)", text, args.strict)
        try:
            components = uri_parser.parse(text)
        except ParseError as exc:
            logger.debug("Failed at position %d: %s", exc.position, exc.kind.name)
            print(f"urivo: {text}: {exc}", file=stderr)
            status = 1
            continue

        if args.json:
            print(to_json(components), file=stdout)
        else:
            if printed:
                print(file=stdout)
            _print_fields(components, stdout)
            printed = True
    return status
