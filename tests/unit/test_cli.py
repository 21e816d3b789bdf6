"""tests/unit/test_cli.py"""

import io
import json
import logging

import pytest

from urivo.cli import build_parser, main


def run(*argv):
    stdout, stderr = io.StringIO(), io.StringIO()
    status = main(list(argv), stdout=stdout, stderr=stderr)
    return status, stdout.getvalue(), stderr.getvalue()


class TestCli:
    """Tests for the urivo command."""

    def test_prints_present_fields(self):
        """Test plain output omits absent components."""
        status, out, err = run("https://user@example.com:8443/a?b#c")
        assert status == 0
        assert err == ""
        assert out.splitlines() == [
            "scheme: https",
            "userinfo: user",
            "host: example.com",
            "port: 8443",
            "path: /a",
            "query: b",
            "fragment: c",
        ]

    def test_multiple_uris_separated(self):
        """Test a blank line between URIs."""
        status, out, _ = run("a:x", "b:y")
        assert status == 0
        assert out == "scheme: a\npath: x\n\nscheme: b\npath: y\n"

    def test_json_output(self):
        """Test one JSON object per line."""
        status, out, _ = run("--json", "mailto:a@b", "http://h/")
        assert status == 0
        lines = [json.loads(line) for line in out.splitlines()]
        assert lines[0]["path"] == "a@b"
        assert lines[1]["host"] == "h"

    def test_failure_reported(self):
        """Test that failures go to stderr and set the exit status."""
        status, out, err = run("http://host:999999/", "x:ok")
        assert status == 1
        assert "urivo: http://host:999999/: invalid port at position 12" in err
        assert "scheme: x" in out

    def test_strict(self):
        """Test the --strict option."""
        assert run("file:///tmp")[0] == 0
        status, _, err = run("--strict", "file:///tmp")
        assert status == 1
        assert "invalid authority" in err

    def test_failed_first_uri_no_leading_blank_line(self):
        """Test that the separator only follows printed output."""
        status, out, _ = run("bad", "x:y")
        assert status == 1
        assert out == "scheme: x\npath: y\n"

    def test_verbose(self, caplog):
        """Test that --verbose emits debug records."""
        caplog.set_level(logging.DEBUG, logger="urivo.cli")
        assert run("-v", "http://h/")[0] == 0
        debug = [r for r in caplog.records if r.levelno == logging.DEBUG]
        assert any("http://h/" in r.getMessage() for r in debug)

    def test_usage_error(self):
        """Test that argparse exits with status 2 without URIs."""
        with pytest.raises(SystemExit) as exc_info:
            build_parser().parse_args([])
        assert exc_info.value.code == 2
