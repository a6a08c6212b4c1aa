"""
Tests for the command-line entry point.
"""

from chordlab.server import build_parser


class TestParser:
    """Tests for server options."""

    def test_defaults(self):
        """stdio on port 8000 with no project directory."""
        args = build_parser().parse_args([])
        assert args.transport == "stdio"
        assert args.port == 8000
        assert args.project_dir is None
        assert args.debug is False

    def test_http_options(self):
        """HTTP transport with a project directory."""
        args = build_parser().parse_args(
            ["--transport", "http", "--port", "9000", "--project-dir", "/tmp/songs", "--debug"]
        )
        assert args.transport == "http"
        assert args.port == 9000
        assert args.project_dir == "/tmp/songs"
        assert args.debug is True
