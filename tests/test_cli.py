"""Tests for CLI commands."""

import pytest
from click.testing import CliRunner

from hexfmt import __version__
from hexfmt.cli import main


@pytest.fixture
def runner():
    """Create a CLI test runner."""
    return CliRunner()


class TestCliMain:
    """Tests for main CLI group."""

    def test_help(self, runner):
        result = runner.invoke(main, ["--help"])
        assert result.exit_code == 0
        assert "hexfmt" in result.output
        assert "render" in result.output

    def test_version_command(self, runner):
        result = runner.invoke(main, ["version"])
        assert result.exit_code == 0
        assert f"hexfmt {__version__}" in result.output


class TestRenderCommand:
    """Tests for render command."""

    def test_render_help(self, runner):
        result = runner.invoke(main, ["render", "--help"])
        assert result.exit_code == 0
        assert "Print FILES" in result.output

    def test_render_text(self, runner):
        result = runner.invoke(main, ["render", "--text", "AB"])
        assert result.exit_code == 0
        assert result.output == "4142\n"

    def test_render_file(self, runner, sample_file):
        result = runner.invoke(main, ["render", str(sample_file)])
        assert result.exit_code == 0
        assert result.output == "090a..0e0f\n"

    def test_render_precision(self, runner, sample_file):
        result = runner.invoke(main, ["render", "-p", "7", str(sample_file)])
        assert result.output == "090..0f\n"

    def test_render_upper(self, runner, sample_file):
        result = runner.invoke(main, ["render", "-p", "8", "-U", str(sample_file)])
        assert result.output == "090..E0F\n"

    def test_render_stdin(self, runner):
        result = runner.invoke(main, ["render", "-"], input=b"\x09\x0a\x0b")
        assert result.exit_code == 0
        assert result.output == "090a0b\n"

    def test_one_line_per_input(self, runner):
        result = runner.invoke(main, ["render", "-t", "AB", "-t", "BA"])
        assert result.output == "4142\n4241\n"

    def test_render_list(self, runner):
        result = runner.invoke(main, ["render", "-t", "AB", "-t", "BA", "--list"])
        assert result.exit_code == 0
        assert result.output == "[4142, 4241]\n"

    def test_render_list_upper(self, runner):
        result = runner.invoke(main, ["render", "-t", "JK", "-t", "KJ", "-l", "-U"])
        assert result.output == "[4A4B, 4B4A]\n"

    def test_no_input(self, runner):
        result = runner.invoke(main, ["render"])
        assert result.exit_code == 1
        assert "No input given" in result.output

    def test_lower_case_by_default(self, runner):
        result = runner.invoke(main, ["render", "-t", "\xfa\xfb"])
        assert result.output == "c3bac3bb\n"

    def test_negative_precision(self, runner):
        result = runner.invoke(main, ["render", "-t", "AB", "-p", "-1"])
        assert result.exit_code == 2

    def test_missing_file(self, runner, tmp_path):
        result = runner.invoke(main, ["render", str(tmp_path / "missing.bin")])
        assert result.exit_code == 2

    def test_no_lower_flag(self, runner):
        """Test lower case is the only default and has no flag of its own."""
        result = runner.invoke(main, ["render", "-t", "AB", "-L"])
        assert result.exit_code == 2
