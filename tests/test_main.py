"""Tests for the click entry point."""

from click.testing import CliRunner

from mysh import __version__
from mysh.main import cli


class TestCli:
    def test_version(self):
        result = CliRunner().invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_help(self):
        result = CliRunner().invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "--history-file" in result.output

    def test_runs_builtins_from_stdin(self, tmp_path):
        history = tmp_path / "hist"
        result = CliRunner().invoke(
            cli,
            ["--history-file", str(history), "--prompt", "> "],
            input="pwd\nhistory\nexit\n",
        )
        assert result.exit_code == 0
        assert "> " in result.output
        assert "   1  pwd" in result.output
        assert history.read_text() == "   1  pwd\n   2  history\n"

    def test_end_of_input_is_normal_exit(self, tmp_path):
        result = CliRunner().invoke(cli, ["--history-file", str(tmp_path / "h")], input="")
        assert result.exit_code == 0
