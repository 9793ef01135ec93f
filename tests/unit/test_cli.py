"""Tests for CLI commands."""

from importlib.metadata import PackageNotFoundError
from pathlib import Path

import pytest
from typer.testing import CliRunner

from slate.cli import app
from slate.core.settings import SLATE_LOG_LEVEL_VAR


@pytest.fixture
def cli_runner(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> CliRunner:
    """Return a CLI test runner working in an empty directory."""
    monkeypatch.delenv(SLATE_LOG_LEVEL_VAR, raising=False)
    monkeypatch.chdir(tmp_path)
    return CliRunner()


class TestEvalCommand:
    def test_eval_prints_result(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(app, ["eval", "3 ^ 2 * 10"])
        assert result.exit_code == 0
        assert result.output.strip() == "90"

    def test_eval_assignment(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(app, ["eval", "x = 10"])
        assert result.exit_code == 0
        assert result.output.strip() == "'x"

    def test_eval_error(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(app, ["eval", "missing + 1"])
        assert result.exit_code == 1
        assert "UnboundSymbolError" in result.output

    def test_eval_parse_error(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(app, ["eval", "(1 + 2"])
        assert result.exit_code == 1
        assert "ParseError" in result.output

    def test_eval_long_chain(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(app, ["eval", " + ".join(["1"] * 1000)])
        assert result.exit_code == 0
        assert result.output.strip() == "1000"

    def test_eval_deep_nesting(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(app, ["eval", "(" * 2000 + "1" + ")" * 2000])
        assert result.exit_code == 1
        assert "ParseError" in result.output


class TestRunCommand:
    def test_run_file(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        program = tmp_path / "prog.slate"
        program.write_text("x = 10\nif x > 5 then\n    y = 2\nend\ny\n")
        result = cli_runner.invoke(app, ["run", str(program)])
        assert result.exit_code == 0
        assert result.output.strip() == "2"

    def test_run_missing_file(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        result = cli_runner.invoke(app, ["run", str(tmp_path / "nope.slate")])
        assert result.exit_code != 0

    def test_show_ast_from_config(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        (tmp_path / "slate.toml").write_text("[slate]\nshow_ast = true\n")
        result = cli_runner.invoke(app, ["eval", "1 + 2"])
        assert result.exit_code == 0
        assert "(block (+ 1 2))" in result.output
        assert result.output.strip().endswith("3")


class TestInspectCommands:
    def test_tokens(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(app, ["tokens", "x != 1"])
        assert result.exit_code == 0
        assert "not_equal" in result.output
        assert "symbol" in result.output

    def test_tokens_invalid_character(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(app, ["tokens", "x ; y"])
        assert result.exit_code == 1
        assert "InvalidCharacterError" in result.output

    def test_ast(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(app, ["ast", "2 ^ 3 ^ 2"])
        assert result.exit_code == 0
        assert result.output.strip() == "(block (^ 2 (^ 3 2)))"


class TestReplCommand:
    def test_repl_keeps_bindings(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(app, ["repl"], input="x = 4\nx * 2\n")
        assert result.exit_code == 0
        assert "'x" in result.output
        assert "8" in result.output

    def test_repl_survives_errors(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(app, ["repl"], input="nope\n1 + 1\n")
        assert result.exit_code == 0
        assert "UnboundSymbolError" in result.output
        assert "2" in result.output


class TestGlobalOptions:
    def test_version(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert result.output.startswith("slate ")

    def test_bad_config(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        (tmp_path / "slate.toml").write_text('[slate]\nlog_level = "LOUD"\n')
        result = cli_runner.invoke(app, ["eval", "1"])
        assert result.exit_code == 1
        assert "Invalid config" in result.output

    def test_version_uninstalled(
        self, cli_runner: CliRunner, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        def missing(name: str) -> str:
            raise PackageNotFoundError(name)

        monkeypatch.setattr("slate._version.version", missing)
        result = cli_runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert result.output.strip() == "slate 0+unknown"
