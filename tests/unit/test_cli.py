"""CLI commands driven through click's CliRunner."""

import logging

import pytest
from click.testing import CliRunner

from rucky.cli.main import cli
from rucky.config import config


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def source_file(tmp_path):
    def write(text, name="main.rk"):
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return str(path)
    return write


def test_check_valid_file(runner, source_file):
    result = runner.invoke(cli, ["check", source_file("let x = 1 + 2;\nx;")])
    assert result.exit_code == 0
    assert "Syntax is valid!" in result.output
    assert "2 statements" in result.output


def test_check_reports_errors(runner, source_file):
    result = runner.invoke(cli, ["check", source_file("let = 5;")])
    assert result.exit_code == 1
    assert "Syntax Errors Found:" in result.output
    assert "expected identifier after 'let'" in result.output


def test_ast_prints_program_and_tree(runner, source_file):
    result = runner.invoke(cli, ["ast", source_file("1 + 2 * 3;")])
    assert result.exit_code == 0
    assert "1 + 2 * 3;" in result.output
    assert "InfixExpression" in result.output


def test_ast_exits_on_errors(runner, source_file):
    result = runner.invoke(cli, ["ast", source_file("let x 5;")])
    assert result.exit_code == 1
    assert "Parser Errors:" in result.output


def test_tokens_table(runner, source_file):
    result = runner.invoke(cli, ["tokens", source_file("let five = 5;")])
    assert result.exit_code == 0
    for text in ("LET", "IDENT", "five", "INT"):
        assert text in result.output


def test_missing_file(runner, tmp_path):
    result = runner.invoke(cli, ["check", str(tmp_path / "nope.rk")])
    assert result.exit_code != 0


def test_version(runner):
    result = runner.invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert "0.1.0" in result.output


def test_debug_flag_logs_diagnostics_and_restores_config(runner, source_file, monkeypatch, caplog):
    monkeypatch.setattr(config, "enable_debug_logs", False)
    monkeypatch.setattr(config, "log_level", "minimal")

    with caplog.at_level(logging.DEBUG, logger="rucky"):
        result = runner.invoke(cli, ["--debug", "check", source_file("let = 5;")])

    assert result.exit_code == 1
    messages = [r.getMessage() for r in caplog.records if r.name.startswith("rucky")]
    assert any("expected identifier after 'let'" in m for m in messages)
    assert config.enable_debug_logs is False
    assert config.log_level == "minimal"


def test_without_debug_flag_nothing_is_logged(runner, source_file, monkeypatch, caplog):
    monkeypatch.setattr(config, "enable_debug_logs", False)

    with caplog.at_level(logging.DEBUG, logger="rucky"):
        result = runner.invoke(cli, ["check", source_file("let = 5;")])

    assert result.exit_code == 1
    assert not [r for r in caplog.records if r.name.startswith("rucky")]
