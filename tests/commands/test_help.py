"""Tests for root help, version, and --examples output."""

from __future__ import annotations

import click
import pytest
from click.testing import CliRunner

from rkv import __version__
from rkv.cli import cli
from rkv.commands._base import RkvCommand, entry_types_line
from rkv.domain.types import ENTRY_TYPE_NAMES


class TestRootGroup:
    def test_help_lists_commands(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--help"])
        assert result.exit_code == 0
        for name in ("init", "new", "log", "open"):
            assert name in result.output

    def test_no_subcommand_prints_help(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, [])
        assert result.exit_code == 0
        assert "Professional development journaling" in result.output

    def test_version(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_unknown_command(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["frobnicate"])
        assert result.exit_code == 2


class TestExamples:
    def test_root_examples(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--examples"])
        assert result.exit_code == 0
        assert 'rkv log "Shipped the migration"' in result.output

    @pytest.mark.parametrize("command", ["init", "new", "log", "open"])
    def test_every_command_has_examples(self, cli_runner: CliRunner, command: str) -> None:
        result = cli_runner.invoke(cli, [command, "--examples"])
        assert result.exit_code == 0
        assert "Examples for" in result.output
        assert f"rkv {command}" in result.output

    @pytest.mark.parametrize("command", ["init", "new", "log", "open"])
    def test_help_mentions_examples_flag(self, cli_runner: CliRunner, command: str) -> None:
        result = cli_runner.invoke(cli, [command, "--help"])
        assert result.exit_code == 0
        assert "--examples" in result.output


class TestEntryTypeFooter:
    def test_new_examples_end_with_entry_types(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["new", "--examples"])
        assert result.exit_code == 0
        assert result.output.rstrip().endswith(entry_types_line())

    def test_new_help_lists_entry_types(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["new", "--help"])
        assert result.exit_code == 0
        assert entry_types_line() in result.output
        assert all(name in result.output for name in ENTRY_TYPE_NAMES)

    def test_log_has_no_footer(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["log", "--examples"])
        assert "Entry types:" not in result.output

    def test_root_examples_list_entry_types(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--examples"])
        assert entry_types_line() in result.output

    def test_examples_are_reindented(self, cli_runner: CliRunner) -> None:
        @click.command("demo", cls=RkvCommand, examples="\n    rkv demo\n    rkv demo --x\n")
        def demo() -> None:
            pass

        result = cli_runner.invoke(demo, ["--examples"])
        assert result.exit_code == 0
        assert result.output.endswith("\n  rkv demo\n  rkv demo --x\n")

    def test_examples_skip_command_body(self, cli_runner: CliRunner) -> None:
        calls: list[str] = []

        @click.command("demo", cls=RkvCommand, examples="rkv demo")
        def demo() -> None:
            calls.append("ran")

        cli_runner.invoke(demo, ["--examples"])
        assert calls == []
