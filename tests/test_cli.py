"""Tests for the todolist command surface."""

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from todolist.cli.commands import cli
from todolist.storage import TodoStore


@pytest.fixture
def runner():
    return CliRunner()


def seed(*texts):
    """Write db.json in the current directory with the given todos."""
    store = TodoStore()
    store.load()
    for text in texts:
        store.add(text)
    store.save()
    return store


def stored():
    store = TodoStore()
    store.load()
    return store.todos


class TestGlobalOptions:
    """Test the diagnostic echoes."""

    def test_defaults(self, runner):
        with runner.isolated_filesystem():
            result = runner.invoke(cli, [])

            assert result.exit_code == 0
            assert "Debug mode is off" in result.output
            assert Path("db.json").exists()

    @pytest.mark.parametrize("flags,message", [
        (["-d"], "Debug mode is kind of on"),
        (["-dd"], "Debug mode is on"),
        (["-ddd"], "Don't be crazy"),
    ])
    def test_debug_levels(self, runner, flags, message):
        with runner.isolated_filesystem():
            result = runner.invoke(cli, flags + ["list"])

            assert message in result.output

    def test_name_and_config_echo(self, runner):
        with runner.isolated_filesystem():
            result = runner.invoke(cli, ["--name", "sam", "--config", "missing.yaml", "list"])

            assert "Value for name: sam" in result.output
            assert "Value for config: missing.yaml" in result.output

    def test_config_selects_db_path(self, runner):
        with runner.isolated_filesystem():
            Path("conf.yaml").write_text("db_path: other.json\n")

            result = runner.invoke(cli, ["-c", "conf.yaml", "add", "elsewhere"])

            assert result.exit_code == 0
            assert json.loads(Path("other.json").read_text())["todos"][0]["text"] == "elsewhere"

    def test_test_command(self, runner):
        with runner.isolated_filesystem():
            assert "Printing testing lists..." in runner.invoke(cli, ["test", "--list"]).output
            assert "Not printing testing lists..." in runner.invoke(cli, ["test"]).output


class TestCommands:
    """Test mutations through the command line."""

    def test_add(self, runner):
        with runner.isolated_filesystem():
            result = runner.invoke(cli, ["add", "buy milk"])

            assert result.exit_code == 0
            assert "Today" in result.output
            assert "0. buy milk" in result.output
            todos = stored()
            assert [t.text for t in todos] == ["buy milk"]
            assert todos[0].completed is False

    def test_add_with_option(self, runner):
        with runner.isolated_filesystem():
            result = runner.invoke(cli, ["add", "--todo", "walk dog"])

            assert result.exit_code == 0
            assert [t.text for t in stored()] == ["walk dog"]

    def test_add_requires_text(self, runner):
        with runner.isolated_filesystem():
            result = runner.invoke(cli, ["add"])

            assert result.exit_code != 0

    def test_check_and_uncheck_by_position(self, runner):
        with runner.isolated_filesystem():
            seed("first", "second")

            runner.invoke(cli, ["check", "1"])
            assert [t.completed for t in stored()] == [False, True]

            runner.invoke(cli, ["uncheck", "1"])
            assert [t.completed for t in stored()] == [False, False]

    def test_delete_by_position(self, runner):
        with runner.isolated_filesystem():
            seed("first", "second", "third")

            result = runner.invoke(cli, ["delete", "0"])

            assert result.exit_code == 0
            assert [t.text for t in stored()] == ["second", "third"]

    def test_positions_follow_file_order(self, runner):
        """Indices address whatever is at that position when the command runs."""
        with runner.isolated_filesystem():
            seed("first", "second", "third")
            runner.invoke(cli, ["delete", "0"])

            runner.invoke(cli, ["check", "0"])

            assert [(t.text, t.completed) for t in stored()] == [
                ("second", True), ("third", False),
            ]

    @pytest.mark.parametrize("command", ["check", "uncheck", "delete"])
    def test_out_of_range_index_leaves_file_untouched(self, runner, command):
        with runner.isolated_filesystem():
            seed("only")
            before = Path("db.json").read_text()

            result = runner.invoke(cli, [command, "5"])

            assert result.exit_code == 0
            assert "Error: no todo at index 5" in result.output
            assert Path("db.json").read_text() == before

    def test_list_does_not_write(self, runner):
        with runner.isolated_filesystem():
            Path("db.json").write_text('{"todos": []}')

            result = runner.invoke(cli, ["list"])

            assert result.exit_code == 0
            assert Path("db.json").read_text() == '{"todos": []}'

    def test_corrupt_file_is_reported_not_fatal(self, runner):
        with runner.isolated_filesystem():
            Path("db.json").write_text("{oops")

            result = runner.invoke(cli, ["list"])

            assert result.exit_code == 0
            assert "could not parse" in result.output

    def test_undecodable_file_is_reported_not_fatal(self, runner):
        with runner.isolated_filesystem():
            Path("db.json").write_bytes(b"\xff\xfe garbage")

            result = runner.invoke(cli, ["list"])

            assert result.exit_code == 0
            assert "could not parse" in result.output

    def test_wrong_typed_config_falls_back_to_defaults(self, runner):
        with runner.isolated_filesystem():
            Path("conf.yaml").write_text("db_path: [a, b]\n")

            result = runner.invoke(cli, ["-c", "conf.yaml", "add", "still works"])

            assert result.exit_code == 0
            assert "Failed to load config" in result.output
            assert [t.text for t in stored()] == ["still works"]

    def test_ui_saves_toggles(self, runner, monkeypatch):
        def fake_run(todos, config):
            todos[0].toggle()

        monkeypatch.setattr("todolist.interactive.run_interactive", fake_run)

        with runner.isolated_filesystem():
            seed("first")

            result = runner.invoke(cli, ["ui"])

            assert result.exit_code == 0
            assert stored()[0].completed is True
