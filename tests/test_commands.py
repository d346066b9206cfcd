"""Tests for command block execution."""

import pytest

from plates.core.models import CommandLine
from plates.errors import CommandError
from plates.execution.commands import (
    parse_command_line,
    run_command,
    run_command_block,
    split_command_lines,
)
from plates.rendering.parser import parse_definition


def _command_block(functions, body):
    source = '{% define "# setup" %}' + body + "{% enddefine %}"
    return parse_definition("demo", source, functions).blocks[1]


@pytest.mark.unit
class TestParseCommandLine:

    def test_program_and_arguments(self):
        command = parse_command_line("git init -q")

        assert command == CommandLine(program="git", argv=["init", "-q"])

    def test_program_only(self):
        assert parse_command_line("make").as_list() == ["make"]

    def test_blank_lines_are_skipped(self):
        assert parse_command_line("") is None
        assert parse_command_line("   ") is None

    def test_splits_on_single_spaces_without_quoting(self):
        command = parse_command_line('echo "a b"  c')

        assert command.argv == ['"a', 'b"', "", "c"]

    def test_split_command_lines(self):
        assert split_command_lines("a\n\nb") == ["a", "", "b"]


class TestRunCommand:

    def test_success(self):
        result = run_command(CommandLine(program="true"))

        assert result.returncode == 0

    def test_captures_stdout(self, capsys):
        result = run_command(CommandLine(program="echo", argv=["hi"]), echo="never")

        assert result.stdout == "hi\n"
        assert capsys.readouterr().out == ""

    def test_non_zero_exit_raises(self):
        with pytest.raises(CommandError) as exc_info:
            run_command(CommandLine(program="false"))

        assert exc_info.value.returncode == 1
        assert exc_info.value.command == ["false"]

    def test_missing_program_raises(self):
        with pytest.raises(CommandError) as exc_info:
            run_command(CommandLine(program="plates-no-such-program"))

        assert exc_info.value.returncode is None

    def test_output_replayed_on_error(self, capsys):
        command = CommandLine(program="sh", argv=["-c", "echo boom; exit 3"])

        with pytest.raises(CommandError) as exc_info:
            run_command(command, echo="on_error")

        assert exc_info.value.returncode == 3
        assert exc_info.value.stdout == "boom\n"
        assert "boom" in capsys.readouterr().out

    def test_output_hidden_on_success_by_default(self, capsys):
        run_command(CommandLine(program="echo", argv=["quiet"]))

        assert capsys.readouterr().out == ""

    def test_output_always_replayed(self, capsys):
        run_command(CommandLine(program="echo", argv=["loud"]), echo="always")

        assert capsys.readouterr().out == "loud\n"


class TestRunCommandBlock:

    def test_runs_lines_in_order(self, functions, tmp_path):
        first = tmp_path / "first"
        moved = tmp_path / "moved"
        block = _command_block(
            functions, f"touch {first}\ntest -f {first}\nmv {first} {moved}"
        )

        assert run_command_block(block) == 3
        assert moved.exists()
        assert not first.exists()

    def test_quoted_arguments_are_not_supported(self, functions, tmp_path):
        block = _command_block(functions, "sh -c 'exit 0'")

        # sh receives "'exit" as its script and fails on the open quote
        with pytest.raises(CommandError):
            run_command_block(block)

    def test_blank_lines_are_no_ops(self, functions, tmp_path):
        first = tmp_path / "first"
        second = tmp_path / "second"
        block = _command_block(functions, f"touch {first}\n\n   \ntouch {second}")

        assert run_command_block(block) == 2
        assert first.exists()
        assert second.exists()

    def test_stops_at_first_failure(self, functions, tmp_path):
        sentinel = tmp_path / "sentinel"
        block = _command_block(functions, f"false\ntouch {sentinel}")

        with pytest.raises(CommandError):
            run_command_block(block)

        assert not sentinel.exists()

    def test_body_is_rendered(self, functions, tmp_path):
        block = _command_block(functions, "mkdir " + str(tmp_path) + "/{{ args(1) }}")

        run_command_block(block)

        assert (tmp_path / "out").is_dir()
