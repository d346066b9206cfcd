"""Command block execution."""

from __future__ import annotations

import logging
import subprocess
import sys

from ..core.models import Block, CommandLine
from ..core.settings import EchoMode
from ..errors import CommandError
from ..rendering.engine import render_block
from .classifier import command_set_label

logger = logging.getLogger(__name__)


def split_command_lines(text: str) -> list[str]:
    return text.split("\n")


def parse_command_line(line: str) -> CommandLine | None:
    """Split a command line on single spaces into program and arguments.

    There is no quoting: an argument can never contain a space, and runs of
    spaces produce empty arguments.

    Returns:
        The parsed command, or None for a blank line
    """
    if not line.strip():
        return None
    program, *argv = line.split(" ")
    return CommandLine(program=program, argv=argv)


def run_command(
    command: CommandLine, *, echo: EchoMode = "on_error"
) -> subprocess.CompletedProcess[str]:
    """Run a command to completion, capturing its output.

    Captured output is replayed to the caller's streams always, only when the
    command fails, or never, according to ``echo``.

    Raises:
        CommandError: If the program cannot be started or exits non-zero
    """
    cmd_list = command.as_list()
    try:
        result = subprocess.run(cmd_list, capture_output=True, text=True)
    except OSError as e:
        raise CommandError(
            f"Cannot run {command.program!r}: {e}", command=cmd_list
        ) from e

    if echo == "always" or (echo == "on_error" and result.returncode != 0):
        if result.stdout:
            sys.stdout.write(result.stdout)
        if result.stderr:
            sys.stderr.write(result.stderr)

    if result.returncode != 0:
        raise CommandError(
            f"Command {' '.join(cmd_list)!r} exited with status {result.returncode}",
            command=cmd_list,
            returncode=result.returncode,
            stdout=result.stdout,
            stderr=result.stderr,
        )
    return result


def run_command_block(block: Block, *, echo: EchoMode = "on_error") -> int:
    """Render a command block and run its lines in order.

    Returns:
        Number of commands run
    """
    content = render_block(block)

    logger.info(f"Executing command set: {command_set_label(block.name)}")
    ran = 0
    for line in split_command_lines(content):
        logger.info(f"\t # {line}")
        command = parse_command_line(line)
        if command is None:
            continue
        run_command(command, echo=echo)
        ran += 1
    return ran
