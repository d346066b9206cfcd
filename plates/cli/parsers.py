"""CLI argument parsers and validators."""

from __future__ import annotations

from typing import get_args

import typer

from ..core.settings import EchoMode


def parse_file_mode(value: str) -> int:
    """Parse octal file mode string."""
    try:
        return int(value, 8)
    except ValueError as e:
        raise typer.BadParameter(f"Invalid octal mode: {value!r}") from e


def parse_echo_mode(value: str) -> EchoMode:
    """Parse when captured command output is shown."""
    choices = get_args(EchoMode)
    if value not in choices:
        raise typer.BadParameter(
            f"Must be one of {', '.join(choices)}, got: {value!r}"
        )
    return value  # type: ignore[return-value]


def template_args(program: str, dest: str, extra: list[str] | None) -> list[str]:
    """Build the positional arguments templates see through ``args(i)``.

    ``args(0)`` is the program, ``args(1)`` the destination and template
    specific arguments start at ``args(2)``, whatever options were given.
    """
    return [program, dest, *(extra or [])]
