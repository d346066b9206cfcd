"""Numbered template picker."""

from __future__ import annotations

import sys
from typing import Callable, TextIO

from ..errors import InteractiveReadError, NoTemplatesError


def _display_options(names: list[str], output: TextIO) -> None:
    print("Available templates:", file=output)
    print("", file=output)
    for i, name in enumerate(names):
        print(f"  {i + 1} - {name}", file=output)
    print("", file=output)


def _parse_choice(raw_input: str, option_count: int) -> int | None:
    raw_input = raw_input.strip()
    if raw_input.isdigit() and 1 <= int(raw_input) <= option_count:
        return int(raw_input)
    return None


def choose_template(
    names: list[str],
    *,
    input_fn: Callable[[str], str] = input,
    output: TextIO | None = None,
) -> str:
    """Display the available templates and return the one the operator picks.

    Args:
        names: Template names to choose from
        input_fn: Reads one answer line (called with an empty prompt)
        output: Stream the list and prompt are printed to (default: stdout)

    Returns:
        The selected template name

    Raises:
        NoTemplatesError: If ``names`` is empty
        InteractiveReadError: On EOF (e.g. piped input closed)
    """
    if output is None:
        output = sys.stdout
    if not names:
        raise NoTemplatesError("No templates available")

    _display_options(names, output)
    prompt_text = f"Choose your template [1-{len(names)}]: "

    while True:
        print(prompt_text, end="", file=output, flush=True)
        try:
            raw = input_fn("")
        except EOFError as e:
            print("", file=output)
            raise InteractiveReadError("Input closed while choosing a template") from e

        choice = _parse_choice(raw, len(names))
        if choice is not None:
            return names[choice - 1]
