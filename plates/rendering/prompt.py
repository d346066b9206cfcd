"""Interactive prompts for values a template asks the operator for."""

from __future__ import annotations

import logging
import sys
from typing import Callable, TextIO

from ..errors import InteractiveReadError

logger = logging.getLogger(__name__)


class Prompter:
    """Asks the operator for named values on the interactive streams.

    The prompt text goes to ``output``; ``input_fn`` is then called with an
    empty prompt and returns one line without its newline, raising
    ``EOFError`` when input is closed (the contract of the builtin ``input``).
    """

    def __init__(
        self,
        input_fn: Callable[[str], str] = input,
        output: TextIO | None = None,
    ) -> None:
        self.input_fn = input_fn
        self.output = output if output is not None else sys.stdout

    def ask(self, label: str) -> str:
        """Ask for ``label`` until a non-blank answer is given.

        Args:
            label: Name shown to the operator

        Returns:
            The answer with surrounding whitespace removed

        Raises:
            InteractiveReadError: If input is closed before an answer arrives
        """
        prompt_text = f"> {label}: "
        while True:
            print(prompt_text, end="", file=self.output, flush=True)
            try:
                raw = self.input_fn("")
            except EOFError as e:
                print("", file=self.output)
                raise InteractiveReadError(
                    f"Input closed while asking for {label!r}"
                ) from e

            value = raw.strip()
            if value:
                return value
            logger.debug(f"Blank answer for {label!r}, asking again")
