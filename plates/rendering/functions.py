"""Functions exposed to block bodies while they render."""

from __future__ import annotations

import logging
from typing import Any, Callable, Sequence

from ..errors import UsageError
from .prompt import Prompter

logger = logging.getLogger(__name__)


class FunctionEnvironment:
    """The ``args`` and ``ask`` functions bound to one template execution.

    The prompt memo lives as long as this object; build a fresh one for each
    execution so answers never leak from one run to the next.
    """

    def __init__(self, args: Sequence[str], prompter: Prompter) -> None:
        self._args = list(args)
        self._prompter = prompter
        self.memo: dict[str, str] = {}

    def args(self, index: Any) -> str:
        """Return the positional argument at ``index`` (0-based).

        Raises:
            UsageError: If ``index`` is not a valid position
        """
        if (
            isinstance(index, bool)
            or not isinstance(index, int)
            or not 0 <= index < len(self._args)
        ):
            logger.debug(f"Template requested missing argument {index!r}")
            raise UsageError(
                f"The current template requires Args[{index}].",
                available_args=self._args,
            )
        return self._args[index]

    def ask(self, name: str) -> str:
        """Return the operator's answer for ``name``, asking at most once."""
        if name in self.memo:
            return self.memo[name]

        value = self._prompter.ask(name)
        self.memo[name] = value
        return value

    def as_globals(self) -> dict[str, Callable[..., str]]:
        return {"args": self.args, "ask": self.ask}
