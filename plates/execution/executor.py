"""Two-phase template executor: write every file, then run every command set."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Sequence

from ..core.models import ExecutionPlan
from ..core.settings import EchoMode, PlatesSettings
from ..rendering.engine import materialize_all
from ..rendering.functions import FunctionEnvironment
from ..rendering.parser import open_template
from ..rendering.prompt import Prompter
from ..store import TemplateStore
from .classifier import plan_execution
from .commands import run_command_block

logger = logging.getLogger(__name__)


class Executor:
    """Runs templates from a store against one destination directory."""

    def __init__(
        self,
        store: TemplateStore,
        dest_root: Path,
        prompter: Prompter | None = None,
        echo: EchoMode = "on_error",
        file_mode: int = 0o644,
    ) -> None:
        self.store = store
        self.dest_root = Path(dest_root)
        self.prompter = prompter if prompter is not None else Prompter()
        self.echo = echo
        self.file_mode = file_mode

    def execute(self, name: str, args: Sequence[str]) -> ExecutionPlan:
        """Execute template ``name`` with positional ``args``.

        Every file block is written before any command block runs. The first
        failure aborts the run; files already written stay in place.

        Args:
            name: Template name in the store
            args: Positional arguments visible to ``args(i)``

        Returns:
            The plan that was executed

        Raises:
            PlatesError: On the first lookup, parse, render, write or command
                failure
        """
        functions = FunctionEnvironment(args, self.prompter)
        definition = open_template(self.store, name, functions)
        plan = plan_execution(definition)

        logger.debug(
            f"Template {name!r}: {len(plan.file_blocks)} file block(s), "
            f"{len(plan.command_blocks)} command block(s)"
        )

        materialize_all(plan.file_blocks, self.dest_root, self.file_mode)

        for block in plan.command_blocks:
            run_command_block(block, echo=self.echo)

        logger.debug(f"Template {name!r} done")
        return plan


def execute(
    name: str,
    args: Sequence[str],
    *,
    dest_root: Path,
    settings: PlatesSettings | None = None,
    prompter: Prompter | None = None,
) -> ExecutionPlan:
    """Execute ``name`` from the store configured in ``settings``."""
    settings = settings or PlatesSettings()
    store = TemplateStore(settings.templates_dir, settings.extension)
    executor = Executor(
        store,
        dest_root,
        prompter=prompter,
        echo=settings.echo_output,
        file_mode=settings.file_mode,
    )
    return executor.execute(name, args)
