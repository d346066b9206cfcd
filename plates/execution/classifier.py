"""Block classification into file blocks and command blocks."""

from __future__ import annotations

from ..core.models import ExecutionPlan, TemplateDefinition

COMMAND_PREFIX = "# "


def is_command_block(name: str) -> bool:
    """Return True for command set names (case-sensitive ``"# "`` prefix)."""
    return name.startswith(COMMAND_PREFIX)


def command_set_label(name: str) -> str:
    return name[len(COMMAND_PREFIX) :] if is_command_block(name) else name


def plan_execution(definition: TemplateDefinition) -> ExecutionPlan:
    """Partition the named blocks of a definition into the two phases.

    The root unit is skipped. Declaration order is kept within each phase.
    """
    plan = ExecutionPlan()
    for block in definition.blocks:
        if block.is_root:
            continue
        if is_command_block(block.name):
            plan.command_blocks.append(block)
        else:
            plan.file_blocks.append(block)
    return plan
