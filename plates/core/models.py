"""Domain models for template definitions and their execution plan."""

from __future__ import annotations

from jinja2 import Template
from pydantic import BaseModel, ConfigDict, Field


class Block(BaseModel):
    """A named fragment of a template definition."""

    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    name: str = Field(..., description="File path or '# ' command set label")
    raw_body: str = Field(..., description="Block source before rendering")
    template: Template = Field(..., description="Compiled block body")

    @property
    def is_root(self) -> bool:
        return self.name == ""


class TemplateDefinition(BaseModel):
    """A parsed template: the root unit and its named blocks, in declaration order."""

    name: str = Field(..., description="Template name in the store")
    blocks: list[Block] = Field(default_factory=list, description="Parsed blocks")

    def block_names(self) -> list[str]:
        return [block.name for block in self.blocks]


class ExecutionPlan(BaseModel):
    """Blocks partitioned into the two execution phases."""

    file_blocks: list[Block] = Field(
        default_factory=list, description="Blocks written in phase one"
    )
    command_blocks: list[Block] = Field(
        default_factory=list, description="Blocks run in phase two"
    )


class CommandLine(BaseModel):
    """A single command line split into program and arguments."""

    program: str = Field(..., description="Executable to run")
    argv: list[str] = Field(default_factory=list, description="Program arguments")

    def as_list(self) -> list[str]:
        return [self.program, *self.argv]
