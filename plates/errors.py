"""Exceptions raised while loading and executing templates."""

from __future__ import annotations

from typing import Sequence


class PlatesError(Exception):
    """Base class for every error plates reports to the operator."""


class FatalError(PlatesError):
    """Errors that must end the whole run, whatever the call depth."""


class UsageError(FatalError):
    """Raised when the invocation does not provide what a template needs."""

    def __init__(self, message: str, available_args: Sequence[str] = ()) -> None:
        super().__init__(message)
        self.available_args = list(available_args)

    def diagnostic(self) -> str:
        lines = [str(self)]
        if self.available_args:
            lines.append("Current Args are:")
            lines.extend(
                f"  {index}: {arg}" for index, arg in enumerate(self.available_args)
            )
        return "\n".join(lines)


class InteractiveReadError(FatalError):
    """Raised when operator input is closed while a value is being asked for."""


class TemplateNotFoundError(PlatesError, LookupError):
    """Raised when no definition file exists for a template name."""


class NoTemplatesError(PlatesError):
    """Raised when the template store holds nothing to choose from."""


class TemplateParseError(PlatesError):
    """Raised when a template definition cannot be parsed."""


class RenderError(PlatesError):
    """Raised when a block body fails while rendering."""


class MaterializeError(PlatesError):
    """Raised when a rendered file cannot be written to the destination."""


class CommandError(PlatesError):
    """Raised when a command line fails to start or exits non-zero."""

    def __init__(
        self,
        message: str,
        command: Sequence[str],
        returncode: int | None = None,
        stdout: str = "",
        stderr: str = "",
    ) -> None:
        super().__init__(message)
        self.command = list(command)
        self.returncode = returncode
        self.stdout = stdout
        self.stderr = stderr
