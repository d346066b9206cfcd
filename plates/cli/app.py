"""Main CLI application."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import List, Optional

import typer
from typing_extensions import Annotated

from ..core.settings import PlatesSettings
from ..errors import NoTemplatesError, PlatesError, UsageError
from ..execution.executor import Executor
from ..store import TemplateStore
from .parsers import parse_echo_mode, parse_file_mode, template_args
from .picker import choose_template

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="plates",
    help="Scaffold a project from a template, then run its setup commands.",
    add_completion=False,
)


@app.command()
def run(
    dest: Annotated[
        Optional[str],
        typer.Argument(
            help="Destination directory for the generated files.",
            metavar="PROJECT_PATH",
            show_default=False,
        ),
    ] = None,
    extra: Annotated[
        Optional[List[str]],
        typer.Argument(
            help="Extra arguments, visible to templates from args(2) on.",
            metavar="[ARGS]...",
            show_default=False,
        ),
    ] = None,
    template: Annotated[
        str,
        typer.Option(
            "--template",
            "-t",
            help="Template name (default: choose interactively).",
            metavar="NAME",
        ),
    ] = "",
    list_only: Annotated[
        bool,
        typer.Option(
            "--list",
            help="List available templates and exit.",
        ),
    ] = False,
    file_mode: Annotated[
        Optional[str],
        typer.Option(
            "--mode",
            help="File permissions in octal (default: 0644).",
            metavar="OCTAL",
        ),
    ] = None,
    echo: Annotated[
        Optional[str],
        typer.Option(
            "--echo",
            help="Show command output: always, on_error or never (default: on_error).",
            metavar="WHEN",
        ),
    ] = None,
    verbose: Annotated[
        Optional[bool],
        typer.Option(
            "--verbose/--quiet",
            help="Log each file and command (default: verbose).",
        ),
    ] = None,
) -> None:
    """Render a template into PROJECT_PATH and run its command sets."""
    settings = PlatesSettings()
    overrides: dict = {}
    if verbose is not None:
        overrides["verbose"] = verbose
    if echo is not None:
        overrides["echo_output"] = parse_echo_mode(echo)
    if file_mode is not None:
        overrides["file_mode"] = parse_file_mode(file_mode)
    if overrides:
        settings = settings.model_copy(update=overrides)

    # Configure logging
    logging.basicConfig(
        level=logging.INFO if settings.verbose else logging.WARNING,
        format="[%(levelname)s] %(message)s",
    )

    store = TemplateStore(settings.templates_dir, settings.extension)
    store.setup()

    if list_only:
        for name in store.available():
            typer.echo(name)
        return

    program = sys.argv[0]
    if not dest:
        typer.echo(f"Usage:\n  {program} PROJECT_PATH")
        raise typer.Exit(code=1)

    try:
        name = template or choose_template(store.available())
        executor = Executor(
            store,
            Path(dest),
            echo=settings.echo_output,
            file_mode=settings.file_mode,
        )
        executor.execute(name, template_args(program, dest, extra))
    except UsageError as e:
        typer.echo(e.diagnostic())
        raise typer.Exit(code=1) from e
    except NoTemplatesError as e:
        typer.echo(f"No templates available in {store.root}", err=True)
        raise typer.Exit(code=1) from e
    except PlatesError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1) from e


def main() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
