"""Template store: the directory holding ``<name>.plate`` definitions."""

from __future__ import annotations

import logging
from pathlib import Path

from .errors import TemplateNotFoundError

logger = logging.getLogger(__name__)


class TemplateStore:
    """Locates, lists and reads template definition files."""

    def __init__(self, root: Path, extension: str = ".plate") -> None:
        self.root = Path(root)
        self.extension = extension

    def setup(self) -> None:
        """Create the store directory if it does not exist yet."""
        self.root.mkdir(parents=True, exist_ok=True)

    def path_for(self, name: str) -> Path:
        return self.root / f"{name}{self.extension}"

    def available(self) -> list[str]:
        """Return the names of all templates in the store, sorted.

        Returns:
            Template names without the extension
        """
        if not self.root.is_dir():
            return []
        return sorted(
            path.name[: -len(self.extension)]
            for path in self.root.glob(f"*{self.extension}")
            if path.is_file()
        )

    def read(self, name: str) -> str:
        """Read the full source of a template definition.

        Args:
            name: Template name without the extension

        Returns:
            Template source text

        Raises:
            TemplateNotFoundError: If no definition file exists for ``name``
        """
        path = self.path_for(name)
        logger.debug(f"Loading template: {path}")
        try:
            return path.read_text(encoding="utf-8")
        except FileNotFoundError as e:
            raise TemplateNotFoundError(f"Template not found: {path}") from e
        except IsADirectoryError as e:
            raise TemplateNotFoundError(f"Template is not a file: {path}") from e
