"""Block rendering and file materialization."""

from __future__ import annotations

import logging
from pathlib import Path

from jinja2 import TemplateError

from ..core.models import Block
from ..errors import PlatesError, RenderError
from .io import write_artifact

logger = logging.getLogger(__name__)


def render_block(block: Block) -> str:
    """Render a block body and strip surrounding whitespace.

    Args:
        block: Parsed block to render

    Returns:
        Rendered, trimmed content

    Raises:
        RenderError: If the body fails while rendering
    """
    logger.debug(f"Rendering block: {block.name!r}")
    try:
        rendered = block.template.render()
    except PlatesError:
        raise
    except (TemplateError, TypeError, ValueError, ArithmeticError, LookupError) as e:
        raise RenderError(f"Cannot render block {block.name!r}: {e}") from e
    return rendered.strip()


def output_path(dest_root: Path, block_name: str) -> Path:
    """Return where a file block lands: its name joined under ``dest_root``."""
    return dest_root / block_name.lstrip("/")


def materialize(block: Block, dest_root: Path, file_mode: int = 0o644) -> Path:
    """Render a file block and write it below ``dest_root``.

    Returns:
        Output file path
    """
    content = render_block(block)
    path = output_path(dest_root, block.name)

    logger.info(f"Creating file {path}")
    write_artifact(path, content, mode=file_mode)
    return path


def materialize_all(
    blocks: list[Block], dest_root: Path, file_mode: int = 0o644
) -> list[Path]:
    """Write every file block in order, stopping at the first failure."""
    logger.debug(f"Materializing {len(blocks)} file block(s)")
    return [materialize(block, dest_root, file_mode) for block in blocks]
