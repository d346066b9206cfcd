"""Plates - scaffold projects from block templates.

Renders the file blocks of a ``.plate`` template into a destination
directory, then runs its command blocks.
"""

__version__ = "0.1.0"

# Configure logging for library use
import logging

logging.getLogger(__name__).addHandler(logging.NullHandler())

# Re-export main CLI entry point
from .cli import main

__all__ = ["main"]
