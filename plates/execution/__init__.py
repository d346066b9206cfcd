"""Two-phase template execution."""
