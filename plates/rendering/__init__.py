"""Template parsing and rendering."""
