"""Command-line interface for tbunread."""
