"""Command-line interface for csvrules."""
