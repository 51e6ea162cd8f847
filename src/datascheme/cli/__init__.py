"""Command-line interface for datascheme."""
