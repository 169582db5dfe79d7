"""Command-line interface for mddir."""
