"""Command-line interface for assetstash."""
