"""Subcommand handlers, one module per command group."""
