"""Command-line interface for ghprojects."""

from __future__ import annotations

from ghprojects.cli.app import main as main
from ghprojects.cli.parser import build_parser as build_parser

__all__ = ["build_parser", "main"]
