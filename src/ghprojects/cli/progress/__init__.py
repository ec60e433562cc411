"""CLI progress displays."""

from ghprojects.cli.progress.rich import RichRequestProgress

__all__ = ["RichRequestProgress"]
