"""Markdown summary for ``view``."""

from __future__ import annotations

from typing import TextIO

from rich.console import Console
from rich.markdown import Markdown

from ghprojects.models.project import Project

EMPTY = " -- "


def render_project(project: Project) -> str:
    """Render *project* as a Markdown document."""
    lines = [
        "# Title",
        project.title,
        "## Description",
        project.short_description or EMPTY,
        "## Visibility",
        "Public" if project.public else "Private",
        "## URL",
        project.url,
        "## ID",
        project.id,
        "## Item count",
        str(project.item_count),
        "## Readme",
        project.readme or EMPTY,
        "## Field Name (Field Type)",
    ]
    text = "\n".join(lines) + "\n"
    for field in project.fields:
        text += f"{field.name} ({field.type})\n\n"
    return text


def print_markdown(text: str, out: TextIO, *, is_terminal: bool) -> None:
    """Write *text* as-is, or styled through Rich on a terminal."""
    if not is_terminal:
        out.write(text)
        return
    Console(file=out).print(Markdown(text))
