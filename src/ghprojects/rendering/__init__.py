"""Output rendering for ghprojects.

:class:`TablePrinter` writes tabular results, :mod:`~ghprojects.rendering.projections`
builds ``--format json`` payloads and :func:`render_project` the ``view``
summary.
"""

from ghprojects.rendering.markdown import print_markdown, render_project
from ghprojects.rendering.table import PLACEHOLDER, TablePrinter, or_placeholder

__all__ = ["PLACEHOLDER", "TablePrinter", "or_placeholder", "print_markdown", "render_project"]
