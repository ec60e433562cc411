"""Rich-based request spinner."""

from __future__ import annotations

from types import TracebackType
from typing import ClassVar

from rich.console import Console
from rich.progress import Progress, SpinnerColumn, TextColumn, TimeElapsedColumn
from rich.progress import TaskID as RichTaskID

from ghprojects.github.progress import RequestProgress


class RichRequestProgress(RequestProgress):
    """Transient spinner on stderr while a GraphQL request is in flight.

    The live display only runs between ``request_start`` and
    ``request_done``, so interactive prompts between requests are not
    redrawn over. Use as a context manager so the display is always
    stopped::

        with RichRequestProgress() as progress:
            async with GraphQLClient(url, token=token, progress=progress) as client:
                ...
    """

    _LABELS: ClassVar[dict[str, str]] = {
        "Owner": "Resolving owner",
        "Project": "Fetching project",
        "Projects": "Listing projects",
        "IssueOrPullRequest": "Resolving URL",
    }

    def __init__(self, console: Console | None = None) -> None:
        self._console = console or Console(stderr=True)
        self._progress = Progress(
            SpinnerColumn(),
            TextColumn("{task.description}"),
            TimeElapsedColumn(),
            console=self._console,
            transient=True,
        )
        self._task_id: RichTaskID | None = None

    def __enter__(self) -> RichRequestProgress:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        self._stop()

    def _label(self, operation: str) -> str:
        for suffix, label in self._LABELS.items():
            if operation.endswith(suffix):
                return label
        return operation

    def request_start(self, operation: str) -> None:
        self._stop()
        self._progress.start()
        self._task_id = self._progress.add_task(f"[cyan]{self._label(operation)}[/]", total=None)

    def request_done(self, operation: str) -> None:
        self._stop()

    def _stop(self) -> None:
        if self._task_id is None:
            return
        self._progress.remove_task(self._task_id)
        self._task_id = None
        self._progress.stop()
