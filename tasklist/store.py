"""Task store: a task list persisted as one line per task in a flat file.

Each line takes the form::

    <id>: <Complete|Incomplete> <description>

The collection is re-read from the file on every operation. Edit and remove
rewrite the whole file; create appends. There is no locking, so two processes
writing the same file at once can lose updates.
"""

import logging
import re
from pathlib import Path

from .errors import ParseError, StoreIOError
from .models import STATUS_TOKENS, Task, TaskStatus

logger = logging.getLogger(__name__)

LINE_RE = re.compile(
    r"^(?P<id>[0-9]+): (?P<status>{}) (?P<description>.*)$".format(
        "|".join(re.escape(token) for token in STATUS_TOKENS.values())
    )
)


def format_line(task: Task) -> str:
    return f"{task.id}: {task.status.token} {task.description}"


def parse_line(line: str, lineno: int | None = None) -> Task:
    """Parse one line of the backing file. Raises ParseError on any mismatch."""
    match = LINE_RE.match(line)
    if not match:
        raise ParseError(f"Malformed task line {line!r}", lineno=lineno, line=line)
    return Task(
        id=int(match["id"]),
        status=TaskStatus.from_token(match["status"]),
        description=match["description"],
    )


def _check_id(task_id: int) -> None:
    if task_id < 0:
        raise ValueError(f"Task id must be non-negative, got {task_id}")


def _check_description(description: str) -> None:
    if "\n" in description or "\r" in description:
        raise ValueError("Task description must be a single line")


class TaskStore:
    def __init__(self, path: Path | str):
        self.path = Path(path)

    def __repr__(self) -> str:
        return f"TaskStore({str(self.path)!r})"

    def load(self) -> dict[int, Task]:
        """Read every task in the file. A missing file or any bad line is fatal."""
        tasks: dict[int, Task] = {}
        for lineno, line in enumerate(self._read_lines(), start=1):
            task = parse_line(line, lineno=lineno)
            tasks[task.id] = task
        return tasks

    def get(self, task_id: int) -> Task | None:
        return self.load().get(task_id)

    def next_id(self) -> int:
        """Id for the next task: one past the id on the file's last line.

        Only the last physical line is consulted, not the maximum over all
        lines. Creates the file (and its directory) when it does not exist.
        """
        if not self.path.exists():
            self._create_file()
            return 0
        lines = self._read_lines()
        if not lines:
            return 0
        return parse_line(lines[-1], lineno=len(lines)).id + 1

    def create(self, description: str) -> Task:
        _check_description(description)
        task = Task(id=self.next_id(), status=TaskStatus.INCOMPLETE, description=description)
        line = format_line(task) + "\n"
        try:
            if not self._ends_with_newline():
                line = "\n" + line
            with open(self.path, "a", encoding="utf-8") as f:
                f.write(line)
        except OSError as e:
            raise StoreIOError(f"Could not write to {self.path}: {e}") from e
        logger.debug("Created task %d in %s", task.id, self.path)
        return task

    def edit(self, task_id: int, status: TaskStatus, description: str) -> Task:
        """Replace status and description of a task, inserting it if absent."""
        _check_id(task_id)
        _check_description(description)
        tasks = self.load()
        task = Task(id=task_id, status=TaskStatus(status), description=description)
        if task_id not in tasks:
            logger.debug("Task %d not found in %s, inserting", task_id, self.path)
        tasks[task_id] = task
        self._write(tasks)
        logger.debug("Edited task %d in %s", task_id, self.path)
        return task

    def remove(self, task_id: int) -> bool:
        """Delete a task. Returns False, and still rewrites, when it was absent."""
        tasks = self.load()
        removed = tasks.pop(task_id, None) is not None
        self._write(tasks)
        logger.debug("Removed task %d from %s: %s", task_id, self.path, removed)
        return removed

    def _read_lines(self) -> list[str]:
        try:
            with open(self.path, encoding="utf-8", newline="") as f:
                text = f.read()
        except FileNotFoundError as e:
            raise StoreIOError(f"Task list not found: {self.path}") from e
        except UnicodeDecodeError as e:
            raise ParseError(f"{self.path} is not valid UTF-8 text") from e
        except OSError as e:
            raise StoreIOError(f"Could not read {self.path}: {e}") from e
        # Lines end at "\n" only (optionally "\r\n"); other Unicode line
        # breaks are description text.
        lines = text.split("\n")
        if lines[-1] == "":
            lines.pop()
        return [line[:-1] if line.endswith("\r") else line for line in lines]

    def _write(self, tasks: dict[int, Task]) -> None:
        content = "".join(format_line(tasks[task_id]) + "\n" for task_id in sorted(tasks))
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.path, "w", encoding="utf-8") as f:
                f.write(content)
        except OSError as e:
            raise StoreIOError(f"Could not write to {self.path}: {e}") from e

    def _create_file(self) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.touch()
        except OSError as e:
            raise StoreIOError(f"Could not create {self.path}: {e}") from e
        logger.debug("Created task list %s", self.path)

    def _ends_with_newline(self) -> bool:
        with open(self.path, "rb") as f:
            f.seek(0, 2)
            if f.tell() == 0:
                return True
            f.seek(-1, 2)
            return f.read(1) == b"\n"
