"""Task formatting for CLI display."""

from tasklist.models import Task


def format_task(task: Task) -> str:
    mark = "[x]" if task.done else "[ ]"
    return f"{task.id:>3} {mark} {task.description}"


def format_task_list(tasks: list[Task]) -> str:
    """Format tasks for display, one line per task, ordered by id."""
    if not tasks:
        return "No tasks"
    return "\n".join(format_task(task) for task in sorted(tasks, key=lambda t: t.id))


def format_task_detail(task: Task) -> str:
    lines = [
        f"ID: {task.id}",
        f"Status: {task.status.token}",
        "",
        task.description,
    ]
    return "\n".join(lines)
