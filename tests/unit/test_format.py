from tasklist.format import format_task_detail, format_task_list
from tasklist.models import Task, TaskStatus


def test_format_task_list_empty():
    assert format_task_list([]) == "No tasks"


def test_format_task_list_sorted_with_marks():
    tasks = [
        Task(1, TaskStatus.INCOMPLETE, "Add error handling"),
        Task(0, TaskStatus.COMPLETE, "Add TUI"),
    ]

    lines = format_task_list(tasks).splitlines()
    assert lines == ["  0 [x] Add TUI", "  1 [ ] Add error handling"]


def test_format_task_detail():
    result = format_task_detail(Task(3, TaskStatus.COMPLETE, "ship it"))
    assert "ID: 3" in result
    assert "Status: Complete" in result
    assert result.endswith("ship it")
