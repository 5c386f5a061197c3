import pytest

from tasklist.lib import config
from tasklist.store import TaskStore


@pytest.fixture(autouse=True)
def isolated_todo_home(monkeypatch, tmp_path):
    """Point the todo directory at tmp_path so no test touches ~/todo.

    Also drops any TODO_LIST override from the environment and resets the
    cached config before and after each test.
    """
    todo_home = tmp_path / "todo"
    monkeypatch.setenv("TODO_HOME", str(todo_home))
    monkeypatch.delenv("TODO_LIST", raising=False)
    config.clear_cache()

    yield todo_home

    config.clear_cache()


@pytest.fixture
def list_file(tmp_path):
    return tmp_path / "todo" / "list.txt"


@pytest.fixture
def store(list_file):
    return TaskStore(list_file)
