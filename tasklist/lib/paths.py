import os
from pathlib import Path

from tasklist.errors import HomeNotFoundError


def home() -> Path:
    """Returns the user's home directory."""
    try:
        return Path.home()
    except (RuntimeError, KeyError) as e:
        raise HomeNotFoundError("Could not determine home directory, please set $HOME") from e


def todo_dir() -> Path:
    """Returns the todo directory, ~/todo unless TODO_HOME is set."""
    override = os.environ.get("TODO_HOME")
    if override:
        return Path(override).expanduser()
    return home() / "todo"


def default_list_file() -> Path:
    """Returns the default backing file, ~/todo/list.txt."""
    return todo_dir() / "list.txt"


def config_file() -> Path:
    return todo_dir() / "config.yaml"


def list_file(explicit: Path | str | None = None) -> Path:
    """Resolve the backing file.

    Precedence: explicit argument, TODO_LIST env var, `list_path` from
    config.yaml, then ~/todo/list.txt. Relative config paths are taken from
    the todo directory.
    """
    if explicit:
        return Path(explicit).expanduser()

    env_path = os.environ.get("TODO_LIST")
    if env_path:
        return Path(env_path).expanduser()

    from . import config

    configured = config.load_config().get("list_path")
    if configured:
        path = Path(configured).expanduser()
        return path if path.is_absolute() else todo_dir() / path

    return default_list_file()
