import pytest

from tasklist.lib import config


def test_config_missing_file_returns_defaults():
    cfg = config.load_config()
    assert cfg == config.DEFAULT_CONFIG


def test_config_loads_values(isolated_todo_home):
    isolated_todo_home.mkdir(parents=True)
    (isolated_todo_home / "config.yaml").write_text("logging_level: debug\nlist_path: /tmp/x.txt\n")

    cfg = config.load_config()
    assert cfg["logging_level"] == "debug"
    assert cfg["list_path"] == "/tmp/x.txt"


def test_config_empty_file_returns_defaults(isolated_todo_home):
    isolated_todo_home.mkdir(parents=True)
    (isolated_todo_home / "config.yaml").write_text("")

    assert config.load_config() == config.DEFAULT_CONFIG


def test_config_is_cached(isolated_todo_home):
    isolated_todo_home.mkdir(parents=True)
    config_file = isolated_todo_home / "config.yaml"
    config_file.write_text("logging_level: INFO\n")
    assert config.load_config()["logging_level"] == "INFO"

    config_file.write_text("logging_level: ERROR\n")
    assert config.load_config()["logging_level"] == "INFO"

    config.clear_cache()
    assert config.load_config()["logging_level"] == "ERROR"


@pytest.mark.parametrize("content", ["- a\n- b\n", "list_path: 3\n", "logging_level: [x]\n"])
def test_config_invalid_raises(isolated_todo_home, content):
    isolated_todo_home.mkdir(parents=True)
    (isolated_todo_home / "config.yaml").write_text(content)

    with pytest.raises(ValueError):
        config.load_config()


def test_config_unknown_logging_level_raises(isolated_todo_home):
    isolated_todo_home.mkdir(parents=True)
    (isolated_todo_home / "config.yaml").write_text("logging_level: loud\n")

    with pytest.raises(ValueError, match="unknown level"):
        config.load_config()
