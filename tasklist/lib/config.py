import logging
from functools import lru_cache

import yaml

from . import paths

DEFAULT_CONFIG = {
    "list_path": None,
    "logging_level": "WARNING",
}


def clear_cache():
    load_config.cache_clear()


def _validate_config(cfg) -> None:
    """Fail fast on invalid types."""
    if not isinstance(cfg, dict):
        raise ValueError(f"Config must be a mapping, got {type(cfg).__name__}")

    list_path = cfg.get("list_path")
    if list_path is not None and not isinstance(list_path, str):
        raise ValueError("Config 'list_path' must be a string")

    level = cfg.get("logging_level")
    if level is not None:
        if not isinstance(level, str):
            raise ValueError("Config 'logging_level' must be a string")
        if not isinstance(logging.getLevelName(level.upper()), int):
            raise ValueError(f"Config 'logging_level' has unknown level '{level}'")


@lru_cache(maxsize=1)
def load_config() -> dict:
    """Load config.yaml merged over the defaults. Missing file yields the defaults."""
    path = paths.config_file()
    if not path.exists():
        return dict(DEFAULT_CONFIG)
    with open(path) as f:
        cfg = yaml.safe_load(f)
    if cfg is None:
        cfg = {}
    _validate_config(cfg)
    return {**DEFAULT_CONFIG, **cfg}
