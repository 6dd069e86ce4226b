"""Layered YAML configuration.

Sources, lowest priority first: system, user, every ``.buildwatch/``
directory from the filesystem root down to the project, then environment
variables.

    from buildwatch.config import load_config

    config = load_config(project_dir="/path/to/src/App")
    config.evaluator.resolve_muxer_path()
"""

from buildwatch.config.loader import get_config, load_config, reset_config
from buildwatch.config.paths import (
    get_config_paths,
    get_project_config_path,
    get_project_config_paths,
    get_system_config_path,
    get_user_config_path,
)
from buildwatch.config.schema import Config, EnvironmentOptions, LoggingConfig

__all__ = [
    "Config",
    "EnvironmentOptions",
    "LoggingConfig",
    "get_config",
    "get_config_paths",
    "get_project_config_path",
    "get_project_config_paths",
    "get_system_config_path",
    "get_user_config_path",
    "load_config",
    "reset_config",
]
