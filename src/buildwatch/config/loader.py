"""Loading, layering and caching of buildwatch configuration."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any

import yaml

from buildwatch.config.paths import get_config_paths
from buildwatch.config.schema import Config, EnvironmentOptions, LoggingConfig

# Not configured yet when config is loaded at startup
_log = logging.getLogger("buildwatch.config")

_cached_config: Config | None = None

_TRUE_VALUES = {"1", "true", "yes", "on"}
_SECTIONS = ("evaluator", "logging")


def load_yaml_file(path: Path) -> dict[str, Any]:
    """Read one config file. Missing, unreadable or invalid files count as empty."""
    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except FileNotFoundError:
        return {}
    except yaml.YAMLError as e:
        _log.warning("Invalid YAML in %s: %s", path, e)
        return {}
    except OSError as e:
        _log.warning("Cannot read %s: %s", path, e)
        return {}
    return data if isinstance(data, dict) else {}


def merge_layers(*layers: dict[str, Any]) -> dict[str, Any]:
    """Fold config layers into one dict, later layers winning.

    Nested mappings merge key by key. Lists and scalars replace the lower
    value. A None value leaves the lower value in place, so a layer only
    needs to mention what it changes. The layers are not modified.
    """
    merged: dict[str, Any] = {}
    for layer in layers:
        _merge_into(merged, layer)
    return merged


def _merge_into(target: dict[str, Any], layer: dict[str, Any]) -> dict[str, Any]:
    for key, value in layer.items():
        if value is None:
            continue
        current = target.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            target[key] = _merge_into(dict(current), value)
        else:
            target[key] = value
    return target


def _env_flag(value: str) -> bool:
    return value.strip().lower() in _TRUE_VALUES


def env_overrides() -> dict[str, Any]:
    """Config layer taken from environment variables.

    DOTNET_HOST_PATH                           evaluator executable
    DOTNET_WATCH_SUPPRESS_STATIC_FILE_HANDLING skip static content files
    BUILDWATCH_BINLOG_DIR                      write a binary log to this directory
    BUILDWATCH_LOG                             log file
    BUILDWATCH_VERBOSE                         verbosity, 0..4
    """
    env = os.environ
    evaluator: dict[str, Any] = {}
    log_section: dict[str, Any] = {}

    if env.get("DOTNET_HOST_PATH"):
        evaluator["muxer_path"] = env["DOTNET_HOST_PATH"]
    if env.get("DOTNET_WATCH_SUPPRESS_STATIC_FILE_HANDLING"):
        evaluator["suppress_static_content_files"] = _env_flag(
            env["DOTNET_WATCH_SUPPRESS_STATIC_FILE_HANDLING"]
        )
    if env.get("BUILDWATCH_BINLOG_DIR"):
        evaluator["write_binary_log"] = True
        evaluator["diagnostic_output_dir"] = env["BUILDWATCH_BINLOG_DIR"]

    if env.get("BUILDWATCH_LOG"):
        log_section["file"] = env["BUILDWATCH_LOG"]
    if env.get("BUILDWATCH_VERBOSE"):
        try:
            log_section["verbose"] = int(env["BUILDWATCH_VERBOSE"])
        except ValueError:
            _log.warning("Ignoring non-integer BUILDWATCH_VERBOSE=%r", env["BUILDWATCH_VERBOSE"])

    sections = {"evaluator": evaluator, "logging": log_section}
    return {name: values for name, values in sections.items() if values}


def dict_to_config(data: dict[str, Any]) -> Config:
    """Build the typed Config from merged layers."""
    evaluator = data.get("evaluator") or {}
    log_section = data.get("logging") or {}
    verbose = log_section.get("verbose")

    return Config(
        evaluator=EnvironmentOptions(
            muxer_path=evaluator.get("muxer_path"),
            suppress_static_content_files=bool(evaluator.get("suppress_static_content_files", False)),
            write_binary_log=bool(evaluator.get("write_binary_log", False)),
            diagnostic_output_dir=evaluator.get("diagnostic_output_dir"),
        ),
        logging=LoggingConfig(
            level=log_section.get("level"),
            verbose=verbose if isinstance(verbose, int) else None,
            file=log_section.get("file"),
        ),
        extra={k: v for k, v in data.items() if k not in _SECTIONS},
    )


def load_config(project_dir: str | None = None, reload: bool = False) -> Config:
    """Load the configuration, layering system, user, project and environment.

    Args:
        project_dir: Directory of the root project. Enables the project
            layers and bypasses the cache.
        reload: Re-read the global config even if it is cached.
    """
    global _cached_config

    if project_dir is None and _cached_config is not None and not reload:
        return _cached_config

    layers = []
    for path in get_config_paths(project_dir):
        data = load_yaml_file(path)
        if data:
            _log.debug("Loaded config from %s", path)
            layers.append(data)
    layers.append(env_overrides())

    config = dict_to_config(merge_layers(*layers))
    if project_dir is None:
        _cached_config = config
    return config


def get_config() -> Config:
    """Cached global config, loaded on first use."""
    return _cached_config if _cached_config is not None else load_config()


def reset_config() -> None:
    """Forget the cached global config."""
    global _cached_config
    _cached_config = None
