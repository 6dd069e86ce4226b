"""Configuration schema dataclasses for buildwatch.

Defines the structure of configuration at all levels (system, user, project).
All fields are optional to support partial configs that merge together.
"""

from __future__ import annotations

import os
import shutil
from dataclasses import dataclass, field
from typing import Any

DEFAULT_MUXER = "dotnet"


@dataclass
class EnvironmentOptions:
    """Options describing how the build evaluator is launched.

    Example config.yaml:
        evaluator:
          muxer_path: /usr/share/dotnet/dotnet
          suppress_static_content_files: false
          write_binary_log: true
          diagnostic_output_dir: ~/buildwatch-logs
    """

    muxer_path: str | None = None  # Default: DOTNET_HOST_PATH, then "dotnet" on PATH
    suppress_static_content_files: bool = False  # Passes DotNetWatchContentFiles=false
    write_binary_log: bool = False  # Diagnostics toggle (/bl:)
    diagnostic_output_dir: str | None = None  # Where the binary log goes; default: cwd

    def resolve_muxer_path(self) -> str:
        """Return the evaluator executable to launch."""
        if self.muxer_path:
            return os.path.expanduser(self.muxer_path)
        return shutil.which(DEFAULT_MUXER) or DEFAULT_MUXER

    def resolve_diagnostic_output_dir(self) -> str:
        """Return the directory that receives diagnostic logs."""
        if self.diagnostic_output_dir:
            return os.path.expanduser(self.diagnostic_output_dir)
        return os.getcwd()


@dataclass
class LoggingConfig:
    """Logging configuration."""

    level: str | None = None  # DEBUG, VERBOSE, INFO, WARNING, ERROR
    verbose: int | None = None  # 0..4, takes precedence over level
    file: str | None = None  # Log file path


@dataclass
class Config:
    """Root configuration object.

    Aggregates all configuration sections. All fields use default factories
    to ensure partial configs work correctly with deep merging.
    """

    evaluator: EnvironmentOptions = field(default_factory=EnvironmentOptions)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    # Extension point for future config sections
    extra: dict[str, Any] = field(default_factory=dict)
