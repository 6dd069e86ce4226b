"""buildwatch: resolve the files a development loop watches for a build project."""

__version__ = "0.1.0"

# Public API
from buildwatch.build import (
    EvaluationResult,
    FileItem,
    FileSetFactory,
    GraphRequest,
    ProjectCollection,
    ProjectGraph,
    ProjectGraphBuilder,
    ProjectReferenceGraphBuilder,
    TargetsFileNotFoundError,
)
from buildwatch.config import Config, EnvironmentOptions, get_config, load_config
from buildwatch.process import OutputLine, ProcessRunner, ProcessSpec
from buildwatch.reporting import ConsoleReporter, LoggingReporter, Reporter

__all__ = [
    # Main entry points
    "FileSetFactory",
    "EvaluationResult",
    "FileItem",
    "TargetsFileNotFoundError",
    # Project graph
    "GraphRequest",
    "ProjectCollection",
    "ProjectGraph",
    "ProjectGraphBuilder",
    "ProjectReferenceGraphBuilder",
    # Config
    "Config",
    "EnvironmentOptions",
    "load_config",
    "get_config",
    # Process
    "OutputLine",
    "ProcessRunner",
    "ProcessSpec",
    # Reporting
    "Reporter",
    "LoggingReporter",
    "ConsoleReporter",
]
