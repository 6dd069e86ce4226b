"""Command-line interface for buildwatch."""

from __future__ import annotations

import argparse
import asyncio
import json
import os
from collections.abc import Sequence

from rich.console import Console
from rich.table import Table

from buildwatch import __version__
from buildwatch.build import EvaluationResult, FileSetFactory, GraphRequest
from buildwatch.config import load_config
from buildwatch.logging import get_logger, setup_logging
from buildwatch.process import ProcessRunner
from buildwatch.reporting import ConsoleReporter

log = get_logger("cli")


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="buildwatch",
        description="List the files a development loop should watch for a build project",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="count",
        default=0,
        help="Increase verbosity (can be repeated)",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the watch set as JSON",
    )
    parser.add_argument(
        "--graph",
        choices=[GraphRequest.OPTIONAL.value, GraphRequest.REQUIRED.value],
        help="Also load the project graph",
    )
    parser.add_argument(
        "project",
        help="Root project file",
    )
    parser.add_argument(
        "build_args",
        nargs=argparse.REMAINDER,
        help="Arguments passed through to the build evaluator (e.g. -p:Configuration=Release)",
    )
    return parser


def result_to_dict(result: EvaluationResult) -> dict[str, object]:
    """Serialize an evaluation result for JSON output."""
    data: dict[str, object] = {
        "files": [item.to_dict() for item in result.files.values()],
    }
    if result.project_graph is not None:
        data["project_graph"] = {
            "entry_project": result.project_graph.entry_project,
            "projects": sorted(result.project_graph.nodes),
            "references": [list(edge) for edge in result.project_graph.edges],
        }
    return data


def _print_table(console: Console, result: EvaluationResult) -> None:
    table = Table(title=f"{len(result.files)} file(s) to watch")
    table.add_column("File")
    table.add_column("Projects")
    table.add_column("Static asset path")
    for item in sorted(result.files.values(), key=lambda i: i.file_path):
        table.add_row(
            item.file_path,
            "\n".join(os.path.basename(p) for p in item.containing_project_paths),
            item.static_web_asset_path or "",
        )
    console.print(table)

    if result.project_graph is not None:
        console.print(f"Project graph: {len(result.project_graph)} project(s)")


def run_cli(args: Sequence[str]) -> int:
    """Run the CLI with the given arguments."""
    parser = create_parser()
    parsed = parser.parse_args(args)

    project = os.path.abspath(parsed.project)
    config = load_config(project_dir=os.path.dirname(project))
    if parsed.verbose:
        config.logging.verbose = 2 + parsed.verbose
    setup_logging(config.logging)

    reporter = ConsoleReporter(show_verbose=parsed.verbose > 0)
    factory = FileSetFactory(
        project,
        parsed.build_args,
        config.evaluator,
        ProcessRunner(reporter),
        reporter,
    )
    graph_request = GraphRequest(parsed.graph) if parsed.graph else GraphRequest.NOT_REQUESTED

    try:
        result = asyncio.run(factory.try_create(graph_request))
    except KeyboardInterrupt:
        log.info("Interrupted")
        return 130

    if result is None:
        return 1

    console = Console(highlight=False)
    if parsed.json:
        console.print_json(json.dumps(result_to_dict(result)))
    else:
        _print_table(console, result)
    return 0
