"""Shared test utilities for buildwatch tests."""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any

from buildwatch.process import OutputLine, ProcessSpec

WATCH_LIST_SWITCH = "/p:_DotNetWatchListFile="


class RecordingReporter:
    """Reporter that records every message with its channel."""

    def __init__(self) -> None:
        self.messages: list[tuple[str, str]] = []

    def verbose(self, message: str) -> None:
        self.messages.append(("verbose", message))

    def output(self, message: str) -> None:
        self.messages.append(("output", message))

    def warn(self, message: str) -> None:
        self.messages.append(("warn", message))

    def error(self, message: str) -> None:
        self.messages.append(("error", message))

    def channel(self, name: str) -> list[str]:
        return [message for channel, message in self.messages if channel == name]

    @property
    def errors(self) -> list[str]:
        return self.channel("error")

    @property
    def warnings(self) -> list[str]:
        return self.channel("warn")

    @property
    def outputs(self) -> list[str]:
        return self.channel("output")


def watch_list_path(arguments: list[str] | tuple[str, ...]) -> str:
    """Extract the result file path from an evaluator argument vector."""
    values = [a[len(WATCH_LIST_SWITCH):] for a in arguments if a.startswith(WATCH_LIST_SWITCH)]
    assert values, "result file switch missing"
    return values[-1]


def make_payload(projects: dict[str, dict[str, Any]]) -> dict[str, Any]:
    """Build an evaluator payload from {project: {"Files": [...], "StaticFiles": [...]}}."""
    return {"Projects": projects}


class FakeProcessRunner:
    """In-process stand-in for ProcessRunner.

    Emits the configured output lines, optionally writes the payload to the
    result file named in the arguments, and returns ``exit_code``.
    """

    def __init__(
        self,
        *,
        payload: dict[str, Any] | str | None = None,
        exit_code: int = 0,
        lines: list[OutputLine] | None = None,
    ) -> None:
        self.payload = payload
        self.exit_code = exit_code
        self.lines = lines or []
        self.specs: list[ProcessSpec] = []
        self.result_paths: list[str] = []

    async def run(self, spec: ProcessSpec) -> int:
        self.specs.append(spec)
        path = watch_list_path(list(spec.arguments))
        self.result_paths.append(path)

        for line in self.lines:
            if spec.on_output is not None:
                spec.on_output(line)

        if self.payload is not None:
            text = self.payload if isinstance(self.payload, str) else json.dumps(self.payload)
            Path(path).write_text(text, encoding="utf-8")

        return self.exit_code


_FAKE_EVALUATOR = '''\
"""Fake build evaluator used by the tests."""
import json
import sys

SWITCH = "/p:_DotNetWatchListFile="

args = sys.argv[1:]
with open({args_log!r}, "w", encoding="utf-8") as f:
    json.dump(args, f)

for line in {stdout_lines!r}:
    print(line, flush=True)
for line in {stderr_lines!r}:
    print(line, file=sys.stderr, flush=True)

payload = {payload!r}
if payload is not None:
    target = [a[len(SWITCH):] for a in args if a.startswith(SWITCH)][-1]
    with open(target, "w", encoding="utf-8") as f:
        f.write(payload)

sys.exit({exit_code})
'''


def write_fake_evaluator(
    directory: Path,
    *,
    payload: dict[str, Any] | None = None,
    exit_code: int = 0,
    stdout_lines: list[str] | None = None,
    stderr_lines: list[str] | None = None,
) -> Path:
    """Write a script named ``msbuild`` into ``directory``.

    Launching the current interpreter with the evaluator arguments in
    ``directory`` runs the script, since the first argument is ``msbuild``.
    The script records its arguments to ``evaluator-args.json``.
    """
    script = directory / "msbuild"
    script.write_text(
        _FAKE_EVALUATOR.format(
            args_log=str(directory / "evaluator-args.json"),
            stdout_lines=list(stdout_lines or []),
            stderr_lines=list(stderr_lines or []),
            payload=json.dumps(payload) if payload is not None else None,
            exit_code=exit_code,
        ),
        encoding="utf-8",
    )
    return script


def write_project(path: Path, references: list[str] | None = None) -> Path:
    """Write a minimal SDK-style project file with ProjectReference items."""
    path.parent.mkdir(parents=True, exist_ok=True)
    items = "\n".join(
        f'    <ProjectReference Include="{reference}" />' for reference in references or []
    )
    path.write_text(
        '<Project Sdk="Microsoft.NET.Sdk">\n'
        "  <ItemGroup>\n"
        f"{items}\n"
        "  </ItemGroup>\n"
        "</Project>\n",
        encoding="utf-8",
    )
    return path


def write_targets_file(directory: Path) -> Path:
    """Place a DotNetWatch.targets file in ``directory``."""
    directory.mkdir(parents=True, exist_ok=True)
    targets = directory / "DotNetWatch.targets"
    targets.write_text("<Project />\n", encoding="utf-8")
    return targets


def abs_path(*parts: str) -> str:
    """Platform-appropriate absolute path for fixture data."""
    return os.path.join(os.path.abspath(os.sep), *parts)
