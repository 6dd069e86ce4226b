"""Asyncio subprocess runner with line-by-line output streaming."""

from __future__ import annotations

import asyncio
import contextlib
import os
import time

from buildwatch.logging import get_logger
from buildwatch.process.spec import OutputLine, ProcessSpec
from buildwatch.reporting import LoggingReporter, Reporter

log = get_logger("process")

_CHUNK_SIZE = 64 * 1024

# Standard shell exit codes for launch failures
EXIT_PERMISSION_DENIED = 126
EXIT_NOT_FOUND = 127


class ProcessRunner:
    """Run a child process to completion, streaming its output.

    stdout and stderr are read concurrently; every line is handed to
    ``ProcessSpec.on_output`` as soon as it arrives. Cancelling the awaiting
    task kills the child and waits for it to exit before re-raising.
    """

    def __init__(self, reporter: Reporter | None = None) -> None:
        self._reporter = reporter if reporter is not None else LoggingReporter()

    async def run(self, spec: ProcessSpec) -> int:
        """Launch ``spec`` and return its exit code.

        Launch failures are reported and mapped to the usual shell exit codes
        (127 not found, 126 permission denied, 1 other OS errors) instead of
        raising.
        """
        process_env = os.environ.copy()
        if spec.environment:
            process_env.update(spec.environment)

        log.debug("Starting '%s' in '%s'", spec.command_line, spec.working_directory or ".")
        start_time = time.perf_counter()

        try:
            process = await asyncio.create_subprocess_exec(
                spec.executable,
                *spec.arguments,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
                cwd=spec.working_directory,
                env=process_env,
            )
        except FileNotFoundError:
            self._reporter.error(f"Command not found: {spec.executable}")
            return EXIT_NOT_FOUND
        except PermissionError:
            self._reporter.error(f"Permission denied: {spec.executable}")
            return EXIT_PERMISSION_DENIED
        except OSError as e:
            self._reporter.error(f"Failed to start '{spec.executable}': {e}")
            return 1

        try:
            await asyncio.gather(
                self._read_lines(process.stdout, spec, is_error=False),
                self._read_lines(process.stderr, spec, is_error=True),
            )
            exit_code = await process.wait()
        finally:
            if process.returncode is None:
                log.debug("Killing process %d", process.pid)
                with contextlib.suppress(ProcessLookupError):
                    process.kill()
                await process.wait()

        duration_ms = (time.perf_counter() - start_time) * 1000
        log.debug("Process %d exited with %d after %.0fms", process.pid, exit_code, duration_ms)
        return exit_code

    @staticmethod
    async def _read_lines(
        stream: asyncio.StreamReader | None,
        spec: ProcessSpec,
        *,
        is_error: bool,
    ) -> None:
        # Read in chunks: a single line may be longer than any stream limit
        if stream is None:
            return

        def emit(raw: bytes) -> None:
            if spec.on_output is not None:
                line = raw.decode("utf-8", errors="replace").rstrip("\r\n")
                spec.on_output(OutputLine(line, is_error))

        pending = bytearray()
        while True:
            chunk = await stream.read(_CHUNK_SIZE)
            if not chunk:
                break
            pending += chunk
            *complete, rest = pending.split(b"\n")
            for raw in complete:
                emit(raw)
            pending = bytearray(rest)
        if pending:
            emit(bytes(pending))
