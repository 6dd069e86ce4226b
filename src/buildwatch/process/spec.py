"""Process launch description and captured output lines."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass, field


@dataclass(frozen=True)
class OutputLine:
    """A single line written by a child process.

    Attributes:
        content: The line text without its trailing newline.
        is_error: True if the line was written to stderr.
    """

    content: str
    is_error: bool = False

    def __str__(self) -> str:
        return self.content


@dataclass
class ProcessSpec:
    """Everything needed to launch a child process.

    Attributes:
        executable: Program to run (path or name resolved via PATH).
        arguments: Arguments passed verbatim, no shell quoting involved.
        working_directory: Directory the process starts in. None for cwd.
        environment: Extra environment variables layered over os.environ.
        on_output: Called once per line of stdout/stderr. May be invoked
            from either stream reader, so implementations must be safe to
            call concurrently.
    """

    executable: str
    arguments: Sequence[str] = ()
    working_directory: str | None = None
    environment: dict[str, str] = field(default_factory=dict)
    on_output: Callable[[OutputLine], None] | None = None

    @property
    def command_line(self) -> str:
        """Space-joined command for display."""
        return " ".join([self.executable, *self.arguments])
