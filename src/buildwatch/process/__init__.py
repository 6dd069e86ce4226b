"""Child process execution.

Provides ProcessRunner for launching the build evaluator and streaming its
output line by line.
"""

from buildwatch.process.runner import ProcessRunner
from buildwatch.process.spec import OutputLine, ProcessSpec

__all__ = [
    "OutputLine",
    "ProcessRunner",
    "ProcessSpec",
]
