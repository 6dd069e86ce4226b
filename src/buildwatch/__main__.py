"""Entry point for running buildwatch as a module.

Usage:
    python -m buildwatch path/to/App.csproj -p:Configuration=Release
"""

import sys

from buildwatch.cli import run_cli


def main() -> None:
    """Run the buildwatch command line."""
    sys.exit(run_cli(sys.argv[1:]))


if __name__ == "__main__":
    main()
