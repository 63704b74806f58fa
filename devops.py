"""Developer tasks for filemgr.

Usage: python devops.py <task>
Tasks: fmt, lint, test, clean
"""

import subprocess
import sys

TASKS: dict[str, list[list[str]]] = {
    "fmt": [
        ["ruff", "format", "app", "tests"],
        ["ruff", "check", "--fix", "app", "tests"],
    ],
    "lint": [
        ["ruff", "check", "app", "tests"],
    ],
    "test": [
        ["pytest", "-q"],
    ],
    "clean": [
        ["find", ".", "-type", "d", "-name", "__pycache__", "-exec", "rm", "-rf", "{}", "+"],
        ["rm", "-rf", ".pytest_cache", ".ruff_cache", "build", "dist"],
    ],
}


def _run(commands: list[list[str]]) -> None:
    """Execute a sequence of shell commands, exiting on first failure."""
    for cmd in commands:
        try:
            subprocess.run(cmd, check=True)  # nosec: B603, B607
        except subprocess.CalledProcessError as e:
            print(f"Command failed: {' '.join(e.cmd)}", file=sys.stderr)
            sys.exit(e.returncode)


def main(argv: list[str]) -> None:
    """Run the tasks named on the command line."""
    if not argv or any(task not in TASKS for task in argv):
        print(__doc__, file=sys.stderr)
        sys.exit(2)
    for task in argv:
        _run(TASKS[task])


if __name__ == "__main__":
    main(sys.argv[1:])
