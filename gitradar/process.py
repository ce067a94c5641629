"""Running external commands and collecting their standard output."""

import subprocess
from collections.abc import Sequence


def run_with_exit_code(command: str, args: Sequence[str]) -> tuple[int, bytes]:
    """Run a command, returning its exit code and standard output.

    Standard error is discarded.  Failure to start the command raises OSError.
    """
    result = subprocess.run(
        [command, *args],
        stdout=subprocess.PIPE,
        stderr=subprocess.DEVNULL,
        check=False,
    )
    return result.returncode, result.stdout


def run_ignoring_exit_code(command: str, args: Sequence[str]) -> bytes:
    """Run a command; return its output, or nothing if it exited unsuccessfully."""
    code, stdout = run_with_exit_code(command, args)
    return stdout if code == 0 else b""