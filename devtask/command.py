"""Command invocation for leaf tasks.

A `CommandRunner` runs one external program to completion and reports only
its exit status. Output of the child goes straight to our own stdout/stderr.
"""

import shlex
import subprocess
from pathlib import Path
from typing import List, Protocol, Sequence, Union, runtime_checkable


# same statuses a POSIX shell reports for these cases
EXIT_NOT_EXECUTABLE = 126
EXIT_NOT_FOUND = 127


def format_command(program: str, args: Sequence[str]) -> str:
    """Return a shell-quoted rendering of a command line."""
    return shlex.join([program, *args])


@runtime_checkable
class CommandRunner(Protocol):
    """Protocol for objects that can run an external command.

    Implementations must block until the command has finished.
    """

    def run(self, program: str, args: Sequence[str],
            cwd: Union[str, Path]) -> int:
        """Run `program` with `args` inside `cwd`.

        Returns:
            Exit status of the command, 0 on success.
        """
        ...


class SubprocessRunner:
    """Run commands with `subprocess`, passing output through unbuffered.

    A program that cannot be launched is reported as a failing status,
    never as an exception.
    """

    def __init__(self, verbose: bool = False):
        self.verbose = verbose

    def run(self, program: str, args: Sequence[str],
            cwd: Union[str, Path]) -> int:
        if self.verbose:
            print(f"$ {format_command(program, args)}", flush=True)

        try:
            completed = subprocess.run([program, *args], cwd=cwd)
        except FileNotFoundError:
            return EXIT_NOT_FOUND
        except PermissionError:
            return EXIT_NOT_EXECUTABLE
        except NotADirectoryError:
            return EXIT_NOT_FOUND
        except OSError:
            # e.g. ENOEXEC for a script without a shebang line
            return EXIT_NOT_EXECUTABLE
        if completed.returncode < 0:
            # killed by signal N, report it as 128 + N
            return 128 - completed.returncode
        return completed.returncode


class DryRunRunner:
    """Print each command line instead of running it.

    Every command is reported as successful so the whole task tree is shown.
    """

    def __init__(self):
        self.commands: List[str] = []

    def run(self, program: str, args: Sequence[str],
            cwd: Union[str, Path]) -> int:
        line = format_command(program, args)
        self.commands.append(line)
        print(f"[{cwd}] $ {line}")
        return 0
