"""Command line dispatch of a single named task."""

import argparse
import os
import subprocess
from pathlib import Path
from typing import Callable, List, Optional, Union

from .command import CommandRunner, DryRunRunner, SubprocessRunner
from .composer import Composer
from .defaults import DEFAULT_TASKS
from .exceptions import ProjectRootError, UnknownTask
from .helpdoc import format_usage
from .registry import TaskRegistry


NO_ARG = 'no-arg'
"""Task name used when none was given on the command line."""

TASKS_FILENAME = 'devtask.yaml'

EXIT_USAGE = 1


def build_parser(prog: str = 'devtask') -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=prog,
        description='Run a project development task',
    )
    parser.add_argument(
        'task',
        nargs='?',
        default=NO_ARG,
        help='Name of the task to run',
    )
    parser.add_argument(
        '-f', '--file',
        type=str,
        default=None,
        help=f'Task file to use instead of {TASKS_FILENAME} in the project root',
    )
    parser.add_argument(
        '-C', '--root',
        type=str,
        default=None,
        help='Project root (default: top-level directory of the git checkout)',
    )
    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        help='Print each command before it runs',
    )
    parser.add_argument(
        '--dry-run',
        action='store_true',
        help='Show the commands a task would run without running them',
    )
    return parser


def find_project_root(start: Union[str, Path, None] = None) -> Path:
    """Return the top-level directory of the git checkout containing `start`.

    Raises:
        ProjectRootError: If `start` is not inside a git checkout
    """
    try:
        completed = subprocess.run(
            ['git', 'rev-parse', '--show-toplevel'],
            cwd=start,
            capture_output=True,
            text=True,
        )
    except OSError as e:
        raise ProjectRootError(f"Unable to run git: {e}")

    if completed.returncode != 0:
        raise ProjectRootError(
            "Unable to find the project root: "
            f"{completed.stderr.strip() or 'not a git repository'}"
        )
    return Path(completed.stdout.strip())


def load_tasks(root: Path, path: Union[str, Path, None] = None,
               verbose: bool = False) -> TaskRegistry:
    """Load the task table for the project at `root`.

    An explicit `path` wins, then devtask.yaml in `root`, then the
    built-in table.
    """
    if path is None and (root / TASKS_FILENAME).exists():
        path = root / TASKS_FILENAME

    if path is None:
        registry = TaskRegistry.from_descriptors(DEFAULT_TASKS)
        source = 'built-in task table'
    else:
        from .yaml import load_registry
        registry = load_registry(path)
        source = str(path)

    if verbose:
        print(f"Loaded {len(registry)} task(s) from {source}")
    return registry


class Dispatcher:
    """Resolve the requested task and run it.

    Args:
        runner: CommandRunner used for leaf tasks (default: subprocess,
            or a dry-run printer with --dry-run)
        root_finder: callable returning the project root when --root
            is not given
    """

    def __init__(self, runner: Optional[CommandRunner] = None,
                 root_finder: Callable[[], Path] = find_project_root,
                 prog: str = 'devtask'):
        self.runner = runner
        self.root_finder = root_finder
        self.prog = prog

    def dispatch(self, argv: Optional[List[str]] = None) -> int:
        """Run the task named in `argv` and return the process exit status.

        Raises:
            ProjectRootError: If the project root can not be determined
            InvalidTask, TasksParseError: If the task table is broken
        """
        parsed = build_parser(self.prog).parse_args(argv)

        if parsed.root is not None:
            root = Path(parsed.root).resolve()
        else:
            root = Path(self.root_finder())
        if not root.is_dir():
            raise ProjectRootError(f"Project root is not a directory: {root}")
        # leaf commands are relative to the project root
        os.chdir(root)

        registry = load_tasks(root, parsed.file, verbose=parsed.verbose)

        try:
            task = registry.resolve_dispatchable(parsed.task)
        except UnknownTask:
            print(format_usage(registry, self.prog))
            return EXIT_USAGE

        runner = self.runner
        if runner is None:
            if parsed.dry_run:
                runner = DryRunRunner()
            else:
                runner = SubprocessRunner(verbose=parsed.verbose)

        result = Composer(registry, runner, root).run(task)
        if parsed.verbose and not result.success:
            print(f"Task '{result.failed_task}' failed with status "
                  f"{result.returncode}")
        return result.returncode
