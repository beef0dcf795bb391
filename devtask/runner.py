"""Entry point for running devtask from the command line.

Usage:
    devtask [options] [task]

Example:
    devtask validate
    devtask --dry-run build
    devtask -C path/to/project lint
"""

import sys
from typing import List, Optional

from .dispatcher import Dispatcher
from .exceptions import DevTaskError
from .notifier import FailureNotifier
from .yaml import TasksParseError


EXIT_INTERRUPTED = 130


def main(args: Optional[List[str]] = None,
         dispatcher: Optional[Dispatcher] = None,
         notifier: Optional[FailureNotifier] = None) -> int:
    """CLI entry point.

    Args:
        args: Command line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code: 0 for success, the status of the first failing command,
        or 1 for an unknown task or a configuration error
    """
    dispatcher = dispatcher or Dispatcher()
    notifier = notifier or FailureNotifier()

    with notifier.guard() as outcome:
        try:
            outcome.status = dispatcher.dispatch(args)
        except (DevTaskError, TasksParseError, FileNotFoundError) as e:
            print(f"Error: {e}", file=sys.stderr)
            outcome.status = 1
        except KeyboardInterrupt:
            outcome.status = EXIT_INTERRUPTED
    return outcome.status


if __name__ == '__main__':
    sys.exit(main())
