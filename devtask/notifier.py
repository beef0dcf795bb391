"""Process-wide notification of a failed run.

The notifier observes the final exit status exactly once, at the very end
of the run, no matter how deep in the task tree a failure happened.
"""

import sys
from contextlib import contextmanager
from typing import Iterator, Optional, TextIO


FAILURE_MESSAGE = "process failed, exiting..."


class FailureNotifier:
    """Prints a single warning when the run ends with a non-zero status."""

    def __init__(self, stream: Optional[TextIO] = None,
                 message: str = FAILURE_MESSAGE):
        self._stream = stream
        self.message = message
        self.fired = False
        self.status: Optional[int] = None

    def notify(self, status: Optional[int]) -> None:
        """Record the final status, warn when it is not 0.

        Only the first call has any effect.
        """
        if self.fired:
            return
        self.fired = True
        self.status = status
        if status != 0:
            print(self.message, file=self._stream or sys.stderr, flush=True)

    @contextmanager
    def guard(self) -> Iterator['_Outcome']:
        """Notify on leaving the block, whatever the exit path.

        The block reports its status through the yielded outcome. A
        `SystemExit` carries its own code; any other exception counts as
        status 1 and is re-raised after notifying.

        Example:
            with notifier.guard() as outcome:
                outcome.status = dispatcher.dispatch(argv)
        """
        outcome = _Outcome()
        try:
            yield outcome
        except SystemExit as exc:
            outcome.status = _exit_code(exc.code)
            raise
        except BaseException:
            outcome.status = 1
            raise
        finally:
            self.notify(outcome.status)


class _Outcome:
    # status stays 1 until the guarded block reports otherwise
    def __init__(self):
        self.status: int = 1


def _exit_code(code) -> int:
    """Translate a `SystemExit.code` into the status the process ends with."""
    if code is None:
        return 0
    if isinstance(code, int):
        return code
    return 1
