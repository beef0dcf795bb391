"""Exceptions raised by devtask.

Failures of the external commands themselves are not exceptions: they are
exit statuses propagated through the composer unchanged.
"""


class DevTaskError(Exception):
    """Base class for all devtask errors."""
    pass


class InvalidTask(DevTaskError):
    """A task descriptor is malformed or references a missing task."""
    pass


class TaskCycleError(InvalidTask):
    """Composite tasks reference each other in a cycle."""

    def __init__(self, path):
        self.path = list(path)
        super().__init__(
            "Task cycle detected: " + " -> ".join(self.path))


class UnknownTask(DevTaskError):
    """Requested task name is not present in the registry."""

    def __init__(self, name):
        self.name = name
        super().__init__(f"Unknown task: {name!r}")


class ProjectRootError(DevTaskError):
    """The project root directory could not be determined."""
    pass
