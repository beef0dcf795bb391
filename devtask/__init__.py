"""Sequential task runner for a project's development workflow.

Named tasks either run one external command (leaf) or a list of other
tasks in order (composite). The first failing command stops the run.

Usage:
    from devtask import TaskRegistry, Composer, SubprocessRunner
    registry = TaskRegistry.from_descriptors(DEFAULT_TASKS)
    result = Composer(registry, SubprocessRunner()).run(
        registry.resolve('validate'))

CLI:
    devtask validate
"""

from .command import CommandRunner, SubprocessRunner, DryRunRunner
from .composer import Composer, ExecutionResult
from .defaults import DEFAULT_TASKS
from .dispatcher import Dispatcher
from .exceptions import (
    DevTaskError, InvalidTask, TaskCycleError, UnknownTask, ProjectRootError,
)
from .helpdoc import usage_entries, format_usage
from .notifier import FailureNotifier
from .registry import TaskRegistry
from .runner import main
from .task import Task, TaskKind

__all__ = [
    'CommandRunner',
    'SubprocessRunner',
    'DryRunRunner',
    'Composer',
    'ExecutionResult',
    'DEFAULT_TASKS',
    'Dispatcher',
    'DevTaskError',
    'InvalidTask',
    'TaskCycleError',
    'UnknownTask',
    'ProjectRootError',
    'usage_entries',
    'format_usage',
    'FailureNotifier',
    'TaskRegistry',
    'main',
    'Task',
    'TaskKind',
]
