"""Sequential, fail-fast execution of tasks.

Composite tasks run their subtasks strictly in declaration order. The first
failing subtask stops the composite and its status becomes the composite's
status. Nothing already executed is rolled back.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Union

from .command import CommandRunner
from .registry import TaskRegistry
from .task import Task


@dataclass
class ExecutionResult:
    """Outcome of running a task."""

    task_name: str
    """Name of the task that was requested."""

    returncode: int = 0
    """0 on success, otherwise status of the first failing command."""

    failed_task: Optional[str] = None
    """Name of the leaf task that failed, if any."""

    executed: List[str] = field(default_factory=list)
    """Leaf tasks that ran, in execution order."""

    @property
    def success(self) -> bool:
        return self.returncode == 0

    def __bool__(self) -> bool:
        return self.success


@dataclass
class Composer:
    """Runs tasks from a registry through a `CommandRunner`.

    Example:
        composer = Composer(registry, SubprocessRunner(), root)
        result = composer.run(registry.resolve('validate'))
        if not result:
            print(f"{result.failed_task} failed")
    """

    registry: TaskRegistry
    runner: CommandRunner
    root: Union[str, Path] = '.'
    announce: bool = True
    """Print the task banner before each task starts."""

    def run(self, task: Task) -> ExecutionResult:
        result = ExecutionResult(task_name=task.name)
        self._run_task(task, result)
        return result

    def _run_task(self, task: Task, result: ExecutionResult) -> None:
        if self.announce:
            print(task.title, flush=True)

        if task.is_leaf:
            self._run_leaf(task, result)
            return

        for name in task.subtasks:
            self._run_task(self.registry.resolve(name), result)
            if not result.success:
                return

    def _run_leaf(self, task: Task, result: ExecutionResult) -> None:
        program, *args = task.command
        cwd = Path(self.root) / task.cwd
        status = self.runner.run(program, args, cwd)
        result.executed.append(task.name)
        if status != 0:
            result.returncode = status
            result.failed_task = task.name
