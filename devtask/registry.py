"""Registry of all tasks known to a devtask run.

The registry is filled once at startup, validated, and only read afterwards.
"""

from typing import Any, Dict, Iterator, List, Mapping, Optional, Sequence

from .exceptions import InvalidTask, TaskCycleError, UnknownTask
from .task import Task


class TaskRegistry:
    """Ordered mapping of task name to `Task`.

    Iteration follows declaration order, which is also the order of the
    usage listing.
    """

    def __init__(self, tasks: Sequence[Task] = ()):
        self._tasks: Dict[str, Task] = {}
        for task in tasks:
            self.add(task)

    @classmethod
    def from_descriptors(
        cls, descriptors: Sequence[Mapping[str, Any]]
    ) -> 'TaskRegistry':
        """Build and validate a registry from task descriptor mappings.

        Each descriptor holds the `Task` constructor arguments
        (`name`, `doc`, `command` or `subtasks`, `cwd`, `internal`).

        Raises:
            InvalidTask: on a malformed descriptor, a duplicate name,
                a dangling subtask reference or a cycle
        """
        registry = cls()
        for desc in descriptors:
            registry.add(Task(**desc))
        registry.validate()
        return registry

    def add(self, task: Task) -> None:
        if task.name in self._tasks:
            raise InvalidTask(f"Task '{task.name}' is defined more than once.")
        self._tasks[task.name] = task

    def get(self, name: str) -> Optional[Task]:
        return self._tasks.get(name)

    def resolve(self, name: str) -> Task:
        """Return the task called `name` (exact, case-sensitive match).

        Raises:
            UnknownTask: if no such task exists
        """
        try:
            return self._tasks[name]
        except KeyError:
            raise UnknownTask(name) from None

    def resolve_dispatchable(self, name: str) -> Task:
        """Like `resolve`, but internal tasks are treated as unknown."""
        task = self.resolve(name)
        if task.internal:
            raise UnknownTask(name)
        return task

    def dispatchable(self) -> List[Task]:
        return [task for task in self if not task.internal]

    def validate(self) -> None:
        """Check every subtask reference exists and there are no cycles."""
        for task in self:
            for sub in task.subtasks:
                if sub not in self._tasks:
                    raise InvalidTask(
                        f"Task '{task.name}' references unknown "
                        f"subtask '{sub}'.")

        done = set()
        for task in self:
            self._check_cycles(task.name, [], done)

    def _check_cycles(self, name: str, path: List[str], done: set) -> None:
        if name in done:
            return
        if name in path:
            raise TaskCycleError(path[path.index(name):] + [name])

        path.append(name)
        for sub in self._tasks[name].subtasks:
            self._check_cycles(sub, path, done)
        path.pop()
        done.add(name)

    def __contains__(self, name: object) -> bool:
        return name in self._tasks

    def __iter__(self) -> Iterator[Task]:
        return iter(self._tasks.values())

    def __len__(self) -> int:
        return len(self._tasks)

    @property
    def names(self) -> List[str]:
        return list(self._tasks)
