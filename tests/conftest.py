"""Shared fixtures for devtask tests."""

from pathlib import Path

import pytest

from devtask.defaults import DEFAULT_TASKS
from devtask.registry import TaskRegistry


class RecordingRunner:
    """CommandRunner fake that records which leaf tasks ran.

    Commands are mapped back to the leaf task that declares them, so tests
    can assert on task names. `failures` maps task name to exit status.
    """

    def __init__(self, registry, failures=None):
        self._names = {tuple(t.command): t.name for t in registry if t.is_leaf}
        self.failures = dict(failures or {})
        self.calls = []
        self.cwds = []

    def run(self, program, args, cwd):
        name = self._names[(program, *args)]
        self.calls.append(name)
        self.cwds.append(Path(cwd))
        return self.failures.get(name, 0)


@pytest.fixture
def default_registry():
    return TaskRegistry.from_descriptors(DEFAULT_TASKS)


@pytest.fixture
def make_runner():
    """Factory: make_runner(registry, failures=None) -> RecordingRunner."""
    return RecordingRunner
