"""Convert parsed task files to task descriptors and registries."""

from pathlib import Path
from typing import Any, Dict, List, Union

from ..registry import TaskRegistry
from .parser import TasksConfig, parse_yaml_file


def yaml_to_descriptors(config: TasksConfig) -> List[Dict[str, Any]]:
    """Convert validated YAML task entries to `Task` keyword arguments.

    Numeric command arguments (`-i 2` written as `[shfmt, -i, 2]`) are
    turned into strings.
    """
    descriptors = []
    for entry in config.tasks:
        desc = dict(entry)
        command = desc.get('command')
        if isinstance(command, list):
            desc['command'] = [str(arg) for arg in command]
        descriptors.append(desc)
    return descriptors


def load_registry(path: Union[str, Path]) -> TaskRegistry:
    """Parse a devtask.yaml file into a validated `TaskRegistry`.

    Raises:
        TasksParseError: If the file is not a valid task file
        InvalidTask: If the tasks reference each other incorrectly
    """
    config = parse_yaml_file(path)
    return TaskRegistry.from_descriptors(yaml_to_descriptors(config))
