"""YAML parsing and validation for devtask task files.

This module handles parsing devtask.yaml files and validating their structure.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Any, Union

import yaml


TASK_FIELDS = {'name', 'doc', 'command', 'subtasks', 'cwd', 'internal'}


@dataclass
class TasksConfig:
    """Parsed task file."""
    tasks: List[Dict[str, Any]] = field(default_factory=list)


class TasksParseError(Exception):
    """Error parsing or validating a task file."""
    pass


def parse_yaml_file(path: Union[str, Path]) -> TasksConfig:
    """Parse and validate a devtask.yaml file.

    Args:
        path: Path to the YAML file

    Returns:
        TasksConfig with the validated task entries

    Raises:
        TasksParseError: If the file is invalid or missing required fields
        FileNotFoundError: If the file doesn't exist
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Task file not found: {path}")

    with open(path) as f:
        return parse_yaml_string(f.read())


def parse_yaml_string(content: str) -> TasksConfig:
    """Parse task file content from a string."""
    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise TasksParseError(f"Invalid YAML syntax: {e}")

    if data is None:
        data = {}

    if not isinstance(data, dict):
        raise TasksParseError("YAML root must be a mapping")

    return _validate_yaml_data(data)


def _validate_yaml_data(data: Dict[str, Any]) -> TasksConfig:
    tasks = data.get('tasks', [])
    if not isinstance(tasks, list):
        raise TasksParseError("'tasks' must be a list")

    validated = []
    for i, task in enumerate(tasks):
        validated.append(_validate_task(task, i))

    return TasksConfig(tasks=validated)


def _validate_task(task: Any, index: int) -> Dict[str, Any]:
    """Validate a single task entry.

    Args:
        task: Task mapping
        index: Index in tasks list (for error messages)

    Returns:
        Validated task dictionary

    Raises:
        TasksParseError: If validation fails
    """
    if not isinstance(task, dict):
        raise TasksParseError(f"Task {index} must be a mapping")

    # Required fields
    if 'name' not in task:
        raise TasksParseError(f"Task {index} missing required field 'name'")
    if not isinstance(task['name'], str):
        raise TasksParseError(f"Task {index}: 'name' must be a string")
    name = task['name']

    unknown = set(task) - TASK_FIELDS
    if unknown:
        raise TasksParseError(
            f"Task '{name}' has unknown field(s): {', '.join(sorted(unknown))}"
        )

    if 'doc' not in task:
        raise TasksParseError(f"Task '{name}' missing required field 'doc'")
    if not isinstance(task['doc'], str):
        raise TasksParseError(f"Task '{name}': 'doc' must be a string")

    has_command = 'command' in task
    has_subtasks = 'subtasks' in task
    if has_command == has_subtasks:
        raise TasksParseError(
            f"Task '{name}' must define exactly one of 'command' or 'subtasks'"
        )

    if has_command:
        _validate_command(task['command'], name)
    else:
        _validate_subtasks(task['subtasks'], name)

    # Optional fields
    if 'cwd' in task and not isinstance(task['cwd'], str):
        raise TasksParseError(f"Task '{name}': 'cwd' must be a string")
    if 'internal' in task and not isinstance(task['internal'], bool):
        raise TasksParseError(f"Task '{name}': 'internal' must be a boolean")

    return task


def _validate_command(command: Any, name: str) -> None:
    """A command is a shell string or a list of string arguments."""
    if isinstance(command, str):
        if not command.strip():
            raise TasksParseError(f"Task '{name}': 'command' must not be empty")
        return

    if not isinstance(command, list):
        raise TasksParseError(
            f"Task '{name}': 'command' must be a string or a list"
        )
    if not command:
        raise TasksParseError(f"Task '{name}': 'command' must not be empty")
    for arg in command:
        if not isinstance(arg, (str, int, float)) or isinstance(arg, bool):
            raise TasksParseError(
                f"Task '{name}': command argument {arg!r} must be a scalar"
            )


def _validate_subtasks(subtasks: Any, name: str) -> None:
    if not isinstance(subtasks, list):
        raise TasksParseError(f"Task '{name}': 'subtasks' must be a list")
    if not subtasks:
        raise TasksParseError(f"Task '{name}': 'subtasks' must not be empty")
    for sub in subtasks:
        if not isinstance(sub, str):
            raise TasksParseError(
                f"Task '{name}': subtask {sub!r} must be a task name"
            )
