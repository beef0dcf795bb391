"""YAML-based task tables for devtask.

A project may replace the built-in task table with a devtask.yaml file in
its root directory.

Example devtask.yaml:
    tasks:
      - name: check
        doc: run all checks
        subtasks: [lint, test]
      - name: lint
        doc: lint the python code
        command: [ruff, check, .]
      - name: test
        doc: run the test-suite
        command: pytest -q

Usage:
    from devtask.yaml import load_registry
    registry = load_registry('devtask.yaml')
"""

from .parser import parse_yaml_file, parse_yaml_string, TasksConfig, TasksParseError
from .converter import yaml_to_descriptors, load_registry

__all__ = [
    'parse_yaml_file',
    'parse_yaml_string',
    'TasksConfig',
    'TasksParseError',
    'yaml_to_descriptors',
    'load_registry',
]
