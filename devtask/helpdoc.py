"""Usage listing derived from the task table.

The listing is computed from the same registry the dispatcher uses, so the
help text can not drift from what is actually dispatchable.
"""

from typing import List, Tuple

from .registry import TaskRegistry


def usage_entries(registry: TaskRegistry) -> List[Tuple[str, str]]:
    """Return (task name, description) of dispatchable tasks in
    declaration order."""
    return [(task.name, task.doc) for task in registry.dispatchable()]


def format_usage(registry: TaskRegistry, prog: str = 'devtask') -> str:
    lines = [
        f"Usage: {prog} [command] ...",
        "Commands:",
        "",
    ]
    for name, doc in usage_entries(registry):
        lines.append(f"{name})")
        lines.append(f"  {doc}")
    return "\n".join(lines)
