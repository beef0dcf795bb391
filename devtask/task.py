"""Task descriptors managed by devtask.

A task is either a leaf, which runs one external command, or a composite,
which runs other tasks in declaration order.
"""

from enum import Enum
from typing import List, Optional, Sequence, Union

from .exceptions import InvalidTask


def first_line(doc):
    """extract first non-blank line from text, to extract docstring title"""
    if doc is not None:
        for line in doc.splitlines():
            striped = line.strip()
            if striped:
                return striped
    return ''


class TaskKind(Enum):
    LEAF = 'leaf'
    COMPOSITE = 'composite'


class Task(object):
    """Task

    @ivar name: (str) unique task name, used on the command line
    @ivar doc: (str) one-line description shown in the usage listing
    @ivar kind: (TaskKind)
    @ivar command: (list - str) argv of the external command (leaf only)
    @ivar cwd: (str) directory relative to the project root the command
               runs in (leaf only)
    @ivar subtasks: (list - str) names of tasks to run in order
                    (composite only)
    @ivar internal: (bool) building block of composites, not dispatchable
    """

    string_types = (str, )
    # list of valid types/values for each task attribute.
    valid_attr = {'name': (string_types, ()),
                  'doc': (string_types, (None,)),
                  'command': ((list, tuple) + string_types, (None,)),
                  'subtasks': ((list, tuple), (None,)),
                  'cwd': (string_types, ()),
                  'internal': ((bool,), ()),
                  }

    def __init__(self, name: str, doc: Optional[str] = None,
                 command: Union[str, Sequence[str], None] = None,
                 subtasks: Optional[Sequence[str]] = None,
                 cwd: str = '.', internal: bool = False):
        self.check_attr(name, 'name', name, self.valid_attr['name'])
        self.check_attr(name, 'doc', doc, self.valid_attr['doc'])
        self.check_attr(name, 'command', command, self.valid_attr['command'])
        self.check_attr(name, 'subtasks', subtasks,
                        self.valid_attr['subtasks'])
        self.check_attr(name, 'cwd', cwd, self.valid_attr['cwd'])
        self.check_attr(name, 'internal', internal,
                        self.valid_attr['internal'])

        if not name or name != name.strip() or ' ' in name:
            msg = "Task {!r}: name must be a non-empty word without spaces."
            raise InvalidTask(msg.format(name))
        if (command is None) == (subtasks is None):
            msg = "Task '{}' must define exactly one of 'command' or 'subtasks'."
            raise InvalidTask(msg.format(name))

        self.name = name
        self.doc = first_line(doc)
        self.cwd = cwd
        self.internal = internal

        if command is not None:
            self.kind = TaskKind.LEAF
            self.command = self._init_command(command)
            self.subtasks = []
        else:
            self.kind = TaskKind.COMPOSITE
            self.command = []
            self.subtasks = self._init_subtasks(subtasks)

    def _init_command(self, command) -> List[str]:
        """convert command to an argv list, shell strings run through bash
        with pipefail so any failing stage fails the command"""
        if isinstance(command, str):
            if not command.strip():
                raise InvalidTask(
                    "Task '%s': 'command' must not be empty." % self.name)
            return ['bash', '-o', 'pipefail', '-c', command]

        argv = []
        for arg in command:
            if not isinstance(arg, str):
                msg = ("%s. command arguments must be str. Got '%r' (%s)")
                raise InvalidTask(msg % (self.name, arg, type(arg)))
            argv.append(arg)
        if not argv:
            raise InvalidTask(
                "Task '%s': 'command' must not be empty." % self.name)
        return argv

    def _init_subtasks(self, subtasks) -> List[str]:
        names = []
        for sub in subtasks:
            if not isinstance(sub, str):
                msg = ("%s. subtasks must be task names. Got '%r' (%s)")
                raise InvalidTask(msg % (self.name, sub, type(sub)))
            if sub == self.name:
                msg = "Task '%s' must not list itself as a subtask."
                raise InvalidTask(msg % self.name)
            names.append(sub)
        if not names:
            raise InvalidTask(
                "Task '%s': 'subtasks' must not be empty." % self.name)
        return names

    @staticmethod
    def check_attr(task, attr, value, valid):
        """check input task attribute is correct type/value

        @param task (string): task name
        @param attr (string): attribute name
        @param value: actual input from user
        @param valid (list): of valid types/value accepted
        @raises InvalidTask if invalid input
        """
        if isinstance(value, valid[0]):
            return
        if value in valid[1]:
            return

        # input value didnt match any valid type/value, raise exception
        msg = "Task '%s' attribute '%s' must be " % (task, attr)
        accept = ", ".join([getattr(v, '__name__', str(v)) for v in
                            (valid[0] + valid[1])])
        msg += "{%s} got:%r %s" % (accept, value, type(value))
        raise InvalidTask(msg)

    @property
    def is_leaf(self) -> bool:
        return self.kind is TaskKind.LEAF

    @property
    def is_composite(self) -> bool:
        return self.kind is TaskKind.COMPOSITE

    @property
    def title(self) -> str:
        """banner printed before the task runs"""
        if self.doc:
            return "%s: %s" % (self.name.upper(), self.doc)
        return self.name.upper()

    def __repr__(self):
        return "<Task: %s>" % self.name
