"""Tests for the CLI entry point."""

import io
import os
import runpy
import sys

import pytest
from unittest.mock import MagicMock

from devtask.dispatcher import Dispatcher
from devtask.exceptions import InvalidTask, ProjectRootError
from devtask.notifier import FAILURE_MESSAGE, FailureNotifier
from devtask.runner import EXIT_INTERRUPTED, main


@pytest.fixture(autouse=True)
def restore_cwd(monkeypatch):
    monkeypatch.chdir(os.getcwd())


def make_dispatcher(status=0, error=None):
    dispatcher = MagicMock()
    if error is not None:
        dispatcher.dispatch.side_effect = error
    else:
        dispatcher.dispatch.return_value = status
    return dispatcher


class TestMain:
    """main() returns the exit status and notifies exactly once."""

    def test_success(self):
        stream = io.StringIO()
        notifier = FailureNotifier(stream=stream)

        status = main(['build'], dispatcher=make_dispatcher(0),
                      notifier=notifier)

        assert status == 0
        assert notifier.fired
        assert stream.getvalue() == ''

    def test_failure_notifies_once(self):
        stream = io.StringIO()
        notifier = FailureNotifier(stream=stream)

        status = main(['validate'], dispatcher=make_dispatcher(101),
                      notifier=notifier)

        assert status == 101
        assert stream.getvalue() == FAILURE_MESSAGE + '\n'

    def test_args_are_forwarded(self):
        dispatcher = make_dispatcher(0)
        main(['lint'], dispatcher=dispatcher,
             notifier=FailureNotifier(stream=io.StringIO()))
        dispatcher.dispatch.assert_called_once_with(['lint'])

    @pytest.mark.parametrize('error', [
        ProjectRootError("not a git repository"),
        InvalidTask("Task 'a' references unknown subtask 'b'."),
    ])
    def test_configuration_error(self, error, capsys):
        stream = io.StringIO()
        notifier = FailureNotifier(stream=stream)

        status = main([], dispatcher=make_dispatcher(error=error),
                      notifier=notifier)

        assert status == 1
        assert capsys.readouterr().err == f"Error: {error}\n"
        assert stream.getvalue() == FAILURE_MESSAGE + '\n'

    def test_keyboard_interrupt(self):
        notifier = FailureNotifier(stream=io.StringIO())

        status = main(['watch'],
                      dispatcher=make_dispatcher(error=KeyboardInterrupt()),
                      notifier=notifier)

        assert status == EXIT_INTERRUPTED
        assert notifier.status == EXIT_INTERRUPTED

    def test_unexpected_error_propagates(self):
        stream = io.StringIO()
        notifier = FailureNotifier(stream=stream)

        with pytest.raises(RuntimeError):
            main([], dispatcher=make_dispatcher(error=RuntimeError("bug")),
                 notifier=notifier)

        assert stream.getvalue() == FAILURE_MESSAGE + '\n'


class TestMainEndToEnd:
    """main() with a real Dispatcher and a fake runner."""

    def test_unknown_task(self, tmp_path, default_registry, make_runner,
                          capsys):
        runner = make_runner(default_registry)
        dispatcher = Dispatcher(runner=runner, root_finder=lambda: tmp_path)

        status = main(['frobnicate'], dispatcher=dispatcher)

        assert status == 1
        assert runner.calls == []
        captured = capsys.readouterr()
        assert captured.out.startswith('Usage: devtask [command] ...')
        assert captured.err.count(FAILURE_MESSAGE) == 1

    def test_validate_failure(self, tmp_path, default_registry, make_runner,
                              capsys):
        runner = make_runner(default_registry, failures={'lint-docs': 123})
        dispatcher = Dispatcher(runner=runner, root_finder=lambda: tmp_path)

        status = main(['validate'], dispatcher=dispatcher)

        assert status == 123
        assert runner.calls == ['lint-rust', 'lint-shell', 'lint-docs']
        captured = capsys.readouterr()
        assert 'VALIDATE: run all the checks and validations available' in captured.out
        assert captured.err.count(FAILURE_MESSAGE) == 1

    def test_validate_success_is_silent(self, tmp_path, default_registry,
                                        make_runner, capsys):
        runner = make_runner(default_registry)
        dispatcher = Dispatcher(runner=runner, root_finder=lambda: tmp_path)

        status = main(['validate'], dispatcher=dispatcher)

        assert status == 0
        assert FAILURE_MESSAGE not in capsys.readouterr().err

    def test_bad_option_still_notifies(self, tmp_path, capsys):
        dispatcher = Dispatcher(root_finder=lambda: tmp_path)

        with pytest.raises(SystemExit) as exc_info:
            main(['--no-such-option'], dispatcher=dispatcher)

        assert exc_info.value.code == 2
        assert capsys.readouterr().err.count(FAILURE_MESSAGE) == 1

    def test_broken_task_file(self, tmp_path, capsys):
        (tmp_path / 'devtask.yaml').write_text("tasks: [1, 2]\n")
        dispatcher = Dispatcher(root_finder=lambda: tmp_path)

        status = main(['build'], dispatcher=dispatcher)

        assert status == 1
        assert "Error: Task 0 must be a mapping" in capsys.readouterr().err


class TestModuleEntryPoint:

    def test_python_dash_m(self, monkeypatch, capsys):
        monkeypatch.setattr(sys, 'argv', ['devtask', '--help'])

        with pytest.raises(SystemExit) as exc_info:
            runpy.run_module('devtask', run_name='__main__')

        assert exc_info.value.code == 0
        assert 'usage: devtask' in capsys.readouterr().out
