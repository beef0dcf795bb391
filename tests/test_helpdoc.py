"""Tests for the usage listing."""

from devtask.helpdoc import format_usage, usage_entries
from devtask.registry import TaskRegistry


DISPATCHABLE = [
    'clean', 'validate', 'docs', 'lint', 'test', 'build', 'check-format',
    'format', 'watch', 'lint-rust', 'build-rust', 'test-rust',
    'check-shell-format', 'format-shell', 'lint-shell', 'check-nix-format',
    'format-nix', 'lint-nix', 'build-nix', 'lint-docs',
]


class TestUsageEntries:

    def test_default_table_order(self, default_registry):
        names = [name for name, _ in usage_entries(default_registry)]
        assert names == DISPATCHABLE

    def test_internal_tasks_not_listed(self, default_registry):
        names = [name for name, _ in usage_entries(default_registry)]
        assert 'check-rust-format' not in names
        assert 'format-rust' not in names

    def test_descriptions(self, default_registry):
        entries = dict(usage_entries(default_registry))
        assert entries['clean'] == 'remove all the build artifacts in the system'
        assert entries['validate'] == 'run all the checks and validations available'
        assert entries['lint-docs'] == 'lint all the docs using the vale text linter'

    def test_every_entry_has_description(self, default_registry):
        for name, doc in usage_entries(default_registry):
            assert doc, name


class TestFormatUsage:

    def test_format(self):
        registry = TaskRegistry.from_descriptors([
            {'name': 'build', 'doc': 'build things', 'command': ['make']},
            {'name': 'hidden', 'doc': 'secret', 'command': ['x'],
             'internal': True},
            {'name': 'test', 'doc': 'test things', 'command': ['pytest']},
        ])

        text = format_usage(registry)

        assert text.splitlines() == [
            'Usage: devtask [command] ...',
            'Commands:',
            '',
            'build)',
            '  build things',
            'test)',
            '  test things',
        ]

    def test_prog_name(self, default_registry):
        text = format_usage(default_registry, prog='./dev.py')
        assert text.startswith('Usage: ./dev.py [command] ...')
