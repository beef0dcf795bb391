"""Built-in task table for a Rust + Nix project.

Used when the project root has no `devtask.yaml`. Entries are listed in the
order they appear in the usage listing; composites may reference tasks
declared further down.
"""

import shlex
import sys


WATCH_COMMAND = (
    'rg --files | entr -s "%s -m devtask validate 2>&1 | head -n 40"'
    % shlex.quote(sys.executable)
)

DEFAULT_TASKS = [
    {
        'name': 'clean',
        'doc': 'remove all the build artifacts in the system',
        'command': ['cargo', 'clean'],
    },
    {
        'name': 'validate',
        'doc': 'run all the checks and validations available',
        'subtasks': ['lint', 'build', 'test', 'check-format'],
    },
    {
        'name': 'docs',
        'doc': 'build the sphinx based documentation in the `docs` directory',
        'command': ['make', 'html'],
        'cwd': 'docs',
    },
    {
        'name': 'lint',
        'doc': 'run all of the lint checks',
        'subtasks': ['lint-rust', 'lint-shell', 'lint-docs', 'lint-nix'],
    },
    {
        'name': 'test',
        'doc': 'run all of the tests in the system',
        'subtasks': ['test-rust'],
    },
    {
        'name': 'build',
        'doc': 'build all the buildable code in the system',
        'subtasks': ['build-rust', 'build-nix'],
    },
    {
        'name': 'check-format',
        'doc': 'check formatting on all the code in the system',
        'subtasks': [
            'check-shell-format', 'check-rust-format', 'check-nix-format',
        ],
    },
    {
        'name': 'format',
        'doc': 'format all the code in the system',
        'subtasks': ['format-rust', 'format-shell', 'format-nix'],
    },
    {
        'name': 'watch',
        'doc': 'run validate any time a file changes',
        'command': WATCH_COMMAND,
    },
    {
        'name': 'lint-rust',
        'doc': 'run all of the lint checks on rust code',
        'command': ['cargo', 'clippy', '--', '-D', 'warnings'],
    },
    {
        'name': 'build-rust',
        'doc': 'build all of the rust code in the system',
        'command': ['cargo', 'build'],
    },
    {
        'name': 'test-rust',
        'doc': 'run all of the rust tests in the system',
        'command': ['cargo', 'test'],
    },
    {
        'name': 'check-shell-format',
        'doc': 'check that all the shell files in the system are formatted',
        'command': ['shfmt', '-d', '-i', '2', '.'],
    },
    {
        'name': 'format-shell',
        'doc': 'format all the shell files in the system',
        'command': ['shfmt', '-i', '2', '-w', '.'],
    },
    {
        'name': 'lint-shell',
        'doc': 'lint all the shell files in the system',
        'command': "rg --files -g '*.sh' | xargs shellcheck",
    },
    {
        'name': 'check-nix-format',
        'doc': 'check that all the nix files in the system are formatted',
        'command': "rg --files -g '*.nix' | xargs nixfmt -c",
    },
    {
        'name': 'format-nix',
        'doc': 'format all the nix files in the system',
        'command': "rg --files -g '*.nix' | xargs nixfmt",
    },
    {
        'name': 'lint-nix',
        'doc': 'lint all the nix files in the system',
        # nix-linter chokes on flakes and generated files, no match is fine
        'command': (
            "{ rg --files -g '*.nix' -g '!flake.nix' -g '!Cargo.nix' "
            "|| true; } | xargs -r nix-linter"
        ),
    },
    {
        'name': 'build-nix',
        'doc': 'build the system using nix',
        'command': ['nix', 'build'],
    },
    {
        'name': 'lint-docs',
        'doc': 'lint all the docs using the vale text linter',
        'command': "rg --files -g '*.rst' | xargs vale",
    },
    {
        'name': 'check-rust-format',
        'doc': 'check the formatting on all rust code',
        'command': ['cargo', 'fmt', '--all', '--', '--check'],
        'internal': True,
    },
    {
        'name': 'format-rust',
        'doc': 'format all rust code',
        'command': ['cargo', 'fmt', '--all'],
        'internal': True,
    },
]
