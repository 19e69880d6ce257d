"""
Sample applications built on subcommands.

- simple:  two commands and help, no shared state.
    python -m subcommands.samples.simple greet bob
- complex: sections, env-vars, common flags, a nested application and a
  command receiving raw arguments.
    python -m subcommands.samples.complex help -advanced
"""
