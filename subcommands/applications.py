"""
Subcommands application layer: the descriptor the dispatcher runs.

What this module provides
- EnvVarDefinition: declaration of an environment variable the application
  responds to (advanced, short_desc, default).
- Application: name, title, ordered commands, env-var declarations and the
  output/error sinks.

Design notes
- The command order is the display order of the help listing.
- out/err default to sys.stdout/sys.stderr, looked up on every access so
  redirections made after construction are honoured.
- replace(**overrides) derives a new application (also reachable through
  copy.replace()). Nested applications are built this way inside a command's
  run(): same sinks and env declarations, different name and commands.
- Applications are read-only once built; dispatch() only borrows them.
"""
import sys
from dataclasses import dataclass
from types import MappingProxyType

from .commands import Command
from .utils import Unset, coalesce, mirror


@dataclass(frozen=True)
class EnvVarDefinition:
    """
    An environment variable this application responds to.

    - advanced: hidden from the default help listing.
    - short_desc: one line shown in the help listing.
    - default: value used when the variable is absent from the environment.
    """
    short_desc: str = ""
    default: str = ""
    advanced: bool = False


class Application:
    """
    An application with subcommand support.

    Invariants
    - every entry of commands is a Command.
    - two runnable commands never share a name (sections are exempt).
    - env-var names are strings; definitions are EnvVarDefinition.
    """

    def __init__(self, name="", title="", commands=(), env_vars=None, *, out=None, err=None):
        self._name = name
        self._title = title
        self._commands = tuple(commands)
        self._env_vars = MappingProxyType(dict(env_vars or {}))
        self._out = out
        self._err = err

        names = {}
        for command in self._commands:
            if not isinstance(command, Command):
                raise TypeError("Application() commands must be Command instances, not %s" % type(command).__name__)
            if command.is_section:
                continue
            if not command.name:
                raise ValueError("Application() commands must have a non-empty name")
            if command.name in names:
                raise ValueError("command name %r is already in use" % command.name)
            names[command.name] = command

        for key, definition in self._env_vars.items():
            if not isinstance(key, str) or not key:
                raise TypeError("Application() env-var names must be non-empty strings")
            if not isinstance(definition, EnvVarDefinition):
                raise TypeError("Application() env-var %r must be defined by an EnvVarDefinition" % key)

    name = mirror("name")
    title = mirror("title")

    @property
    def commands(self):
        return self._commands

    @property
    def env_vars(self):
        return self._env_vars

    @property
    def out(self):
        return sys.stdout if self._out is None else self._out

    @property
    def err(self):
        return sys.stderr if self._err is None else self._err

    def replace(self, *unused, name=Unset, title=Unset, commands=Unset, env_vars=Unset, out=Unset, err=Unset):
        """
        Return a copy of this application with the given fields replaced.

        Subclasses keep their type; their extra state is shallow-copied.
        """
        assert not unused, "positional arguments are not allowed"
        clone = object.__new__(type(self))
        clone.__dict__.update(self.__dict__)
        Application.__init__(
            clone,
            coalesce(name, self._name),
            coalesce(title, self._title),
            coalesce(commands, self._commands),
            coalesce(env_vars, self._env_vars),
            out=coalesce(out, self._out),
            err=coalesce(err, self._err),
        )
        return clone

    __replace__ = replace

    def __repr__(self):
        return "%s(name=%r, commands=%r)" % (type(self).__name__, self._name, [c.name for c in self._commands])

    def __rich_repr__(self):
        yield "name", self._name
        yield "title", self._title
        yield "commands", list(self._commands)
        yield "env_vars", dict(self._env_vars), {}


__all__ = (
    "Application",
    "EnvVarDefinition",
)
