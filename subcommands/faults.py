"""
Subcommands faults (exit codes and flag-parsing errors).

Scope
- ExitCode: the three process exit codes the dispatcher returns.
- CommandException: base type carrying a message and an optional hint.
- FlagError and its subclasses: raised by FlagSet.parse() when the flag set is
  in "continue on error" mode. The dispatcher reduces every FlagError to
  ExitCode.USAGE; nothing crosses the dispatch boundary as an exception.
- HelpRequested: an undeclared -help/-h was seen. The usage text was already
  rendered; the parse still counts as failed (hence `<cmd> -help` exits 2
  while `help <cmd>` exits 0).

Programmer errors (bad descriptors, duplicate names) are plain TypeError and
ValueError raised at construction time and are never converted here.
"""
from enum import IntEnum

from .utils import Unset, coalesce


class ExitCode(IntEnum):
    """
    conventional process exit codes.

    - SUCCESS: the command ran and succeeded (also help requested via `help`).
    - FAILURE: the command reported its own error.
    - USAGE:   bad command token, bad flag, missing command, too many arguments.
    """
    SUCCESS = 0
    FAILURE = 1
    USAGE   = 2


class CommandException(Exception):
    def __init__(self, message, /, *, hint=Unset):
        super().__init__(message)
        self.message = message
        self.hint = coalesce(hint)

    def __str__(self):
        return self.message


class FlagError(CommandException):
    """
    a flag set refused its input.

    `flag` carries the offending flag name (without dashes) when one is known.
    """
    def __init__(self, message, /, *, flag=Unset, hint=Unset):
        super().__init__(message, hint=hint)
        self.flag = coalesce(flag)


class BadFlagSyntaxError(FlagError): ...
class UnknownFlagError(FlagError): ...
class MissingFlagValueError(FlagError): ...
class InvalidFlagValueError(FlagError): ...


class HelpRequested(FlagError):
    def __init__(self, message="flag: help requested", /, **options):
        super().__init__(message, **options)


__all__ = (
    "ExitCode",
    "CommandException",
    "FlagError",
    "BadFlagSyntaxError",
    "UnknownFlagError",
    "MissingFlagValueError",
    "InvalidFlagValueError",
    "HelpRequested",
)
