"""
subcommands.flags
~~~~~~~~~~~~~~~~~

Per-command flag sets on top of argparse.

What this module provides
- FlagSet: an argparse.ArgumentParser that speaks the conventional single-dash
  flag grammar used by subcommand tools:
  • parsing stops at the first positional token; whatever follows is left
    untouched in FlagSet.args for the command to consume.
  • `-name` and `--name` are the same flag; `-name=value` carries an inline value.
  • `--` ends flag parsing and is dropped; a lone `-` is a positional.
  • an undeclared `-help`/`-h` renders usage and fails with HelpRequested.
  • failures print a one-line diagnostic followed by the usage text.
- ErrorHandling: what parse() does on failure (raise or exit).
- command_line: the process-wide flag set used by the dispatcher's global phase.

How it fits with argparse
- Declaration, defaults and value conversion stay with argparse
  (add_argument(), type=..., dest=...). FlagSet.flag() is a shorthand that
  declares `-name` with its default and usage text.
- parse() scans the token list itself so the first positional ends flag
  parsing. Each value is converted with the action's type and handed to the
  action directly, so a value is never mistaken for a flag (`-name --` binds
  "--"). Defaults and required flags are settled the way parse_args() does.
  argparse errors are routed through error(), which never exits in CONTINUE
  mode.
- int flags accept the usual literal prefixes (`0x10`, `0o17`, `0b11`,
  `1_000`) and treat a leading zero as octal, see parse_int().

Example
    flags = FlagSet("sleep")
    flags.flag("duration", 0, "Duration in seconds")
    flags.parse(["-duration=3", "now"])
    flags.namespace.duration   # 3
    flags.args                 # ["now"]
"""
import argparse
import builtins
import enum
import os.path
import sys

from .faults import *
from .utils import Unset, rename, quote


class ErrorHandling(enum.Enum):
    """
    failure policy of FlagSet.parse().

    - CONTINUE: raise the FlagError (HelpRequested for -help).
    - EXIT:     exit the process with status 2 (0 for -help).
    """
    CONTINUE = "continue"
    EXIT = "exit"


_BOOLEANS = {
    "1": True, "t": True, "T": True, "true": True, "TRUE": True, "True": True,
    "0": False, "f": False, "F": False, "false": False, "FALSE": False, "False": False,
}


@rename("bool")
def parse_bool(text, /):
    """
    convert the textual forms accepted by boolean flags (`1`, `t`, `true`, `FALSE`, ...).
    """
    try:
        return _BOOLEANS[text]
    except KeyError:
        raise ValueError("invalid syntax: %r" % text) from None


@rename("int")
def parse_int(text, /):
    """
    convert an integer literal: decimal, `0x`/`0o`/`0b` prefixed, or octal with a leading zero.
    """
    try:
        return int(text, 0)
    except ValueError:
        digits = text.lstrip("+-")
        if len(digits) > 1 and digits[0] == "0" and digits.replace("_", "").isdigit():
            return int(text, 8)
        raise


class BoolAction(argparse.Action):
    """
    boolean flag: `-name` sets True, `-name=false` sets False.
    """

    def __init__(self, option_strings, dest, default=False, required=False, help=None, metavar=None):
        super().__init__(
            option_strings,
            dest,
            nargs="?",
            const=True,
            default=default,
            type=parse_bool,
            required=required,
            help=help,
            metavar=metavar,
        )

    def __call__(self, parser, namespace, values, option_string=None):
        setattr(namespace, self.dest, values)


def _flag_name(action):
    return action.option_strings[0].lstrip("-")


def _unquote_usage(action):
    # A back-quoted word in the usage text names the flag's value.
    usage = action.help or ""
    start = usage.find("`")
    if start >= 0:
        end = usage.find("`", start + 1)
        if end >= 0:
            name = usage[start + 1:end]
            return name, usage[:start] + name + usage[end + 1:]
    if action.metavar is not None:
        return str(action.metavar), usage
    if action.nargs == 0 or isinstance(action, BoolAction):
        return "", usage
    return {None: "string", str: "string", int: "int", parse_int: "int", float: "float"}.get(action.type, "value"), usage


def _is_zero(default):
    if default is None or default is argparse.SUPPRESS:
        return True
    if isinstance(default, bool | int | float | str):
        return not default
    return False


def _format_default(default):
    if isinstance(default, bool):
        return "true" if default else "false"
    if isinstance(default, str):
        return quote(default)
    return str(default)


class FlagSet(argparse.ArgumentParser):
    """
    A named set of flags, parsed in the single-dash grammar.

    Attributes
    - name: used by the default usage text ("Usage of <name>:").
    - error_handling: ErrorHandling policy applied by parse().
    - usage_hook: callable invoked by print_usage(); None selects the default usage.
    - namespace: object receiving parsed values (argparse.Namespace by default).

    Read-only state
    - output: sink for diagnostics and usage (standard error unless set).
    - args: positional arguments left after the last parse().
    - parsed: whether parse() was called.
    """

    def __init__(self, name="", error_handling=ErrorHandling.CONTINUE, *, namespace=None):
        super().__init__(prog=name or None, add_help=False, allow_abbrev=False)
        self.name = name
        self.error_handling = error_handling
        self.usage_hook = None
        self.namespace = argparse.Namespace() if namespace is None else namespace
        self._output = None
        self._args = []
        self._parsed = False

    @property
    def output(self):
        return sys.stderr if self._output is None else self._output

    @property
    def args(self):
        return list(self._args)

    @property
    def parsed(self):
        return self._parsed

    def init(self, name, error_handling):
        """
        rename the flag set and set its failure policy.
        """
        self.name = name
        self.prog = name or None
        self.error_handling = error_handling

    def set_output(self, sink):
        self._output = sink

    def flag(self, name, default=False, usage="", *, type=Unset, metavar=Unset):
        """
        declare `-name` and return its argparse action.

        - bool default (and no explicit type): boolean flag, see BoolAction.
        - any other default: a value flag converted with `type`, which defaults
          to type(default) (str when default is None, parse_int for ints).
        - the value lands on namespace.<name>, dashes replaced by underscores.
        """
        if not isinstance(name, str) or not name or name[0] == "-" or "=" in name:
            raise ValueError("flag() name must be a non-empty string without leading dashes or '='")

        options = {"dest": name.replace("-", "_"), "default": default, "help": usage}
        if metavar is not Unset:
            options["metavar"] = metavar

        if isinstance(default, bool) and type is Unset:
            return self.add_argument("-" + name, action=BoolAction, **options)
        if type is Unset:
            type = str if default is None else builtins.type(default)
            if type is int:
                type = parse_int
        return self.add_argument("-" + name, type=type, **options)

    def _lookup(self, name):
        for option in ("-" + name, "--" + name):
            if (action := self._option_string_actions.get(option)) is not None:
                return option, action
        return None, None

    def parse(self, arguments):
        """
        parse flags from `arguments`, leaving the positional remainder in args.

        Returns the namespace holding the parsed values. On failure, applies
        error_handling (raise FlagError or exit).
        """
        self._parsed = True
        tokens = list(arguments)
        given = []

        while tokens:
            token = tokens[0]
            if len(token) < 2 or token[0] != "-":
                break
            del tokens[0]
            if token == "--":
                break

            name, sep, value = token[2 if token[1] == "-" else 1:].partition("=")
            if not name or name[0] in "-=":
                self._fail(BadFlagSyntaxError("bad flag syntax: %s" % token))

            option, action = self._lookup(name)
            if action is None:
                if name in ("help", "h"):
                    self.print_usage()
                    self._fail(HelpRequested(flag=name))
                self._fail(UnknownFlagError("flag provided but not defined: -%s" % name, flag=name))

            if action.nargs == 0:
                # store_true and friends cannot take a value; honour -name=false by skipping it
                if sep:
                    try:
                        enabled = parse_bool(value)
                    except ValueError:
                        self._fail(InvalidFlagValueError(
                            "invalid boolean value %s for -%s: parse error" % (quote(value), name),
                            flag=name,
                        ))
                    if not enabled:
                        continue
                given.append((action, option, []))
            elif isinstance(action, BoolAction):
                given.append((action, option, self._convert(action, name, value) if sep else action.const))
            else:
                if not sep:
                    if not tokens:
                        self._fail(MissingFlagValueError("flag needs an argument: -%s" % name, flag=name))
                    value = tokens.pop(0)
                converted = self._convert(action, name, value)
                given.append((action, option, converted if action.nargs in (None, "?") else [converted]))

        self._args = tokens
        self._apply(given)
        return self.namespace

    def _convert(self, action, name, value):
        # the value is taken as is, never re-read as a flag
        try:
            converted = self._get_value(action, value)
            if action.choices is not None:
                self._check_value(action, converted)
        except argparse.ArgumentError as error:
            self._fail(InvalidFlagValueError(str(error), flag=name))
        return converted

    def _apply(self, given):
        namespace = self.namespace
        for action in self._actions:
            if action.dest is argparse.SUPPRESS or action.default is argparse.SUPPRESS:
                continue
            if not hasattr(namespace, action.dest):
                setattr(namespace, action.dest, action.default)
        for dest, value in self._defaults.items():
            if not hasattr(namespace, dest):
                setattr(namespace, dest, value)

        seen = set()
        for action, option, value in given:
            action(self, namespace, value, option)
            seen.add(action)

        missing = []
        for action in self._actions:
            if action in seen:
                continue
            if action.required:
                missing.append("/".join(action.option_strings) or action.dest)
            elif isinstance(action.default, str) and getattr(namespace, action.dest, None) is action.default:
                setattr(namespace, action.dest, self._get_value(action, action.default))
        if missing:
            self.error("the following arguments are required: %s" % ", ".join(missing))

    def print_usage(self, file=None):
        """
        render usage through usage_hook, or the default usage when unset.

        `file` only redirects the default usage; a hook writes where it wants.
        """
        if self.usage_hook is not None:
            self.usage_hook()
        else:
            self.default_usage(file)

    def default_usage(self, file=None):
        file = self.output if file is None else file
        if self.name:
            print("Usage of %s:" % self.name, file=file)
        else:
            print("Usage:", file=file)
        self.print_defaults(file)

    def print_defaults(self, file=None):
        """
        list declared flags, sorted by name, with usage text and non-zero defaults.

        Layout
            -advanced
            	show advanced commands
            -duration int
            	Duration in seconds (default 1)
        """
        actions = [
            action for action in self._actions
            if action.option_strings and action.help is not argparse.SUPPRESS
        ]
        for action in sorted(actions, key=_flag_name):
            metavar, usage = _unquote_usage(action)
            line = "  -" + _flag_name(action)
            if metavar:
                line += " " + metavar
            # one-letter flags without a metavar keep their usage on the same line
            if len(line) <= 4:
                line += "\t"
            else:
                line += "\n    \t"
            line += usage.replace("\n", "\n    \t")
            if not _is_zero(action.default):
                line += " (default %s)" % _format_default(action.default)
            print(line, file=self.output if file is None else file)

    def error(self, message):
        # argparse reports conversion and requirement failures here
        self._fail(InvalidFlagValueError(message))

    def _fail(self, fault):
        if not isinstance(fault, HelpRequested):
            print(fault.message, file=self.output)
            self.print_usage()
        if self.error_handling is ErrorHandling.EXIT:
            sys.exit(ExitCode.SUCCESS if isinstance(fault, HelpRequested) else ExitCode.USAGE)
        raise fault


command_line = FlagSet(os.path.basename(sys.argv[0]) if sys.argv and sys.argv[0] else "")
"""
process-wide flag set for global flags, parsed by dispatch() when it is not
given an argument list. Its usage hook is swapped by the dispatcher under a lock.
"""


__all__ = (
    "ErrorHandling",
    "BoolAction",
    "FlagSet",
    "parse_bool",
    "parse_int",
    "command_line",
)
