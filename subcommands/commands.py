"""
Subcommands command layer: describe subcommands and their per-invocation runs.

What this module provides
- Command: static description of a subcommand.
  • usage_line: "<name> <syntax hint>"; the first word is the command name.
  • short_desc: one line shown in the command listing.
  • long_desc: shown by `help <command>` and `<command> -help`.
  • advanced: hidden from the default listing, revealed by `help -advanced`.
  • factory: zero-argument callable returning a fresh CommandRun.
- section(title): a non-runnable Command used as a heading in the listing.
- CommandRun: what a factory produces; one instance per invocation.
- CommandRunBase: CommandRun with its own FlagSet whose values land on the run.

Core ideas
- A descriptor never carries per-invocation state. The factory builds a new
  run (with a new FlagSet) every time the command is dispatched, so two
  concurrent dispatches of the same command never see each other's flags.
- A run whose `flags` is None receives its arguments verbatim; this is how
  wrapper commands forward arguments to another tool.

Quick start
    class GreetRun(CommandRunBase):
        def __init__(self):
            super().__init__()
            self.flags.flag("loud", False, "shout the greeting")

        def run(self, app, args, env):
            print("Hi %s!" % args[0], file=app.out)
            return 0

    greet = Command("greet <who>", "greets someone", "Greets someone.", factory=GreetRun)
"""
from .flags import FlagSet
from .utils import mirror


class CommandRun:
    """
    Interface of an initialized subcommand, ready to be executed.

    - flags: the run's FlagSet, or None to receive arguments unparsed.
    - run(app, args, env): execute with the residual arguments and the resolved
      environment; return the process exit code.
    """
    flags = None

    def run(self, app, args, env):
        raise NotImplementedError("%s must implement run()" % type(self).__name__)


class CommandRunBase(CommandRun):
    """
    CommandRun owning a FlagSet; parsed flag values are set as attributes of the run.

    Subclasses declare their flags in __init__ (after calling super) and
    implement run().
    """

    def __init__(self):
        self._flags = FlagSet(namespace=self)

    @property
    def flags(self):
        return self._flags


class Command:
    """
    Descriptor of one subcommand (or of a section heading, see section()).

    Invariants
    - runnable commands have a non-empty name and a callable factory.
    - sections are never resolved from user input and never run.
    """

    def __init__(self, usage_line="", short_desc="", long_desc="", *, advanced=False, factory=None):
        if not isinstance(usage_line, str) or not isinstance(short_desc, str) or not isinstance(long_desc, str):
            raise TypeError("Command() usage_line, short_desc and long_desc must be strings")
        if factory is not None and not callable(factory):
            raise TypeError("Command() factory must be callable")
        self._usage_line = usage_line
        self._short_desc = short_desc
        self._long_desc = long_desc
        self._advanced = bool(advanced)
        self._factory = factory
        self._is_section = False

    usage_line = mirror("usage_line")
    short_desc = mirror("short_desc")
    long_desc = mirror("long_desc")
    advanced = mirror("advanced")
    is_section = mirror("is_section")

    @property
    def name(self):
        """
        first word of the usage line.
        """
        return self._usage_line.split(" ", 1)[0]

    def factory(self):
        """
        build a fresh CommandRun for one invocation.
        """
        if self._factory is None:
            raise TypeError("command %r has no factory" % self.name)
        return self._factory()

    def __repr__(self):
        if self._is_section:
            return "section(%r)" % self._short_desc.removeprefix("\n\t")
        return "command(%r, advanced=%r)" % (self._usage_line, self._advanced)

    def __rich_repr__(self):
        yield "usage_line", self._usage_line
        yield "short_desc", self._short_desc
        yield "advanced", self._advanced, False
        yield "is_section", self._is_section, False


def section(title, /):
    """
    Return an un-runnable Command acting as a heading in the command listing.
    """
    command = Command(short_desc="\n\t" + title)
    command._is_section = True
    return command


__all__ = (
    "Command",
    "CommandRun",
    "CommandRunBase",
    "section",
)
