"""
`ask` hosts an application of its own, dispatched with the arguments that
follow it. Its commands are listed by `sample-complex ask help`.
"""
from subcommands import Command, CommandRun, CmdHelp, dispatch

from .common import CommonFlags


class AskRun(CommandRun):
    # no FlagSet: every argument belongs to the nested application
    def run(self, app, args, env):
        ask = app.replace(name=app.name + " ask", title="Ask stuff.", commands=ask_commands, env_vars={})
        return dispatch(ask, args)


class AppleRun(CommonFlags):
    bare = False

    def __init__(self):
        super().__init__()
        self.flags.flag("bare", False, "Shows only a bare apple")

    def run(self, app, args, env):
        # -verbose is accepted but has no effect here
        self.parse(app, ignore_verbose=True)
        if args:
            app.err.write("%s: Unsupported arguments.\n" % app.name)
            return 1
        app.out.write("apple\n" if self.bare else "Would you like an apple?\n")
        return 0


class BeerRun(CommonFlags):
    file = ""

    def __init__(self):
        super().__init__()
        self.flags.flag("file", "", "Name of the beer `file`")

    def run(self, app, args, env):
        self.parse(app)
        self.log.info("Asked for beer from %r", self.file)
        app.err.write("%s: It's a BYOB party!\n" % app.name)
        return 1


class ArbitraryRun(CommandRun):
    def run(self, app, args, env):
        if not args or not args[-1].endswith("?"):
            app.err.write("%s: Only questions are accepted.\n" % app.name)
            return 1
        app.out.write("You asked: %s\n" % " ".join(args))
        app.out.write("That's a great question!\n")
        return 0


ask_commands = (
    Command("apple <options>", "asks for an apple", "Asks for an apple.", factory=AppleRun),
    Command("beer <options>", "asks for beer", "Asks for beer.", advanced=True, factory=BeerRun),
    Command(
        "arbitrary <anything>",
        "asks for anything you want",
        "Asks for arbitrary arguments. Flags are not parsed, they are received verbatim.",
        factory=ArbitraryRun,
    ),
    CmdHelp,
)

cmd_ask = Command(
    "ask <subcommand>",
    "asks questions",
    "Asks one of the known subquestion.",
    factory=AskRun,
)
