"""
sample-simple: the smallest useful application.

It implements two commands, one taking an argument, the other a flag, plus
the built-in help. Help pages are generated from the descriptors.
"""
import logging
import sys

from subcommands import Application, Command, CommandRunBase, CmdHelp, dispatch

logger = logging.getLogger(__name__)


class GreetRun(CommandRunBase):
    def run(self, app, args, env):
        if len(args) != 1:
            app.err.write("%s: Can only greet one person at a time.\n" % app.name)
            return 1
        app.out.write("Hi %s!\n" % args[0])
        return 0


class SleepRun(CommandRunBase):
    def __init__(self):
        super().__init__()
        self.flags.flag("duration", 0, "Duration in seconds")

    def run(self, app, args, env):
        if args:
            app.err.write("%s: Unsupported arguments.\n" % app.name)
            return 1
        if self.duration <= 0:
            app.err.write("%s: -duration is required.\n" % app.name)
            return 1
        logger.info("Simulating sleeping for %ds.", self.duration)
        return 0


application = Application(
    "sample-simple",
    "Sample tool to act as a skeleton for subcommands usage.",
    # Shown in this exact order.
    [
        Command(
            "greet <who>",
            "greets someone",
            "Greets someone. This command has no specific option except the common ones.",
            factory=GreetRun,
        ),
        Command("sleep <options>", "sleeps for some time", "Sleeps for some time, as desired.", factory=SleepRun),
        CmdHelp,
    ],
)


def main():
    logging.basicConfig(format="%(asctime)s %(message)s", level=logging.INFO)
    return dispatch(application)


if __name__ == "__main__":
    sys.exit(main())
