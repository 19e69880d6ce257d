"""
The built-in `help` command.

CmdHelp is not added automatically: list it in the application's commands
where it should appear in the listing.

    help                 top-level help on the output sink, exit 0
    help -advanced       same, including advanced commands and env-vars
    help <command>       command usage on the error sink, exit 0
                         (unknown command: diagnostic, exit 2)
    help <a> <b> ...     "Too many arguments given", exit 2

`help <command>` renders exactly what `<command> -help` renders. Beware that
`<tool> help -advanced <command>` does not forward -advanced to the command.
"""
from .commands import Command, CommandRunBase
from .dispatcher import init_command, unknown_command
from .faults import ExitCode
from .resolver import find_nearest_command
from .rendering import usage, command_usage_handler


class HelpRun(CommandRunBase):
    advanced = False

    def __init__(self):
        super().__init__()
        self.flags.flag("advanced", False, "show advanced commands")

    def run(self, app, args, env):
        if not args:
            usage(app.out, app, self.advanced)
            return ExitCode.SUCCESS
        if len(args) != 1:
            app.err.write("%s: Too many arguments given\n\nRun '%s help' for usage.\n" % (app.name, app.name))
            return ExitCode.USAGE

        command = find_nearest_command(app, args[0])
        if command is None:
            unknown_command(app, args[0])
            return ExitCode.USAGE

        run = command.factory()
        if init_command(app, command, run, app.err):
            run.flags.print_usage()
        else:
            command_usage_handler(app.err, app, command, run)()
        return ExitCode.SUCCESS


CmdHelp = Command(
    "help [<command>|-advanced]",
    "prints help about a command",
    "Prints an overview of every command or information about a specific command.\n"
    "Pass -advanced to see help for advanced commands.",
    factory=HelpRun,
)


__all__ = (
    "CmdHelp",
    "HelpRun",
)
