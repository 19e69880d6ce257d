"""
Flags shared by most sample-complex commands.
"""
import logging

from subcommands import CommandRunBase, verbose_handler


class CommonFlags(CommandRunBase):
    """
    CommandRunBase with -verbose; call parse() first thing in run().

    After parse(), `self.log` is the logger the command should use: the
    application's quiet logger, or one printing to the error sink with
    -verbose.
    """
    verbose = False
    log = None

    def __init__(self):
        super().__init__()
        self.flags.flag("verbose", False, "Enable verbose output.")

    def parse(self, app, ignore_verbose=False):
        self.log = app.log
        if self.verbose and not ignore_verbose:
            # a private logger per run; nothing registered process-wide
            self.log = logging.Logger(app.name, logging.DEBUG)
            self.log.addHandler(verbose_handler(app.err))
