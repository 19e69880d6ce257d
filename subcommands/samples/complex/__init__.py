"""
sample-complex: a skeleton for larger tools.

Shows sections in the command listing, declared env-vars (one advanced),
flags shared between commands, a nested application (`ask`) and a command
receiving its arguments unparsed (`ask arbitrary`).
"""
import logging

from subcommands import Application, CmdHelp, EnvVarDefinition, dispatch, kill_std_log, section

from .ask import cmd_ask
from .greet import cmd_greet
from .sleep import cmd_sleep


class SampleApplication(Application):
    """
    Application carrying a logger for its commands (`log`), quiet by default.
    """

    def __init__(self, *arguments, log=None, **options):
        super().__init__(*arguments, **options)
        if log is None:
            log = logging.getLogger(__name__)
            log.propagate = False
            log.addHandler(logging.NullHandler())
        self.log = log


application = SampleApplication(
    "sample-complex",
    "Sample tool to act as a skeleton for subcommands usage.",
    # Shown in this exact order.
    [
        section("Nonsleepy commands."),
        cmd_greet,
        CmdHelp,
        cmd_ask,
        section("Sleepy commands."),
        cmd_sleep,
    ],
    {
        "GREET_STYLE": EnvVarDefinition("Controls the type of greeting.", "Hi"),
        "VERBOSE_DREAMS": EnvVarDefinition('If set to "1", shows dream while sleeping.', advanced=True),
    },
)


def main():
    # commands log through application.log only
    kill_std_log()
    return dispatch(application)


__all__ = (
    "SampleApplication",
    "application",
    "main",
)
