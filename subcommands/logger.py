"""
Logging helpers for applications and tests built on subcommands.

The library itself logs through `logging.getLogger("subcommands.*")` at DEBUG
level only and never installs handlers. These helpers cover what applications
and test suites usually want around that:

- PanicHandler / kill_std_log(): make any record reaching the root logger
  raise, to trap stray logging in tests meant to run in parallel.
- void_std_log(): silently drop records reaching the root logger.
- verbose_handler(sink): a Rich handler for `-verbose` style output, bound to
  the given sink (standard error by default).

Example
    if self.verbose:
        logging.getLogger().addHandler(verbose_handler(app.err))
"""
import logging
import sys

from rich.console import Console
from rich.logging import RichHandler


class PanicHandler(logging.Handler):
    """
    Handler that refuses every record.
    """

    def emit(self, record):
        raise RuntimeError("unexpected write")


def _replace_handlers(handler):
    root = logging.getLogger()
    for previous in list(root.handlers):
        root.removeHandler(previous)
    root.addHandler(handler)
    return handler


def kill_std_log():
    """
    Route the root logger to a PanicHandler and return it.
    """
    return _replace_handlers(PanicHandler())


def void_std_log():
    """
    Route the root logger to a NullHandler and return it.
    """
    return _replace_handlers(logging.NullHandler())


def verbose_handler(sink=None, *, level=logging.DEBUG):
    """
    Return a RichHandler writing to `sink` (standard error by default).

    Colors are only used when the sink is a terminal.
    """
    console = Console(file=sys.stderr if sink is None else sink, soft_wrap=True)
    handler = RichHandler(console=console, show_path=False, markup=False, rich_tracebacks=False)
    handler.setLevel(level)
    return handler


__all__ = (
    "PanicHandler",
    "kill_std_log",
    "void_std_log",
    "verbose_handler",
)
