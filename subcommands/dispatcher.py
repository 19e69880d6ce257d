"""
Dispatcher: run an application against an argument list and return the exit code.

Phases
- global (only when no argument list is given)
  • parse sys.argv[1:] with the process-wide `command_line` flag set, with a
    usage hook rendering the top-level help. `-help` there renders the help to
    the error sink and returns 0; a bad global flag returns 2.
  • the hook is swapped under a module lock and restored on every exit path,
    so concurrent dispatches never see each other's hook.
- command
  • no arguments: top-level help on the error sink, exit 2.
  • resolve args[0] with find_nearest_command(); unknown tokens exit 2.
  • build a fresh CommandRun through the command's factory.
  • parse args[1:] with the run's FlagSet in CONTINUE mode, usage going to the
    error sink. Parse failure exits 2 (including `-help`, which still renders
    the command usage first). A run without FlagSet receives args[1:] verbatim.
  • resolve declared env-vars and call run(app, residual, env).

Tests and embedded applications call dispatch(app, args) with an explicit
list; that path touches no process-wide state and is safe to run in parallel.
"""
import logging
import sys
import threading

from .environment import resolve_env
from .faults import ExitCode, FlagError, HelpRequested
from .flags import ErrorHandling, command_line
from .resolver import find_nearest_command
from .rendering import usage, command_usage_handler
from .utils import Unset, backquote

logger = logging.getLogger(__name__)

_lock = threading.Lock()


def unknown_command(app, token, /):
    """
    Write the unknown-command diagnostic to the application's error sink.
    """
    app.err.write("%s: unknown command %s\n\nRun '%s help' for usage.\n" % (app.name, backquote(token), app.name))


def init_command(app, command, run, out, on_help=None, /):
    """
    Prepare the FlagSet of `run` for parsing; return whether it has one.

    Installs the per-command usage hook (unless the run brought its own),
    routes diagnostics to `out` and names the set after the command in
    CONTINUE mode.
    """
    flags = run.flags
    if flags is None:
        return False
    if flags.usage_hook is None:
        flags.usage_hook = command_usage_handler(out, app, command, run, on_help)
    flags.set_output(out)
    flags.init(command.name, ErrorHandling.CONTINUE)
    return True


def _parse_general(app):
    help_used = False

    def on_help():
        nonlocal help_used
        usage(app.err, app, False)
        help_used = True

    with _lock:
        previous = command_line.usage_hook
        command_line.usage_hook = on_help
        try:
            command_line.parse(sys.argv[1:])
            args = command_line.args
        finally:
            command_line.usage_hook = previous
    return args, help_used


def dispatch(app, args=Unset, /):
    """
    Run `app` with `args` (sys.argv[1:] through `command_line` when omitted or None).

    Returns the process exit code: 0 success, 1 command-reported failure,
    2 usage error. User input never makes this raise.
    """
    help_used = False

    def on_help():
        nonlocal help_used
        help_used = True

    if args is Unset or args is None:
        try:
            args, help_used = _parse_general(app)
        except HelpRequested:
            return ExitCode.SUCCESS
        except FlagError:
            return ExitCode.USAGE
    args = list(args)

    if not args:
        usage(app.err, app, False)
        return ExitCode.USAGE

    command = find_nearest_command(app, args[0])
    if command is None:
        logger.debug("%s: no command matches %r", app.name, args[0])
        unknown_command(app, args[0])
        return ExitCode.USAGE
    logger.debug("%s: %r resolved to %r", app.name, args[0], command.name)

    run = command.factory()
    if init_command(app, command, run, app.err, on_help):
        try:
            run.flags.parse(args[1:])
        except FlagError as error:
            logger.debug("%s %s: %s", app.name, command.name, error)
            return ExitCode.USAGE
        if help_used:
            return ExitCode.SUCCESS
        residual = run.flags.args
    else:
        residual = args[1:]

    env = resolve_env(app)
    logger.debug("%s %s: running with %r", app.name, command.name, residual)
    code = run.run(app, residual, env)
    logger.debug("%s %s: exited with %r", app.name, command.name, code)
    return code


__all__ = (
    "dispatch",
    "init_command",
    "unknown_command",
)
