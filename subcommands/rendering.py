"""
Help rendering: the top-level listing and the per-command usage.

Top-level layout

    <title>

    Usage:  <name> [command] [arguments]

    Commands:
      <command>  <short description>
      ...

    Environment Variables:            (only when some are visible)
      <NAME>  <short description>[ (Default: "<default>")]
      ...

    Use "<name> help [command]" for more information about a command.
    Use "<name> help -advanced" to display all commands.   (only when hiding some)

Rules
- commands keep their declared order; sections are rows with an empty name,
  their short description already being "\\n\\t<title>".
- env-vars are sorted by name.
- name columns are as wide as the widest visible name, followed by two spaces.
- advanced commands and env-vars are listed only with include_advanced; the
  advanced tip shows when something is hidden that way.

Per-command layout

    <long description, stripped>            (followed by a blank line if any)
    usage:  <application name> <usage line>
    <flag listing>                          (when the command has a FlagSet)

Rendering is plain text written straight to the given sink.
"""
from .utils import quote


def _wrap_with_lines(text):
    return text + "\n\n" if text else text


def usage(out, app, include_advanced=False, /):
    """
    Write the application's top-level help to `out`.
    """
    has_advanced = False

    commands = []
    widest_command = 0
    for command in app.commands:
        has_advanced = has_advanced or command.advanced
        if not command.advanced or include_advanced:
            widest_command = max(widest_command, len(command.name))
            commands.append(command)

    env_vars = []
    widest_env_var = 0
    for name, definition in app.env_vars.items():
        has_advanced = has_advanced or definition.advanced
        if not definition.advanced or include_advanced:
            widest_env_var = max(widest_env_var, len(name))
            env_vars.append((name, definition))
    env_vars.sort(key=lambda item: item[0])

    text = "%s\n\nUsage:  %s [command] [arguments]\n\nCommands:" % (app.title, app.name)
    for command in commands:
        text += "\n  %s  %s" % (command.name.ljust(widest_command), command.short_desc)
    text += "\n\n"

    if env_vars:
        text += "Environment Variables:"
        for name, definition in env_vars:
            text += "\n  %s  %s" % (name.ljust(widest_env_var), definition.short_desc)
            if definition.default:
                text += " (Default: %s)" % quote(definition.default)
        text += "\n\n"

    text += '\nUse "%s help [command]" for more information about a command.' % app.name
    if has_advanced and not include_advanced:
        text += '\nUse "%s help -advanced" to display all commands.' % app.name
    text += "\n\n"

    out.write(text)


def command_usage(out, app, command, run, /):
    """
    Write the usage of `command` to `out`, followed by its flag listing.
    """
    out.write("%susage:  %s %s\n" % (_wrap_with_lines(command.long_desc.strip()), app.name, command.usage_line))
    if (flags := run.flags) is not None:
        flags.print_defaults()


def command_usage_handler(out, app, command, run, on_help=None, /):
    """
    Return a FlagSet usage hook rendering command_usage() and calling `on_help`.
    """
    def handler():
        command_usage(out, app, command, run)
        if on_help is not None:
            on_help()
    return handler


__all__ = (
    "usage",
    "command_usage",
    "command_usage_handler",
)
