"""
Command resolution: map a user token to a Command.

Two entry points
- find_command(app, name): strict; the first command, in declared order,
  whose name equals `name`. Sections are not skipped.
- find_nearest_command(app, token): forgiving; the cascade below, where the
  first step yielding a single command wins:
  1. exact name;
  2. unique case-sensitive prefix;
  3. unique case-insensitive prefix;
  4. nearest edit distance, only when it is close (≤ 3) and clearly ahead of
     the runner-up (gap ≥ 3). Anything else resolves to None rather than
     running a command the user did not mean.

Sections are never candidates of find_nearest_command().

Edit distance counts insertions and deletions as 1 and substitutions as 2,
so a transposed pair of letters costs 2 and a wrong letter costs 2.
"""
from rapidfuzz.distance import Levenshtein

_WEIGHTS = (1, 1, 2)

# No command further than this is a plausible typo.
_MAX_DISTANCE = 3
# The runner-up must be at least this much further away.
_MIN_GAP = 3
_SENTINEL = 1000


def distance(a, b, /):
    """
    weighted edit distance between two names (substitution counts 2).
    """
    return Levenshtein.distance(a, b, weights=_WEIGHTS)


def find_command(app, name, /):
    """
    Return the first command of `app` named exactly `name`, or None.
    """
    for command in app.commands:
        if command.name == name:
            return command
    return None


def find_nearest_command(app, token, /):
    """
    Return the command the user most plausibly meant by `token`, or None.
    """
    commands = {command.name: command for command in app.commands if not command.is_section}

    if (command := commands.get(token)) is not None:
        return command

    prefixed = [command for name, command in commands.items() if name.startswith(token)]
    if len(prefixed) == 1:
        return prefixed[0]

    lowered = token.lower()
    prefixed = [command for name, command in commands.items() if name.lower().startswith(lowered)]
    if len(prefixed) == 1:
        return prefixed[0]

    closest, second, nearest = _SENTINEL, _SENTINEL, None
    for name, command in commands.items():
        if (current := distance(name, token)) < closest:
            closest, second, nearest = current, closest, command
        elif current < second:
            second = current

    if closest > _MAX_DISTANCE:
        return None
    if second - closest < _MIN_GAP:
        return None
    return nearest


__all__ = (
    "distance",
    "find_command",
    "find_nearest_command",
)
