"""
Environment resolution: materialize declared env-vars for one dispatch.

Only the variables an application declares are resolved; the mapping handed
to CommandRun.run() never exposes anything else.

- present variable:  EnvVar(<value>, True), even when the value is empty.
- absent variable:   EnvVar(<declared default>, False).

Commands implementing boolean-ish toggles must look at `present`, since an
absent variable with an empty default and a present empty variable share the
same value.
"""
import os
from types import MappingProxyType
from typing import NamedTuple


class EnvVar(NamedTuple):
    value: str
    present: bool


def resolve_env(app, environ=None, /):
    """
    Resolve every env-var declared by `app` against `environ` (os.environ by default).

    Returns a read-only mapping of name -> EnvVar, built fresh on each call.
    """
    environ = os.environ if environ is None else environ
    env = {}
    for name, definition in app.env_vars.items():
        try:
            env[name] = EnvVar(environ[name], True)
        except KeyError:
            env[name] = EnvVar(definition.default, False)
    return MappingProxyType(env)


__all__ = (
    "EnvVar",
    "resolve_env",
)
