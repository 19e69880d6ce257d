"""
Subcommands utilities (internal helpers, carefully exposed)

Scope
- Small building blocks shared by the descriptor, flag and rendering layers.

Overview
- Unset: “argument not provided”, distinct from None. dispatch() uses it to
  tell “parse the process arguments” apart from an explicit argument list.
- coalesce(value, default=None): Unset becomes `default`; anything else,
  falsey values included, passes through.
- @rename("name"): give a callable the name users should read. argparse
  names type converters in its diagnostics (“invalid bool value”).
- mirror("attr"): read-only property over the backing field self._attr.
- quote(text) / backquote(text): quoting used by the help renderer and
  diagnostics.

Stability and contract
- Names listed in __all__ are supported; everything else may change.
"""
from typing import final


@final
class UnsetType:
    """
    Sentinel type for “not provided”; falsey and a process-wide singleton.
    """
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self):
        return False

    def __repr__(self):
        return "Unset"

    def __reduce__(self):
        return UnsetType, ()


def coalesce(object, default=None, /):
    """
    Return `object` unless it is Unset, in which case return `default`.

    - coalesce("name", "fallback") -> "name"
    - coalesce(Unset, "fallback")  -> "fallback"
    - coalesce(None, "fallback")   -> None
    """
    return default if object is Unset else object


def rename(name, /):
    """
    Decorator setting __name__ and __qualname__ of a callable to `name`.
    """
    if not isinstance(name, str):
        raise TypeError("@rename() argument must be a string")

    def decorator(callable):
        callable.__name__ = callable.__qualname__ = name
        return callable

    return decorator


def mirror(name, /):
    """
    Read-only property returning self._<name>.
    """
    attribute = "_" + name

    @rename(name)
    def getter(self):
        return getattr(self, attribute)

    return property(getter, doc="read-only %s" % name)


_ESCAPES = {
    "\a": "\\a", "\b": "\\b", "\f": "\\f", "\n": "\\n", "\r": "\\r",
    "\t": "\\t", "\v": "\\v", "\\": "\\\\", '"': '\\"',
}


def quote(text, /):
    """
    Double-quote `text`, escaping what cannot be shown as is (`"yep"`, `"a\\tb"`, `"\\x01"`).

    Printable characters pass through; other characters use a named escape
    when one exists, else `\\xHH`, `\\uHHHH` or `\\UHHHHHHHH` by code point.
    """
    parts = []
    for char in text:
        if char in _ESCAPES:
            parts.append(_ESCAPES[char])
        elif char.isprintable():
            parts.append(char)
        elif ord(char) < 0x80:
            parts.append("\\x%02x" % ord(char))
        elif ord(char) < 0x10000:
            parts.append("\\u%04x" % ord(char))
        else:
            parts.append("\\U%08x" % ord(char))
    return '"%s"' % "".join(parts)


def backquote(text, /):
    """
    Back-quote `text` when it can be shown raw, otherwise fall back to quote().

    Text can be shown raw when it holds no back quote, no byte order mark and
    no control character other than tab.
    """
    for char in text:
        if char == "`" or char == "\ufeff":
            return quote(text)
        if char != "\t" and (ord(char) < 0x20 or ord(char) == 0x7f):
            return quote(text)
    return "`%s`" % text


Unset = UnsetType()
"""
Process-wide “not provided” sentinel. Distinct from None; falsey.
"""


__all__ = (
    # Functions
    "coalesce",
    "rename",
    "mirror",
    "quote",
    "backquote",

    # Types
    "UnsetType",
    "Unset",
)
