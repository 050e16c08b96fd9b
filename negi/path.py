"""Path separator helpers and cached well-known directories."""

import functools
import os

SEP_UNIX = "/"
SEP_WINDOWS = "\\"

_WINDOWS = os.name == "nt"


def _separators():
    return (SEP_WINDOWS, SEP_UNIX) if _WINDOWS else (SEP_UNIX,)


def is_sep(c):
    """Return True if ``c`` is a path separator on this platform."""
    return c in _separators()


def is_abs(name):
    """Return True if ``name`` is an absolute path."""
    if _WINDOWS:
        return name[:1] == SEP_WINDOWS or name[1:2] == ":"
    return name[:1] == SEP_UNIX


def next_sep(s):
    """Return the rest of ``s`` from its first separator, or None."""
    found = [i for i in (s.find(sep) for sep in _separators()) if i != -1]
    return s[min(found):] if found else None


def last_sep(s):
    """Return the rest of ``s`` from its last separator, or None."""
    pos = max(s.rfind(sep) for sep in _separators())
    return s[pos:] if pos != -1 else None


def is_dot(name):
    """Return True for the special entries '.' and '..'."""
    return name in (".", "..")


def delink(name):
    """Return the target of the symbolic link ``name``.

    Raises OSError if ``name`` does not exist or is not a link.
    """
    return os.readlink(name)


@functools.lru_cache(maxsize=None)
def home():
    """Return the current user's home directory."""
    if _WINDOWS:
        return os.path.expanduser("~")

    import pwd

    return pwd.getpwuid(os.getuid()).pw_dir


@functools.lru_cache(maxsize=None)
def cwd():
    """Return the working directory as it was on the first call."""
    return os.getcwd()