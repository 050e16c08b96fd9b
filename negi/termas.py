"""Terminal messages: tagged, optionally coloured lines on stderr or stdout."""

import enum
import inspect
import os
import string
import sys
import time
from dataclasses import dataclass
from typing import Optional

MAS_BUF_CAP = 4096

_RESET = "\033[0m"
_BOLD = "1"
_RED = "31"
_GREEN = "32"
_YELLOW = "33"
_MAGENTA = "35"
_BG_BLACK = "40"


def _paint(text, *codes):
    return f"\033[{';'.join(codes)}m{text}{_RESET}"


class Level(enum.IntEnum):
    LOG = 0
    HINT = 1
    WARN = 2
    ERROR = 3
    FATAL = 4
    BUG = 5


class MasFlag(enum.IntFlag):
    SHOW_FILE = 1 << 0
    SHOW_FUNC = 1 << 1
    TO_STDOUT = 1 << 2
    NO_EXIT = 1 << 3


@dataclass
class Settings:
    """User-adjustable output settings."""

    use_tercol: bool = True
    termas_ts: bool = False
    termas_pid: bool = False
    control_replacement: str = "?"
    termas_dest: Optional[str] = None
    prefix: Optional[str] = None
    cred: Optional[str] = None
    cred_key: Optional[str] = None


settings = Settings()


class BugError(RuntimeError):
    """An internal invariant was broken."""


_TAGS = {
    Level.HINT: ("hint:", _paint("hint:", _BOLD, _YELLOW)),
    Level.WARN: ("warn:", _paint("warn:", _BOLD, _MAGENTA)),
    Level.ERROR: ("error:", _paint("error:", _BOLD, _RED)),
    Level.FATAL: ("fatal:", _paint("fatal:", _BOLD, _RED)),
    Level.BUG: ("BUG:", _paint("BUG:", _BOLD, _RED, _BG_BLACK)),
}

_GOOD_CONTROL = frozenset("\t\n\033")


def ts_now():
    """Return a monotonic timestamp in nanoseconds."""
    return time.monotonic_ns()


def ts_mono():
    """Return the monotonic clock as a (seconds, nanoseconds) pair."""
    return divmod(ts_now(), 1_000_000_000)


def _is_bad_control(ch):
    code = ord(ch)
    return (code < 0x20 or code == 0x7F) and ch not in _GOOD_CONTROL


def replace_bad_control(text, cap):
    """Replace control characters other than tab, newline and escape.

    The configured replacement is used when the result still fits in
    ``cap`` characters; otherwise each one becomes a single '?'.
    """
    count = sum(1 for ch in text if _is_bad_control(ch))
    if count == 0:
        return text

    replacement = settings.control_replacement
    if (len(replacement) - 1) * count > cap - len(text):
        replacement = "?"
    return "".join(replacement if _is_bad_control(ch) else ch for ch in text)


def _caller():
    frame = inspect.currentframe()
    try:
        while frame is not None and frame.f_code.co_filename == __file__:
            frame = frame.f_back
        if frame is None:
            return "?", 0, "?"
        return frame.f_code.co_filename, frame.f_lineno, frame.f_code.co_name
    finally:
        del frame


def _trim_tail(text):
    suffix = ""
    if settings.use_tercol:
        stripped = text.rstrip()
        if stripped.endswith(_RESET):
            text = stripped[: -len(_RESET)]
            suffix = _RESET
    return text.rstrip(string.whitespace + ":") + suffix


def format_message(level, message, hint=None, flags=0, file=None, line=None,
                   func=None):
    """Build the line that :func:`termas` writes, without its newline."""
    level = Level(level)
    flags = MasFlag(flags)
    color = settings.use_tercol
    tag = _TAGS.get(level)
    parts = []

    if settings.termas_ts or tag is None:
        sec, nsec = ts_mono()
        stamp = f"[{sec}.{nsec // 1000}] "
        parts.append(_paint(stamp, _GREEN) if color else stamp)

    if settings.termas_pid:
        pid = os.getpid()
        parts.append(f"{_paint('>', _BOLD)}{pid} " if color else f">{pid} ")

    show_file = MasFlag.SHOW_FILE in flags
    show_func = MasFlag.SHOW_FUNC in flags
    if (show_file or show_func) and (file is None or line is None
                                     or func is None):
        c_file, c_line, c_func = _caller()
        file = c_file if file is None else file
        line = c_line if line is None else line
        func = c_func if func is None else func

    if tag is not None:
        name = tag[1] if color else tag[0]
        parts.append(name if show_file or show_func else name + " ")

    if show_file:
        pos = f"{file}:{line}:{'' if show_func else ' '}"
        parts.append(_paint(pos, _BOLD) if color else pos)

    if show_func:
        parts.append(_paint(f"{func}: ", _BOLD) if color else f"{func}: ")

    cap = MAS_BUF_CAP - 1
    if not message:
        text = _trim_tail("".join(parts)[:cap])
    else:
        parts.append(message)
        if hint:
            parts.append("; " + hint)
        text = "".join(parts)[:cap]

    return replace_bad_control(text, cap)


def termas(level, message, hint=None, flags=0, file=None, line=None,
           func=None):
    """Write a message line and return it.

    A FATAL message exits with status 128 unless NO_EXIT is set; a BUG
    message raises :class:`BugError`.
    """
    level = Level(level)
    flags = MasFlag(flags)
    text = format_message(level, message, hint, flags, file, line, func)
    stream = sys.stdout if MasFlag.TO_STDOUT in flags else sys.stderr

    stream.write(text + "\n")
    stream.flush()

    if level is Level.BUG:
        raise BugError(text)
    if level is Level.FATAL and MasFlag.NO_EXIT not in flags:
        raise SystemExit(128)
    return text


def mas(message):
    """Write a plain, timestamped message to stdout."""
    return termas(Level.LOG, message, flags=MasFlag.TO_STDOUT)


def hint(message):
    return termas(Level.HINT, message)


def warn(message, hint=None):
    return termas(Level.WARN, message, hint)


def error(message, hint=None):
    return termas(Level.ERROR, message, hint)


def die(message, hint=None):
    """Report a fatal error and exit with status 128."""
    return termas(Level.FATAL, message, hint)


def bug(message):
    """Report an internal bug and raise :class:`BugError`."""
    return termas(Level.BUG, message)