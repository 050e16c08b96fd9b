"""Start child programs and wait for them."""

import enum
import os
import subprocess
import sys


class Redirect(enum.IntFlag):
    OUT = 1 << 30
    ERR = 1 << 31


def redirect_std(name, flags):
    """Send this process's stdout and/or stderr to the file ``name``.

    The file is created or truncated. Raises OSError on failure.
    """
    flags = Redirect(flags)
    fd = os.open(name, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o664)
    try:
        if Redirect.OUT in flags:
            sys.stdout.flush()
            os.dup2(fd, 1)
        if Redirect.ERR in flags:
            sys.stderr.flush()
            os.dup2(fd, 2)
    finally:
        os.close(fd)


def spawn(flags, file, *args):
    """Start ``file`` with argument vector ``args`` (argv[0] included).

    Redirect flags send the child's output to the null device. The program
    is looked up in PATH. Raises OSError if it cannot be started.
    """
    flags = Redirect(flags)
    argv = list(args) or [file]
    return subprocess.Popen(
        argv,
        executable=file,
        stdout=subprocess.DEVNULL if Redirect.OUT in flags else None,
        stderr=subprocess.DEVNULL if Redirect.ERR in flags else None,
    )


def wait(proc):
    """Wait for ``proc``; return its exit status, or the signal that ended it."""
    code = proc.wait()
    return -code if code < 0 else code