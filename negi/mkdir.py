"""Create a directory together with any missing parents."""

import errno
import os
import re

from negi.path import SEP_UNIX, SEP_WINDOWS, is_sep

_SEP_CHARS = "".join(c for c in (SEP_UNIX, SEP_WINDOWS) if is_sep(c))
_SEP_RUN = re.compile(f"[{re.escape(_SEP_CHARS)}]+")


def mkdirp(name):
    """Create ``name`` and its missing parents.

    Existing parents are accepted. The final directory must not exist unless
    ``name`` ends with a separator. A parent that is not a directory raises
    NotADirectoryError.
    """
    drive, _ = os.path.splitdrive(name)
    trailing = False

    for match in _SEP_RUN.finditer(name):
        if match.end() == len(name):
            trailing = True
        prefix = name[: match.start()]
        if not prefix or prefix == drive:
            continue
        try:
            os.mkdir(prefix)
        except FileExistsError:
            if not os.path.isdir(prefix):
                raise NotADirectoryError(
                    errno.ENOTDIR, os.strerror(errno.ENOTDIR), prefix
                ) from None

    if not trailing:
        os.mkdir(name)