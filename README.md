# negi

negi is a set of small, self-contained helpers. It has no dependencies
outside the standard library.

## Modules

- `negi.unicode`: `is_wide(c)` tells whether a character or code point
  takes two terminal columns. `is_end_of_clause(c)` tells whether it is
  clause-ending punctuation such as `,` `.` `!` `?` or their ideographic and
  fullwidth forms.
- `negi.path`: `is_sep`, `is_abs`, `next_sep` and `last_sep` for the
  platform's separators. `next_sep` and `last_sep` return the rest of the
  string from the separator, or `None` if there is no separator. The module
  also has `is_dot` for `.` and `..`, `delink(name)`, which returns a
  symbolic link's target, and the cached `home()` and `cwd()`.
- `negi.linkedlist`: `LinkedList`, a doubly linked list. `add` and
  `add_tail` return a `ListNode`, which `remove` can later unlink in O(1).
  `nodes()` may be iterated while the yielded node is removed.
- `negi.termas`: prints tagged messages (`hint:`, `warn:`, `error:`,
  `fatal:`, `BUG:`) through `hint`, `warn`, `error`, `die` and `bug`.
  `mas` prints timestamped lines to stdout. `format_message` builds a line
  without printing it. Output is controlled by the module-level `settings`
  (a `Settings` instance), which sets colour, timestamps, process id and
  the replacement for control characters. `die` exits with status 128.
  `bug` raises `BugError`.
- `negi.mkdir`: `mkdirp(name)` creates a directory and any missing parents.
  Existing parents are accepted. The last directory must not already exist
  unless `name` ends with a separator. A parent that is a file raises
  `NotADirectoryError`.
- `negi.proc`: `spawn(flags, file, *args)` starts a program, looked up in
  `PATH`, and returns a `subprocess.Popen`. Its `Redirect.OUT` and
  `Redirect.ERR` flags send the child's output to the null device.
  `wait(proc)` returns the exit status, or the number of the signal that
  ended the child. `redirect_std(name, flags)` points this process's own
  stdout and/or stderr at a file.

## Installation

```
pip install .
```

## Examples

```python
from negi.linkedlist import LinkedList

items = LinkedList()
node = items.add_tail(1)
items.add_tail(2)
items.add(0)
list(items)               # [0, 1, 2]
items.remove(node)        # 1
list(items)               # [0, 2]
```

```python
from negi.termas import settings, warn

settings.use_tercol = False
warn("something looks odd", "check the input")
# stderr: warn: something looks odd; check the input
```

```python
from negi.proc import Redirect, spawn, wait

proc = spawn(Redirect.OUT, "echo", "echo", "hello")
wait(proc)                # 0
```

```python
from negi.unicode import is_wide

is_wide("ミ")             # True
is_wide("M")              # False
```

## What it does not do

negi is a library only. It installs no command-line program.

## Running the tests

```
pip install .[test]
pytest
```