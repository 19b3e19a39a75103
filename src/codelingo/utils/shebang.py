"""Interpreter extraction from "#!" lines."""

import re
from pathlib import PurePosixPath

# Lines searched for a `exec interpreter "$0" "$@"` hand-off in sh scripts.
EXEC_SEARCH_LINES = 5

_ENV_OPTION = re.compile(r"^(?:-[a-zA-Z0-9]+|--\S+)$")
_ENV_ASSIGNMENT = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*=\S*$")
_ENV_VARIABLE = re.compile(r"^\$[A-Za-z_]+$")
_SH_EXEC = re.compile(r"""exec\s+(\w+)[\s'"]+\$0[\s'"]+\$@""")
_PYTHON_VERSION = re.compile(r"^(python\d*)\.\d+")
_TRAILING_VERSION = re.compile(r"^(\D+?)[\d.]+$")


def interpreter_from_shebang(content: str) -> str | None:
    """
    Extract the interpreter named by a leading shebang.

    Handles ``/usr/bin/env`` (skipping option flags and ``VAR=value``
    assignments), sh scripts that re-exec another interpreter, and
    ``pythonX.Y`` style names which are reduced to ``pythonX``.

    Args:
        content: File content (only the first lines are inspected).

    Returns:
        Interpreter name, or None if there is no usable shebang.
    """
    if not content.startswith("#!"):
        return None

    first_line = content.split("\n", 1)[0].rstrip("\r")
    fields = first_line[2:].split()
    if not fields:
        return None

    interpreter = PurePosixPath(fields[0]).name
    args = fields[1:]

    if interpreter == "env":
        while args and (
            _ENV_OPTION.match(args[0])
            or _ENV_ASSIGNMENT.match(args[0])
            or _ENV_VARIABLE.match(args[0])
        ):
            args = args[1:]
        if not args:
            return None
        interpreter = PurePosixPath(args[0]).name
        args = args[1:]

    if interpreter == "sh":
        head = content.split("\n", EXEC_SEARCH_LINES)[:EXEC_SEARCH_LINES]
        for line in head:
            match = _SH_EXEC.search(line)
            if match:
                interpreter = match.group(1)
                break

    version = _PYTHON_VERSION.match(interpreter)
    if version:
        interpreter = version.group(1)

    # osascript -l selects another OSA language
    if interpreter == "osascript" and "-l" in args:
        return None

    return interpreter or None


def strip_version(interpreter: str) -> str | None:
    """
    Drop a trailing version number ("ruby2.7" -> "ruby").

    Returns:
        The shortened name, or None if there was no version suffix.
    """
    match = _TRAILING_VERSION.match(interpreter)
    return match.group(1) if match else None
