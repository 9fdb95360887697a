"""Backslash escaping shared by the parser and the renderer."""

from __future__ import annotations

import re

WHITESPACE = " \t\r\n\v\b\f"

_ESCAPE_RE = re.compile(r"\\(.)", re.DOTALL)


def is_white(char: str) -> bool:
    """Return True if ``char`` is one of the codec's whitespace characters."""
    return char != "" and char in WHITESPACE


def unescape(text: str) -> str:
    """Collapse every backslash pair to the escaped character.

    A lone trailing backslash has nothing to escape and is kept as is.
    """
    return _ESCAPE_RE.sub(r"\1", text)


def escape_value(value: str) -> str:
    """Escape a single-line value so that parsing it back yields ``value``.

    Backslashes are doubled. Then a whitespace character at either end of the
    value is prefixed with a backslash, which keeps it from being trimmed on the
    next parse. Interior whitespace is left alone.

    >>> escape_value(" padded ")
    '\\\\ padded\\\\ '
    """
    if not value:
        return ""
    value = value.replace("\\", "\\\\")
    if len(value) == 1:
        return "\\" + value if is_white(value) else value

    head = "\\" if is_white(value[0]) else ""
    if is_white(value[-1]):
        return head + value[:-1] + "\\" + value[-1]
    return head + value


def escape_fragment(fragment: str) -> str:
    """Escape a continuation fragment written after the first line of a value.

    Backslashes are doubled and a trailing carriage return is escaped so it is
    not read back as part of a "\\r\\n" line terminator.
    """
    fragment = fragment.replace("\\", "\\\\")
    if fragment.endswith("\r"):
        return fragment[:-1] + "\\\r"
    return fragment


def ends_with_escape(text: str) -> bool:
    """Return True if ``text`` ends in a backslash that escapes nothing.

    A trailing run of backslashes pairs up from the left, so an odd-length run
    leaves the last one unpaired.
    """
    run = len(text) - len(text.rstrip("\\"))
    return run % 2 == 1
