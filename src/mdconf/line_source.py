"""Line-at-a-time reading with pushback."""

from __future__ import annotations

import logging
from typing import TextIO

from mdconf.escaping import ends_with_escape
from mdconf.exceptions import ReadError

logger = logging.getLogger(__name__)


class PushbackLineSource:
    """Yield lines from a text stream, with terminators stripped.

    Lines handed back with :meth:`unread_line` are returned again, last in first
    out, before any fresh input is read. ``None`` marks the end of input.

    Args:
        stream: Text stream to read from.
        strict: If True, a failed read raises :class:`ReadError`. If False, the
            failure is logged and treated as the end of input.
    """

    def __init__(self, stream: TextIO, *, strict: bool = True) -> None:
        self._stream = stream
        self._strict = strict
        self._held: list[str] = []
        self._exhausted = False

    def read_line(self) -> str | None:
        """Return the next line, or None at end of input."""
        if self._held:
            return self._held.pop()
        if self._exhausted:
            return None

        try:
            raw = self._stream.readline()
        except (OSError, UnicodeDecodeError) as exc:
            self._exhausted = True
            if self._strict:
                raise ReadError(f"Failed to read configuration input: {exc}") from exc
            logger.warning("Read failed, treating as end of input: %s", exc)
            return None

        if not raw:
            self._exhausted = True
            return None
        return _strip_terminator(raw)

    def unread_line(self, line: str) -> None:
        """Hand a line back so the next read returns it."""
        self._held.append(line)


def _strip_terminator(line: str) -> str:
    # A carriage return escaped by a backslash is value data, not part of "\r\n".
    if line.endswith("\n"):
        line = line[:-1]
        if line.endswith("\r") and not ends_with_escape(line[:-1]):
            line = line[:-1]
    return line
