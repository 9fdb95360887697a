"""Parse MDConf text into a section tree."""

from __future__ import annotations

import io
import logging
import re
from dataclasses import dataclass, field
from typing import TextIO

from mdconf.config import MDCONF_STRICT_READS
from mdconf.escaping import WHITESPACE, ends_with_escape, unescape
from mdconf.line_source import PushbackLineSource
from mdconf.schemas import Section

logger = logging.getLogger(__name__)

_HEADER_RE = re.compile(r"^\s*(#+)\s*((?:\\.|.)*)\s*$")
_KV_RE = re.compile(r"^\s*\+\s*((?:\\.|[^:\s])*)\s*:\s*((?:\\.|.)*?)$")


def parse(text: str, *, strict: bool | None = None) -> Section:
    """Parse MDConf ``text`` and return the root section."""
    return parse_stream(io.StringIO(text), strict=strict)


def parse_stream(stream: TextIO, *, strict: bool | None = None) -> Section:
    """Parse MDConf text read line by line from ``stream``.

    Args:
        stream: Text stream positioned at the start of the document.
        strict: If True, a failed read raises :class:`~mdconf.exceptions.ReadError`.
            If False, it ends the parse and the tree read so far is returned.
            Defaults to ``MDCONF_STRICT_READS``.

    Returns:
        The level-0 root section.
    """
    if strict is None:
        strict = MDCONF_STRICT_READS
    source = PushbackLineSource(stream, strict=strict)
    return _parse_body(Section.root(), source)


@dataclass
class _MultilineValue:
    """A value being collected across continuation lines."""

    key: str
    fragments: list[str] = field(default_factory=list)

    def join(self) -> str:
        """Return the fragments joined with newlines."""
        return "\n".join(self.fragments)


def _parse_body(section: Section, source: PushbackLineSource) -> Section:
    """Consume lines into ``section`` until a same-or-shallower header or the end."""
    pending: _MultilineValue | None = None

    while True:
        line = source.read_line()
        if line is None:
            break

        if pending is not None:
            if line.endswith("\\"):
                pending.fragments.append(unescape(line[:-1]))
                continue
            pending.fragments.append(unescape(line))
            section.set_value_local(pending.key, pending.join())
            pending = None
            continue

        stripped = line.strip()
        if not stripped or stripped.startswith("//"):
            continue

        match = _KV_RE.match(line)
        if match:
            key, raw_value = match.group(1), match.group(2)
            value, continued = _split_value(raw_value)
            if continued:
                pending = _MultilineValue(key, [unescape(value)])
            else:
                section.set_value_local(key, unescape(value))
            continue

        match = _HEADER_RE.match(line)
        if match:
            level = len(match.group(1))
            if level <= section.level:
                source.unread_line(line)
                return section
            child = Section(level=level, name=match.group(2))
            logger.debug("Opening section %r at level %d", child.name, level)
            if section.children is None:
                section.children = []
            section.children.append(_parse_body(child, source))
            continue

        logger.debug("Dropping unrecognized line: %r", line)

    if pending is not None:
        section.set_value_local(pending.key, pending.join())
    return section


def _split_value(raw: str) -> tuple[str, bool]:
    """Trim a raw value and detect a continuation marker.

    Unescaped trailing whitespace is removed. If the last removed character was
    escaped it is kept. A value left ending in an unescaped backslash continues
    on the next line; the marker is dropped from the returned text.
    """
    body = raw.rstrip(WHITESPACE)
    if len(body) < len(raw) and ends_with_escape(body):
        return raw[: len(body) + 1], False
    if ends_with_escape(body):
        return body[:-1], True
    return body, False
