"""Render a section tree back to MDConf text."""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING

from mdconf.escaping import escape_fragment, escape_value

if TYPE_CHECKING:
    from mdconf.schemas import Section

logger = logging.getLogger(__name__)

# Keys are written verbatim; anything outside this shape will not parse back.
_SAFE_KEY_RE = re.compile(r"^(?:\\.|[^:\s\\])*$")


def render(section: Section) -> str:
    """Serialize ``section`` and its subtree, depth-first.

    Each section is written as its header line (omitted for the level-0 root),
    its key lines in insertion order followed by a blank line when it has any
    values, then each child followed by a blank line.
    """
    lines: list[str] = []
    _render_section(section, lines)
    return "".join(lines)


def _render_section(section: Section, lines: list[str]) -> None:
    if section.level > 0:
        lines.append(f"{'#' * section.level} {section.name}\n")

    if section.values is not None:
        for key, value in section.values.items():
            if not _SAFE_KEY_RE.match(key):
                logger.warning("Key %r in section %r will not round-trip", key, section.name)
            lines.append(_render_value(key, value))
        lines.append("\n")

    for child in section.children or ():
        _render_section(child, lines)
        lines.append("\n")


def _render_value(key: str, value: str) -> str:
    fragments = value.split("\n")
    if len(fragments) == 1:
        return f"+ {key}: {escape_value(value)}\n"

    parts = [f"+ {key}: {escape_value(fragments[0])}\\\n"]
    for fragment in fragments[1:-1]:
        parts.append(f"{escape_fragment(fragment)}\\\n")
    parts.append(f"{escape_fragment(fragments[-1])}\n")
    return "".join(parts)
