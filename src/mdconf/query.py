"""Path-based lookup and mutation over a possibly absent section.

Each function takes ``section: Section | None`` first. ``None`` stands for an
absent section: lookups on it raise :class:`NotFoundError` and mutations raise
:class:`EmptySubjectError`, so an optional section can be passed in without
checking it first.
"""

from __future__ import annotations

from typing import Sequence

from mdconf.exceptions import EmptySubjectError, NotFoundError
from mdconf.schemas import Section


def _subject(section: Section | None) -> Section:
    if section is None:
        raise NotFoundError("Section is absent")
    return section


def _target(section: Section | None) -> Section:
    if section is None:
        raise EmptySubjectError("Cannot modify an absent section")
    return section


def lookup_value(section: Section | None, path: Sequence[str]) -> str:
    """Return the value at ``path``; all but the last element name sections.

    Raises:
        EmptyKeyError: If ``path`` is empty.
        NotFoundError: If a section on the path or the final key is missing.
    """
    return _subject(section).lookup_value(path)


def lookup_value_local(section: Section | None, key: str) -> str:
    """Return the value of ``key`` directly in ``section``."""
    return _subject(section).lookup_value_local(key)


def lookup_section(section: Section | None, path: Sequence[str]) -> Section:
    """Return the section at ``path``; an empty path returns ``section`` itself."""
    return _subject(section).lookup_section(path)


def lookup_section_local(section: Section | None, name: str) -> Section:
    """Return the first direct child of ``section`` called ``name``."""
    return _subject(section).lookup_section_local(name)


def set_value(section: Section | None, path: Sequence[str], value: str) -> None:
    """Set the key named by the last element of ``path``.

    The sections named by the other elements must already exist.

    Raises:
        EmptySubjectError: If ``section`` is None.
        EmptyKeyError: If ``path`` is empty.
        NotFoundError: If a section on the path is missing.
    """
    _target(section).set_value(path, value)


def set_value_local(section: Section | None, key: str, value: str) -> None:
    """Set ``key`` directly on ``section``."""
    _target(section).set_value_local(key, value)


def add_section(section: Section | None, path: Sequence[str], name: str) -> Section:
    """Create or get the child ``name`` of the existing section at ``path``."""
    return _target(section).add_section(path, name)


def add_section_local(section: Section | None, name: str) -> Section:
    """Create or get the child ``name`` directly under ``section``."""
    return _target(section).add_section_local(name)
