"""Load and save configuration files."""

from __future__ import annotations

import asyncio
from pathlib import Path

from mdconf.config import MDCONF_ENCODING
from mdconf.parser import parse_stream
from mdconf.render import render
from mdconf.schemas import Section


def load(path: Path | str, *, encoding: str = MDCONF_ENCODING, strict: bool | None = None) -> Section:
    """Parse the configuration file at ``path``.

    Args:
        path: File to read.
        encoding: Text encoding of the file.
        strict: Read-failure policy, see :func:`mdconf.parser.parse_stream`.

    Returns:
        The root section of the file.

    Raises:
        OSError: If the file cannot be opened.
        ReadError: If reading fails part way and ``strict`` is in effect.
    """
    with Path(path).open(encoding=encoding, newline="\n") as handle:
        return parse_stream(handle, strict=strict)


def dump(section: Section, path: Path | str, *, encoding: str = MDCONF_ENCODING) -> None:
    """Render ``section`` and write it to ``path``, replacing any existing file."""
    Path(path).write_text(render(section), encoding=encoding, newline="\n")


async def load_async(
    path: Path | str, *, encoding: str = MDCONF_ENCODING, strict: bool | None = None
) -> Section:
    """Parse a configuration file in a worker thread."""
    return await asyncio.to_thread(load, path, encoding=encoding, strict=strict)


async def dump_async(section: Section, path: Path | str, *, encoding: str = MDCONF_ENCODING) -> None:
    """Write a configuration file in a worker thread."""
    await asyncio.to_thread(dump, section, path, encoding=encoding)
