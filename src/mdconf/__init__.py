"""mdconf: parse and render Markdown-style hierarchical configuration."""

from mdconf.exceptions import (
    EmptyKeyError,
    EmptySubjectError,
    MDConfError,
    NotFoundError,
    ReadError,
)
from mdconf.files import dump, dump_async, load, load_async
from mdconf.parser import parse, parse_stream
from mdconf.query import (
    add_section,
    add_section_local,
    lookup_section,
    lookup_section_local,
    lookup_value,
    lookup_value_local,
    set_value,
    set_value_local,
)
from mdconf.render import render
from mdconf.schemas import Section

__all__ = [
    "EmptyKeyError",
    "EmptySubjectError",
    "MDConfError",
    "NotFoundError",
    "ReadError",
    "Section",
    "add_section",
    "add_section_local",
    "dump",
    "dump_async",
    "load",
    "load_async",
    "lookup_section",
    "lookup_section_local",
    "lookup_value",
    "lookup_value_local",
    "parse",
    "parse_stream",
    "render",
    "set_value",
    "set_value_local",
]
