"""Command-line access to MDConf files."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from mdconf.exceptions import MDConfError
from mdconf.files import dump, load
from mdconf.render import render

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    """Run the mdconf command and return its exit status."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        return args.handler(args)
    except MDConfError as exc:
        print(f"mdconf: {exc}", file=sys.stderr)
        return 1
    except OSError as exc:
        print(f"mdconf: {exc}", file=sys.stderr)
        return 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="mdconf", description="Query and edit MDConf configuration files.")
    parser.add_argument("--verbose", action="store_true", help="Log parser activity to stderr")
    commands = parser.add_subparsers(dest="command", required=True)

    get = commands.add_parser("get", help="Print the value at a path")
    get.add_argument("file", type=Path)
    get.add_argument("names", nargs="+", metavar="NAME", help="Section names followed by a key")
    get.set_defaults(handler=_cmd_get)

    sections = commands.add_parser("sections", help="List the child sections at a path")
    sections.add_argument("file", type=Path)
    sections.add_argument("names", nargs="*", metavar="NAME", help="Section names")
    sections.set_defaults(handler=_cmd_sections)

    set_ = commands.add_parser("set", help="Set the value at a path and rewrite the file")
    set_.add_argument("file", type=Path)
    set_.add_argument("names", nargs="+", metavar="NAME", help="Section names followed by a key")
    set_.add_argument("value")
    set_.set_defaults(handler=_cmd_set)

    fmt = commands.add_parser("fmt", help="Re-render a file")
    fmt.add_argument("file", type=Path)
    fmt.add_argument("--in-place", action="store_true", help="Rewrite the file instead of printing")
    fmt.set_defaults(handler=_cmd_fmt)

    return parser


def _cmd_get(args: argparse.Namespace) -> int:
    root = load(args.file)
    print(root.lookup_value(args.names))
    return 0


def _cmd_sections(args: argparse.Namespace) -> int:
    root = load(args.file)
    for child in root.lookup_section(args.names).children or ():
        print(child.name)
    return 0


def _cmd_set(args: argparse.Namespace) -> int:
    root = load(args.file)
    root.set_value(args.names, args.value)
    dump(root, args.file)
    logger.info("Updated %s in %s", "/".join(args.names), args.file)
    return 0


def _cmd_fmt(args: argparse.Namespace) -> int:
    root = load(args.file)
    if args.in_place:
        dump(root, args.file)
    else:
        sys.stdout.write(render(root))
    return 0
