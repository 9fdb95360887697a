"""Module entry point for running with python -m mdconf."""

import sys

from mdconf.cli import main

if __name__ == "__main__":
    sys.exit(main())
