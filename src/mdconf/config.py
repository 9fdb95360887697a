"""Local configuration for mdconf."""

from __future__ import annotations

import os


DEFAULT_ENCODING = "utf-8"
DEFAULT_STRICT_READS = True

# Text encoding used by the file helpers.
MDCONF_ENCODING = os.getenv("MDCONF_ENCODING", DEFAULT_ENCODING)
# When false, a failed read ends the parse as if the input had ended.
MDCONF_STRICT_READS = os.getenv("MDCONF_STRICT_READS", "1" if DEFAULT_STRICT_READS else "0").lower() not in {
    "0",
    "false",
    "no",
    "off",
}
