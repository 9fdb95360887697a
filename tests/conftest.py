"""Test setup for mdconf."""

from __future__ import annotations

import io
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


class FlakyStream(io.StringIO):
    """Text stream that fails with OSError once its contents are used up."""

    def readline(self, size: int = -1) -> str:  # type: ignore[override]
        line = super().readline(size)
        if not line:
            raise OSError("device went away")
        return line


@pytest.fixture
def flaky_stream() -> type[FlakyStream]:
    """Factory for streams that fail after their last line."""
    return FlakyStream


@pytest.fixture
def sample_text() -> str:
    """Document with root keys, nested sections, a comment, and empty values."""
    return """
+ key1: value1
+ key2: value2

# subsection1
+ key1.1: value1.1
+ key1.2: value1.2

## subsection1.1
+ key1.1.1: value1.1.1

# subsection2
//empty section
# subsection3
+ key3.1: value3.1
"""
