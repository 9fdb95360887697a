"""Tests for file load and dump helpers."""

from __future__ import annotations

from pathlib import Path

import pytest

from mdconf.exceptions import ReadError
from mdconf.files import dump, dump_async, load, load_async
from mdconf.schemas import Section


def _tree() -> Section:
    root = Section.root()
    root.set_value_local("name", "demo")
    db = root.add_section_local("database")
    db.set_value_local("url", "postgres://localhost:5432/demo")
    db.set_value_local("banner", "multi\nline\nvalue")
    return root


class TestLoadDump:
    """Tests for synchronous load and dump."""

    def test_dump_then_load(self, tmp_path: Path) -> None:
        path = tmp_path / "app.mdconf"
        tree = _tree()

        dump(tree, path)
        loaded = load(path)

        assert loaded.model_dump() == tree.model_dump()

    def test_load_accepts_str_path(self, tmp_path: Path) -> None:
        path = tmp_path / "app.mdconf"
        path.write_text("# s\n+ k: v\n", encoding="utf-8")

        assert load(str(path)).lookup_value(["s", "k"]) == "v"

    def test_load_handles_crlf_files(self, tmp_path: Path) -> None:
        path = tmp_path / "app.mdconf"
        path.write_bytes(b"# s\r\n+ k: v\r\n+ j: w  \r\n")

        root = load(path)
        assert root.children[0].name == "s"
        assert root.lookup_section(["s"]).values == {"k": "v", "j": "w"}

    def test_carriage_returns_in_values_survive(self, tmp_path: Path) -> None:
        path = tmp_path / "app.mdconf"
        root = Section.root()
        root.set_value_local("k", "a\rb")
        root.set_value_local("tail", "a\r")
        root.set_value_local("j", "c")

        dump(root, path)

        assert load(path).values == {"k": "a\rb", "tail": "a\r", "j": "c"}

    def test_dump_overwrites(self, tmp_path: Path) -> None:
        path = tmp_path / "app.mdconf"
        path.write_text("+ old: 1\n", encoding="utf-8")

        dump(_tree(), path)

        assert "old" not in path.read_text(encoding="utf-8")

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            load(tmp_path / "missing.mdconf")

    def test_undecodable_file_is_a_read_error(self, tmp_path: Path) -> None:
        path = tmp_path / "bad.mdconf"
        path.write_bytes(b"+ k: v\n\xff\xfe\xfd\n")

        with pytest.raises(ReadError):
            load(path, strict=True)

    def test_undecodable_file_tolerated(self, tmp_path: Path) -> None:
        path = tmp_path / "bad.mdconf"
        path.write_bytes(b"+ k: v\n\xff\xfe\xfd\n")

        assert isinstance(load(path, strict=False), Section)

    def test_explicit_encoding(self, tmp_path: Path) -> None:
        path = tmp_path / "latin.mdconf"
        path.write_bytes("+ city: Zürich\n".encode("latin-1"))

        assert load(path, encoding="latin-1").lookup_value(["city"]) == "Zürich"


class TestAsyncHelpers:
    """Tests for async load and dump."""

    @pytest.mark.asyncio
    async def test_round_trip(self, tmp_path: Path) -> None:
        path = tmp_path / "app.mdconf"
        tree = _tree()

        await dump_async(tree, path)
        loaded = await load_async(path)

        assert loaded.model_dump() == tree.model_dump()

    @pytest.mark.asyncio
    async def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            await load_async(tmp_path / "missing.mdconf")
