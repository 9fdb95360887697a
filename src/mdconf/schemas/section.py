"""Section tree model."""

from __future__ import annotations

from typing import Sequence

from pydantic import BaseModel, Field

from mdconf.exceptions import EmptyKeyError, NotFoundError
from mdconf.render import render as render_section


class Section(BaseModel):
    """One header-delimited block of a configuration, or the implicit root.

    Attributes:
        level: Nesting depth. The root is level 0; a parsed header with N ``#``
            characters has level N.
        name: Header title, empty for the root.
        values: Key to value mapping, None until the first key is written.
        children: Child sections in document or creation order, None until the
            first child is added.
    """

    level: int = Field(default=0, ge=0)
    name: str = ""
    values: dict[str, str] | None = None
    children: list["Section"] | None = None

    @classmethod
    def root(cls) -> "Section":
        """Create an empty level-0 section with no name."""
        return cls(level=0, name="")

    def lookup_value_local(self, key: str) -> str:
        """Return the value of ``key`` in this section only."""
        if self.values is None or key not in self.values:
            raise NotFoundError(f"Key not found: {key!r}")
        return self.values[key]

    def lookup_value(self, path: Sequence[str]) -> str:
        """Descend ``path[:-1]`` as section names and look up ``path[-1]`` as a key."""
        if not path:
            raise EmptyKeyError("Key path is empty")
        return self._descend(path[:-1]).lookup_value_local(path[-1])

    def lookup_section_local(self, name: str) -> "Section":
        """Return the first direct child called ``name``."""
        for child in self.children or ():
            if child.name == name:
                return child
        raise NotFoundError(f"Section not found: {name!r}")

    def lookup_section(self, path: Sequence[str]) -> "Section":
        """Descend ``path`` as section names. An empty path returns this section."""
        return self._descend(path)

    def set_value_local(self, key: str, value: str) -> None:
        """Set ``key`` to ``value`` in this section, overwriting any prior value."""
        if self.values is None:
            self.values = {}
        self.values[key] = value

    def set_value(self, path: Sequence[str], value: str) -> None:
        """Set the key ``path[-1]`` in the existing section at ``path[:-1]``.

        Missing intermediate sections are not created.
        """
        if not path:
            raise EmptyKeyError("Key path is empty")
        self._descend(path[:-1]).set_value_local(path[-1], value)

    def add_section_local(self, name: str) -> "Section":
        """Return the child called ``name``, creating it one level deeper if absent."""
        if self.children is None:
            self.children = []
        for child in self.children:
            if child.name == name:
                return child
        child = Section(level=self.level + 1, name=name)
        self.children.append(child)
        return child

    def add_section(self, path: Sequence[str], name: str) -> "Section":
        """Create or get the child ``name`` under the existing section at ``path``."""
        return self._descend(path).add_section_local(name)

    def render(self) -> str:
        """Serialize this section and its subtree to text."""
        return render_section(self)

    def _descend(self, names: Sequence[str]) -> "Section":
        subject = self
        for name in names:
            subject = subject.lookup_section_local(name)
        return subject
