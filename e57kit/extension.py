"""Extensions that namespace custom point record attributes."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, eq=False)
class Extension:
    """An E57 extension, identified by its name and described by a URL.

    Two extensions are equal when their names are equal; the URL is ignored.
    """

    name: str
    url: str

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Extension):
            return NotImplemented
        return self.name == other.name

    def __hash__(self) -> int:
        return hash(self.name)

    @classmethod
    def from_prototype(cls, prototype: Iterable[Any]) -> list[Extension]:
        """Collect the distinct extensions used by the record names of a prototype.

        A record refers to an extension when its ``name`` carries an
        ``extension`` attribute holding an :class:`Extension`.  The result
        keeps the order in which extensions are first seen.
        """
        found: dict[Extension, None] = {}
        for record in prototype:
            extension = getattr(getattr(record, "name", None), "extension", None)
            if isinstance(extension, Extension) and extension not in found:
                found[extension] = None
        return list(found)