from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True, slots=True)
class Position:
    """Location of a subterm inside a term tree.

    The path lists the argument index taken at each compound on the way down
    from the root. The empty path is the root itself.
    """

    path: Tuple[int, ...] = ()

    def __post_init__(self) -> None:
        if any(i < 0 for i in self.path):
            raise ValueError("invalid position path")

    @property
    def depth(self) -> int:
        return len(self.path)

    def child(self, index: int) -> Position:
        return Position((*self.path, index))

    def __str__(self) -> str:  # debug-friendly
        if not self.path:
            return "<root>"
        return ".".join(str(i) for i in self.path)
