from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum, auto
from typing import Optional, Tuple

from .nodes import Term
from .positions import Position
from .printer import print_term


class Severity(Enum):
    ERROR = auto()
    WARNING = auto()


@dataclass(frozen=True, slots=True)
class Related:
    message: str
    position: Optional[Position]
    subterm: Optional[Term] = None


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """A finding about a caller-built term.

    `position` locates the offending subterm from the root of the validated
    term; `subterm` is the node found there, kept so the report can show it.
    """

    code: str
    message: str
    severity: Severity = Severity.ERROR
    position: Optional[Position] = None
    subterm: Optional[Term] = None
    related: Tuple[Related, ...] = ()

    @property
    def is_error(self) -> bool:
        return self.severity is Severity.ERROR

    def with_related(self, *rels: Related) -> Diagnostic:
        return replace(self, related=(*self.related, *rels))


def _locate(position: Optional[Position], subterm: Optional[Term]) -> str:
    parts = []
    if position is not None:
        parts.append(f" at {position}")
    if subterm is not None:
        parts.append(f" [{print_term(subterm)}]")
    return "".join(parts)


def format_diagnostic(d: Diagnostic) -> str:
    lines = [f"{d.severity.name}: {d.code}{_locate(d.position, d.subterm)}: {d.message}"]
    for r in d.related:
        lines.append(f"  note{_locate(r.position, r.subterm)}: {r.message}")
    return "\n".join(lines)
