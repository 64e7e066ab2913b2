from __future__ import annotations

from typing import Callable, List, Optional

from .nodes import Compound, Constant, ContractViolation, Term, Variable
from .positions import Position


class Visitor:
    """Composition-based visitor using structural pattern matching.

    - Calls `term_cb` for every subterm (pre-order), together with its position
    - Arguments of a compound are visited left to right
    """

    def __init__(self, term_cb: Callable[[Term, Position], None]) -> None:
        self._term_cb = term_cb

    def visit(self, term: Term, position: Optional[Position] = None) -> None:
        if position is None:
            position = Position()
        self._term_cb(term, position)
        match term:
            case Compound(args=args):
                for i, a in enumerate(args):
                    self.visit(a, position.child(i))
            case Variable() | Constant():
                return


class Transformer:
    """Composition-based transformer using structural pattern matching.

    - Transforms compound children first (post-order) and rebuilds the compound
    - Leaves (variables and constants) go through `leaf_fn`
    - Rebuilt compounds go through `compound_fn` when given
    """

    def __init__(
        self,
        leaf_fn: Callable[[Term], Term],
        compound_fn: Optional[Callable[[Compound], Term]] = None,
    ) -> None:
        self._leaf_fn = leaf_fn
        self._compound_fn = compound_fn

    def transform(self, term: Term) -> Term:
        match term:
            case Compound(functor=functor, args=args):
                node = Compound(functor, tuple(self.transform(a) for a in args))
                if self._compound_fn is not None:
                    return self._compound_fn(node)
                return node
            case Variable() | Constant():
                return self._leaf_fn(term)


def variables(term: Term) -> List[str]:
    """Distinct variable names of `term` in first-seen, left-to-right order."""
    seen: List[str] = []

    def collect(t: Term, _: Position) -> None:
        if isinstance(t, Variable) and t.name not in seen:
            seen.append(t.name)

    Visitor(collect).visit(term)
    return seen


def is_ground(term: Term) -> bool:
    return not variables(term)


def subterm_at(term: Term, position: Position) -> Term:
    current = term
    for depth, index in enumerate(position.path):
        match current:
            case Compound():
                current = current.arg(index)
            case _:
                raise ContractViolation(
                    f"position {position} leaves the term at depth {depth}"
                )
    return current
