from __future__ import annotations

from typing import Mapping, Optional

from .nodes import Term, Variable, Constant, Compound


def print_outcome(result: Optional[Mapping[str, Term]]) -> str:
    if result is None:
        return "failure"
    return f"success => {print_substitution(result)}"


def print_substitution(sub: Mapping[str, Term]) -> str:
    pairs = ", ".join(f"{name} -> {print_term(sub[name])}" for name in sorted(sub))
    return f"{{{pairs}}}"


def print_term(t: Term) -> str:
    match t:
        case Variable():
            return t.name
        case Constant():
            return t.value
        case Compound():
            args = ", ".join(print_term(a) for a in t.args)
            return f"{t.functor}({args})"
