from __future__ import annotations

from typing import Dict, List, Tuple

from .diagnostics import Diagnostic, Related, Severity
from .nodes import Compound, Constant, Term, Variable
from .positions import Position
from .visitors import Visitor


def validate(term: Term) -> List[Diagnostic]:
    diags: List[Diagnostic] = []
    diags.extend(check_leaf_names(term))
    diags.extend(check_functor_consistency(term))
    return diags


def check_leaf_names(term: Term) -> List[Diagnostic]:
    diags: List[Diagnostic] = []

    def check(t: Term, pos: Position) -> None:
        match t:
            case Variable(name=name):
                if not name:
                    diags.append(Diagnostic(code="E100", message="variable name must be non-empty", position=pos, subterm=t))
                # Prolog convention: uppercase-first or anonymous
                elif not (name[0].isupper() or name[0] == "_"):
                    diags.append(Diagnostic(
                        code="W101",
                        message=f"variable '{name}' should start with an uppercase letter or '_'",
                        severity=Severity.WARNING,
                        position=pos,
                        subterm=t,
                    ))
            case Constant(value=value):
                # Constants are opaque strings; only warn on empty
                if value == "":
                    diags.append(Diagnostic(code="W110", message="empty constant string", severity=Severity.WARNING, position=pos, subterm=t))

    Visitor(check).visit(term)
    return diags


def check_functor_consistency(term: Term) -> List[Diagnostic]:
    diags: List[Diagnostic] = []
    seen: Dict[str, Tuple[Compound, Position]] = {}

    def check(t: Term, pos: Position) -> None:
        if not isinstance(t, Compound):
            return
        if not t.functor:
            diags.append(Diagnostic(code="E120", message="functor name must be non-empty", position=pos, subterm=t))
            return
        prev = seen.get(t.functor)
        if prev is None:
            seen[t.functor] = (t, pos)
        elif prev[0].arity != t.arity:
            diags.append(Diagnostic(
                code="W121",
                message=f"functor '{t.functor}' used with arity {t.arity}, previously {prev[0].arity}",
                severity=Severity.WARNING,
                position=pos,
                subterm=t,
            ).with_related(Related(f"'{t.functor}/{prev[0].arity}' first used here", prev[1], prev[0])))

    Visitor(check).visit(term)
    return diags
