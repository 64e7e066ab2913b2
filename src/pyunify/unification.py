from __future__ import annotations

import logging
from typing import Dict, Optional

from .nodes import Compound, Constant, Term, Variable
from .printer import print_term
from .visitors import Transformer

logger = logging.getLogger(__name__)

# Substitution maps a variable name to the term it is bound to
Substitution = Dict[str, Term]


def unify(t1: Term, t2: Term) -> Optional[Substitution]:
    """Compute the most general unifier of two terms.

    Returns the bindings on success and None when the terms do not unify.
    Bindings made before a failure are never handed back.
    """
    working: Substitution = {}
    if not _try_unify(t1, t2, working):
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(f"no unifier for {print_term(t1)} ~ {print_term(t2)}")
        return None
    return working


def substitute(term: Term, sub: Substitution) -> Term:
    """Copy `term` with every bound variable replaced by its resolved value.

    Variable chains are followed until an unbound variable or a non-variable
    term is reached. Unbound variables are copied unchanged.
    """

    def resolve(leaf: Term) -> Term:
        match leaf:
            case Variable(name=name) if name in sub:
                return substitute(sub[name], sub)
            case _:
                return leaf.clone()

    return Transformer(resolve).transform(term)


def occurs(name: str, term: Term, sub: Substitution) -> bool:
    """True if variable `name` appears in `term`, looking through bindings."""
    match term:
        case Variable(name=other):
            if other == name:
                return True
            if other in sub:
                return occurs(name, sub[other], sub)
            return False
        case Constant():
            return False
        case Compound(args=args):
            return any(occurs(name, a, sub) for a in args)


def _try_unify(a: Term, b: Term, working: Substitution) -> bool:
    # compare the current most-resolved shapes of both sides
    lhs = substitute(a, working)
    rhs = substitute(b, working)
    match lhs, rhs:
        case Variable(name=left), Variable(name=right):
            if left == right:
                return True
            first, second = (left, right) if left < right else (right, left)
            working[first] = Variable(second)
            logger.debug(f"bind {first} -> {second}")
            return True
        case Variable(), _:
            return _bind(lhs, rhs, working)
        case _, Variable():
            return _bind(rhs, lhs, working)
        case Constant(value=left), Constant(value=right):
            if left != right:
                logger.debug(f"constant mismatch: {left} vs {right}")
                return False
            return True
        case Compound(), Compound():
            if lhs.functor != rhs.functor or lhs.arity != rhs.arity:
                logger.debug(
                    f"functor mismatch: {lhs.functor}/{lhs.arity} vs {rhs.functor}/{rhs.arity}"
                )
                return False
            for x, y in zip(lhs.args, rhs.args):
                if not _try_unify(x, y, working):
                    return False
            return True
        case _:
            if logger.isEnabledFor(logging.DEBUG):
                logger.debug(f"shape mismatch: {print_term(lhs)} vs {print_term(rhs)}")
            return False


def _bind(v: Variable, term: Term, working: Substitution) -> bool:
    if occurs(v.name, term, working):
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(f"occurs check: {v.name} in {print_term(term)}")
        return False
    working[v.name] = substitute(term, working)
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(f"bind {v.name} -> {print_term(working[v.name])}")
    return True


class Unifier:
    """Stateless entry point bundling `unify` and `substitute`."""

    def unify(self, t1: Term, t2: Term) -> Optional[Substitution]:
        return unify(t1, t2)

    def substitute(self, term: Term, sub: Substitution) -> Term:
        return substitute(term, sub)
