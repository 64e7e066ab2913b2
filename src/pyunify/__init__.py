"""pyunify: first-order term unification with occurs check."""

from .nodes import (
    Term,
    Variable,
    Constant,
    Compound,
    ContractViolation,
    var,
    const,
    compound,
)
from .positions import Position
from .printer import print_term, print_substitution, print_outcome
from .unification import Substitution, Unifier, unify, substitute, occurs
from .visitors import Visitor, Transformer, variables, is_ground, subterm_at
from .diagnostics import Diagnostic, Related, Severity, format_diagnostic
from .validation import validate
__all__ = [
    "Term",
    "Variable",
    "Constant",
    "Compound",
    "ContractViolation",
    "var",
    "const",
    "compound",
    "Position",
    "print_term",
    "print_substitution",
    "print_outcome",
    "Substitution",
    "Unifier",
    "unify",
    "substitute",
    "occurs",
    "Visitor",
    "Transformer",
    "variables",
    "is_ground",
    "subterm_at",
    "Diagnostic",
    "Related",
    "Severity",
    "format_diagnostic",
    "validate",
]
