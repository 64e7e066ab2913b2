from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple, Union


class ContractViolation(IndexError):
    """Raised when a caller indexes a compound outside its arguments."""


@dataclass(frozen=True, slots=True)
class Variable:
    name: str

    def is_variable(self) -> bool:
        return True

    def is_constant(self) -> bool:
        return False

    def is_compound(self) -> bool:
        return False

    def clone(self) -> Variable:
        return Variable(self.name)


@dataclass(frozen=True, slots=True)
class Constant:
    value: str

    def is_variable(self) -> bool:
        return False

    def is_constant(self) -> bool:
        return True

    def is_compound(self) -> bool:
        return False

    def clone(self) -> Constant:
        return Constant(self.value)


@dataclass(frozen=True, slots=True)
class Compound:
    functor: str
    args: Tuple[Term, ...] = ()

    def __post_init__(self) -> None:
        # accept any sequence of children but store it immutably
        if not isinstance(self.args, tuple):
            object.__setattr__(self, "args", tuple(self.args))

    @property
    def arity(self) -> int:
        return len(self.args)

    def arg(self, index: int) -> Term:
        if not 0 <= index < len(self.args):
            raise ContractViolation(
                f"argument index {index} out of range for '{self.functor}/{self.arity}'"
            )
        return self.args[index]

    def is_variable(self) -> bool:
        return False

    def is_constant(self) -> bool:
        return False

    def is_compound(self) -> bool:
        return True

    def clone(self) -> Compound:
        return Compound(self.functor, tuple(a.clone() for a in self.args))


# Term is a union of concrete term node types
Term = Union[Variable, Constant, Compound]

# Ergonomic factories for strict construction

def var(name: str) -> Variable:
    return Variable(name)


def const(value: str) -> Constant:
    return Constant(value)


def compound(functor: str, *args: Term) -> Compound:
    return Compound(functor=functor, args=tuple(args))
