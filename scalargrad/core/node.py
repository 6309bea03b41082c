# scalargrad/core/node.py
from dataclasses import dataclass
from typing import Any, Tuple, Union


@dataclass(frozen=True)
class Leaf:
    """A value supplied by the caller; no operands."""
    tag = "leaf"

    @property
    def operands(self) -> Tuple[Any, ...]:
        return ()


@dataclass(frozen=True, eq=False)
class Add:
    a: Any
    b: Any
    tag = "add"

    @property
    def operands(self) -> Tuple[Any, ...]:
        return (self.a, self.b)


@dataclass(frozen=True, eq=False)
class Mul:
    a: Any
    b: Any
    tag = "mul"

    @property
    def operands(self) -> Tuple[Any, ...]:
        return (self.a, self.b)


@dataclass(frozen=True, eq=False)
class Exp:
    a: Any
    tag = "exp"

    @property
    def operands(self) -> Tuple[Any, ...]:
        return (self.a,)


@dataclass(frozen=True, eq=False)
class PowConst:
    """Power with a constant exponent; the exponent is not differentiated."""
    a: Any
    exponent: float
    tag = "pow"

    @property
    def operands(self) -> Tuple[Any, ...]:
        return (self.a,)


# Closed set of operation kinds. `operands` has one entry per operand slot,
# so Mul(x, x) yields (x, x) and counts as two edges into x.
Operation = Union[Leaf, Add, Mul, Exp, PowConst]


@dataclass
class GradEntry:
    """
    Per-label bookkeeping stored on a node.

    Attributes
    ----------
    value   : float
        Accumulated gradient of the root w.r.t. this node.
    pending : int
        Incoming contributions still to arrive before `value` is complete.
    """
    value: float = 0.0
    pending: int = 0
