# scalargrad/core/var.py
from __future__ import annotations
import numbers
import numpy as np
from typing import Dict, Optional

from .errors import GradientNotFoundError
from .node import GradEntry, Leaf, Operation


class Value:
    """
    One scalar node of the computation graph.

    Attributes
    ----------
    operation : Operation
        Provenance: Leaf, or the operation (with operand Values) that produced it.
    gradients : dict[str, GradEntry]
        Per-label accumulator and pending dependency count. Only the gradient
        engine mutates it.
    name : Optional[str]
        Optional debug/pretty-print name.

    The forward value is computed once, at construction, and never changes.
    """

    __slots__ = ("_val", "operation", "gradients", "name")

    def __init__(self, data, *, name: Optional[str] = None):
        # Only real numeric scalars make a leaf
        if isinstance(data, bool) or not isinstance(data, numbers.Real):
            raise TypeError(
                f"Value only accepts real numeric scalars, but got {type(data)}"
            )
        self._val = np.float64(data)
        self.operation: Operation = Leaf()
        self.gradients: Dict[str, GradEntry] = {}
        self.name = name

    @classmethod
    def _from_op(cls, val, operation: Operation) -> "Value":
        """Build a derived node around an already-computed forward value."""
        out = cls.__new__(cls)
        out._val = np.float64(val)
        out.operation = operation
        out.gradients = {}
        out.name = None
        return out

    @property
    def val(self) -> np.float64:
        """Forward (primal) value."""
        return self._val

    def eval(self) -> float:
        return float(self._val)

    @property
    def is_leaf(self) -> bool:
        return isinstance(self.operation, Leaf)

    def has_gradient(self, label: str) -> bool:
        return label in self.gradients

    def grad(self, label: str) -> float:
        """Accumulated d(root)/d(self) for a previously computed `label`."""
        try:
            return float(self.gradients[label].value)
        except KeyError:
            raise GradientNotFoundError(label, self) from None

    def compute_gradient(self, label: str) -> None:
        from .engine import compute_gradient
        compute_gradient(self, label)

    def __repr__(self):
        return f"Value({float(self._val)!r}, op={self.operation.tag}, name={self.name!r})"

    # Operator overloading for arithmetic operations
    def __add__(self, other):
        from ..ops.arithmetic import add
        return add(self, other)

    def __radd__(self, other):
        from ..ops.arithmetic import add
        return add(other, self)

    def __sub__(self, other):
        from ..ops.arithmetic import sub
        return sub(self, other)

    def __rsub__(self, other):
        from ..ops.arithmetic import sub
        return sub(other, self)

    def __mul__(self, other):
        from ..ops.arithmetic import mul
        return mul(self, other)

    def __rmul__(self, other):
        from ..ops.arithmetic import mul
        return mul(other, self)

    def __truediv__(self, other):
        from ..ops.arithmetic import div
        return div(self, other)

    def __rtruediv__(self, other):
        from ..ops.arithmetic import div
        return div(other, self)

    def __neg__(self):
        from ..ops.arithmetic import neg
        return neg(self)

    def __pow__(self, exponent):
        from ..ops.arithmetic import power
        return power(self, exponent)

    def exp(self):
        from ..ops.transcendental import exp
        return exp(self)

    def tanh(self):
        from ..ops.transcendental import tanh
        return tanh(self)
