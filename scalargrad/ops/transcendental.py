# scalargrad/ops/transcendental.py
import numpy as np
from ..core.var import Value
from ..core.node import Exp
from .arithmetic import _as_value, add, mul, power, sub


def exp(x):
    x = _as_value(x)
    with np.errstate(all="ignore"):
        ex = np.exp(x.val)
    return Value._from_op(ex, Exp(x))


def tanh(x):
    """
    tanh(x) = (e^{2x} - 1) / (e^{2x} + 1), built from exp/add/mul/power.

    e^{2x} is a single node consumed twice, so its gradient is summed from
    both paths before it flows back into x.
    """
    e2x = exp(mul(x, 2.0))
    return mul(sub(e2x, 1.0), power(add(e2x, 1.0), -1.0))
