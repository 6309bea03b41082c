# scalargrad/ops/arithmetic.py
import numbers
import numpy as np
from ..core.var import Value
from ..core.node import Add, Mul, PowConst


def _as_value(x):
    """Ensure x is a Value; otherwise wrap it as a leaf."""
    return x if isinstance(x, Value) else Value(x)


def leaf(data, name=None):
    return Value(data, name=name)


def add(x, y):
    x, y = _as_value(x), _as_value(y)
    with np.errstate(all="ignore"):
        val = x.val + y.val
    return Value._from_op(val, Add(x, y))


def mul(x, y):
    x, y = _as_value(x), _as_value(y)
    with np.errstate(all="ignore"):
        val = x.val * y.val
    return Value._from_op(val, Mul(x, y))


def power(x, p):
    """
    Constant-exponent power: out.val = x.val ** p.

    Negative bases with non-integer `p` give NaN and 0 ** negative gives inf,
    as plain float64 arithmetic does; nothing is raised.
    """
    if isinstance(p, Value) or isinstance(p, bool) or not isinstance(p, numbers.Real):
        raise TypeError(f"power() takes a constant real exponent, got {type(p)}")
    x = _as_value(x)
    p = float(p)
    with np.errstate(all="ignore"):
        val = np.power(x.val, np.float64(p))
    return Value._from_op(val, PowConst(x, p))


# Derived operations: compositions over add/mul/power, no operation kinds of their own.

def sub(x, y):
    return add(x, mul(y, Value(-1.0)))


def neg(x):
    return mul(x, Value(-1.0))


def div(x, y):
    return mul(x, power(y, -1.0))


multiply = mul
subtract = sub
