# scalargrad/core/seeds.py

#-----------------------------------------------------------------------------
# We "plant" a seed (dy/dy = 1) at the scalar output and let gradients grow
# backwards through the graph. Functions may close over Values built outside
# the helper (weights), so the working label is cleared from the graph once the
# results are read.
#-----------------------------------------------------------------------------
from __future__ import annotations
import logging
from typing import Any, Callable, Dict, Optional, Tuple

import numpy as np

from ..config import GradCheckConfig
from .engine import compute_gradient, zero_gradients
from .var import Value

logger = logging.getLogger(__name__)

_LABEL = "grad"


def value(x: Any) -> Any:
    """Return the forward value of a Value; pass through plain numbers unchanged."""
    return x.eval() if isinstance(x, Value) else x


def _ensure_value(v: Any, *, name: str) -> Value:
    return v if isinstance(v, Value) else Value(v, name=name)


def _as_output(y: Any) -> Value:
    # A function that ignores its input may return a plain number
    return y if isinstance(y, Value) else Value(y, name="y")


def value_and_grad(f: Callable[[Value], Value], x0: float) -> Tuple[float, float]:
    """Return (f(x0), f'(x0)) for a scalar function of one Value."""
    x = _ensure_value(x0, name="x")
    y = _as_output(f(x))
    compute_gradient(y, _LABEL)
    try:
        # x is not in y's graph when f ignores its input
        dx = x.grad(_LABEL) if x.has_gradient(_LABEL) else 0.0
    finally:
        zero_gradients(y, _LABEL)
    return y.eval(), dx


def grad(f: Callable[[Value], Value], x0: float) -> float:
    """Derivative of y = f(x) at x0 (single input)."""
    return value_and_grad(f, x0)[1]


def grads(f: Callable[[Dict[str, Value]], Value],
          inputs: Dict[str, float]) -> Dict[str, float]:
    """
    Partials of y = f(vars) w.r.t. ALL inputs, from ONE backward pass.

    Example
    -------
    grads(lambda v: v["a"] * v["b"], {"a": 2.0, "b": 3.0}) -> {"a": 3.0, "b": 2.0}
    """
    vars_v: Dict[str, Value] = {k: _ensure_value(v, name=k) for k, v in inputs.items()}
    y = _as_output(f(vars_v))
    compute_gradient(y, _LABEL)
    try:
        return {
            k: (x.grad(_LABEL) if x.has_gradient(_LABEL) else 0.0)
            for k, x in vars_v.items()
        }
    finally:
        zero_gradients(y, _LABEL)


def check_gradient(f: Callable[[Value], Value], x0: float,
                   config: Optional[GradCheckConfig] = None) -> bool:
    """
    Compare the reverse-mode derivative of f at x0 against the central
    difference (f(x0 + eps) - f(x0 - eps)) / (2 eps).
    """
    config = config or GradCheckConfig()
    analytic = grad(f, x0)
    eps = config.eps
    x = value(x0)
    numeric = (value(f(Value(x + eps))) - value(f(Value(x - eps)))) / (2.0 * eps)
    ok = bool(np.isclose(analytic, numeric, rtol=config.rtol, atol=config.atol))
    if not ok:
        logger.warning(
            "gradient check failed at x0=%r: analytic=%r numeric=%r", x0, analytic, numeric
        )
    return ok
