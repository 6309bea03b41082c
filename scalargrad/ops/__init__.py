# scalargrad/ops/__init__.py

# Convenience re-exports so users can do: from scalargrad.ops import mul, exp, ...
from .arithmetic import leaf, add, sub, mul, div, neg, power, multiply, subtract
from .transcendental import exp, tanh

__all__ = [
    "leaf",
    "add", "sub", "mul", "div", "neg", "power",
    "multiply", "subtract",
    "exp", "tanh",
]
