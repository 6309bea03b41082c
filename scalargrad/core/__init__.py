# scalargrad/core/__init__.py

"""
Core public API for scalargrad.

Exports:
    Value              : One scalar node of the computation graph.
    compute_gradient   : Count dependencies, then propagate d(root)/d(node) under a label.
    count_dependencies : Pass 1 alone.
    propagate          : Pass 2 alone (requires pass 1 for the same label).
    zero_gradients     : Drop gradient state for a label so it can be reused.
    grad, grads        : Convenience: derivative(s) of a scalar function.
    value              : Convenience: forward value of a Value.
"""

from .var import Value
from .node import Operation, Leaf, Add, Mul, Exp, PowConst, GradEntry
from .engine import compute_gradient, count_dependencies, propagate, zero_gradients
from .errors import (
    ScalarGradError,
    GradientNotFoundError,
    LabelReuseError,
    GradientInvariantError,
)
from .seeds import grad, grads, value, value_and_grad, check_gradient
from .graph_utils import iter_nodes, get_graph_stats, graph_summary

__all__ = [
    "Value",
    "Operation", "Leaf", "Add", "Mul", "Exp", "PowConst", "GradEntry",
    "compute_gradient", "count_dependencies", "propagate", "zero_gradients",
    "ScalarGradError", "GradientNotFoundError", "LabelReuseError", "GradientInvariantError",
    "grad", "grads", "value", "value_and_grad", "check_gradient",
    "iter_nodes", "get_graph_stats", "graph_summary",
]
