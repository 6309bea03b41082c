# scalargrad/__init__.py
# Reverse-mode automatic differentiation over scalar values

import logging

from .core.var import Value
from .core.engine import (
    compute_gradient,
    count_dependencies,
    propagate,
    zero_gradients,
)
from .core.errors import (
    ScalarGradError,
    GradientNotFoundError,
    LabelReuseError,
    GradientInvariantError,
)
from .core.seeds import grad, grads, value, value_and_grad, check_gradient
from .core.graph_utils import iter_nodes, get_graph_stats, graph_summary
from .config import GradCheckConfig

# Operations
from .ops import (
    leaf, add, sub, mul, div, neg, power, multiply, subtract, exp, tanh,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    # Core
    'Value',
    # Engine
    'compute_gradient',
    'count_dependencies',
    'propagate',
    'zero_gradients',
    # Errors
    'ScalarGradError',
    'GradientNotFoundError',
    'LabelReuseError',
    'GradientInvariantError',
    # Helpers
    'grad',
    'grads',
    'value',
    'value_and_grad',
    'check_gradient',
    'GradCheckConfig',
    'iter_nodes',
    'get_graph_stats',
    'graph_summary',
    # Operations
    'leaf', 'add', 'sub', 'mul', 'div', 'neg', 'power',
    'multiply', 'subtract', 'exp', 'tanh',
]
