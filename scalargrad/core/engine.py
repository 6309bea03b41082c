# scalargrad/core/engine.py
from __future__ import annotations
import logging
import numpy as np
from typing import List, Optional

from .errors import GradientInvariantError, LabelReuseError
from .graph_utils import iter_nodes
from .node import Add, Exp, GradEntry, Leaf, Mul, PowConst
from .var import Value

logger = logging.getLogger(__name__)


def count_dependencies(root: Value, label: str) -> int:
    """
    Pass 1: for `label`, set every reachable node's pending count to its
    in-degree within the subgraph reachable from `root`.

    A node's operands are visited once, on first discovery, but every operand
    slot pointing at a node adds one to its count. The root gets one count for
    the seed delivered by `propagate`.

    Raises LabelReuseError if `root` already holds `label`; counting twice
    would leave counts that never reach zero.

    Returns the number of nodes newly discovered.
    """
    if label in root.gradients:
        raise LabelReuseError(
            f"label {label!r} already counted on {root!r}; zero it with zero_gradients() first"
        )
    discovered = 0
    stack: List[Value] = []

    def visit(node: Value) -> None:
        nonlocal discovered
        entry = node.gradients.get(label)
        if entry is None:
            entry = node.gradients[label] = GradEntry()
            stack.append(node)
            discovered += 1
        entry.pending += 1

    visit(root)
    while stack:
        node = stack.pop()
        for operand in node.operation.operands:
            visit(operand)

    logger.debug("label %r: counted dependencies over %d nodes", label, discovered)
    return discovered


def _deliver(node: Value, label: str, contribution, ready: List[Value]) -> None:
    """Add one incoming contribution; queue `node` once all of them arrived."""
    entry = node.gradients.get(label)
    if entry is None:
        raise GradientInvariantError(
            f"{node!r} has no entry for label {label!r}; was count_dependencies skipped?"
        )
    if entry.pending <= 0:
        raise GradientInvariantError(
            f"{node!r} received more contributions for label {label!r} than counted"
        )
    entry.value += contribution
    entry.pending -= 1
    if entry.pending == 0:
        ready.append(node)


def propagate(root: Value, label: str, seed: float = 1.0) -> None:
    """
    Pass 2: push d(root)/d(root) = `seed` down the graph.

    A node applies its local chain-rule step only after its pending count
    reaches zero, i.e. once every consumer has contributed.

    After a GradientInvariantError the stored values for `label` are partly
    updated; clear them with `zero_gradients(root, label)` before reusing it.
    """
    ready: List[Value] = []
    with np.errstate(all="ignore"):
        _deliver(root, label, np.float64(seed), ready)
        if not ready:
            raise GradientInvariantError(
                f"{root!r} still expects {root.gradients[label].pending} contributions "
                f"for label {label!r} after the seed; was count_dependencies run twice?"
            )
        while ready:
            node = ready.pop()
            g = node.gradients[label].value
            op = node.operation
            if isinstance(op, Leaf):
                continue
            elif isinstance(op, Add):
                _deliver(op.a, label, g, ready)
                _deliver(op.b, label, g, ready)
            elif isinstance(op, Mul):
                _deliver(op.a, label, g * op.b.val, ready)
                _deliver(op.b, label, g * op.a.val, ready)
            elif isinstance(op, Exp):
                _deliver(op.a, label, g * node.val, ready)
            elif isinstance(op, PowConst):
                p = np.float64(op.exponent)
                _deliver(op.a, label, g * p * np.power(op.a.val, p - 1.0), ready)
            else:
                raise GradientInvariantError(f"unknown operation {op!r}")
    logger.debug("label %r: propagation from %r complete", label, root)


def compute_gradient(root: Value, label: str) -> None:
    """
    Compute d(root)/d(node) for every node reachable from `root`, stored
    under `label` (read back with `node.grad(label)`).

    Labels are single use: if any reachable node already holds `label`,
    LabelReuseError is raised and nothing is modified. Call
    `zero_gradients(root, label)` first to reuse a label.
    """
    for node in iter_nodes(root):
        if label in node.gradients:
            raise LabelReuseError(
                f"label {label!r} already computed on {node!r}; "
                f"zero it with zero_gradients() or pick a new label"
            )
    count_dependencies(root, label)
    propagate(root, label)


def zero_gradients(root: Value, label: Optional[str] = None) -> None:
    """
    Drop the gradient state for `label` (every label if None) from all nodes
    reachable from `root`.
    """
    for node in iter_nodes(root):
        if label is None:
            node.gradients.clear()
        else:
            node.gradients.pop(label, None)
