# scalargrad/core/graph_utils.py
"""
Graph walking and inspection helpers.

Walks the DAG reachable from a root Value through its operation operands.
"""

import numpy as np
from typing import Dict, Iterator
from collections import Counter

from .var import Value


def iter_nodes(root: Value) -> Iterator[Value]:
    """
    Yield every node reachable from `root` exactly once, operands before the
    nodes that consume them (the root comes last).

    Iterative, so graph depth is not bounded by the recursion limit.
    """
    seen = set()
    stack = [(root, False)]
    while stack:
        node, expanded = stack.pop()
        if expanded:
            yield node
            continue
        if id(node) in seen:
            continue
        seen.add(id(node))
        stack.append((node, True))
        for operand in reversed(node.operation.operands):
            if id(operand) not in seen:
                stack.append((operand, False))


def get_graph_stats(root: Value) -> Dict:
    """
    Collect graph statistics for the subgraph reachable from `root`.

    Fan-out counts operand slots, so x*x contributes two edges out of x.

    Returns
    -------
    dict with keys nodes, edges, leaves, max_fan_out, avg_fan_out, operations
    """
    nodes = list(iter_nodes(root))
    fan_outs = Counter()
    for node in nodes:
        for operand in node.operation.operands:
            fan_outs[id(operand)] += 1

    counts = [fan_outs[id(node)] for node in nodes]
    op_counter = Counter(node.operation.tag for node in nodes)

    return {
        'nodes': len(nodes),
        'edges': sum(counts),
        'leaves': op_counter.get('leaf', 0),
        'max_fan_out': max(counts),
        'avg_fan_out': float(np.mean(counts)),
        'operations': dict(op_counter),
    }


def graph_summary(root: Value, detailed: bool = False) -> str:
    """
    Text report of the graph reachable from `root`.

    With `detailed`, lists up to the first 100 nodes in evaluation order.
    """
    stats = get_graph_stats(root)
    lines = [
        "=" * 70,
        "COMPUTATION GRAPH SUMMARY",
        "=" * 70,
        f"Total nodes:        {stats['nodes']:,}",
        f"Total edges:        {stats['edges']:,}",
        f"Leaves:             {stats['leaves']:,}",
        f"Max fan-out:        {stats['max_fan_out']}",
        f"Avg fan-out:        {stats['avg_fan_out']:.2f}",
        "",
        "Operation breakdown:",
    ]
    for tag, count in Counter(stats['operations']).most_common():
        pct = 100.0 * count / stats['nodes']
        lines.append(f"  {tag:12s}: {count:6,} ({pct:5.1f}%)")

    if detailed:
        lines += ["", "=" * 70, "DETAILED NODE LIST (first 100 nodes)", "=" * 70]
        nodes = list(iter_nodes(root))
        index = {id(node): i for i, node in enumerate(nodes)}
        for i, node in enumerate(nodes[:100]):
            if node.is_leaf:
                label = node.name or "leaf/input"
                lines.append(f"Node {i:4d}: {'leaf':12s} ({node.eval():10.6f}) [{label}]")
            else:
                parent_info = ", ".join(f"Node{index[id(p)]}" for p in node.operation.operands)
                lines.append(
                    f"Node {i:4d}: {node.operation.tag:12s} ({node.eval():10.6f}) <- [{parent_info}]"
                )
        if len(nodes) > 100:
            lines.append(f"... ({len(nodes) - 100} more nodes)")

    lines.append("=" * 70)
    return "\n".join(lines)
