"""
Single tanh neuron: o = tanh(x1*w1 + x2*w2 + b), with gradients of o
w.r.t. every input and weight.
"""

import argparse
import logging

from scalargrad import Value, graph_summary


def parse_args():
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description='Forward and backward pass through one tanh neuron',
        formatter_class=argparse.ArgumentDefaultsHelpFormatter
    )
    parser.add_argument('--label', type=str, default='loss',
                        help='Gradient label to compute under')
    parser.add_argument('--graph', action='store_true',
                        help='Print the computation graph summary')
    parser.add_argument('--verbose', action='store_true',
                        help='Enable engine debug logging')
    return parser.parse_args()


def main():
    args = parse_args()
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    x1 = Value(2.0, name="x1")
    x2 = Value(0.0, name="x2")
    w1 = Value(-3.0, name="w1")
    w2 = Value(1.0, name="w2")
    b = Value(6.881373587019, name="b")

    n = x1 * w1 + x2 * w2 + b
    o = n.tanh()

    print(f"o = {o.eval():.16f}")
    o.compute_gradient(args.label)

    for name, node in [("o", o), ("n", n), ("x1", x1), ("x2", x2), ("w1", w1), ("w2", w2)]:
        print(f"d o / d {name:2s} = {node.grad(args.label): .6f}")

    if args.graph:
        print(graph_summary(o, detailed=True))


if __name__ == "__main__":
    main()
