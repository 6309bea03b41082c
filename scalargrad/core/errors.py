# scalargrad/core/errors.py
"""
Exception taxonomy for the gradient engine.

Missing lookups and label reuse are ordinary, recoverable errors. A broken
bookkeeping invariant during propagation is a caller protocol violation and is
raised as an AssertionError subclass so it is never mistaken for a data error.
"""


class ScalarGradError(Exception):
    """Base class for all scalargrad errors."""


class GradientNotFoundError(ScalarGradError, KeyError):
    """No gradient was computed for this label on this node."""

    def __init__(self, label: str, node=None):
        self.label = label
        self.node = node
        super().__init__(label)

    def __str__(self):
        where = f" on {self.node!r}" if self.node is not None else ""
        return f"no gradient computed for label {self.label!r}{where}"


class LabelReuseError(ScalarGradError, ValueError):
    """The label already holds gradient state somewhere in the graph."""


class GradientInvariantError(ScalarGradError, AssertionError):
    """Dependency bookkeeping is inconsistent (counting pass skipped or corrupted)."""
