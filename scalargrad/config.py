"""
Finite-difference gradient-check settings.

Defaults: central difference with eps = 1e-5, accepted within 1e-4.
"""

import os
from dataclasses import dataclass


@dataclass(frozen=True)
class GradCheckConfig:
    """
    Settings for `check_gradient`.

    Attributes
    ----------
    eps  : half-width of the central difference step.
    atol : absolute tolerance between analytic and numeric derivative.
    rtol : relative tolerance (scaled by the numeric derivative).
    """
    eps: float = 1e-5
    atol: float = 1e-4
    rtol: float = 1e-4

    def __post_init__(self):
        if not self.eps > 0.0:
            raise ValueError(f"eps must be positive, got {self.eps}")
        if self.atol < 0.0 or self.rtol < 0.0:
            raise ValueError(f"tolerances must be non-negative, got atol={self.atol}, rtol={self.rtol}")

    @classmethod
    def from_env(cls, prefix: str = "SCALARGRAD_") -> "GradCheckConfig":
        """
        Build a config from environment overrides, e.g. SCALARGRAD_EPS=1e-6.
        Unset variables keep the defaults.
        """
        overrides = {}
        for field in ("eps", "atol", "rtol"):
            raw = os.environ.get(prefix + field.upper())
            if raw is not None:
                try:
                    overrides[field] = float(raw)
                except ValueError:
                    raise ValueError(f"{prefix + field.upper()}={raw!r} is not a number") from None
        return cls(**overrides)
