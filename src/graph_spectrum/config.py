"""
Solver configuration.

A single frozen value object carries the numerical knobs shared by every
routine, so one calculator can be configured once and passed around.
"""

from __future__ import annotations

import time
from dataclasses import dataclass, replace
from typing import Any, Optional

from .validation import validate_iterations, validate_timeout, validate_tolerance

DEFAULT_TOLERANCE = 1e-10
DEFAULT_MAX_ITERATIONS = 1000
DEFAULT_CHAIN_ITERATIONS_4X4 = 200
DEFAULT_CHAIN_ITERATIONS = 100


@dataclass(frozen=True)
class ToleranceConfig:
    """
    Convergence settings.

    Attributes:
        tolerance: Convergence threshold for eigenvalue changes, subdiagonal
            entries and degenerate vector norms.
        max_iterations: Iteration cap for standalone power iteration and
            QR iteration.
        chain_iterations_4x4: Power-iteration cap for each step of the
            order-4 deflation chain.
        chain_iterations: Power-iteration cap for each step of the general
            deflation loop (order >= 5).
        timeout: Optional wall-clock budget in seconds for one
            calculation. None means only the iteration caps apply.
    """

    tolerance: float = DEFAULT_TOLERANCE
    max_iterations: int = DEFAULT_MAX_ITERATIONS
    chain_iterations_4x4: int = DEFAULT_CHAIN_ITERATIONS_4X4
    chain_iterations: int = DEFAULT_CHAIN_ITERATIONS
    timeout: Optional[float] = None

    def __post_init__(self) -> None:
        # frozen: normalise through object.__setattr__
        object.__setattr__(self, "tolerance", validate_tolerance(self.tolerance))
        object.__setattr__(
            self, "max_iterations", validate_iterations(self.max_iterations, "max_iterations")
        )
        object.__setattr__(
            self,
            "chain_iterations_4x4",
            validate_iterations(self.chain_iterations_4x4, "chain_iterations_4x4"),
        )
        object.__setattr__(
            self, "chain_iterations", validate_iterations(self.chain_iterations, "chain_iterations")
        )
        object.__setattr__(self, "timeout", validate_timeout(self.timeout))

    def with_overrides(self, **overrides: Any) -> ToleranceConfig:
        """Return a copy with the given fields replaced (None values are ignored)."""
        changes = {key: value for key, value in overrides.items() if value is not None}
        if not changes:
            return self
        return replace(self, **changes)

    def deadline(self) -> Optional[float]:
        """Absolute ``time.monotonic()`` deadline for a calculation starting now."""
        if self.timeout is None:
            return None
        return time.monotonic() + self.timeout


__all__ = [
    "ToleranceConfig",
    "DEFAULT_TOLERANCE",
    "DEFAULT_MAX_ITERATIONS",
    "DEFAULT_CHAIN_ITERATIONS_4X4",
    "DEFAULT_CHAIN_ITERATIONS",
]
