"""
Common types for the eigenvalue engine.

This module provides the value types shared by every solver:
- Matrix / Vector: accepted input and produced output shapes
- EigenResult: one eigenpair found by an iterative method
- QRDecomposition: the (Q, R) factors of a Householder decomposition
- SpectrumResult: eigenvalues plus the Laplacian they came from
- Link: edge between two graph nodes
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, NamedTuple, Sequence, Union

import numpy as np

Matrix = Union[Sequence[Sequence[float]], np.ndarray]
"""Square matrix input: nested sequences of floats or a 2-D array."""

Vector = np.ndarray
"""1-D array of floats."""


@dataclass(eq=False)
class EigenResult:
    """
    An eigenvalue estimate with its eigenvector.

    Attributes:
        eigenvalue: Rayleigh-quotient estimate of the eigenvalue
        eigenvector: Unit-norm eigenvector (sign is arbitrary)
        iterations: Number of iterations performed
        converged: False when the iteration cap or deadline was reached
            before the estimate settled within tolerance
    """

    eigenvalue: float
    eigenvector: Vector
    iterations: int = 0
    converged: bool = True

    def __iter__(self) -> Any:
        # Allows ``value, vector = power_iteration(A)``
        return iter((self.eigenvalue, self.eigenvector))


class QRDecomposition(NamedTuple):
    """Orthogonal factor ``q`` and upper-triangular factor ``r`` with q @ r == A."""

    q: np.ndarray
    r: np.ndarray


@dataclass(eq=False)
class SpectrumResult:
    """Eigenvalues (descending) and the Laplacian used to derive them."""

    eigenvalues: list[float] = field(default_factory=list)
    laplacian: np.ndarray = field(default_factory=lambda: np.zeros((0, 0)))

    def __len__(self) -> int:
        return len(self.eigenvalues)


class Link:
    """
    Edge connecting two nodes.

    Attributes:
        source: Source node index
        target: Target node index
    """

    def __init__(self, source: int, target: int) -> None:
        """
        Initialize link between two nodes.

        Raises:
            ValueError: If source or target is None
        """
        if source is None:
            raise ValueError("Link source cannot be None")
        if target is None:
            raise ValueError("Link target cannot be None")

        self.source = source
        self.target = target

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Link):
            return NotImplemented
        return (self.source, self.target) == (other.source, other.target)

    def __hash__(self) -> int:
        return hash((self.source, self.target))

    def __repr__(self) -> str:
        return f"Link({self.source} -> {self.target})"


LinkLike = Union[Link, tuple[int, int], dict[str, Any], Any]
"""Input type for links: Link objects, (source, target) pairs, or dicts."""


__all__ = [
    "Matrix",
    "Vector",
    "EigenResult",
    "QRDecomposition",
    "SpectrumResult",
    "Link",
    "LinkLike",
]
