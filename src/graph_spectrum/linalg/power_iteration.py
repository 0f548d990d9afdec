"""
Power iteration for the dominant eigenpair.

Repeated multiplication by A amplifies the component of the iterate along
the eigenvector of largest-magnitude eigenvalue. The eigenvalue is
estimated each step by the Rayleigh quotient of the current unit iterate.
"""

from __future__ import annotations

import math
import time
from typing import Optional, Union

import numpy as np

from ..config import DEFAULT_MAX_ITERATIONS, DEFAULT_TOLERANCE
from ..types import EigenResult, Matrix
from ..validation import validate_iterations, validate_square_matrix

RandomSource = Union[int, np.random.Generator, None]
"""Seed or generator for the random start vector (None draws OS entropy)."""


def make_rng(rng: RandomSource = None) -> np.random.Generator:
    """Return ``rng`` itself if it is a Generator, else a new one seeded with it."""
    if isinstance(rng, np.random.Generator):
        return rng
    return np.random.default_rng(rng)


def random_unit_vector(n: int, rng: RandomSource = None) -> np.ndarray:
    """Random vector with entries drawn from [0, 1), scaled to unit length."""
    generator = make_rng(rng)
    v = generator.random(n)
    length = math.sqrt(float(v @ v))
    if length == 0.0:
        v = np.ones(n)
        length = math.sqrt(float(n))
    return v / length


def power_iteration(
    matrix: Matrix,
    max_iterations: int = DEFAULT_MAX_ITERATIONS,
    tolerance: float = DEFAULT_TOLERANCE,
    rng: RandomSource = None,
    deadline: Optional[float] = None,
) -> EigenResult:
    """
    Estimate the dominant eigenvalue and its eigenvector.

    Each iteration computes ``w = A v``, takes ``v . w`` as the eigenvalue
    estimate and renormalises ``w`` into the next iterate. Iteration stops
    when:

    - ``|w|`` falls below ``tolerance`` (A annihilates the iterate; the
      current estimate is returned as-is),
    - the estimate changes by less than ``tolerance`` between steps,
    - ``max_iterations`` or the ``deadline`` is reached.

    Only the second condition marks the result as converged.

    Args:
        matrix: Square matrix (copied, never modified)
        max_iterations: Iteration cap
        tolerance: Convergence threshold on the eigenvalue change
        rng: Seed or numpy Generator for the random start vector
        deadline: Optional ``time.monotonic()`` value to stop at

    Returns:
        EigenResult with a unit-norm eigenvector
    """
    a = validate_square_matrix(matrix)
    max_iterations = validate_iterations(max_iterations, "max_iterations")
    n = a.shape[0]

    if n == 0:
        return EigenResult(eigenvalue=0.0, eigenvector=np.zeros(0), iterations=0, converged=True)

    vector = random_unit_vector(n, rng)
    eigenvalue = 0.0
    previous: Optional[float] = None
    converged = False
    iterations = 0

    for iteration in range(max_iterations):
        if iteration > 0 and deadline is not None and time.monotonic() >= deadline:
            break
        iterations = iteration + 1

        product = a @ vector
        eigenvalue = float(vector @ product)

        length = math.sqrt(float(product @ product))
        if length < tolerance:
            break

        vector = product / length

        if previous is not None and abs(eigenvalue - previous) < tolerance:
            converged = True
            break
        previous = eigenvalue

    return EigenResult(
        eigenvalue=eigenvalue,
        eigenvector=vector,
        iterations=iterations,
        converged=converged,
    )


__all__ = ["RandomSource", "make_rng", "random_unit_vector", "power_iteration"]
