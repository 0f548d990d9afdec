"""
Unshifted QR iteration.

Repeatedly factors A = QR and recombines A <- RQ. Each step is a
similarity transform, so the spectrum is preserved while the subdiagonal
decays toward zero and the diagonal approaches the eigenvalues.

Without shifts convergence can stall when two eigenvalues share a
magnitude (for example a +/- pair or a complex pair). The iteration then
stops at its cap and the current diagonal is returned as an estimate.
"""

from __future__ import annotations

import time
import warnings
from typing import Optional

import numpy as np

from ..config import DEFAULT_MAX_ITERATIONS, DEFAULT_TOLERANCE
from ..diagnostics import ConvergenceWarning
from ..types import Matrix
from ..validation import validate_iterations, validate_square_matrix
from .householder import householder_qr


def is_quasi_triangular(a: np.ndarray, tolerance: float = DEFAULT_TOLERANCE) -> bool:
    """Check whether every first-subdiagonal entry is below tolerance."""
    if a.shape[0] < 2:
        return True
    return bool(np.all(np.abs(np.diag(a, k=-1)) < tolerance))


def qr_algorithm(
    matrix: Matrix,
    max_iterations: int = DEFAULT_MAX_ITERATIONS,
    tolerance: float = DEFAULT_TOLERANCE,
    deadline: Optional[float] = None,
) -> list[float]:
    """
    All eigenvalues of a square matrix by unshifted QR iteration.

    Args:
        matrix: Square matrix (copied, never modified)
        max_iterations: Maximum number of QR steps
        tolerance: Subdiagonal magnitude treated as converged
        deadline: Optional ``time.monotonic()`` value after which the
            iteration stops with its current estimate

    Returns:
        Diagonal entries of the final iterate, sorted descending

    Warns:
        ConvergenceWarning: If the cap or deadline is reached first
    """
    a = validate_square_matrix(matrix)
    max_iterations = validate_iterations(max_iterations, "max_iterations")
    n = a.shape[0]

    if n == 0:
        return []

    converged = False
    for _ in range(max_iterations):
        if is_quasi_triangular(a, tolerance):
            converged = True
            break
        if deadline is not None and time.monotonic() >= deadline:
            break
        q, r = householder_qr(a, tolerance)
        a = r @ q

    if not converged and is_quasi_triangular(a, tolerance):
        converged = True

    if not converged:
        residual = float(np.max(np.abs(np.diag(a, k=-1))))
        warnings.warn(
            f"QR iteration did not converge (largest subdiagonal entry {residual:.3e}); "
            "returning the current diagonal as an approximation.",
            ConvergenceWarning,
            stacklevel=2,
        )

    return sorted((float(x) for x in np.diag(a)), reverse=True)


__all__ = ["qr_algorithm", "is_quasi_triangular"]
