"""
Spectral summaries and display helpers.

Provides quantitative readings of a Laplacian spectrum:
- Spectral gap: largest minus second-largest eigenvalue
- Algebraic connectivity: second-smallest eigenvalue (Fiedler value)
- Zero-eigenvalue count: number of connected components of an
  undirected graph

and plain-text formatting for matrices and eigenvalue lists.
"""

from __future__ import annotations

from typing import Any, Sequence

import numpy as np

from .validation import validate_square_matrix


def spectral_gap(eigenvalues: Sequence[float]) -> float:
    """
    Difference between the largest and second-largest eigenvalues.

    Returns 0.0 when fewer than two eigenvalues are given.
    """
    if len(eigenvalues) < 2:
        return 0.0
    ordered = sorted(eigenvalues, reverse=True)
    return float(ordered[0] - ordered[1])


def algebraic_connectivity(eigenvalues: Sequence[float]) -> float:
    """
    Second-smallest Laplacian eigenvalue.

    Positive exactly when an undirected graph is connected. Returns 0.0
    when fewer than two eigenvalues are given.
    """
    if len(eigenvalues) < 2:
        return 0.0
    return float(sorted(eigenvalues)[1])


def count_zero_eigenvalues(eigenvalues: Sequence[float], epsilon: float = 1e-6) -> int:
    """Number of eigenvalues with ``|lambda| < epsilon``."""
    return sum(1 for value in eigenvalues if abs(value) < epsilon)


def spectrum_summary(eigenvalues: Sequence[float], epsilon: float = 1e-6) -> dict[str, Any]:
    """
    Summarise a Laplacian spectrum.

    Args:
        eigenvalues: Eigenvalues in any order
        epsilon: Threshold for counting an eigenvalue as zero

    Returns:
        Dictionary with keys: order, trace, largest, smallest,
        spectral_gap, algebraic_connectivity, zero_count
    """
    values = [float(v) for v in eigenvalues]
    return {
        "order": len(values),
        "trace": float(sum(values)),
        "largest": max(values) if values else 0.0,
        "smallest": min(values) if values else 0.0,
        "spectral_gap": spectral_gap(values),
        "algebraic_connectivity": algebraic_connectivity(values),
        "zero_count": count_zero_eigenvalues(values, epsilon),
    }


def format_matrix(matrix: Any, precision: int = 3) -> str:
    """
    Format a matrix as tab-separated rows, one row per line.

    Returns "Empty matrix" for a 0 x 0 matrix.
    """
    m = validate_square_matrix(matrix)
    if m.shape[0] == 0:
        return "Empty matrix"
    return "\n".join("\t".join(f"{value:.{precision}f}" for value in row) for row in m)


def format_eigenvalues(eigenvalues: Sequence[float], precision: int = 3) -> list[float]:
    """
    Eigenvalues rounded for display, in ascending order.

    Negative zero produced by rounding is normalised to 0.0.
    """
    rounded = np.round(np.sort(np.asarray(eigenvalues, dtype=float)), precision)
    return [float(value) + 0.0 for value in rounded]


__all__ = [
    "spectral_gap",
    "algebraic_connectivity",
    "count_zero_eigenvalues",
    "spectrum_summary",
    "format_matrix",
    "format_eigenvalues",
]
