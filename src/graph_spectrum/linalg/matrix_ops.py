"""
Dense vector and matrix primitives.

Thin, validated wrappers around numpy used by the solvers. Every function
is pure: arguments are converted to fresh ``float64`` arrays and never
modified.
"""

from __future__ import annotations

import math
from typing import Any, Sequence, cast

import numpy as np

from ..validation import InvalidMatrixError


def _as_matrix(m: Any, name: str) -> np.ndarray:
    try:
        arr = np.array(m, dtype=float)
    except (TypeError, ValueError) as exc:
        raise InvalidMatrixError(f"{name} is not a numeric matrix: {exc}") from None
    if arr.ndim == 1 and arr.shape[0] == 0:
        return np.zeros((0, 0))
    if arr.ndim != 2:
        raise InvalidMatrixError(f"{name} must be 2-dimensional, got {arr.ndim} dimension(s)")
    return arr


def _as_vector(v: Any, name: str) -> np.ndarray:
    arr = np.array(v, dtype=float)
    if arr.ndim != 1:
        raise ValueError(f"{name} must be 1-dimensional, got {arr.ndim} dimension(s)")
    return arr


def copy_matrix(m: Any) -> np.ndarray:
    """Return a private ``float64`` copy of a 2-D matrix."""
    return _as_matrix(m, "matrix")


def identity(n: int) -> np.ndarray:
    """Return the n x n identity matrix."""
    return np.eye(n)


def transpose(m: Any) -> np.ndarray:
    """Return the transpose as a new array."""
    return cast(np.ndarray, _as_matrix(m, "matrix").T.copy())


def multiply(a: Any, b: Any) -> np.ndarray:
    """
    Standard matrix product ``a @ b``.

    Args:
        a: Matrix with shape (r, k)
        b: Matrix with shape (k, c)

    Returns:
        New (r, c) array

    Raises:
        InvalidMatrixError: If the inner dimensions do not agree
    """
    left = _as_matrix(a, "left operand")
    right = _as_matrix(b, "right operand")
    if left.shape[1] != right.shape[0]:
        raise InvalidMatrixError(
            f"Cannot multiply {left.shape[0]}x{left.shape[1]} by "
            f"{right.shape[0]}x{right.shape[1]}: inner dimensions differ"
        )
    return cast(np.ndarray, left @ right)


def mat_vec(m: Any, v: Any) -> np.ndarray:
    """Matrix-vector product."""
    matrix = _as_matrix(m, "matrix")
    vector = _as_vector(v, "vector")
    if matrix.shape[1] != vector.shape[0]:
        raise InvalidMatrixError(
            f"Cannot multiply {matrix.shape[0]}x{matrix.shape[1]} matrix "
            f"by vector of length {vector.shape[0]}"
        )
    return cast(np.ndarray, matrix @ vector)


def dot(a: Sequence[float], b: Sequence[float]) -> float:
    """
    Inner product of two equal-length vectors.

    Raises:
        ValueError: If the lengths differ
    """
    u = _as_vector(a, "a")
    w = _as_vector(b, "b")
    if u.shape[0] != w.shape[0]:
        raise ValueError(f"Vector lengths differ: {u.shape[0]} != {w.shape[0]}")
    return float(u @ w)


def norm(v: Sequence[float]) -> float:
    """Euclidean (L2) norm."""
    u = _as_vector(v, "vector")
    return math.sqrt(float(u @ u))


def outer(a: Sequence[float], b: Sequence[float]) -> np.ndarray:
    """Outer product ``a b^T``."""
    return cast(np.ndarray, np.outer(_as_vector(a, "a"), _as_vector(b, "b")))


def trace(m: Any) -> float:
    """Sum of the diagonal entries."""
    return float(np.trace(_as_matrix(m, "matrix")))


def is_symmetric(m: Any, tolerance: float = 1e-10) -> bool:
    """
    Check whether a square matrix equals its transpose.

    The tolerance is scaled by the largest entry magnitude so integer
    Laplacians and rescaled matrices are judged alike.
    """
    matrix = _as_matrix(m, "matrix")
    if matrix.shape[0] != matrix.shape[1]:
        return False
    if matrix.size == 0:
        return True
    scale = max(1.0, float(np.max(np.abs(matrix))))
    return bool(np.all(np.abs(matrix - matrix.T) <= tolerance * scale))


__all__ = [
    "copy_matrix",
    "identity",
    "transpose",
    "multiply",
    "mat_vec",
    "dot",
    "norm",
    "outer",
    "trace",
    "is_symmetric",
]
