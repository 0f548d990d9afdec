"""
QR decomposition via Householder reflections.

For each column k the reflection H_k = I - 2 v v^T maps the part of the
column on and below the diagonal onto a multiple of e_k, zeroing the
subdiagonal. Applying H_{n-2} ... H_0 to A gives R; the product of the
reflections is Q^T.
"""

from __future__ import annotations

import math

import numpy as np

from ..config import DEFAULT_TOLERANCE
from ..types import Matrix, QRDecomposition
from ..validation import validate_square_matrix


def householder_vector(column: np.ndarray, tolerance: float = DEFAULT_TOLERANCE) -> np.ndarray:
    """
    Unit Householder vector that reflects ``column`` onto ``alpha * e_0``.

    ``alpha = -sign(column[0]) * ||column||`` so that ``column[0] - alpha``
    never cancels. Returns a zero vector when the column is already zero.
    """
    col_norm = math.sqrt(float(column @ column))
    v = np.zeros_like(column, dtype=float)
    if col_norm < tolerance:
        return v

    sign = 1.0 if column[0] >= 0 else -1.0
    alpha = -sign * col_norm

    v[:] = column
    v[0] = column[0] - alpha

    v_norm = math.sqrt(float(v @ v))
    if v_norm > tolerance:
        v /= v_norm
    return v


def householder_qr(matrix: Matrix, tolerance: float = DEFAULT_TOLERANCE) -> QRDecomposition:
    """
    Decompose a square matrix as A = Q R.

    Performs n - 1 reflection steps. A step is skipped when the
    subdiagonal part of its column is already below ``tolerance``, so
    upper-triangular input (including the identity) comes back with
    ``Q = I``.

    Args:
        matrix: Square matrix (copied, never modified)
        tolerance: Norm below which a subdiagonal is treated as zero

    Returns:
        QRDecomposition with orthogonal ``q`` and upper-triangular ``r``

    Raises:
        InvalidMatrixError: If the matrix is ragged or not square
    """
    a = validate_square_matrix(matrix)
    n = a.shape[0]
    qt = np.eye(n)

    for k in range(n - 1):
        sub = a[k + 1 :, k]
        if math.sqrt(float(sub @ sub)) < tolerance:
            continue

        v = householder_vector(a[k:, k], tolerance)

        # Reflect the trailing block of A
        a[k:, k:] -= 2.0 * np.outer(v, v @ a[k:, k:])

        # Accumulate H_k into Q^T
        qt[k:, :] -= 2.0 * np.outer(v, v @ qt[k:, :])

    r = np.triu(a)
    return QRDecomposition(q=qt.T.copy(), r=r)


__all__ = ["householder_vector", "householder_qr"]
