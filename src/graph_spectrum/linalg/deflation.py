"""Hotelling deflation: remove a known eigenpair from a matrix."""

from __future__ import annotations

from typing import Sequence, cast

import numpy as np

from ..types import Matrix
from ..validation import InvalidMatrixError, validate_square_matrix


def deflate(matrix: Matrix, eigenvalue: float, eigenvector: Sequence[float]) -> np.ndarray:
    """
    Return ``A - eigenvalue * v v^T``.

    For symmetric A and a unit eigenvector v this moves ``eigenvalue`` to
    zero and leaves the rest of the spectrum in place, so the next power
    iteration finds the next-largest eigenvalue. The input is not modified.

    Raises:
        InvalidMatrixError: If the vector length does not match the matrix
    """
    a = validate_square_matrix(matrix)
    v = np.asarray(eigenvector, dtype=float)
    if v.ndim != 1 or v.shape[0] != a.shape[0]:
        raise InvalidMatrixError(
            f"Eigenvector of shape {v.shape} does not match matrix of order {a.shape[0]}"
        )
    return cast(np.ndarray, a - float(eigenvalue) * np.outer(v, v))


__all__ = ["deflate"]
