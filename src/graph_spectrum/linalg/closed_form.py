"""
Closed-form eigenvalues for matrices of order 0 to 3.

Order 2 uses the quadratic formula on the characteristic polynomial and
order 3 uses Cardano's formula on the depressed cubic. Complex-conjugate
pairs are not returned: the shared real part (order 2) or the single real
root (order 3) is repeated in their place, and a ComplexEigenvalueWarning
is emitted.
"""

from __future__ import annotations

import math
import warnings

import numpy as np

from ..config import DEFAULT_TOLERANCE
from ..diagnostics import ComplexEigenvalueWarning
from ..types import Matrix
from ..validation import InvalidMatrixError, validate_square_matrix

MAX_CLOSED_FORM_ORDER = 3


def eigenvalues_2x2(matrix: Matrix) -> list[float]:
    """
    Eigenvalues of ``[[a, b], [c, d]]`` in descending order.

    The discriminant ``trace^2 - 4 det`` is evaluated as the algebraically
    equal ``(a - d)^2 + 4bc``, which cannot go negative through rounding
    for symmetric input.
    """
    m = validate_square_matrix(matrix)
    if m.shape[0] != 2:
        raise InvalidMatrixError(f"Expected a 2x2 matrix, got order {m.shape[0]}")

    a, b = float(m[0, 0]), float(m[0, 1])
    c, d = float(m[1, 0]), float(m[1, 1])

    trace = a + d
    discriminant = (a - d) * (a - d) + 4.0 * b * c

    if discriminant < 0:
        warnings.warn(
            "2x2 matrix has a complex-conjugate eigenvalue pair; "
            "reporting its real part twice.",
            ComplexEigenvalueWarning,
            stacklevel=2,
        )
        real_part = trace / 2
        return [real_part, real_part]

    sqrt_disc = math.sqrt(discriminant)
    return sorted([(trace + sqrt_disc) / 2, (trace - sqrt_disc) / 2], reverse=True)


def eigenvalues_3x3(matrix: Matrix, tolerance: float = DEFAULT_TOLERANCE) -> list[float]:
    """
    Eigenvalues of a 3x3 matrix via Cardano's formula, descending.

    The characteristic polynomial ``x^3 - t x^2 + m x - d`` (trace ``t``,
    sum of principal 2x2 minors ``m``, determinant ``d``) is shifted by
    ``x = y + t/3`` to the depressed cubic ``y^3 + p y + q``. The sign of
    ``delta = (q/2)^2 + (p/3)^3`` selects the branch:

    - delta > 0: one real root, reported three times
    - delta = 0: a simple and a double real root
    - delta < 0: three distinct real roots (trigonometric form)

    When ``p`` and ``q`` both vanish to within ``tolerance`` at the scale of
    the largest entry, the root is triple and is returned directly. A small
    positive ``delta``, within ``tolerance`` relative to the magnitude of
    its two terms, is rounding noise around a double root and takes the
    delta = 0 branch.

    Args:
        matrix: 3x3 matrix
        tolerance: Relative threshold for the triple-root and delta = 0 tests

    Returns:
        Three eigenvalues sorted in descending order
    """
    m = validate_square_matrix(matrix)
    if m.shape[0] != 3:
        raise InvalidMatrixError(f"Expected a 3x3 matrix, got order {m.shape[0]}")

    a, b, c = (float(x) for x in m[0])
    d, e, f = (float(x) for x in m[1])
    g, h, i = (float(x) for x in m[2])

    trace = a + e + i
    sum_of_minors = (a * e - b * d) + (a * i - c * g) + (e * i - f * h)
    det = a * (e * i - f * h) - b * (d * i - f * g) + c * (d * h - e * g)

    shift = trace / 3
    p = sum_of_minors - trace * trace / 3
    q = -2 * trace**3 / 27 + trace * sum_of_minors / 3 - det

    # Triple root: p and q are rounding noise at the scale of the entries
    scale = float(np.max(np.abs(m)))
    if abs(p) <= tolerance * scale**2 and abs(q) <= tolerance * scale**3:
        return [shift, shift, shift]

    half_q_sq = (q / 2) ** 2
    third_p_cubed = (p / 3) ** 3
    discriminant = half_q_sq + third_p_cubed
    threshold = tolerance * max(half_q_sq, abs(third_p_cubed))

    if discriminant > threshold:
        warnings.warn(
            "3x3 matrix has a complex-conjugate eigenvalue pair; "
            "reporting its real root three times.",
            ComplexEigenvalueWarning,
            stacklevel=2,
        )
        sqrt_disc = math.sqrt(discriminant)
        u = float(np.cbrt(-q / 2 + sqrt_disc))
        v = float(np.cbrt(-q / 2 - sqrt_disc))
        real_root = u + v + shift
        return [real_root, real_root, real_root]

    if discriminant >= 0:
        u = float(np.cbrt(-q / 2))
        simple_root = 2 * u + shift
        double_root = -u + shift
        return sorted([simple_root, double_root, double_root], reverse=True)

    r = math.sqrt(-p / 3)
    cos_arg = max(-1.0, min(1.0, -q / (2 * r**3)))
    theta = math.acos(cos_arg)
    roots = [2 * r * math.cos((theta + 2 * math.pi * k) / 3) + shift for k in range(3)]
    return sorted(roots, reverse=True)


def closed_form_eigenvalues(matrix: Matrix, tolerance: float = DEFAULT_TOLERANCE) -> list[float]:
    """
    Exact eigenvalues for matrices of order 0 to 3, descending.

    Raises:
        InvalidMatrixError: If the matrix is malformed or larger than 3x3
    """
    m = validate_square_matrix(matrix)
    n = m.shape[0]

    if n == 0:
        return []
    if n == 1:
        return [float(m[0, 0])]
    if n == 2:
        return eigenvalues_2x2(m)
    if n == 3:
        return eigenvalues_3x3(m, tolerance)

    raise InvalidMatrixError(
        f"Closed-form solutions exist only up to order {MAX_CLOSED_FORM_ORDER}, got order {n}"
    )


__all__ = [
    "MAX_CLOSED_FORM_ORDER",
    "eigenvalues_2x2",
    "eigenvalues_3x3",
    "closed_form_eigenvalues",
]
