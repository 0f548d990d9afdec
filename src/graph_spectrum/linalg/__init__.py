"""
Numerical linear algebra routines.

This module provides the building blocks of the eigenvalue engine:
dense primitives, closed-form solvers for orders up to 3, Householder QR,
unshifted QR iteration, power iteration and deflation.
"""

from .closed_form import (
    MAX_CLOSED_FORM_ORDER,
    closed_form_eigenvalues,
    eigenvalues_2x2,
    eigenvalues_3x3,
)
from .deflation import deflate
from .householder import householder_qr, householder_vector
from .matrix_ops import (
    copy_matrix,
    dot,
    identity,
    is_symmetric,
    mat_vec,
    multiply,
    norm,
    outer,
    trace,
    transpose,
)
from .power_iteration import RandomSource, make_rng, power_iteration, random_unit_vector
from .qr_algorithm import is_quasi_triangular, qr_algorithm

__all__ = [
    # Matrix primitives
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
    # Closed form
    "MAX_CLOSED_FORM_ORDER",
    "eigenvalues_2x2",
    "eigenvalues_3x3",
    "closed_form_eigenvalues",
    # Decompositions and iterations
    "householder_vector",
    "householder_qr",
    "qr_algorithm",
    "is_quasi_triangular",
    "RandomSource",
    "make_rng",
    "random_unit_vector",
    "power_iteration",
    "deflate",
]
