"""
graph-spectrum: Laplacian eigenvalues of small graphs in Python.

This package computes the spectrum of small dense real square matrices,
in particular graph Laplacians, by mixing closed-form solutions with
iterative methods.

Available components:
- linalg: matrix primitives, closed-form solvers, Householder QR,
  QR iteration, power iteration, deflation
- calculator: size-keyed dispatcher returning sorted eigenvalues
- graph: graph value object producing adjacency/degree/Laplacian matrices
- analysis: spectral gap, algebraic connectivity, formatting helpers
"""

__version__ = "0.1.0"

from typing import Any

# Spectral summaries
from .analysis import (
    algebraic_connectivity,
    count_zero_eigenvalues,
    format_eigenvalues,
    format_matrix,
    spectral_gap,
    spectrum_summary,
)

# Dispatcher
from .calculator import EigenvalueCalculator
from .config import ToleranceConfig

# Warning categories
from .diagnostics import (
    AsymmetricMatrixWarning,
    ComplexEigenvalueWarning,
    ConvergenceWarning,
    SpectrumWarning,
)

# Laplacian producer
from .graph import Graph

# Numerical routines
from .linalg import (
    closed_form_eigenvalues,
    deflate,
    dot,
    householder_qr,
    multiply,
    norm,
    power_iteration,
    qr_algorithm,
)
from .types import (
    EigenResult,
    Link,
    LinkLike,
    Matrix,
    QRDecomposition,
    SpectrumResult,
    Vector,
)

# Validation utilities
from .validation import (
    InvalidConfigError,
    InvalidLinkError,
    InvalidMatrixError,
    ValidationError,
    validate_square_matrix,
)


def calculate_eigenvalues(matrix: Matrix, **kwargs: Any) -> list[float]:
    """Eigenvalues of ``matrix`` in descending order, using a fresh calculator."""
    return EigenvalueCalculator(**kwargs).calculate_eigenvalues(matrix)


__all__ = [
    # Version
    "__version__",
    # Shared types
    "Matrix",
    "Vector",
    "EigenResult",
    "QRDecomposition",
    "SpectrumResult",
    "Link",
    "LinkLike",
    # Configuration
    "ToleranceConfig",
    # Dispatcher
    "EigenvalueCalculator",
    "calculate_eigenvalues",
    # Graph
    "Graph",
    # Numerical routines
    "multiply",
    "dot",
    "norm",
    "closed_form_eigenvalues",
    "householder_qr",
    "qr_algorithm",
    "power_iteration",
    "deflate",
    # Analysis
    "spectral_gap",
    "algebraic_connectivity",
    "count_zero_eigenvalues",
    "spectrum_summary",
    "format_matrix",
    "format_eigenvalues",
    # Warnings
    "SpectrumWarning",
    "ComplexEigenvalueWarning",
    "ConvergenceWarning",
    "AsymmetricMatrixWarning",
    # Validation
    "ValidationError",
    "InvalidMatrixError",
    "InvalidLinkError",
    "InvalidConfigError",
    "validate_square_matrix",
]
