"""
Warning categories for approximate results.

The engine never raises for numerical trouble; it returns its best
estimate. These categories make the approximation visible so callers can
filter, log or escalate it with the standard ``warnings`` machinery.
"""

from __future__ import annotations


class SpectrumWarning(UserWarning):
    """Base category for approximate eigenvalue results."""

    pass


class ComplexEigenvalueWarning(SpectrumWarning):
    """A complex-conjugate pair was reported as its shared real part."""

    pass


class ConvergenceWarning(SpectrumWarning):
    """An iterative method stopped before meeting its tolerance."""

    pass


class AsymmetricMatrixWarning(SpectrumWarning):
    """The input matrix is not symmetric; iterative results are approximate."""

    pass


__all__ = [
    "SpectrumWarning",
    "ComplexEigenvalueWarning",
    "ConvergenceWarning",
    "AsymmetricMatrixWarning",
]
