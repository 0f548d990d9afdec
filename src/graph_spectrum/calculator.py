"""
Eigenvalue calculator.

Single entry point of the engine. Chooses a strategy from the order of the
matrix through one size-keyed table:

    order 0      -> empty spectrum
    order 1      -> the single entry
    order 2-3    -> closed form (quadratic / Cardano)
    order 4      -> fixed chain of power iteration + deflation (cap 200)
    order >= 5   -> power iteration + deflation loop (cap 100)

``method="qr"`` replaces every iterative or closed-form strategy with
unshifted QR iteration.
"""

from __future__ import annotations

import warnings
from typing import Any, Callable, Optional, Protocol

import numpy as np

from .config import ToleranceConfig
from .diagnostics import AsymmetricMatrixWarning
from .linalg.closed_form import closed_form_eigenvalues
from .linalg.deflation import deflate
from .linalg.householder import householder_qr
from .linalg.matrix_ops import is_symmetric
from .linalg.power_iteration import RandomSource, make_rng, power_iteration
from .linalg.qr_algorithm import qr_algorithm
from .types import EigenResult, Matrix, QRDecomposition, SpectrumResult
from .validation import ValidationError, validate_square_matrix

METHODS = ("auto", "qr")

# (lowest order, highest order or None for unbounded, strategy name)
STRATEGY_TABLE: tuple[tuple[int, Optional[int], str], ...] = (
    (0, 0, "empty"),
    (1, 1, "single"),
    (2, 3, "closed_form"),
    (4, 4, "fixed_chain"),
    (5, None, "deflation_loop"),
)


class LaplacianProducer(Protocol):
    """Anything that can supply a graph Laplacian."""

    def laplacian(self) -> Any: ...


class EigenvalueCalculator:
    """
    Computes the spectrum of small dense square matrices.

    Instances hold only configuration and a random source; no state is
    carried between calculations beyond the generator's position.

    Example:
        calculator = EigenvalueCalculator(random_seed=42)
        calculator.calculate_eigenvalues([[1, -1], [-1, 1]])
        # [2.0, 0.0]
    """

    def __init__(
        self,
        config: Optional[ToleranceConfig] = None,
        *,
        tolerance: Optional[float] = None,
        max_iterations: Optional[int] = None,
        timeout: Optional[float] = None,
        method: str = "auto",
        random_seed: Optional[int] = None,
        rng: Optional[np.random.Generator] = None,
    ) -> None:
        """
        Initialize the calculator.

        Args:
            config: Base configuration (defaults to ToleranceConfig())
            tolerance: Override for config.tolerance
            max_iterations: Override for config.max_iterations
            timeout: Override for config.timeout (seconds per calculation)
            method: "auto" for the size-keyed strategy table, "qr" to use
                QR iteration for every order >= 2
            random_seed: Seed for the power-iteration start vectors
            rng: Explicit numpy Generator (takes precedence over random_seed)
        """
        base = config if config is not None else ToleranceConfig()
        self._config: ToleranceConfig = base.with_overrides(
            tolerance=tolerance,
            max_iterations=max_iterations,
            timeout=timeout,
        )
        self._method: str = "auto"
        self.method = method
        source: RandomSource = rng if rng is not None else random_seed
        self._rng: np.random.Generator = make_rng(source)

    # -------------------------------------------------------------------------
    # Properties
    # -------------------------------------------------------------------------

    @property
    def config(self) -> ToleranceConfig:
        """Get the active configuration."""
        return self._config

    @config.setter
    def config(self, value: ToleranceConfig) -> None:
        """Replace the active configuration."""
        if not isinstance(value, ToleranceConfig):
            raise ValidationError(f"config must be a ToleranceConfig, got {type(value).__name__}")
        self._config = value

    @property
    def tolerance(self) -> float:
        """Get convergence tolerance."""
        return self._config.tolerance

    @tolerance.setter
    def tolerance(self, value: float) -> None:
        """Set convergence tolerance (must be positive)."""
        self._config = self._config.with_overrides(tolerance=value)

    @property
    def max_iterations(self) -> int:
        """Get the iteration cap for power iteration and QR iteration."""
        return self._config.max_iterations

    @max_iterations.setter
    def max_iterations(self, value: int) -> None:
        """Set the iteration cap (must be >= 1)."""
        self._config = self._config.with_overrides(max_iterations=value)

    @property
    def method(self) -> str:
        """Get the dispatch method ("auto" or "qr")."""
        return self._method

    @method.setter
    def method(self, value: str) -> None:
        """Set the dispatch method."""
        if value not in METHODS:
            raise ValidationError(f"method must be one of {METHODS}, got {value!r}")
        self._method = value

    @property
    def rng(self) -> np.random.Generator:
        """Get the random generator used for power-iteration start vectors."""
        return self._rng

    # -------------------------------------------------------------------------
    # Strategy selection
    # -------------------------------------------------------------------------

    def strategy_for(self, order: int) -> str:
        """
        Name of the strategy used for a matrix of the given order.

        Raises:
            ValidationError: If order is negative
        """
        if order < 0:
            raise ValidationError(f"Matrix order must be >= 0, got {order}")
        if self._method == "qr" and order >= 2:
            return "qr_algorithm"
        for low, high, name in STRATEGY_TABLE:
            if order >= low and (high is None or order <= high):
                return name
        raise ValidationError(f"No strategy registered for order {order}")  # pragma: no cover

    def _handler(self, name: str) -> Callable[[np.ndarray, Optional[float]], list[float]]:
        handlers: dict[str, Callable[[np.ndarray, Optional[float]], list[float]]] = {
            "empty": self._solve_empty,
            "single": self._solve_single,
            "closed_form": self._solve_closed_form,
            "fixed_chain": self._solve_fixed_chain,
            "deflation_loop": self._solve_deflation_loop,
            "qr_algorithm": self._solve_qr,
        }
        return handlers[name]

    # -------------------------------------------------------------------------
    # Public API
    # -------------------------------------------------------------------------

    def calculate_eigenvalues(self, matrix: Matrix) -> list[float]:
        """
        Compute all eigenvalues of a square matrix.

        Args:
            matrix: Square matrix of real numbers (not modified)

        Returns:
            Eigenvalues sorted in descending order. Complex pairs are
            reported by their real part; iterative results are best-effort
            approximations.

        Raises:
            InvalidMatrixError: If the matrix is ragged, not square, or
                holds non-finite entries

        Warns:
            AsymmetricMatrixWarning: If the matrix is not symmetric
        """
        a = validate_square_matrix(matrix)
        n = a.shape[0]

        if n >= 2 and not is_symmetric(a, self._config.tolerance):
            warnings.warn(
                "Matrix is not symmetric (e.g. the Laplacian of a directed graph); "
                "eigenvalues are approximate and complex values are not reported.",
                AsymmetricMatrixWarning,
                stacklevel=2,
            )

        handler = self._handler(self.strategy_for(n))
        eigenvalues = handler(a, self._config.deadline())
        return sorted(eigenvalues, reverse=True)

    def calculate_graph_eigenvalues(self, graph: LaplacianProducer) -> SpectrumResult:
        """
        Compute the Laplacian spectrum of a graph.

        Args:
            graph: Object exposing ``laplacian()``

        Returns:
            SpectrumResult holding the descending eigenvalues and the
            Laplacian they were computed from. An empty graph yields an
            empty result rather than an error.
        """
        laplacian = validate_square_matrix(graph.laplacian())
        if laplacian.shape[0] == 0:
            return SpectrumResult(eigenvalues=[], laplacian=laplacian)

        eigenvalues = self.calculate_eigenvalues(laplacian)
        return SpectrumResult(eigenvalues=eigenvalues, laplacian=laplacian)

    def power_iteration(self, matrix: Matrix, max_iterations: Optional[int] = None) -> EigenResult:
        """Dominant eigenpair using this calculator's tolerance and random source."""
        return power_iteration(
            matrix,
            max_iterations=self._iteration_cap(max_iterations),
            tolerance=self._config.tolerance,
            rng=self._rng,
            deadline=self._config.deadline(),
        )

    def qr_decomposition(self, matrix: Matrix) -> QRDecomposition:
        """Householder QR decomposition using this calculator's tolerance."""
        return householder_qr(matrix, self._config.tolerance)

    def qr_algorithm(self, matrix: Matrix, max_iterations: Optional[int] = None) -> list[float]:
        """All eigenvalues by unshifted QR iteration, descending."""
        return qr_algorithm(
            matrix,
            max_iterations=self._iteration_cap(max_iterations),
            tolerance=self._config.tolerance,
            deadline=self._config.deadline(),
        )

    def _iteration_cap(self, max_iterations: Optional[int]) -> int:
        if max_iterations is None:
            return self._config.max_iterations
        return max_iterations

    def deflate(self, matrix: Matrix, result: EigenResult) -> np.ndarray:
        """Remove a found eigenpair from ``matrix``."""
        return deflate(matrix, result.eigenvalue, result.eigenvector)

    # -------------------------------------------------------------------------
    # Strategies
    # -------------------------------------------------------------------------

    def _solve_empty(self, a: np.ndarray, deadline: Optional[float]) -> list[float]:
        return []

    def _solve_single(self, a: np.ndarray, deadline: Optional[float]) -> list[float]:
        return [float(a[0, 0])]

    def _solve_closed_form(self, a: np.ndarray, deadline: Optional[float]) -> list[float]:
        return closed_form_eigenvalues(a, self._config.tolerance)

    def _solve_fixed_chain(self, a: np.ndarray, deadline: Optional[float]) -> list[float]:
        return self._deflation_chain(a, self._config.chain_iterations_4x4, deadline)

    def _solve_deflation_loop(self, a: np.ndarray, deadline: Optional[float]) -> list[float]:
        return self._deflation_chain(a, self._config.chain_iterations, deadline)

    def _solve_qr(self, a: np.ndarray, deadline: Optional[float]) -> list[float]:
        return qr_algorithm(
            a,
            max_iterations=self._config.max_iterations,
            tolerance=self._config.tolerance,
            deadline=deadline,
        )

    def _deflation_chain(
        self,
        a: np.ndarray,
        iterations_per_step: int,
        deadline: Optional[float],
    ) -> list[float]:
        """Extract n eigenvalues by power iteration, deflating between steps."""
        n = a.shape[0]
        current = a
        eigenvalues: list[float] = []

        for step in range(n):
            result = power_iteration(
                current,
                max_iterations=iterations_per_step,
                tolerance=self._config.tolerance,
                rng=self._rng,
                deadline=deadline,
            )
            eigenvalues.append(result.eigenvalue)

            if step < n - 1:
                current = deflate(current, result.eigenvalue, result.eigenvector)

        return eigenvalues


__all__ = ["EigenvalueCalculator", "LaplacianProducer", "STRATEGY_TABLE", "METHODS"]
