"""Tests for power iteration and deflation."""

import time

import numpy as np
import pytest

from graph_spectrum import EigenResult, InvalidMatrixError, deflate, power_iteration
from graph_spectrum.linalg import make_rng, random_unit_vector

PATH_4 = [[1, -1, 0, 0], [-1, 2, -1, 0], [0, -1, 2, -1], [0, 0, -1, 1]]


# =============================================================================
# Power iteration
# =============================================================================


class TestPowerIteration:
    """Tests for the dominant-eigenpair estimator."""

    def test_diagonal_dominant(self):
        """Finds the largest diagonal entry and its axis."""
        result = power_iteration(np.diag([5.0, 2.0, 1.0]), rng=0)
        assert result.eigenvalue == pytest.approx(5.0, abs=1e-8)
        assert abs(result.eigenvector[0]) == pytest.approx(1.0, abs=1e-4)
        assert result.converged

    def test_path_laplacian(self):
        """Dominant Laplacian eigenvalue of the 4-path is 2 + sqrt(2)."""
        result = power_iteration(PATH_4, rng=1)
        assert result.eigenvalue == pytest.approx(2 + np.sqrt(2), abs=1e-8)

    def test_eigenvector_is_unit(self):
        """Returned eigenvector has unit norm."""
        result = power_iteration(PATH_4, rng=2)
        assert np.linalg.norm(result.eigenvector) == pytest.approx(1.0)

    def test_eigenvector_satisfies_equation(self):
        """A v is close to lambda v."""
        result = power_iteration(PATH_4, rng=3)
        residual = np.asarray(PATH_4) @ result.eigenvector - result.eigenvalue * result.eigenvector
        assert np.linalg.norm(residual) < 1e-4

    def test_negative_dominant(self):
        """Largest magnitude wins even when negative."""
        result = power_iteration([[-3.0, 0.0], [0.0, 1.0]], rng=4)
        assert result.eigenvalue == pytest.approx(-3.0, abs=1e-8)

    def test_same_seed_same_trajectory(self):
        """A pinned seed reproduces the result exactly."""
        first = power_iteration(PATH_4, max_iterations=7, rng=42)
        second = power_iteration(PATH_4, max_iterations=7, rng=42)
        assert first.eigenvalue == second.eigenvalue
        assert np.array_equal(first.eigenvector, second.eigenvector)
        assert first.iterations == second.iterations

    def test_accepts_generator(self):
        """A numpy Generator can be injected directly."""
        result = power_iteration(PATH_4, rng=np.random.default_rng(5))
        assert result.eigenvalue == pytest.approx(2 + np.sqrt(2), abs=1e-8)

    def test_zero_matrix_stops_immediately(self):
        """A matrix that annihilates the iterate stops after one step."""
        result = power_iteration(np.zeros((3, 3)), rng=6)
        assert result.eigenvalue == 0.0
        assert result.iterations == 1
        assert not result.converged

    def test_iteration_cap(self):
        """A cap of one iteration cannot converge."""
        result = power_iteration(PATH_4, max_iterations=1, rng=7)
        assert result.iterations == 1
        assert not result.converged

    def test_expired_deadline_runs_one_step(self):
        """An expired deadline still yields a first estimate."""
        result = power_iteration(PATH_4, rng=8, deadline=time.monotonic() - 1.0)
        assert result.iterations == 1
        assert not result.converged

    def test_empty_matrix(self):
        """Order 0 returns a zero estimate with an empty vector."""
        result = power_iteration([])
        assert result.eigenvalue == 0.0
        assert result.eigenvector.shape == (0,)

    def test_unpacks_to_pair(self):
        """EigenResult unpacks to (eigenvalue, eigenvector)."""
        value, vector = power_iteration([[2.0]], rng=9)
        assert value == pytest.approx(2.0)
        assert vector.shape == (1,)

    def test_input_not_mutated(self):
        """The caller's matrix is unchanged."""
        matrix = [row[:] for row in PATH_4]
        power_iteration(matrix, rng=10)
        assert matrix == PATH_4

    def test_malformed_raises(self):
        """Ragged input is rejected."""
        with pytest.raises(InvalidMatrixError):
            power_iteration([[1, 2], [3]])


class TestRandomSource:
    """Tests for start-vector generation."""

    def test_unit_vector(self):
        """Start vectors have unit length and non-negative entries."""
        v = random_unit_vector(5, rng=0)
        assert np.linalg.norm(v) == pytest.approx(1.0)
        assert np.all(v >= 0)

    def test_seed_reproducible(self):
        """Equal seeds give equal vectors."""
        assert np.array_equal(random_unit_vector(4, rng=1), random_unit_vector(4, rng=1))

    def test_generator_passthrough(self):
        """An existing Generator is used as-is."""
        generator = np.random.default_rng(0)
        assert make_rng(generator) is generator


# =============================================================================
# Deflation
# =============================================================================


class TestDeflation:
    """Tests for Hotelling deflation."""

    def test_diagonal(self):
        """Removing (2, e_0) from diag(2, 1) leaves diag(0, 1)."""
        result = deflate([[2.0, 0.0], [0.0, 1.0]], 2.0, [1.0, 0.0])
        assert np.array_equal(result, [[0.0, 0.0], [0.0, 1.0]])

    def test_input_not_mutated(self):
        """A new matrix is returned; the input is unchanged."""
        matrix = [row[:] for row in PATH_4]
        deflate(matrix, 1.0, [0.5, 0.5, 0.5, 0.5])
        assert matrix == PATH_4

    def test_removes_eigenvalue_from_spectrum(self):
        """The found eigenvalue is replaced by zero; the rest stay."""
        eigenvalues, eigenvectors = np.linalg.eigh(PATH_4)
        deflated = deflate(PATH_4, eigenvalues[-1], eigenvectors[:, -1])
        expected = sorted(list(eigenvalues[:-1]) + [0.0])
        assert sorted(np.linalg.eigvalsh(deflated)) == pytest.approx(expected, abs=1e-10)

    def test_next_power_iteration_finds_second(self):
        """Power iteration on the deflated matrix moves to the next eigenvalue."""
        first = power_iteration(PATH_4, rng=12)
        deflated = deflate(PATH_4, first.eigenvalue, first.eigenvector)
        second = power_iteration(deflated, rng=13)
        assert second.eigenvalue == pytest.approx(2.0, abs=1e-6)

    def test_length_mismatch_raises(self):
        """Eigenvector length must match the matrix order."""
        with pytest.raises(InvalidMatrixError, match="does not match"):
            deflate(PATH_4, 1.0, [1.0, 0.0])

    def test_accepts_eigen_result(self):
        """Fields of an EigenResult can be passed straight through."""
        result = EigenResult(eigenvalue=1.0, eigenvector=np.array([0.0, 1.0]))
        deflated = deflate(np.eye(2), result.eigenvalue, result.eigenvector)
        assert np.array_equal(deflated, [[1.0, 0.0], [0.0, 0.0]])
