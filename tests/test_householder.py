"""Tests for Householder QR decomposition."""

import numpy as np
import pytest

from graph_spectrum import InvalidMatrixError, householder_qr
from graph_spectrum.linalg import householder_vector


def random_matrix(n, seed):
    """Random square matrix with reproducible entries."""
    return np.random.default_rng(seed).normal(size=(n, n))


def assert_valid_qr(a, q, r, atol=1e-10):
    """Check Q R = A, Q^T Q = I and R upper triangular."""
    n = np.asarray(a).shape[0]
    assert np.allclose(q @ r, a, atol=atol)
    assert np.allclose(q.T @ q, np.eye(n), atol=atol)
    assert np.array_equal(np.tril(r, k=-1), np.zeros((n, n)))


class TestHouseholderVector:
    """Tests for single reflection vectors."""

    def test_reflects_onto_first_axis(self):
        """[3, 4] is reflected onto -5 e_0."""
        column = np.array([3.0, 4.0])
        v = householder_vector(column)
        reflected = column - 2 * v * (v @ column)
        assert reflected == pytest.approx([-5.0, 0.0])

    def test_negative_leading_entry(self):
        """Sign of alpha follows -sign(column[0])."""
        column = np.array([-3.0, 4.0])
        v = householder_vector(column)
        reflected = column - 2 * v * (v @ column)
        assert reflected == pytest.approx([5.0, 0.0])

    def test_unit_length(self):
        """The vector is normalised."""
        v = householder_vector(np.array([1.0, 2.0, 2.0]))
        assert np.linalg.norm(v) == pytest.approx(1.0)

    def test_zero_column(self):
        """A zero column yields a zero vector."""
        assert np.array_equal(householder_vector(np.zeros(3)), np.zeros(3))


class TestHouseholderQR:
    """Tests for the full decomposition."""

    def test_identity(self):
        """QR of the 2x2 identity is (I, I)."""
        q, r = householder_qr(np.eye(2))
        assert np.allclose(q, np.eye(2))
        assert np.allclose(r, np.eye(2))

    def test_named_fields(self):
        """Result exposes q and r by name."""
        result = householder_qr([[2, 1], [1, 2]])
        assert result.q.shape == (2, 2)
        assert result.r.shape == (2, 2)

    @pytest.mark.parametrize("n", [2, 3, 5, 8])
    def test_random_round_trip(self, n):
        """Q R reproduces random matrices; Q is orthogonal."""
        a = random_matrix(n, seed=n)
        q, r = householder_qr(a)
        assert_valid_qr(a, q, r)

    def test_laplacian_round_trip(self):
        """Singular Laplacians decompose cleanly."""
        a = [[2, -1, 0, -1], [-1, 2, -1, 0], [0, -1, 2, -1], [-1, 0, -1, 2]]
        q, r = householder_qr(a)
        assert_valid_qr(a, q, r)
        assert abs(r[3, 3]) < 1e-10

    def test_upper_triangular_input_untouched(self):
        """Upper-triangular input skips every reflection."""
        a = np.array([[1.0, 2.0, 3.0], [0.0, 4.0, 5.0], [0.0, 0.0, 6.0]])
        q, r = householder_qr(a)
        assert np.array_equal(q, np.eye(3))
        assert np.array_equal(r, a)

    def test_negative_diagonal(self):
        """Negative pivots are handled by the sign choice."""
        a = [[-4.0, 1.0], [3.0, 2.0]]
        q, r = householder_qr(a)
        assert_valid_qr(a, q, r)
        assert abs(r[0, 0]) == pytest.approx(5.0)

    def test_order_one(self):
        """A 1x1 matrix needs no reflections."""
        q, r = householder_qr([[7.0]])
        assert np.array_equal(q, [[1.0]])
        assert np.array_equal(r, [[7.0]])

    def test_order_zero(self):
        """The empty matrix decomposes into empty factors."""
        q, r = householder_qr([])
        assert q.shape == (0, 0)
        assert r.shape == (0, 0)

    def test_input_not_mutated(self):
        """The caller's array is unchanged."""
        a = random_matrix(4, seed=11)
        original = a.copy()
        householder_qr(a)
        assert np.array_equal(a, original)

    def test_non_square_raises(self):
        """Non-square input is rejected."""
        with pytest.raises(InvalidMatrixError):
            householder_qr([[1, 2, 3], [4, 5, 6]])
