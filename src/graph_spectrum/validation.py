"""
Input validation utilities for the eigenvalue engine.

Provides centralized validation functions for matrices, graph links and
solver parameters. Raises descriptive exceptions on invalid input so that
malformed data is rejected at the boundary, before any numerical routine
runs.
"""

from __future__ import annotations

from typing import Any, Optional, Sequence

import numpy as np


class ValidationError(ValueError):
    """Base exception for eigenvalue engine validation errors."""

    pass


class InvalidMatrixError(ValidationError):
    """Raised when a matrix is ragged, non-square or non-numeric."""

    pass


class InvalidLinkError(ValidationError):
    """Raised when a link references invalid nodes."""

    pass


class InvalidConfigError(ValidationError):
    """Raised when a tolerance or iteration setting is invalid."""

    pass


def validate_square_matrix(matrix: Any) -> np.ndarray:
    """
    Validate a square matrix and return a private float copy of it.

    Accepts nested sequences (lists, tuples) or a 2-D numpy array. An
    empty sequence is the valid 0 x 0 matrix.

    Args:
        matrix: Sequence of rows, each a sequence of real numbers

    Returns:
        A new ``float64`` array of shape (n, n); the input is never shared

    Raises:
        InvalidMatrixError: If the matrix is ragged, not 2-D, not square,
            or holds non-numeric or non-finite entries
    """
    if isinstance(matrix, np.ndarray):
        if matrix.ndim == 1 and matrix.shape[0] == 0:
            return np.zeros((0, 0))
        if matrix.ndim != 2:
            raise InvalidMatrixError(f"Matrix must be 2-dimensional, got {matrix.ndim} dimension(s)")
        rows = matrix.shape[0]
        cols = matrix.shape[1]
    else:
        try:
            rows = len(matrix)
        except TypeError:
            raise InvalidMatrixError(
                f"Matrix must be a sequence of rows, got {type(matrix).__name__}"
            ) from None
        if rows == 0:
            return np.zeros((0, 0))
        for i, row in enumerate(matrix):
            if isinstance(row, (str, bytes)) or not hasattr(row, "__len__"):
                raise InvalidMatrixError(f"Row {i} is not a sequence")
            if len(row) != rows:
                raise InvalidMatrixError(
                    f"Matrix must be square: row {i} has {len(row)} entries, expected {rows}"
                )
        cols = rows

    # float() maps None to nan; report it as non-numeric instead
    if not isinstance(matrix, np.ndarray) or matrix.dtype == object:
        for i, row in enumerate(matrix):
            if any(entry is None for entry in row):
                raise InvalidMatrixError(f"Matrix entries must be real numbers: row {i} holds None")

    if rows != cols:
        raise InvalidMatrixError(f"Matrix must be square, got shape ({rows}, {cols})")

    try:
        result = np.array(matrix, dtype=float)
    except (TypeError, ValueError) as exc:
        raise InvalidMatrixError(f"Matrix entries must be real numbers: {exc}") from None

    if result.ndim != 2:
        raise InvalidMatrixError(f"Matrix must be 2-dimensional, got {result.ndim} dimension(s)")

    if not np.all(np.isfinite(result)):
        raise InvalidMatrixError("Matrix entries must be finite")

    return result


def validate_link_indices(
    links: Sequence[Any],
    node_count: int,
    strict: bool = True,
) -> list[tuple[int, str]]:
    """
    Validate that all link source/target indices are within bounds.

    Args:
        links: Sequence of Link objects, (source, target) pairs or dicts
        node_count: Number of nodes in the graph
        strict: If True, raises on invalid. If False, returns list of issues.

    Returns:
        List of (link_index, issue_description) tuples

    Raises:
        InvalidLinkError: If strict=True and invalid links found
    """
    issues: list[tuple[int, str]] = []

    for i, link in enumerate(links):
        src = _get_index(link, "source")
        tgt = _get_index(link, "target")

        for attr, val in (("source", src), ("target", tgt)):
            if val is None:
                issues.append((i, f"Link {i}: {attr} is missing"))
            elif not _is_integer(val):
                issues.append((i, f"Link {i}: {attr} index {val!r} is not an integer"))
            elif val < 0 or val >= node_count:
                issues.append(
                    (i, f"Link {i}: {attr} index {val} out of bounds [0, {node_count})")
                )

    if strict and issues:
        msg = "Invalid link indices:\n" + "\n".join(issue[1] for issue in issues)
        raise InvalidLinkError(msg)

    return issues


def validate_tolerance(tolerance: float) -> float:
    """
    Validate a convergence tolerance.

    Raises:
        InvalidConfigError: If tolerance is not a positive finite number
    """
    tolerance = float(tolerance)
    if not np.isfinite(tolerance) or tolerance <= 0:
        raise InvalidConfigError(f"tolerance must be positive, got {tolerance}")
    return tolerance


def validate_iterations(iterations: int, name: str = "iterations") -> int:
    """
    Validate iteration count is positive.

    Args:
        iterations: Number of iterations
        name: Parameter name used in the error message

    Returns:
        Validated iteration count

    Raises:
        InvalidConfigError: If iterations < 1
    """
    if int(iterations) != iterations or iterations < 1:
        raise InvalidConfigError(f"{name} must be an integer >= 1, got {iterations}")
    return int(iterations)


def validate_timeout(timeout: Optional[float]) -> Optional[float]:
    """Validate an optional deadline in seconds (None disables it)."""
    if timeout is None:
        return None
    timeout = float(timeout)
    if timeout < 0:
        raise InvalidConfigError(f"timeout must be >= 0, got {timeout}")
    return timeout


def _get_index(obj: Any, attr: str) -> Any:
    """Extract a raw endpoint from a Link, a pair or a dict (None if absent)."""
    if isinstance(obj, dict):
        val = obj.get(attr)
    elif isinstance(obj, (tuple, list)):
        if len(obj) != 2:
            return None
        val = obj[0] if attr == "source" else obj[1]
    else:
        val = getattr(obj, attr, None)

    if isinstance(val, np.integer):
        return int(val)
    return val


def _is_integer(val: Any) -> bool:
    return isinstance(val, int) and not isinstance(val, bool)


__all__ = [
    "ValidationError",
    "InvalidMatrixError",
    "InvalidLinkError",
    "InvalidConfigError",
    "validate_square_matrix",
    "validate_link_indices",
    "validate_tolerance",
    "validate_iterations",
    "validate_timeout",
]
