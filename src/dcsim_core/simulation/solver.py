# src/dcsim_core/simulation/solver.py
import logging

import numpy as np

from ..constants import PIVOT_EPSILON
from .exceptions import SingularMatrixError

logger = logging.getLogger(__name__)

def solve_linear_system(matrix: np.ndarray, rhs: np.ndarray) -> np.ndarray:
    """
    Solves `matrix @ x = rhs` by Gaussian elimination with partial pivoting.

    At each step the row with the largest absolute entry in the pivot column is
    swapped into the pivot position. A pivot smaller than PIVOT_EPSILON marks a
    floating or disconnected unknown: its column is not eliminated and the unknown
    resolves to exactly 0 in back-substitution. Singular systems therefore never raise.

    The inputs are not modified.

    Args:
        matrix: Square (n, n) coefficient matrix.
        rhs: Right-hand side of length n.

    Returns:
        The solution vector of length n.

    Raises:
        ValueError: If the shapes are inconsistent.
        SingularMatrixError: If the solution contains NaN or Inf values.
    """
    a = np.array(matrix, dtype=float)
    b = np.array(rhs, dtype=float)
    if a.ndim != 2 or a.shape[0] != a.shape[1]:
        raise ValueError(f"MNA matrix must be square, got shape {a.shape}.")
    n = b.shape[0]
    if a.shape[0] != n:
        raise ValueError(f"Right-hand side has length {n}, expected {a.shape[0]}.")

    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        _eliminate(a, b)
        x = _back_substitute(a, b)

    if not np.all(np.isfinite(x)):
        logger.error("NaN or Inf detected in MNA solution vector.")
        raise SingularMatrixError(details="Elimination produced NaN/Inf values.", size=n)

    return x


def _eliminate(a: np.ndarray, b: np.ndarray):
    """Forward elimination with partial pivoting, in place."""
    n = b.shape[0]
    for i in range(n):
        pivot_row = i + int(np.argmax(np.abs(a[i:, i])))
        if pivot_row != i:
            a[[i, pivot_row], i:] = a[[pivot_row, i], i:]
            b[[i, pivot_row]] = b[[pivot_row, i]]

        if abs(a[i, i]) < PIVOT_EPSILON:
            continue

        factors = a[i + 1:, i] / a[i, i]
        a[i + 1:, i:] -= np.outer(factors, a[i, i:])
        a[i + 1:, i] = 0.0
        b[i + 1:] -= factors * b[i]


def _back_substitute(a: np.ndarray, b: np.ndarray) -> np.ndarray:
    n = b.shape[0]
    x = np.zeros(n, dtype=float)
    for i in range(n - 1, -1, -1):
        if abs(a[i, i]) < PIVOT_EPSILON:
            logger.debug(f"Unknown {i} has a singular pivot; resolving it to 0.")
            x[i] = 0.0
            continue
        x[i] = (b[i] - a[i, i + 1:] @ x[i + 1:]) / a[i, i]
    return x
