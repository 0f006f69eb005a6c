# kernels.py
from __future__ import annotations

import numpy as np
import numpy.typing as npt
import numba as nb

# ---- JIT’d table kernels ----

@nb.njit(cache=True)
def gather_blocks(
    flat: npt.NDArray[np.float64],
    cursors: npt.NDArray[np.int64],
    dim: int,
) -> npt.NDArray[np.float64]:
    """
    Copy the block of ``dim`` components starting at ``cursors[i] * dim`` into row i.

    Cursors must already be validated against the length of ``flat``.
    """
    n = cursors.shape[0]
    out = np.empty((n, dim), dtype=np.float64)
    for i in range(n):
        start = cursors[i] * dim
        for j in range(dim):
            out[i, j] = flat[start + j]
    return out

@nb.njit(cache=True, fastmath=True)
def row_norms(matrix: npt.NDArray[np.float64]) -> npt.NDArray[np.float64]:
    """Euclidean length of every row."""
    n, dim = matrix.shape
    out = np.empty(n, dtype=np.float64)
    for i in range(n):
        acc = 0.0
        for j in range(dim):
            acc += matrix[i, j] * matrix[i, j]
        out[i] = np.sqrt(acc)
    return out
