"""
Vector Store
============
Immutable lookup from token to vector and token to precomputed norm.

The table is built once by the bundle parser and never changes afterwards,
so any number of threads may read it without locking.
"""
from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Iterable, Mapping, Optional, Tuple, TYPE_CHECKING

import numpy as np

from wordvec.analysis.kernels import row_norms
from wordvec.errors import MalformedModelError

if TYPE_CHECKING:
    import numpy.typing as npt


@dataclass(frozen=True, eq=False)
class VectorStore:
    """
    Token lookup over a read-only ``(rows, dim)`` matrix.

    Attributes:
        index: Token -> row of ``vectors`` and ``norms``.
        vectors: Vector table, one row per loaded token.
        norms: Euclidean length of each row.
    """
    index: Mapping[str, int]
    vectors: npt.NDArray[np.float64]
    norms: npt.NDArray[np.float64]

    def __post_init__(self) -> None:
        if self.vectors.ndim != 2:
            raise MalformedModelError(f"Vector table must be 2-D, got shape {self.vectors.shape}.")
        if self.norms.shape != (self.vectors.shape[0],):
            raise MalformedModelError(
                f"Norms shape {self.norms.shape} does not match {self.vectors.shape[0]} vectors."
            )
        rows = self.vectors.shape[0]
        if any(not 0 <= row < rows for row in self.index.values()):
            raise MalformedModelError("Token index points outside the vector table.")

        # Freeze the table so callers cannot mutate shared vectors
        self.vectors.flags.writeable = False
        self.norms.flags.writeable = False
        if not isinstance(self.index, MappingProxyType):
            object.__setattr__(self, "index", MappingProxyType(dict(self.index)))

    @classmethod
    def from_arrays(
        cls,
        tokens: Iterable[str],
        vectors: npt.NDArray[np.float64],
    ) -> VectorStore:
        """
        Builds a store from tokens and their vectors (row i belongs to token i).

        A token listed more than once keeps its last vector.
        """
        matrix = np.array(vectors, dtype=np.float64, order="C")
        index = {token: row for row, token in enumerate(tokens)}
        norms = row_norms(matrix) if matrix.ndim == 2 else np.empty(0)
        return cls(index=index, vectors=matrix, norms=norms)

    def vector(self, token: str) -> Tuple[Optional[npt.NDArray[np.float64]], bool]:
        row = self.index.get(token)
        if row is None:
            return None, False
        return self.vectors[row], True

    def norm(self, token: str) -> Tuple[float, bool]:
        row = self.index.get(token)
        if row is None:
            return 0.0, False
        return float(self.norms[row]), True

    def dimensionality(self) -> int:
        return int(self.vectors.shape[1])

    @property
    def tokens(self) -> Tuple[str, ...]:
        """Loaded tokens in load order."""
        return tuple(self.index)

    def __len__(self) -> int:
        return len(self.index)

    def __contains__(self, token: object) -> bool:
        return token in self.index

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(tokens={len(self)}, dim={self.dimensionality()})"
