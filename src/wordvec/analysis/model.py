from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import Protocol, Sequence, TYPE_CHECKING

import numpy as np

from wordvec import config
from wordvec.errors import DegenerateVectorError, EmptyInputError, TokenNotFoundError
from wordvec.model.io import IOManager, PathLike
from wordvec.model.records import WordVectorRecord
from wordvec.model.store import VectorStore

if TYPE_CHECKING:
    import numpy.typing as npt

logger = logging.getLogger(__name__)


class MLModel(Protocol):
    def transform(self, sentence: Sequence[str]) -> npt.NDArray[np.float64]: ...


class ModelLoader(Protocol):
    def load(self, filepath: PathLike) -> MLModel: ...


@dataclass(frozen=True, eq=False)
class WordToVecModel:
    """
    Word-embedding model over an immutable vector table.

    Safe to share between threads: no method mutates the model.
    """
    store: VectorStore
    op: str = ""

    @property
    def dimensionality(self) -> int:
        return self.store.dimensionality()

    def transform(self, sentence: Sequence[str]) -> npt.NDArray[np.float64]:
        """
        Averages the vectors of a tokenized sentence.

        Tokens without a vector contribute nothing, but the sum is still
        divided by the full sentence length.

        Args:
            sentence: Ordered tokens.

        Returns:
            A new array of length ``dimensionality``.

        Raises:
            EmptyInputError: ``sentence`` has no tokens.
        """
        sentence_len = len(sentence)
        if sentence_len == 0:
            raise EmptyInputError("Cannot transform an empty sentence.")

        total = np.zeros(self.dimensionality, dtype=np.float64)
        for token in sentence:
            vector, found = self.store.vector(token)
            if found:
                total += vector

        total *= 1.0 / sentence_len
        return total

    def distance(self, token1: str, token2: str) -> float:
        """
        Cosine similarity between two tokens.

        The result is not clamped, so rounding may put it slightly outside [-1, 1].

        Raises:
            TokenNotFoundError: One of the tokens is not in the model.
            DegenerateVectorError: One of the tokens has a zero vector.
        """
        vector1, vector1_found = self.store.vector(token1)
        if not vector1_found:
            raise TokenNotFoundError(token1)

        vector2, vector2_found = self.store.vector(token2)
        if not vector2_found:
            raise TokenNotFoundError(token2)

        norm1, norm1_found = self.store.norm(token1)
        if not norm1_found:
            raise TokenNotFoundError(token1, f"No norm found for token '{token1}'")

        norm2, norm2_found = self.store.norm(token2)
        if not norm2_found:
            raise TokenNotFoundError(token2, f"No norm found for token '{token2}'")

        if norm1 == 0.0:
            raise DegenerateVectorError(token1)
        if norm2 == 0.0:
            raise DegenerateVectorError(token2)

        return float(np.dot(vector1, vector2)) / (norm1 * norm2)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(op={self.op!r}, tokens={len(self.store)}, dim={self.dimensionality})"


class WordToVecModelLoader:
    """Loads a WordToVecModel from a bundle."""

    def __init__(self, entry_name: str = config.PAYLOAD_ENTRY_NAME) -> None:
        self.entry_name = entry_name

    def load(self, filepath: PathLike) -> WordToVecModel:
        logger.info(f"Loading model from: {filepath}")
        payload = IOManager.read_payload(filepath, self.entry_name)
        record = WordVectorRecord.from_json(payload)
        model = WordToVecModel(store=IOManager.build_store(record), op=record.op)
        logger.info(f"Model loaded: {model}")
        return model


def load_model(filepath: PathLike, entry_name: str = config.PAYLOAD_ENTRY_NAME) -> WordToVecModel:
    """Reads a bundle and returns its model; see :class:`WordToVecModelLoader`."""
    return WordToVecModelLoader(entry_name).load(filepath)
