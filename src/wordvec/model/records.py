"""
Payload Record
==============
Typed view of the JSON record stored in a bundle's payload entry.

The record holds three parallel attributes: the token list, one integer
cursor per token and the flattened vector components. Each attribute is a
small object whose value list is keyed by its element type and which may
carry a ``type`` tag (``"list"`` in the reference format).
"""
from __future__ import annotations

from dataclasses import dataclass, field
import json
import logging
from typing import Any, Dict, Optional, Tuple, TYPE_CHECKING

import numpy as np

from wordvec import config
from wordvec.errors import MalformedModelError

if TYPE_CHECKING:
    import numpy.typing as npt

logger = logging.getLogger(__name__)


def _attribute(attributes: Dict[str, Any], name: str, values_key: str) -> Tuple[list, Optional[str]]:
    """Returns the value list and type tag of one attribute."""
    attr = attributes.get(name)
    if not isinstance(attr, dict):
        raise MalformedModelError(f"Attribute '{name}' is missing or not an object.")

    values = attr.get(values_key)
    if not isinstance(values, list):
        raise MalformedModelError(f"Attribute '{name}' has no '{values_key}' list.")

    type_tag = attr.get(config.TYPE_TAG_KEY)
    return values, type_tag if isinstance(type_tag, str) else None


def _numeric_array(values: list, name: str, kinds: str, dtype: type) -> npt.NDArray:
    """
    Converts a JSON list into a flat numpy array of the requested dtype.

    Args:
        values: Decoded JSON list.
        name: Attribute name, used in error messages.
        kinds: Accepted numpy dtype kinds of the decoded list (e.g. "iu").
        dtype: Target dtype.
    """
    if not values:
        return np.empty(0, dtype=dtype)

    # JSON true/false would otherwise be read as 1/0 inside a numeric list
    if any(isinstance(value, bool) for value in values):
        raise MalformedModelError(f"Attribute '{name}' contains boolean values.")

    try:
        raw = np.asarray(values)
    except (ValueError, TypeError) as e:
        raise MalformedModelError(f"Attribute '{name}' is not a flat list of numbers: {e}") from e

    if raw.ndim != 1 or raw.dtype.kind not in kinds:
        raise MalformedModelError(
            f"Attribute '{name}' is not a flat list of the expected type "
            f"(decoded as {raw.dtype} with {raw.ndim} dimension(s))."
        )
    array = raw.astype(dtype, copy=False)
    if array.dtype.kind == "f" and not np.isfinite(array).all():
        raise MalformedModelError(f"Attribute '{name}' contains NaN or infinite values.")
    return array


@dataclass(frozen=True, eq=False)
class WordVectorRecord:
    """
    Parallel arrays of a serialized word-vector model.

    Attributes:
        tokens: Ordered vocabulary.
        cursors: Start block of each token's vector in ``vectors``.
        vectors: Flattened vector components.
        op: Operation name of the serialized model (informational).
        type_tags: Per-attribute ``type`` tags, as found in the record.
    """
    tokens: Tuple[str, ...]
    cursors: npt.NDArray[np.int64]
    vectors: npt.NDArray[np.float64]
    op: str = ""
    type_tags: Dict[str, Optional[str]] = field(default_factory=dict)

    @staticmethod
    def from_dict(data: Any) -> WordVectorRecord:
        if not isinstance(data, dict):
            raise MalformedModelError("Model record is not a JSON object.")

        attributes = data.get(config.ATTRIBUTES_KEY)
        if not isinstance(attributes, dict):
            raise MalformedModelError(f"Model record has no '{config.ATTRIBUTES_KEY}' object.")

        words, words_type = _attribute(attributes, config.WORDS_KEY, config.STRING_VALUES_KEY)
        indices, indices_type = _attribute(attributes, config.INDICES_KEY, config.LONG_VALUES_KEY)
        components, vectors_type = _attribute(attributes, config.WORD_VECTORS_KEY, config.DOUBLE_VALUES_KEY)

        if not all(isinstance(word, str) for word in words):
            raise MalformedModelError(f"Attribute '{config.WORDS_KEY}' contains non-string tokens.")

        op = data.get(config.OP_KEY, "")
        return WordVectorRecord(
            tokens=tuple(words),
            cursors=_numeric_array(indices, config.INDICES_KEY, "iu", np.int64),
            vectors=_numeric_array(components, config.WORD_VECTORS_KEY, "iuf", np.float64),
            op=op if isinstance(op, str) else str(op),
            type_tags={
                config.WORDS_KEY: words_type,
                config.INDICES_KEY: indices_type,
                config.WORD_VECTORS_KEY: vectors_type,
            },
        )

    @staticmethod
    def from_json(payload: bytes) -> WordVectorRecord:
        try:
            data = json.loads(payload)
        except ValueError as e:
            # JSONDecodeError and UnicodeDecodeError are both ValueErrors
            raise MalformedModelError(f"Payload is not valid JSON: {e}") from e

        record = WordVectorRecord.from_dict(data)
        logger.debug(
            f"Decoded record '{record.op}': {len(record.tokens)} tokens, "
            f"{record.cursors.size} cursors, {record.vectors.size} components."
        )
        return record
