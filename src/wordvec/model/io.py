"""
Input Manager (Bundles)
Handles reading a word-vector bundle (zip archive) and parsing its payload
into a VectorStore.
"""
from __future__ import annotations

import logging
import lzma
import os
import zipfile
import zlib
from typing import Union

import numpy as np

from wordvec import config
from wordvec.analysis.kernels import gather_blocks
from wordvec.errors import ArchiveOpenError, MalformedModelError, PayloadNotFoundError
from wordvec.model.records import WordVectorRecord
from wordvec.model.store import VectorStore

# Get module logger
logger = logging.getLogger(__name__)

PathLike = Union[str, os.PathLike]


class IOManager:

    @staticmethod
    def read_payload(filepath: PathLike, entry_name: str = config.PAYLOAD_ENTRY_NAME) -> bytes:
        """
        Returns the bytes of the first bundle entry whose name contains ``entry_name``.

        Raises:
            ArchiveOpenError: The bundle is missing, not a zip archive, or the entry is corrupt.
            PayloadNotFoundError: No entry name contains ``entry_name``.
        """
        logger.info(f"Reading bundle: {filepath}")
        try:
            with zipfile.ZipFile(filepath, "r") as archive:
                for info in archive.infolist():
                    logger.debug(f"Bundle entry: {info.filename}")
                    if info.is_dir() or entry_name not in info.filename:
                        continue

                    payload = archive.read(info)
                    logger.debug(f"Read {len(payload)} bytes from '{info.filename}'.")
                    return payload

        # RuntimeError covers encrypted entries and unsupported compression
        except (
            OSError, EOFError, RuntimeError,
            zipfile.BadZipFile, zipfile.LargeZipFile, zlib.error, lzma.LZMAError,
        ) as e:
            msg = f"Could not read bundle '{filepath}': {e}"
            logger.error(msg)
            raise ArchiveOpenError(msg) from e

        msg = f"Bundle '{filepath}' has no entry matching '{entry_name}'."
        logger.error(msg)
        raise PayloadNotFoundError(msg)

    @staticmethod
    def parse_payload(payload: bytes) -> VectorStore:
        """Decodes payload bytes and builds the vector table."""
        return IOManager.build_store(WordVectorRecord.from_json(payload))

    @staticmethod
    def build_store(record: WordVectorRecord) -> VectorStore:
        """
        Reconstructs every token's vector from the record's parallel arrays.

        Token i owns the block ``vectors[cursors[i] * dim : cursors[i] * dim + dim]``
        where ``dim = len(vectors) / len(cursors)``. Cursors may be any
        permutation of block indices.

        Raises:
            MalformedModelError: The arrays are inconsistent with each other.
        """
        n_cursors = record.cursors.size
        n_components = record.vectors.size

        if n_cursors == 0:
            raise MalformedModelError("Model has no cursors.")
        if len(record.tokens) != n_cursors:
            raise MalformedModelError(
                f"Token count ({len(record.tokens)}) does not match cursor count ({n_cursors})."
            )
        if n_components % n_cursors != 0:
            raise MalformedModelError(
                f"Vector component count ({n_components}) is not a multiple of cursor count ({n_cursors})."
            )

        dim = n_components // n_cursors

        # Valid cursors address one of the n_cursors blocks
        out_of_range = (record.cursors < 0) | (record.cursors >= n_cursors)
        if out_of_range.any():
            bad = int(np.flatnonzero(out_of_range)[0])
            raise MalformedModelError(
                f"Cursor {int(record.cursors[bad])} of token '{record.tokens[bad]}' "
                f"points outside the {n_components} vector components."
            )

        matrix = gather_blocks(record.vectors, record.cursors, dim)
        store = VectorStore.from_arrays(record.tokens, matrix)
        logger.debug(f"Built vector table: {len(store)} tokens, dim={dim}.")
        return store

    @staticmethod
    def load_store(filepath: PathLike, entry_name: str = config.PAYLOAD_ENTRY_NAME) -> VectorStore:
        return IOManager.parse_payload(IOManager.read_payload(filepath, entry_name))
