"""
Error Taxonomy
==============
Every error raised by the package derives from :class:`WordVecError` and from
the closest builtin exception, so ``except OSError`` or ``except LookupError``
in calling code keeps working.
"""
from __future__ import annotations


class WordVecError(Exception):
    """Base class for all package errors."""


class ArchiveOpenError(WordVecError, OSError):
    """The bundle could not be opened or read (missing, not a zip, corrupt)."""


class PayloadNotFoundError(WordVecError, LookupError):
    """No entry in the bundle matches the payload entry name."""


class MalformedModelError(WordVecError, ValueError):
    """The payload record is structurally inconsistent."""


class TokenNotFoundError(WordVecError, LookupError):
    """A token has no vector or norm in the loaded model."""

    def __init__(self, token: str, message: str | None = None) -> None:
        self.token = token
        super().__init__(message or f"No vector found for token '{token}'")


class EmptyInputError(WordVecError, ValueError):
    """An operation that averages over its input received no tokens."""


class DegenerateVectorError(WordVecError, ArithmeticError):
    """A token's vector has zero length, so its direction is undefined."""

    def __init__(self, token: str) -> None:
        self.token = token
        super().__init__(f"Vector for token '{token}' has zero norm")
