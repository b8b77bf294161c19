"""Error types raised by the codec and its collaborators.

Every error carries a ``stage`` naming where the encode failed
(parse, allocate, hash or io) so callers can report it without
inspecting the message.
"""

from __future__ import annotations

from typing import Optional


class EncodeError(RuntimeError):
    stage: str = "encode"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return f"{self.stage}: {self.message}"


class AlphabetTooSmall(EncodeError, ValueError):
    """Fewer than two symbols were parsed from the alphabet source."""

    stage = "parse"

    def __init__(self, found: int) -> None:
        super().__init__(f"not enough characters (found {found}, need at least 2)")
        self.found = found


class AllocationFailure(EncodeError):
    stage = "allocate"


class HashFailure(EncodeError):
    """The hashing backend rejected the parameters or is unavailable."""

    stage = "hash"


class IoFailure(EncodeError):
    stage = "io"

    def __init__(self, message: str, path: Optional[str] = None) -> None:
        super().__init__(message)
        self.path = path
