"""Argon2id digest of a message, via the `cryptography` package.

The nonce is Argon2's salt; secret and associated data are the optional
keyed-hashing inputs from RFC 9106.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from cryptography.exceptions import AlreadyFinalized, UnsupportedAlgorithm
from cryptography.hazmat.primitives.kdf.argon2 import Argon2id

from .config import HashParams
from .errors import HashFailure

log = logging.getLogger(__name__)

MIN_NONCE_LENGTH = 8


@dataclass(frozen=True)
class HashRequest:
    message: bytes
    nonce: bytes
    secret: bytes = b""
    associated_data: bytes = b""
    params: HashParams = field(default_factory=HashParams)

    def __repr__(self) -> str:
        # keep message and secret out of logs and tracebacks
        return (
            f"HashRequest(message=<{len(self.message)} bytes>, nonce=<{len(self.nonce)} bytes>, "
            f"secret=<{len(self.secret)} bytes>, associated_data=<{len(self.associated_data)} bytes>, "
            f"params={self.params!r})"
        )


def argon2id_supported() -> bool:
    try:
        kdf = Argon2id(salt=b"\x00" * MIN_NONCE_LENGTH, length=4, iterations=1, lanes=1, memory_cost=8)
        kdf.derive(b"probe")
    except UnsupportedAlgorithm:
        return False
    return True


def hash_digest(request: HashRequest) -> bytes:
    """Return the Argon2id tag (params.tag_length bytes) for the request."""
    params = request.params
    try:
        params.validate()
    except ValueError as e:
        raise HashFailure(str(e)) from e
    if len(request.nonce) < MIN_NONCE_LENGTH:
        raise HashFailure(f"nonce must be at least {MIN_NONCE_LENGTH} bytes, got {len(request.nonce)}")

    log.debug(
        "argon2id: tag_length=%d iterations=%d parallelism=%d memory_kib=%d",
        params.tag_length,
        params.iterations,
        params.parallelism,
        params.effective_memory_kib,
    )
    try:
        kdf = Argon2id(
            salt=request.nonce,
            length=params.tag_length,
            iterations=params.iterations,
            lanes=params.parallelism,
            memory_cost=params.effective_memory_kib,
            ad=request.associated_data or None,
            secret=request.secret or None,
        )
        return kdf.derive(request.message)
    except UnsupportedAlgorithm as e:
        raise HashFailure(f"Argon2id is not available in this cryptography backend: {e}") from e
    except (ValueError, TypeError, AlreadyFinalized) as e:
        raise HashFailure(str(e)) from e
    except MemoryError as e:
        raise HashFailure(f"Memory allocation error: {e}") from e
