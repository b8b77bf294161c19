from __future__ import annotations

import logging
from typing import Optional

from .config import EncoderConfig
from .encoder import Encoder
from .hashing import HashRequest, hash_digest

log = logging.getLogger(__name__)


def hash_and_encode(
    request: HashRequest,
    alphabet_source: bytes,
    *,
    config: Optional[EncoderConfig] = None,
) -> bytes:
    """Hash the request with Argon2id and render the tag in the given alphabet.

    The alphabet is parsed before hashing, so an unusable alphabet fails fast
    without paying for the key derivation.
    """
    encoder = Encoder.from_source(alphabet_source, config)
    log.info("Found %d characters", encoder.base)
    tag = hash_digest(request)
    return encoder.encode(tag)
