from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from .alphabet import Alphabet, parse_alphabet
from .capacity import digit_capacity
from .config import EncoderConfig
from .divider import RadixBuffer
from .errors import AllocationFailure

log = logging.getLogger(__name__)


def header_line(base: int) -> bytes:
    return f"Found {base} characters\n".encode("ascii")


def encode_digits(digest: bytes, base: int, *, empty_on_zero: bool = False) -> List[int]:
    """Return the digits of `digest` in base `base`, most significant first.

    The caller's digest is never modified; division runs over a private copy
    that is wiped before returning.
    """
    if not digest:
        raise ValueError("digest must not be empty")
    if empty_on_zero and not any(digest):
        return []
    try:
        buf = RadixBuffer.from_bytes(digest)
    except MemoryError as e:
        raise AllocationFailure("could not copy digest") from e
    try:
        # the first pass always runs, so a zero digest still yields one 0 digit
        digits: List[int] = []
        while not buf.exhausted:
            digits.append(buf.divide(base))
    finally:
        buf.wipe()

    digits.reverse()
    log.debug("encoded %d-byte digest into %d base-%d digits", len(digest), len(digits), base)
    return digits


def render(
    digits: Sequence[int],
    alphabet: Alphabet,
    *,
    header: bool = False,
    size_hint: Optional[int] = None,
) -> bytes:
    """Concatenate the symbol for each digit, in the order given.

    size_hint pre-sizes the output buffer; it must be at least the rendered size.
    """
    prefix = header_line(alphabet.base) if header else b""
    if size_hint is None:
        size_hint = len(prefix) + len(digits) * alphabet.max_symbol_length
    try:
        out = bytearray(size_hint)
    except MemoryError as e:
        raise AllocationFailure("could not allocate output buffer") from e

    pos = len(prefix)
    out[:pos] = prefix
    for d in digits:
        sym = alphabet.view(d)
        out[pos : pos + len(sym)] = sym
        pos += len(sym)
    if pos > size_hint:
        raise AllocationFailure(f"output overflowed its {size_hint}-byte buffer")
    return bytes(out[:pos])


@dataclass
class Encoder:
    """A parsed alphabet plus output options, reusable across digests."""
    alphabet: Alphabet
    config: EncoderConfig = field(default_factory=EncoderConfig)

    @staticmethod
    def from_source(alphabet_source: bytes, config: Optional[EncoderConfig] = None) -> "Encoder":
        return Encoder(alphabet=parse_alphabet(alphabet_source), config=config or EncoderConfig())

    @property
    def base(self) -> int:
        return self.alphabet.base

    def capacity(self, digest_length: int) -> int:
        return digit_capacity(digest_length * 8, self.base)

    def output_size(self, digest_length: int) -> int:
        """Worst-case rendered size in bytes, header included."""
        size = self.capacity(digest_length) * self.alphabet.max_symbol_length
        if self.config.header:
            size += len(header_line(self.base))
        return size

    def digits(self, digest: bytes) -> List[int]:
        return encode_digits(digest, self.base, empty_on_zero=self.config.empty_on_zero)

    def encode(self, digest: bytes) -> bytes:
        return render(
            self.digits(digest),
            self.alphabet,
            header=self.config.header,
            size_hint=self.output_size(len(digest)),
        )


def encode(digest: bytes, alphabet_source: bytes, *, config: Optional[EncoderConfig] = None) -> bytes:
    """Encode `digest` as a big-endian number written with the alphabet's symbols."""
    return Encoder.from_source(alphabet_source, config).encode(digest)
