"""Alphabet parsing.

An alphabet source is a byte buffer of tokens separated by CR and/or LF.
Each non-empty token is one symbol; its position is its digit value.
Symbols are kept as spans into the source, nothing is copied until rendering.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterator, List, Tuple

from .errors import AlphabetTooSmall

log = logging.getLogger(__name__)

_DELIMITERS = frozenset(b"\r\n")


@dataclass(frozen=True)
class Symbol:
    start: int
    end: int

    def __len__(self) -> int:
        return self.end - self.start


@dataclass(frozen=True)
class Alphabet:
    source: bytes
    symbols: Tuple[Symbol, ...]
    max_symbol_length: int

    @property
    def base(self) -> int:
        return len(self.symbols)

    def __len__(self) -> int:
        return len(self.symbols)

    def __iter__(self) -> Iterator[bytes]:
        for i in range(len(self.symbols)):
            yield self[i]

    def __getitem__(self, index: int) -> bytes:
        sym = self.symbols[index]
        return self.source[sym.start : sym.end]

    def view(self, index: int) -> memoryview:
        """Zero-copy view of one symbol's bytes."""
        sym = self.symbols[index]
        return memoryview(self.source)[sym.start : sym.end]


def scan_symbols(source: bytes) -> Tuple[List[Symbol], int]:
    """Split source on runs of CR/LF; return (spans, longest span length)."""
    spans: List[Symbol] = []
    max_len = 0
    start = -1
    for i, b in enumerate(source):
        if b in _DELIMITERS:
            if start >= 0:
                spans.append(Symbol(start, i))
                max_len = max(max_len, i - start)
                start = -1
        elif start < 0:
            start = i
    # last token may run to end of buffer
    if start >= 0:
        spans.append(Symbol(start, len(source)))
        max_len = max(max_len, len(source) - start)
    return spans, max_len


def parse_alphabet(source: bytes) -> Alphabet:
    source = bytes(source)
    spans, max_len = scan_symbols(source)
    if len(spans) < 2:
        raise AlphabetTooSmall(len(spans))
    log.debug("parsed alphabet: base=%d max_symbol_length=%d", len(spans), max_len)
    return Alphabet(source=source, symbols=tuple(spans), max_symbol_length=max_len)
