from argonbase.alphabet import Alphabet, Symbol, parse_alphabet
from argonbase.capacity import digit_capacity
from argonbase.config import EncoderConfig, HashParams
from argonbase.divider import RadixBuffer
from argonbase.encoder import Encoder, encode, encode_digits, render
from argonbase.errors import AllocationFailure, AlphabetTooSmall, EncodeError, HashFailure, IoFailure
from argonbase.fileio import read_file, write_file
from argonbase.hashing import HashRequest, hash_digest
from argonbase.pipeline import hash_and_encode

__version__ = "0.1.0"

__all__ = [
    "Alphabet",
    "AllocationFailure",
    "AlphabetTooSmall",
    "EncodeError",
    "Encoder",
    "EncoderConfig",
    "HashFailure",
    "HashParams",
    "HashRequest",
    "IoFailure",
    "RadixBuffer",
    "Symbol",
    "digit_capacity",
    "encode",
    "encode_digits",
    "hash_and_encode",
    "hash_digest",
    "parse_alphabet",
    "read_file",
    "render",
    "write_file",
    "__version__",
]
