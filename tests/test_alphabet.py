from __future__ import annotations

import pytest

from argonbase.alphabet import parse_alphabet, scan_symbols
from argonbase.errors import AlphabetTooSmall, EncodeError


def test_lf_delimited():
    a = parse_alphabet(b"a\nb\nc\n")
    assert a.base == 3
    assert list(a) == [b"a", b"b", b"c"]
    assert a.max_symbol_length == 1


def test_crlf_and_blank_lines_are_skipped():
    a = parse_alphabet(b"\r\n\r\nlo\r\n\r\nhi\r\n\n\n")
    assert list(a) == [b"lo", b"hi"]
    assert a.base == 2


def test_last_token_without_trailing_newline():
    a = parse_alphabet(b"x\nyz")
    assert list(a) == [b"x", b"yz"]
    assert a.max_symbol_length == 2


def test_multibyte_utf8_symbols():
    src = "α\nβ\nγγ\n".encode("utf-8")
    a = parse_alphabet(src)
    assert [s.decode("utf-8") for s in a] == ["α", "β", "γγ"]
    assert a.max_symbol_length == 4


def test_duplicate_symbols_keep_their_positions():
    a = parse_alphabet(b"0\n0\n1")
    assert a.base == 3
    assert a[1] == b"0"


def test_spans_point_into_source():
    spans, max_len = scan_symbols(b"\nab\r\ncde")
    assert [(s.start, s.end) for s in spans] == [(1, 3), (5, 8)]
    assert [len(s) for s in spans] == [2, 3]
    assert max_len == 3


def test_view_is_zero_copy():
    a = parse_alphabet(b"one\ntwo\n")
    v = a.view(1)
    assert isinstance(v, memoryview)
    assert bytes(v) == b"two"


@pytest.mark.parametrize("src", [b"", b"\n\r\n", b"x\n", b"\r\nonly"])
def test_fewer_than_two_symbols_rejected(src: bytes):
    with pytest.raises(AlphabetTooSmall) as ei:
        parse_alphabet(src)
    assert ei.value.stage == "parse"
    assert isinstance(ei.value, EncodeError)
    assert isinstance(ei.value, ValueError)
