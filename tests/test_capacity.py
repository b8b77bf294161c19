from __future__ import annotations

import pytest
from hypothesis import given, strategies as st

from argonbase.capacity import bit_width, digit_capacity


def _exact_max_digits(bit_length: int, base: int) -> int:
    n = (1 << bit_length) - 1
    count = 1
    while n >= base:
        n //= base
        count += 1
    return count


@pytest.mark.parametrize("base,width", [(2, 2), (3, 2), (4, 3), (16, 5), (94, 7), (255, 8), (256, 9)])
def test_bit_width(base: int, width: int):
    assert bit_width(base) == width
    assert bit_width(base) == base.bit_length()


def test_known_bounds():
    # 256-bit tag: base 2 needs 256 digits, base 16 needs 64
    assert digit_capacity(256, 2) == 258
    assert digit_capacity(256, 16) == 66
    assert digit_capacity(256, 94) >= 40


@given(
    bit_length=st.integers(min_value=0, max_value=2048),
    base=st.integers(min_value=2, max_value=1 << 20),
)
def test_never_underestimates(bit_length: int, base: int):
    assert digit_capacity(bit_length, base) >= _exact_max_digits(bit_length, base)


@pytest.mark.parametrize("base", [2, 3, 10, 16, 58, 64, 94, 255, 256, 257, 65536])
def test_never_underestimates_common_bases(base: int):
    for tag_length in (1, 4, 16, 32, 64, 128):
        assert digit_capacity(tag_length * 8, base) >= _exact_max_digits(tag_length * 8, base)


def test_invalid_arguments():
    with pytest.raises(ValueError):
        digit_capacity(8, 1)
    with pytest.raises(ValueError):
        digit_capacity(-1, 2)
