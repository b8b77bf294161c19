from __future__ import annotations


def bit_width(base: int) -> int:
    """Bits needed to represent base, i.e. floor(log2(base)) + 1."""
    width = 0
    while base:
        base >>= 1
        width += 1
    return width


def digit_capacity(bit_length: int, base: int) -> int:
    """Upper bound on the number of base-`base` digits of a bit_length-bit value.

    width - 1 == floor(log2(base)) <= log2(base), so (L + 1) / (width - 1)
    is never smaller than the exact L / log2(base); the ceiling plus one
    keeps the bound at or above the true digit count for every base >= 2.
    """
    if base < 2:
        raise ValueError(f"base must be >= 2, got {base}")
    if bit_length < 0:
        raise ValueError(f"bit_length must be >= 0, got {bit_length}")
    step = bit_width(base) - 1
    return -(-(bit_length + 1) // step) + 1
