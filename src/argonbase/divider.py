"""In-place long division of a big-endian byte buffer by a small divisor."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class RadixBuffer:
    """A private, mutable copy of a digest being divided down to zero.

    `length` counts the live bytes at the front of `data`. Each division
    drops leading zero quotient bytes, so `length` never grows and reaches
    0 exactly when the remaining value is 0.
    """
    data: bytearray
    length: int

    @staticmethod
    def from_bytes(digest: bytes) -> "RadixBuffer":
        data = bytearray(digest)
        return RadixBuffer(data=data, length=len(data))

    @property
    def exhausted(self) -> bool:
        return self.length == 0

    def value(self) -> int:
        return int.from_bytes(self.data[: self.length], "big")

    def divide(self, base: int) -> int:
        """Replace the value with value // base and return value % base."""
        if base < 2:
            raise ValueError(f"base must be >= 2, got {base}")
        data = self.data
        acc = 0
        pos = 0
        leading = True
        for i in range(self.length):
            acc = (acc << 8) | data[i]
            q, acc = divmod(acc, base)
            data[pos] = q
            if leading and q == 0:
                self.length -= 1
            else:
                pos += 1
                leading = False
        return acc

    def wipe(self) -> None:
        for i in range(len(self.data)):
            self.data[i] = 0
        self.length = 0
