"""Arithmetic in GF(2^256) with modulus X^256 + X^10 + X^5 + X^2 + 1.

Elements are stored as integers whose bit ``i`` is the coefficient of ``X^i``.
Byte serialisation is little-endian (least significant 64-bit word first).
"""

from __future__ import annotations

import functools
from typing import Iterable, Sequence, Union

__all__ = [
    "GF256",
    "dot_product",
    "field_base",
    "combine_vec",
    "vec_mul_transposed_matrix",
]

_BITS = 256
_MASK = (1 << _BITS) - 1
_HEX_DIGITS = _BITS // 4
_BYTE_SIZE = _BITS // 8

# Spread table: byte b -> 16-bit value with b's bits at even positions.
_SPREAD = tuple(
    sum(((b >> i) & 1) << (2 * i) for i in range(8)) for b in range(256)
)


def _clmul(lhs: int, rhs: int) -> int:
    """Carry-less product of two non-negative integers."""
    if rhs.bit_count() > lhs.bit_count() if hasattr(int, "bit_count") else False:
        lhs, rhs = rhs, lhs
    result = 0
    while rhs:
        low = rhs & -rhs
        result ^= lhs << (low.bit_length() - 1)
        rhs ^= low
    return result


def _reduce(value: int) -> int:
    """Reduce a polynomial of degree below 512 modulo the field polynomial."""
    while value >> _BITS:
        top = value >> _BITS
        value = (value & _MASK) ^ top ^ (top << 2) ^ (top << 5) ^ (top << 10)
    return value


def _mul(lhs: int, rhs: int) -> int:
    return _reduce(_clmul(lhs, rhs))


def _sqr(value: int) -> int:
    spread = 0
    shift = 0
    while value:
        spread |= _SPREAD[value & 0xFF] << shift
        value >>= 8
        shift += 16
    return _reduce(spread)


RowLike = Union[int, "GF256", Sequence[int]]


def _row_value(row: RowLike) -> int:
    if isinstance(row, GF256):
        return row.value
    if isinstance(row, int):
        if not 0 <= row <= _MASK:
            raise ValueError("matrix row does not fit in 256 bits")
        return row
    words = list(row)
    if len(words) != 4:
        raise ValueError(f"matrix row needs 4 words, got {len(words)}")
    value = 0
    for i, word in enumerate(words):
        word = int(word)
        if not 0 <= word < (1 << 64):
            raise ValueError("matrix row word does not fit in 64 bits")
        value |= word << (64 * i)
    return value


def _matrix_rows(matrix: Sequence[RowLike]) -> list[int]:
    rows = [_row_value(row) for row in matrix]
    if len(rows) != _BITS:
        raise ValueError(f"matrix needs {_BITS} rows, got {len(rows)}")
    return rows


class GF256:
    """An element of GF(2^256)."""

    __slots__ = ("value",)

    BYTE_SIZE = _BYTE_SIZE

    def __init__(self, value: int = 0) -> None:
        value = int(value)
        if not 0 <= value <= _MASK:
            raise ValueError("value does not fit in 256 bits")
        self.value = value

    @classmethod
    def from_hex(cls, text: str) -> "GF256":
        """Parse a hexadecimal string that starts with ``0x`` or ``0X``."""
        if not (text.startswith("0x") or text.startswith("0X")):
            raise ValueError("input needs to be a hex number")
        digits = text[2:]
        if len(digits) > _HEX_DIGITS:
            raise ValueError("input hex is too large")
        if not digits:
            return cls(0)
        try:
            return cls(int(digits, 16))
        except ValueError as exc:
            raise ValueError("input needs to be a hex number") from exc

    @classmethod
    def from_bytes(cls, data: bytes) -> "GF256":
        if len(data) != _BYTE_SIZE:
            raise ValueError(f"GF256 needs exactly {_BYTE_SIZE} bytes, got {len(data)}")
        return cls(int.from_bytes(bytes(data), "little"))

    def to_bytes(self) -> bytes:
        return self.value.to_bytes(_BYTE_SIZE, "little")

    def is_zero(self) -> bool:
        return self.value == 0

    def with_coeff(self, idx: int) -> "GF256":
        """Return a copy with the coefficient of ``X^idx`` set."""
        if not 0 <= idx < _BITS:
            raise IndexError(f"coefficient index {idx} out of range")
        return GF256(self.value | (1 << idx))

    def __add__(self, other: object) -> "GF256":
        if not isinstance(other, GF256):
            return NotImplemented
        return GF256(self.value ^ other.value)

    def __sub__(self, other: object) -> "GF256":
        return self.__add__(other)

    def __mul__(self, other: object) -> "GF256":
        if not isinstance(other, GF256):
            return NotImplemented
        return GF256(_mul(self.value, other.value))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GF256):
            return NotImplemented
        return self.value == other.value

    def __hash__(self) -> int:
        return hash(("GF256", self.value))

    def __str__(self) -> str:
        return f"0x{self.value:0{_HEX_DIGITS}x}"

    def __repr__(self) -> str:
        return f"GF256({self})"

    def inverse(self) -> "GF256":
        """Multiplicative inverse via an addition chain; zero maps to zero."""
        u = (1, 2, 3, 6, 12, 15, 30, 60, 120, 240, 255)
        q_index = (0, 0, 2, 3, 2, 5, 6, 7, 8, 5)
        powers = [self.value]
        for q in q_index:
            b_p = powers[-1]
            for _ in range(u[q]):
                b_p = _sqr(b_p)
            powers.append(_mul(b_p, powers[q]))
        return GF256(_sqr(powers[-1]))

    def inverse_slow(self) -> "GF256":
        """Multiplicative inverse by square-and-multiply; zero maps to zero."""
        t1 = self.value
        t2 = _sqr(t1)
        for _ in range(254):
            t1 = _mul(t1, t2)
            t2 = _sqr(t2)
        return GF256(_sqr(t1))

    def multiply_with_matrix(self, matrix: Sequence[RowLike]) -> "GF256":
        """Bit ``k`` of the result is the parity of ``self & matrix[k]``."""
        result = 0
        for k, row in enumerate(_matrix_rows(matrix)):
            result |= (bin(self.value & row).count("1") & 1) << k
        return GF256(result)

    def multiply_with_transposed_matrix(self, matrix: Sequence[RowLike]) -> "GF256":
        """XOR of the rows ``matrix[k]`` for every set bit ``k`` of ``self``."""
        rows = _matrix_rows(matrix)
        result = 0
        value = self.value
        while value:
            low = value & -value
            result ^= rows[low.bit_length() - 1]
            value ^= low
        return GF256(result)


def dot_product(lhs: Sequence[GF256], rhs: Sequence[GF256]) -> GF256:
    """Inner product with a single final reduction."""
    if len(lhs) != len(rhs):
        raise ValueError("adding vectors of different sizes")
    accum = 0
    for a, b in zip(lhs, rhs):
        accum ^= _clmul(a.value, b.value)
    return GF256(_reduce(accum))


@functools.lru_cache(maxsize=None)
def _field_base() -> tuple[GF256, ...]:
    return tuple(GF256(1 << i) for i in range(_BITS))


def field_base() -> list[GF256]:
    """The 256 monomials ``X^0 .. X^255``."""
    return list(_field_base())


def combine_vec(vec: Sequence[GF256]) -> GF256:
    """Combine 256 elements, bit order reversed inside each byte."""
    items = list(vec)
    if len(items) != _BITS:
        raise ValueError(f"combine_vec needs {_BITS} elements, got {len(items)}")
    base = _field_base()
    result = GF256(0)
    for k, item in enumerate(items):
        result += item * base[k // 8 * 8 + 7 - k % 8]
    return result


def vec_mul_transposed_matrix(vec: Sequence[GF256], matrix: Iterable[RowLike]) -> GF256:
    """Sum of ``matrix[i] * vec[i']`` with ``i'`` the bit-reversed-in-byte index."""
    items = list(vec)
    if len(items) != _BITS:
        raise ValueError(f"vector needs {_BITS} elements, got {len(items)}")
    rows = _matrix_rows(list(matrix))
    result = GF256(0)
    for i, row in enumerate(rows):
        result += GF256(row) * items[i // 8 * 8 + 7 - i % 8]
    return result