"""Binary extension fields GF(2^8), GF(2^64), GF(2^128), GF(2^192) and GF(2^256).

Elements are stored as integers whose bit ``i`` is the coefficient of ``X^i``.
Byte serialisation is little-endian.
"""

from __future__ import annotations

from typing import ClassVar, Iterable, Sequence, TypeVar

from volezk.randomness import rand_bytes

__all__ = ["BinaryField", "BF8", "BF64", "BF128", "BF192", "BF256"]

F = TypeVar("F", bound="BinaryField")


def _le(hex_text: str) -> int:
    return int.from_bytes(bytes.fromhex(hex_text), "little")


class BinaryField:
    """An element of GF(2^BITS) reduced by ``X^BITS + MODULUS``."""

    __slots__ = ("value",)

    BITS: ClassVar[int] = 0
    MODULUS: ClassVar[int] = 0
    ALPHA: ClassVar[tuple[int, ...]] = ()

    def __init__(self, value: int = 0) -> None:
        bits = type(self).BITS
        if bits == 0:
            raise TypeError("BinaryField is abstract; use a concrete field class")
        value = int(value)
        if not 0 <= value < (1 << bits):
            raise ValueError(f"value does not fit in {bits} bits")
        self.value = value

    # construction -----------------------------------------------------

    @classmethod
    def zero(cls: type[F]) -> F:
        return cls(0)

    @classmethod
    def one(cls: type[F]) -> F:
        return cls(1)

    @classmethod
    def from_bit(cls: type[F], bit: int) -> F:
        return cls(int(bit) & 1)

    @classmethod
    def from_bytes(cls: type[F], data: bytes) -> F:
        size = cls.BITS // 8
        if len(data) != size:
            raise ValueError(f"{cls.__name__} needs exactly {size} bytes, got {len(data)}")
        return cls(int.from_bytes(bytes(data), "little"))

    @classmethod
    def random(cls: type[F]) -> F:
        return cls.from_bytes(rand_bytes(cls.BITS // 8))

    def to_bytes(self) -> bytes:
        return self.value.to_bytes(type(self).BITS // 8, "little")

    def is_zero(self) -> bool:
        return self.value == 0

    # arithmetic helpers -----------------------------------------------

    @classmethod
    def _dbl(cls, value: int) -> int:
        value <<= 1
        if value >> cls.BITS:
            value ^= (1 << cls.BITS) | cls.MODULUS
        return value

    @classmethod
    def _mul_int(cls, lhs: int, rhs: int, rhs_bits: int) -> int:
        result = 0
        for idx in range(rhs_bits):
            if (rhs >> idx) & 1:
                result ^= lhs
            lhs = cls._dbl(lhs)
        return result

    # operators --------------------------------------------------------

    def __add__(self: F, other: object) -> F:
        if type(other) is not type(self):
            return NotImplemented
        return type(self)(self.value ^ other.value)  # type: ignore[attr-defined]

    def __sub__(self: F, other: object) -> F:
        return self.__add__(other)

    def __mul__(self: F, other: object) -> F:
        if type(other) is not type(self):
            return NotImplemented
        cls = type(self)
        return cls(cls._mul_int(self.value, other.value, cls.BITS))  # type: ignore[attr-defined]

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.value == other.value  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.value))

    def __repr__(self) -> str:
        width = type(self).BITS // 4
        return f"{type(self).__name__}(0x{self.value:0{width}x})"

    def mul_64(self: F, other: "int | BF64") -> F:
        """Multiply by a 64-bit value (a GF(2^64) element or a plain integer)."""
        rhs = other.value if isinstance(other, BF64) else int(other)
        if not 0 <= rhs < (1 << 64):
            raise ValueError("multiplier does not fit in 64 bits")
        cls = type(self)
        return cls(cls._mul_int(self.value, rhs, 64))

    def mul_bit(self: F, bit: int) -> F:
        return self if int(bit) & 1 else type(self)(0)

    # combinations -----------------------------------------------------

    @classmethod
    def _require_alpha(cls) -> tuple[int, ...]:
        if not cls.ALPHA:
            raise TypeError(f"{cls.__name__} has no byte-combination constants")
        return cls.ALPHA

    @classmethod
    def byte_combine(cls: type[F], xs: Sequence[F]) -> F:
        """Combine eight field elements, one per bit, into a single element."""
        alpha = cls._require_alpha()
        items = list(xs)
        if len(items) != 8:
            raise ValueError(f"byte_combine needs 8 elements, got {len(items)}")
        out = items[0]
        for x, a in zip(items[1:], alpha):
            out = out + x * cls(a)
        return out

    @classmethod
    def byte_combine_bits(cls: type[F], x: int) -> F:
        """Combine the eight bits of the byte ``x`` into a single element."""
        alpha = cls._require_alpha()
        x = int(x)
        if not 0 <= x < 256:
            raise ValueError("x must be a byte")
        value = x & 1
        for i, a in enumerate(alpha, start=1):
            if (x >> i) & 1:
                value ^= a
        return cls(value)

    @classmethod
    def sum_poly(cls: type[F], xs: Iterable[F]) -> F:
        """Return ``sum(xs[i] * X^i)`` over exactly BITS elements."""
        items = list(xs)
        if len(items) != cls.BITS:
            raise ValueError(f"sum_poly needs {cls.BITS} elements, got {len(items)}")
        value = items[-1].value
        for x in reversed(items[:-1]):
            value = cls._dbl(value) ^ x.value
        return cls(value)


class BF8(BinaryField):
    """GF(2^8) with modulus X^8 + X^4 + X^3 + X + 1."""

    __slots__ = ()
    BITS = 8
    MODULUS = 0b11011

    def inverse(self) -> "BF8":
        """Return the multiplicative inverse; zero maps to zero."""
        t2 = self * self
        t3 = self * t2
        t5 = t3 * t2
        t7 = t5 * t2
        t14 = t7 * t7
        t28 = t14 * t14
        t56 = t28 * t28
        t63 = t56 * t7
        t126 = t63 * t63
        t252 = t126 * t126
        return t252 * t2


class BF64(BinaryField):
    """GF(2^64) with modulus X^64 + X^4 + X^3 + X + 1."""

    __slots__ = ()
    BITS = 64
    MODULUS = 0b11011


class BF128(BinaryField):
    """GF(2^128) with modulus X^128 + X^7 + X^2 + X + 1."""

    __slots__ = ()
    BITS = 128
    MODULUS = (1 << 7) | (1 << 2) | (1 << 1) | 1
    ALPHA = (
        _le("0dce6055ace83fa1" "1c9a97a955853d05"),
        _le("e1ae8834ca5977ec" "84bbbf9c43b7f44c"),
        _le("a8463936ae02cfbf" "c6d2517d4f60ad35"),
        _le("49982e3c4830836b" "fe22a2404636cb0d"),
        _le("b4821b7b27492b25" "a5de881ae1109854"),
        _le("22ff2125eff22bc7" "751f0c6c68a581d6"),
        _le("bcf936e1948e7a7a" "e08fb74f1a315009"),
    )


class BF192(BinaryField):
    """GF(2^192) with modulus X^192 + X^7 + X^2 + X + 1."""

    __slots__ = ()
    BITS = 192
    MODULUS = (1 << 7) | (1 << 2) | (1 << 1) | 1
    ALPHA = (
        _le("6397386fd5a3c8cc" "eabd6e966cd765e6" "62366b0e14c80b31"),
        _le("bb50f47c9e6133b2" "263f63d5191ff67b" "34db91d4263793da"),
        _le("0d8a39f5132c6d9c" "198d320677e33282" "f64e753c700d3b0c"),
        _le("5df72bbd7c7420dd" "2ed25800ab42557a" "5112bc949c51ec45"),
        _le("f82bce8ae20cd5d8" "84bede67b78c1608" "4570a64b6a147dd6"),
        _le("bae1d5ee769c0f97" "4820d75faef7eaf3" "43ea6c695fbda629"),
        _le("71850665c25d94f5" "d3e9063962fd1960" "b0c4870f54567cc7"),
    )


class BF256(BinaryField):
    """GF(2^256) with modulus X^256 + X^10 + X^5 + X^2 + 1."""

    __slots__ = ()
    BITS = 256
    MODULUS = (1 << 10) | (1 << 5) | (1 << 2) | 1
    ALPHA = (
        _le("e7fede0b42889796" "674e47a0388dd6be" "6ae1f1f8459822df" "3358c920cfa8c904"),
        _le("c18922d52af55aa9" "2f07422c8dc4a52b" "eab0006c370d4ad1" "f14a5b9c694d4e06"),
        _le("1d9d803f83b3da55" "570f3b531e837117" "10ac3fad3f5796fb" "8df61170dbe39561"),
        _le("d5cd1bb0190501de" "f6e3301a91582775" "3fa09e48b678072a" "3888764fd64fc256"),
        _le("b6308ae929f5c298" "8284f140d4dbc41b" "81a9497d9409be2f" "fc4f57716d0b2722"),
        _le("0b6744deb9af759e" "bcaff166c666edac" "7e1f99f23f2501f0" "f329fad12f373dc0"),
        _le("8be832b398b643ba" "0d6fb825d6c43752" "4515e8f42a2b652f" "b87b6bd209ea3e13"),
    )