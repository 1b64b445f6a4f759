"""Universal hashes used by the VOLE proof system.

``vole_hash`` compresses a VOLE column to ``lambda + 16`` bits, and
``ZkHasher`` folds a sequence of field elements into one element.
"""

from __future__ import annotations

import operator
from typing import Iterable

from volezk.binfield import BF64, BF128, BF192, BF256, BinaryField

__all__ = ["vole_hash", "ZkHasher", "zk_hash"]

UNIVERSAL_HASH_B = 2

_FIELDS: dict[int, type[BinaryField]] = {128: BF128, 192: BF192, 256: BF256}


def _vole_field(lambda_: int) -> type[BinaryField]:
    return _FIELDS.get(int(lambda_), BF128)


def _strict_field(lambda_: int) -> type[BinaryField]:
    try:
        return _FIELDS[int(lambda_)]
    except KeyError:
        raise ValueError(f"unsupported security parameter {lambda_}") from None


def _tail_block(x: bytes, ell: int, lam: int, length_lambda: int) -> bytes:
    lb = lam // 8
    rem = (ell + lam) % lam
    count = lb if rem == 0 else rem // 8
    start = (length_lambda - 1) * lb
    return bytes(x[start : start + count]).ljust(lb, b"\0")


def _compute_h1(t: bytes, x: bytes, tail: bytes, lam: int, length_lambda: int) -> BF64:
    lb = lam // 8
    b_t = BF64.from_bytes(t)
    words = [tail[p : p + 8] for p in range(lb - 8, -1, -8)]
    words += [x[p : p + 8] for p in range(length_lambda * lb - lb - 8, -1, -8)]
    h1 = BF64.zero()
    running_t = BF64.one()
    for word in words:
        h1 = h1 + running_t * BF64.from_bytes(bytes(word))
        running_t = running_t * b_t
    return h1


def vole_hash(sd: bytes, x: bytes, ell: int, lambda_: int) -> bytes:
    """Hash ``x`` (``ell + 2*lambda + 16`` bits) with the seed ``sd``.

    Security parameters 256 and 192 select their own field; any other value
    uses GF(2^128). The result has ``lambda/8 + 2`` bytes.
    """
    field = _vole_field(lambda_)
    lam = field.BITS
    lb = lam // 8
    ell = operator.index(ell)
    if ell < 0:
        raise ValueError("ell must be non-negative")
    sd = bytes(sd)
    x = bytes(x)
    if len(sd) < 5 * lb + 8:
        raise ValueError(f"seed needs at least {5 * lb + 8} bytes, got {len(sd)}")
    x1_start = (ell + lam) // 8
    if len(x) < x1_start + lb + UNIVERSAL_HASH_B:
        raise ValueError(
            f"input needs at least {x1_start + lb + UNIVERSAL_HASH_B} bytes, got {len(x)}"
        )

    length_lambda = (ell + 2 * lam - 1) // lam
    tail = _tail_block(x, ell, lam, length_lambda)

    h0 = field.from_bytes(tail)
    b_s = field.from_bytes(sd[4 * lb : 5 * lb])
    running_s = b_s
    for i in range(1, length_lambda):
        offset = (length_lambda - 1 - i) * lb
        h0 = h0 + running_s * field.from_bytes(x[offset : offset + lb])
        running_s = running_s * b_s

    h1 = _compute_h1(sd[5 * lb : 5 * lb + 8], x, tail, lam, length_lambda)
    r0, r1, r2, r3 = (field.from_bytes(sd[i * lb : (i + 1) * lb]) for i in range(4))
    h2 = r0 * h0 + r1.mul_64(h1)
    h3 = r2 * h0 + r3.mul_64(h1)

    digest = h2.to_bytes() + h3.to_bytes()[:UNIVERSAL_HASH_B]
    x1 = x[x1_start : x1_start + lb + UNIVERSAL_HASH_B]
    return bytes(a ^ b for a, b in zip(digest, x1))


class ZkHasher:
    """Incremental hash of field elements keyed by the seed ``sd``."""

    def __init__(self, sd: bytes, lambda_: int) -> None:
        field = _strict_field(lambda_)
        lb = field.BITS // 8
        sd = bytes(sd)
        if len(sd) < 3 * lb + 8:
            raise ValueError(f"seed needs at least {3 * lb + 8} bytes, got {len(sd)}")
        self._field = field
        self._r0 = field.from_bytes(sd[:lb])
        self._r1 = field.from_bytes(sd[lb : 2 * lb])
        self._s = field.from_bytes(sd[2 * lb : 3 * lb])
        self._t = BF64.from_bytes(sd[3 * lb : 3 * lb + 8])
        self._h0 = field.zero()
        self._h1 = field.zero()

    def _check(self, value: BinaryField) -> None:
        if type(value) is not self._field:
            raise TypeError(
                f"expected {self._field.__name__}, got {type(value).__name__}"
            )

    def update(self, value: BinaryField) -> None:
        """Absorb one field element."""
        self._check(value)
        self._h0 = self._h0 * self._s + value
        self._h1 = self._h1.mul_64(self._t) + value

    def finalize(self, x1: BinaryField) -> bytes:
        """Return the digest masked with ``x1``."""
        self._check(x1)
        return (self._r0 * self._h0 + self._r1 * self._h1 + x1).to_bytes()


def zk_hash(sd: bytes, xs: Iterable[BinaryField], lambda_: int) -> bytes:
    """Hash all but the last element of ``xs``, masking with the last one."""
    items = list(xs)
    if not items:
        raise ValueError("zk_hash needs at least one element")
    hasher = ZkHasher(sd, lambda_)
    for value in items[:-1]:
        hasher.update(value)
    return hasher.finalize(items[-1])