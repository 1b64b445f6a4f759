"""Hamming-weight circuit witness and its multiplication-gate constraints.

A tree of full and half adders sums the bits of a 256-bit (``n == 7``) or
512-bit (``n == 8``) input. ``gen_witness_255`` lays out every intermediate
sum and carry bit, and the constraint functions turn each adder into one
multiplication gate for a VOLE-based zero-knowledge proof.

Bits are numbered least significant first inside each byte. Field elements
are any objects supporting ``+``, ``-`` and ``*``.
"""

from __future__ import annotations

from typing import Sequence, TypeVar

__all__ = [
    "get_bit",
    "set_bit",
    "full_adder",
    "half_adder",
    "gen_witness_255",
    "mutigate_u",
    "mutigate_values",
    "constrain_prover",
    "constrain_verifier",
]

E = TypeVar("E")

_INPUT_BYTES = {7: 256 // 8, 8: 512 // 8}


def get_bit(value: int, position: int) -> int:
    """Return bit ``position`` of ``value``."""
    if position < 0:
        raise ValueError(f"bit position must be non-negative, got {position}")
    return (int(value) >> position) & 1


def set_bit(value: int, position: int, bit: int) -> int:
    """Return the byte ``value`` with bit ``position`` set to ``bit``."""
    if not 0 <= position < 8:
        raise ValueError(f"bit position must be between 0 and 7, got {position}")
    mask = 1 << position
    return (int(value) & ~mask & 0xFF) | ((1 if bit else 0) << position)


def _shl(shift: int) -> int:
    # Shifts by a negative count yield zero.
    return 1 << shift if shift >= 0 else 0


def _layer_bytes(layer: int, n: int) -> tuple[int, int]:
    """Byte widths of the sum and carry regions of an adder layer."""
    pos_1 = max(_shl(n + 1 - layer), 8)
    pos_2 = max(_shl(n - layer), 8)
    return pos_1 // 8, pos_2 // 8


def _get(values: bytearray, offset: int, byte: int, bit: int) -> int:
    return get_bit(values[offset + byte], bit)


def _put(values: bytearray, offset: int, byte: int, bit: int, value: int) -> None:
    values[offset + byte] = set_bit(values[offset + byte], bit, value)


def full_adder(values: bytearray, offset: int, layer: int, index: int, n: int) -> None:
    """Evaluate full adder ``index`` of ``layer`` in place.

    The layer's bits start at byte ``offset`` of ``values``.
    """
    b1, b2 = _layer_bytes(layer, n)
    if index == 0:
        x1 = _get(values, offset, 0, 0)
        x2 = _get(values, offset, 0, 1)
        x3 = _get(values, offset, 0, 2)
    else:
        x1 = _get(values, offset, b1 + (index - 1) // 8, (index - 1) % 8)
        x2 = _get(values, offset, (2 * index + 1) // 8, (2 * index + 1) % 8)
        x3 = _get(values, offset, (2 * index + 2) // 8, (2 * index + 2) % 8)
    sum_bit = x1 ^ x2 ^ x3
    carry_bit = ((x1 ^ x2) & (x1 ^ x3)) ^ x1
    _put(values, offset, b1 + index // 8, index % 8, sum_bit)
    _put(values, offset, b1 + b2 + index // 8, index % 8, carry_bit)


def half_adder(values: bytearray, offset: int, layer: int, n: int) -> None:
    """Evaluate the half adder closing ``layer`` in place; a no-op for ``n == 8``."""
    if n == 8:
        return
    b1, b2 = _layer_bytes(layer, n)
    x1 = _get(values, offset, b1 - 1, 7)
    if layer == 7:
        x2 = _get(values, offset, b1 - 1, 0)
    else:
        x2 = _get(values, offset, b1 + b2 - 1, _shl(n - layer - 2) % 8)
    _put(values, offset, b1 + b2 + b2 - 1, 7, x1 & x2)
    _put(values, offset, b1 + b2 - 1, 7, x1 ^ x2)


def gen_witness_255(inputs: bytes, n: int, size: int) -> bytes:
    """Return a ``size``-byte witness holding ``inputs`` and every adder output."""
    if n not in _INPUT_BYTES:
        raise ValueError(f"n must be 7 or 8, got {n}")
    copy_len = _INPUT_BYTES[n]
    if len(inputs) < copy_len:
        raise ValueError(f"inputs need at least {copy_len} bytes, got {len(inputs)}")
    if size < copy_len:
        raise ValueError(f"size must be at least {copy_len}, got {size}")
    value = bytearray(size)
    value[:copy_len] = bytes(inputs[:copy_len])
    pos = 0
    try:
        for i in range(n):
            for j in range((1 << (n - i)) - 1):
                full_adder(value, pos // 8, i, j, n)
            half_adder(value, pos // 8, i, n)
            if i >= n - 2:
                pos += 16
            else:
                pos += (1 << (n + 1 - i)) + (1 << (n - i))
        half_adder(value, pos // 8, 7, n)
    except IndexError:
        raise ValueError(f"size {size} is too small for n={n}") from None
    return bytes(value)


def mutigate_u(witness: bytes, n: int) -> list[int]:
    """Return the witness bits of every gate as ``a | b << 1 | (a & b) << 2``."""
    if n < 0:
        raise ValueError(f"n must be non-negative, got {n}")

    def gate(a: int, b: int) -> int:
        return a | (b << 1) | ((a & b) << 2)

    def bit(byte: int, position: int) -> int:
        return get_bit(witness[off + byte], position)

    pos_1, pos_2 = 1 << (n + 1), 1 << n
    off = 0
    gates: list[int] = []
    try:
        for i in range(n):
            x1, x2, x3 = bit(0, 0), bit(0, 1), bit(0, 2)
            gates.append(gate(x1 ^ x2, x1 ^ x3))
            for j in range(1, (1 << (n - i)) - 1):
                x1 = bit(pos_1 // 8 + (j - 1) // 8, (j - 1) % 8)
                x2 = bit((2 * j + 1) // 8, (2 * j + 1) % 8)
                x3 = bit((2 * j + 2) // 8, (2 * j + 2) % 8)
                gates.append(gate(x1 ^ x2, x1 ^ x3))
            if n == 7:
                x1 = bit(pos_1 // 8 - 1, 7)
                x2 = bit(pos_1 // 8 + pos_2 // 8 - 1, ((1 << (n - i)) - 2) % 8)
                gates.append(gate(x1, x2))
            off += pos_1 // 8 + pos_2 // 8
            if pos_1 > 8:
                pos_1 //= 2
            if pos_2 > 8:
                pos_2 //= 2
        if n == 7:
            x1 = bit(pos_1 // 8 - 1, 7)
            x2 = bit(pos_1 // 8 - 1, 0)
            gates.append(gate(x1, x2))
    except IndexError:
        raise ValueError(f"witness of {len(witness)} bytes is too short for n={n}") from None
    return gates


def mutigate_values(v: Sequence[E], n: int) -> list[E]:
    """Return the per-gate triples ``(a, b, c)`` built from one element per witness bit."""
    if n < 0:
        raise ValueError(f"n must be non-negative, got {n}")
    pos_1, pos_2 = 1 << (n + 1), 1 << n
    off = 0
    out: list[E] = []
    try:
        for i in range(n):
            v1, v2, v3 = v[off], v[off + 1], v[off + 2]
            carry = v[off + pos_1 + pos_2]
            out += [v1 + v2, v1 + v3, carry + v1]  # type: ignore[operator]
            for j in range(1, (1 << (n - i)) - 1):
                v1 = v[off + pos_1 + j - 1]
                v2 = v[off + 2 * j + 1]
                v3 = v[off + 2 * j + 2]
                carry = v[off + pos_1 + pos_2 + j]
                out += [v1 + v2, v1 + v3, carry + v1]  # type: ignore[operator]
            if n == 7:
                out += [
                    v[off + pos_1 - 1],
                    v[off + pos_1 + pos_2 - 2],
                    v[off + pos_1 + pos_2 + pos_2 - 1],
                ]
            off += pos_1 + pos_2
            if pos_1 > 8:
                pos_1 //= 2
            if pos_2 > 8:
                pos_2 //= 2
        if n == 7:
            out += [v[off + 7], v[off], v[off + pos_1 + pos_2 + 7]]
    except IndexError:
        raise ValueError(f"{len(v)} values are too few for n={n}") from None
    return out


def constrain_prover(
    v: Sequence[E], witness: bytes, mutigate_num: int, n: int
) -> tuple[list[E], list[E]]:
    """Return the prover's constant and linear coefficients ``(A_0, A_1)``."""
    u = mutigate_u(witness, n)
    values = mutigate_values(v, n)
    if not 0 <= mutigate_num <= len(u):
        raise ValueError(f"mutigate_num must be between 0 and {len(u)}, got {mutigate_num}")
    a_0: list[E] = []
    a_1: list[E] = []
    for i in range(mutigate_num):
        va, vb, vc = values[3 * i], values[3 * i + 1], values[3 * i + 2]
        a_0.append(va * vb)  # type: ignore[operator]
        linear = vc - vc  # type: ignore[operator]
        if get_bit(u[i], 0):
            linear = linear + vb
        if get_bit(u[i], 1):
            linear = linear + va
        a_1.append(linear - vc)
    return a_0, a_1


def constrain_verifier(q: Sequence[E], delta: E, mutigate_num: int, n: int) -> list[E]:
    """Return the verifier's values ``B_i = q_a q_b - q_c delta``."""
    values = mutigate_values(q, n)
    count = len(values) // 3
    if not 0 <= mutigate_num <= count:
        raise ValueError(f"mutigate_num must be between 0 and {count}, got {mutigate_num}")
    return [
        values[3 * i] * values[3 * i + 1] - values[3 * i + 2] * delta  # type: ignore[operator]
        for i in range(mutigate_num)
    ]