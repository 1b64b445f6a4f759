"""Dot-product constraints for a VOLE-based zero-knowledge proof.

The witness holds three 32-byte bit vectors ``a``, ``b`` and ``a AND b``.
Each of the ``mutigate_num`` multiplication gates checks ``a_i * b_i = c_i``.
Field elements are any objects supporting ``+``, ``-`` and ``*``.
"""

from __future__ import annotations

from typing import Sequence, TypeVar

__all__ = [
    "gen_witness_dot_product",
    "constrain_prover_dot_product",
    "constrain_verifier_dot_product",
]

_VEC_BYTES = 32
_MAX_GATES = _VEC_BYTES * 8

E = TypeVar("E")


def _bit(data: bytes, index: int) -> int:
    return (data[index // 8] >> (index % 8)) & 1


def gen_witness_dot_product(vf: bytes, y: bytes) -> bytes:
    """Return ``vf || y || (vf AND y)`` over the first 32 bytes of each."""
    if len(vf) < _VEC_BYTES or len(y) < _VEC_BYTES:
        raise ValueError(f"inputs need at least {_VEC_BYTES} bytes")
    a = bytes(vf[:_VEC_BYTES])
    b = bytes(y[:_VEC_BYTES])
    return a + b + bytes(x & z for x, z in zip(a, b))


def _check(values: Sequence[object], mutigate_num: int) -> None:
    if not 0 <= mutigate_num <= _MAX_GATES:
        raise ValueError(f"mutigate_num must be between 0 and {_MAX_GATES}")
    if len(values) < 3 * mutigate_num:
        raise ValueError(f"need at least {3 * mutigate_num} values, got {len(values)}")


def constrain_prover_dot_product(
    v: Sequence[E], witness: bytes, mutigate_num: int
) -> tuple[list[E], list[E]]:
    """Return the prover's constant and linear coefficients ``(A_0, A_1)``."""
    _check(v, mutigate_num)
    if len(witness) < 2 * _VEC_BYTES:
        raise ValueError(f"witness needs at least {2 * _VEC_BYTES} bytes")
    m = mutigate_num
    a_0: list[E] = []
    a_1: list[E] = []
    for i in range(m):
        v_a, v_b, v_c = v[i], v[i + m], v[i + 2 * m]
        a_0.append(v_a * v_b)  # type: ignore[operator]
        linear = v_c - v_c  # type: ignore[operator]
        if _bit(witness, i):
            linear = linear + v_b
        if _bit(witness[_VEC_BYTES:], i):
            linear = linear + v_a
        a_1.append(linear - v_c)
    return a_0, a_1


def constrain_verifier_dot_product(q: Sequence[E], delta: E, mutigate_num: int) -> list[E]:
    """Return the verifier's values ``B_i = q_a q_b - q_c delta``."""
    _check(q, mutigate_num)
    m = mutigate_num
    return [q[i] * q[i + m] - q[i + 2 * m] * delta for i in range(m)]  # type: ignore[operator]