"""Seed-tree vector commitments: tree layout, bit decoding and opening.

Trees are stored flat, level by level, starting with the root at index 0.
Each node holds ``lambda_bytes`` bytes, so node ``j`` occupies
``k[j * lambda_bytes : (j + 1) * lambda_bytes]``. Leaf indices are encoded
as little-endian bit lists.
"""

from __future__ import annotations

import operator
from dataclasses import dataclass
from typing import Sequence

__all__ = [
    "ParamSet",
    "binary_tree_node_count",
    "node_index",
    "bit_dec",
    "num_rec",
    "vector_open",
]

MAX_DEPTH = 12


@dataclass(frozen=True)
class ParamSet:
    """Security level and the split of the VOLE instances into two tree depths.

    The first ``tau0`` instances use trees of depth ``k0``, the remaining
    ``tau1`` use depth ``k1``.
    """

    lambda_: int
    tau: int
    tau0: int
    tau1: int
    k0: int
    k1: int

    def __post_init__(self) -> None:
        for name in ("lambda_", "tau", "tau0", "tau1", "k0", "k1"):
            value = operator.index(getattr(self, name))
            if value < 0:
                raise ValueError(f"{name} must be non-negative, got {value}")
        if self.lambda_ % 8:
            raise ValueError(f"lambda_ must be a multiple of 8, got {self.lambda_}")

    @property
    def lambda_bytes(self) -> int:
        return self.lambda_ // 8

    def depth_of(self, instance: int) -> int:
        """Tree depth used by the VOLE instance with index ``instance``."""
        if not 0 <= instance < self.tau:
            raise IndexError(f"instance {instance} out of range for tau={self.tau}")
        return self.k0 if instance < self.tau0 else self.k1


def _check_depth(depth: int) -> int:
    depth = operator.index(depth)
    if depth < 0:
        raise ValueError(f"depth must be non-negative, got {depth}")
    return depth


def binary_tree_node_count(depth: int) -> int:
    """Total number of nodes, root included, in a full tree of ``depth`` levels."""
    depth = _check_depth(depth)
    return (1 << (depth + 1)) - 1


def node_index(depth: int, level_index: int) -> int:
    """Flat array index of node ``level_index`` on level ``depth``."""
    depth = _check_depth(depth)
    level_index = operator.index(level_index)
    if depth == 0:
        return 0
    if not 0 <= level_index < (1 << depth):
        raise ValueError(f"level index {level_index} out of range for depth {depth}")
    return ((2 << (depth - 1)) - 2) + level_index + 1


def bit_dec(leaf_index: int, depth: int) -> list[int]:
    """Little-endian bits of ``leaf_index``, ``depth`` of them."""
    depth = _check_depth(depth)
    leaf_index = operator.index(leaf_index)
    if not 0 <= leaf_index < (1 << depth):
        raise ValueError(f"leaf index {leaf_index} does not fit in {depth} bits")
    return [(leaf_index >> j) & 1 for j in range(depth)]


def _check_bits(bits: Sequence[int]) -> list[int]:
    out = [operator.index(bit) for bit in bits]
    if any(bit not in (0, 1) for bit in out):
        raise ValueError("bits must be 0 or 1")
    return out


def num_rec(bits: Sequence[int]) -> int:
    """Integer whose little-endian bits are ``bits``."""
    return sum(bit << i for i, bit in enumerate(_check_bits(bits)))


def vector_open(
    k: bytes, com: bytes, b: Sequence[int], depth: int, lambda_bytes: int
) -> tuple[bytes, bytes]:
    """Open the commitment at the leaf encoded by ``b``.

    Returns ``(cop, com_j)``: the siblings of the path from the root to the
    leaf, top level first, and the leaf's own commitment of
    ``2 * lambda_bytes`` bytes.
    """
    depth = _check_depth(depth)
    lambda_bytes = operator.index(lambda_bytes)
    if lambda_bytes <= 0:
        raise ValueError(f"lambda_bytes must be positive, got {lambda_bytes}")
    bits = _check_bits(b)
    if len(bits) < depth:
        raise ValueError(f"need {depth} challenge bits, got {len(bits)}")
    bits = bits[:depth]
    k = bytes(k)
    com = bytes(com)
    if len(k) < binary_tree_node_count(depth) * lambda_bytes:
        raise ValueError("tree data is too short for the given depth")
    if len(com) < (1 << depth) * 2 * lambda_bytes:
        raise ValueError("commitment data is too short for the given depth")

    leaf = num_rec(bits)
    parts: list[bytes] = []
    a = 0
    for i in range(depth):
        bit = bits[depth - 1 - i]
        start = lambda_bytes * node_index(i + 1, 2 * a + (1 - bit))
        parts.append(k[start : start + lambda_bytes])
        a = 2 * a + bit

    com_start = leaf * lambda_bytes * 2
    return b"".join(parts), com[com_start : com_start + 2 * lambda_bytes]