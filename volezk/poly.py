"""Polynomials over a field, stored as coefficient lists (lowest degree first).

Field elements are any objects supporting ``+``, ``-`` and ``*``. Functions
that take a ``field`` argument build new elements with ``field(0)``,
``field(1)`` and ``field(2)``. Lagrange precomputation also needs
``inverse()`` on elements.
"""

from __future__ import annotations

from typing import Callable, Sequence, TypeVar

__all__ = [
    "get_first_n_field_elements",
    "build_from_roots",
    "precompute_lagrange_polynomials",
    "interpolate_with_precomputation",
    "evaluate",
    "poly_add",
    "poly_scale",
    "poly_mul",
]

E = TypeVar("E")


def _zero_like(element: E) -> E:
    return element - element  # type: ignore[operator]


def get_first_n_field_elements(field: Callable[[int], E], n: int) -> list[E]:
    """Return ``[X, X^2, ..., X^n]`` where ``X`` is ``field(2)``."""
    if n < 0:
        raise ValueError(f"n must be non-negative, got {n}")
    x = field(2)
    result: list[E] = []
    gen = x
    for _ in range(n):
        result.append(gen)
        gen = gen * x  # type: ignore[operator]
    return result


def poly_add(lhs: Sequence[E], rhs: Sequence[E]) -> list[E]:
    """Coefficient-wise sum of two polynomials of equal length."""
    if len(lhs) != len(rhs):
        raise ValueError("adding vectors of different sizes")
    return [a + b for a, b in zip(lhs, rhs)]  # type: ignore[operator]


def poly_scale(poly: Sequence[E], scalar: E) -> list[E]:
    """Multiply every coefficient by ``scalar``."""
    return [c * scalar for c in poly]  # type: ignore[operator]


def poly_mul(lhs: Sequence[E], rhs: Sequence[E]) -> list[E]:
    """Schoolbook product of two non-empty polynomials."""
    if not lhs or not rhs:
        raise ValueError("cannot multiply empty polynomials")
    zero = _zero_like(lhs[0])
    result = [zero] * (len(lhs) + len(rhs) - 1)
    for i, a in enumerate(lhs):
        for j, b in enumerate(rhs):
            result[i + j] = result[i + j] + a * b  # type: ignore[operator]
    return result


def build_from_roots(field: Callable[[int], E], roots: Sequence[E]) -> list[E]:
    """Return the monic polynomial ``prod(X - r)`` over the given roots."""
    one = field(1)
    poly: list[E] = [one]
    for root in roots:
        # In characteristic two, X - r equals X + r.
        poly = poly_mul(poly, [root, one])
    return poly


def precompute_lagrange_polynomials(
    field: Callable[[int], E], x_values: Sequence[E]
) -> list[list[E]]:
    """Return the Lagrange basis polynomials for the given points."""
    basis: list[list[E]] = []
    for k, xk in enumerate(x_values):
        denominator = field(1)
        others: list[E] = []
        for j, xj in enumerate(x_values):
            if j != k:
                denominator = denominator * (xk - xj)  # type: ignore[operator]
                others.append(xj)
        numerator = build_from_roots(field, others)
        basis.append(poly_scale(numerator, denominator.inverse()))  # type: ignore[attr-defined]
    return basis


def interpolate_with_precomputation(
    precomputed: Sequence[Sequence[E]], y_values: Sequence[E]
) -> list[E]:
    """Combine precomputed Lagrange polynomials with the values ``y_values``."""
    if len(precomputed) != len(y_values) or not y_values:
        raise ValueError("invalid sizes for interpolation")
    zero = _zero_like(y_values[0])
    result: list[E] = [zero] * len(precomputed[0])
    for basis, y in zip(precomputed, y_values):
        result = poly_add(result, poly_scale(basis, y))
    return result


def evaluate(poly: Sequence[E], point: E) -> E:
    """Evaluate ``poly`` at ``point`` by Horner's rule."""
    acc = _zero_like(point)
    for coeff in reversed(poly):
        acc = acc * point + coeff  # type: ignore[operator]
    return acc