"""Cryptographically secure random bytes from the operating system."""

from __future__ import annotations

import operator
import secrets

__all__ = ["rand_bytes"]


def rand_bytes(length: int) -> bytes:
    """Return ``length`` bytes from the system's secure random source.

    Raises ``ValueError`` for a negative length. Errors from the operating
    system's generator propagate unchanged.
    """
    count = operator.index(length)
    if count < 0:
        raise ValueError(f"length must be non-negative, got {count}")
    return secrets.token_bytes(count)