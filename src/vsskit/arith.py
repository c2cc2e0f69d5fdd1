# SPDX-FileCopyrightText: 2025 vsskit contributors
# SPDX-License-Identifier: MIT
"""Modular arithmetic and little-endian integer codecs."""
from __future__ import annotations

from vsskit.errors import InvalidInput


def mod_inv(value: int, modulus: int) -> int:
    """Return the inverse of ``value`` modulo ``modulus``.

    Raises :class:`InvalidInput` when no inverse exists.
    """
    try:
        return pow(value % modulus, -1, modulus)
    except ValueError as exc:
        raise InvalidInput("No inverse exists for provided modulo") from exc


def byte_len(value: int) -> int:
    return max(1, (value.bit_length() + 7) // 8)


def le_int_to_bytes(value: int, length: int | None = None) -> bytes:
    """Encode a non-negative integer little-endian, minimal length by default."""
    if value < 0:
        raise InvalidInput("Cannot encode negative integer")
    return value.to_bytes(length or byte_len(value), "little")


def le_bytes_to_int(data: bytes) -> int:
    return int.from_bytes(bytes(data), "little")


__all__ = ["mod_inv", "byte_len", "le_int_to_bytes", "le_bytes_to_int"]
