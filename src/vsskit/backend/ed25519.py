# SPDX-FileCopyrightText: 2025 vsskit contributors
# SPDX-License-Identifier: MIT
"""Prime-order subgroup of edwards25519 backed by libsodium."""
from __future__ import annotations

import secrets
from dataclasses import dataclass

from nacl import bindings

from vsskit.arith import le_bytes_to_int, le_int_to_bytes
from vsskit.enums import System
from vsskit.errors import InvalidPointEncoding, InvalidScalar, PointNotInSubgroup

_P = 2**255 - 19
_L = 2**252 + 27742317777372353535851937790883648493
_D = (-121665 * pow(121666, -1, _P)) % _P
_SQRT_M1 = pow(2, (_P - 1) // 4, _P)

_BASE = b"\x58" + b"\x66" * 31
_ZERO = b"\x01" + b"\x00" * 31


@dataclass(frozen=True)
class EdPoint:
    data: bytes

    def to_bytes(self) -> bytes:
        return self.data

    def hex(self) -> str:
        return self.data.hex()


def _is_on_curve(data: bytes) -> bool:
    """Decompress a canonical encoding; False if it names no curve point."""
    y = le_bytes_to_int(data) & ((1 << 255) - 1)
    sign = data[31] >> 7
    if y >= _P:
        return False
    y2 = y * y % _P
    u = (y2 - 1) % _P
    v = (_D * y2 + 1) % _P
    x2 = u * pow(v, -1, _P) % _P
    x = pow(x2, (_P + 3) // 8, _P)
    if (x * x - x2) % _P != 0:
        x = x * _SQRT_M1 % _P
    if (x * x - x2) % _P != 0:
        return False
    return not (x == 0 and sign == 1)


class Ed25519Group:
    """Ed25519 group of order ``2^252 + 2774...8493``.

    Points are compressed 32-byte encodings; scalars are 32-byte little-endian
    integers below the group order.
    """

    label = System.ED25519
    modulus = _P
    order = _L
    scalar_size = 32
    point_size = 32

    def __init__(self) -> None:
        self.generator = EdPoint(_BASE)
        self.neutral = EdPoint(_ZERO)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Ed25519Group)

    def __hash__(self) -> int:
        return hash(self.label)

    def __repr__(self) -> str:
        return f"Ed25519Group(label={self.label.value!r})"

    # Group law ------------------------------------------------------------------
    def operate(self, lhs: EdPoint, rhs: EdPoint) -> EdPoint:
        if lhs == self.neutral:
            return rhs
        if rhs == self.neutral:
            return lhs
        return EdPoint(bindings.crypto_core_ed25519_add(lhs.data, rhs.data))

    def exp(self, point: EdPoint, scalar: int) -> EdPoint:
        scalar %= _L
        if scalar == 0 or point == self.neutral:
            return self.neutral
        packed = le_int_to_bytes(scalar, 32)
        if point == self.generator:
            return EdPoint(bindings.crypto_scalarmult_ed25519_base_noclamp(packed))
        return EdPoint(bindings.crypto_scalarmult_ed25519_noclamp(packed, point.data))

    def invert(self, point: EdPoint) -> EdPoint:
        if point == self.neutral:
            return point
        return EdPoint(bindings.crypto_core_ed25519_sub(_ZERO, point.data))

    # Encoding -------------------------------------------------------------------
    def unpack(self, data: bytes) -> EdPoint:
        data = bytes(data)
        if len(data) != self.point_size:
            raise InvalidPointEncoding(f"bad encoding: expected {self.point_size} bytes, got {len(data)}")
        if not _is_on_curve(data):
            raise InvalidPointEncoding("bad encoding: not a curve point")
        return EdPoint(data)

    def unpack_valid(self, data: bytes) -> EdPoint:
        point = self.unpack(data)
        self.validate_point(point)
        return point

    def validate_point(self, point: EdPoint, *, raise_on_invalid: bool = True) -> bool:
        flag = point == self.neutral or bindings.crypto_core_ed25519_is_valid_point(point.data)
        if not flag and raise_on_invalid:
            raise PointNotInSubgroup("Point not in subgroup")
        return flag

    # Scalars --------------------------------------------------------------------
    def validate_scalar(self, scalar: int, *, raise_on_invalid: bool = True) -> bool:
        flag = 0 < scalar < _L
        if not flag and raise_on_invalid:
            raise InvalidScalar("Scalar not in range")
        return flag

    def pack_scalar(self, scalar: int) -> bytes:
        return le_int_to_bytes(scalar % _L, self.scalar_size)

    def unpack_scalar(self, data: bytes) -> int:
        data = bytes(data)
        if len(data) != self.scalar_size:
            raise InvalidScalar(f"Invalid scalar length: {len(data)} != {self.scalar_size}")
        value = le_bytes_to_int(data)
        if value >= _L:
            raise InvalidScalar("Scalar not in range")
        return value

    def reduce_scalar(self, data: bytes) -> int:
        return le_bytes_to_int(data) % _L

    # Randomness -----------------------------------------------------------------
    def random_bytes(self) -> bytes:
        return secrets.token_bytes(self.scalar_size)

    def random_scalar(self) -> int:
        return secrets.randbelow(_L - 1) + 1

    def random_point(self) -> EdPoint:
        return self.exp(self.generator, self.random_scalar())

    def random_secret(self) -> bytes:
        return self.pack_scalar(self.random_scalar())


__all__ = ["Ed25519Group", "EdPoint"]
