# SPDX-FileCopyrightText: 2025 vsskit contributors
# SPDX-License-Identifier: MIT
"""Quadratic-residue subgroups of the RFC 3526 MODP safe primes."""
from __future__ import annotations

import secrets
from dataclasses import dataclass

from vsskit.arith import le_bytes_to_int, le_int_to_bytes
from vsskit.enums import System
from vsskit.errors import InvalidPointEncoding, InvalidScalar, PointNotInSubgroup, UnsupportedGroup

_MODP_2048 = int(
    "FFFFFFFFFFFFFFFFC90FDAA22168C234C4C6628B80DC1CD129024E088A67CC74"
    "020BBEA63B139B22514A08798E3404DDEF9519B3CD3A431B302B0A6DF25F1437"
    "4FE1356D6D51C245E485B576625E7EC6F44C42E9A637ED6B0BFF5CB6F406B7ED"
    "EE386BFB5A899FA5AE9F24117C4B1FE649286651ECE45B3DC2007CB8A163BF05"
    "98DA48361C55D39A69163FA8FD24CF5F83655D23DCA3AD961C62F356208552BB"
    "9ED529077096966D670C354E4ABC9804F1746C08CA18217C32905E462E36CE3B"
    "E39E772C180E86039B2783A2EC07A28FB5C55DF06F4C52C9DE2BCBF695581718"
    "3995497CEA956AE515D2261898FA051015728E5A8AACAA68FFFFFFFFFFFFFFFF",
    16,
)

_MODP_3072 = int(
    "FFFFFFFFFFFFFFFFC90FDAA22168C234C4C6628B80DC1CD129024E088A67CC74"
    "020BBEA63B139B22514A08798E3404DDEF9519B3CD3A431B302B0A6DF25F1437"
    "4FE1356D6D51C245E485B576625E7EC6F44C42E9A637ED6B0BFF5CB6F406B7ED"
    "EE386BFB5A899FA5AE9F24117C4B1FE649286651ECE45B3DC2007CB8A163BF05"
    "98DA48361C55D39A69163FA8FD24CF5F83655D23DCA3AD961C62F356208552BB"
    "9ED529077096966D670C354E4ABC9804F1746C08CA18217C32905E462E36CE3B"
    "E39E772C180E86039B2783A2EC07A28FB5C55DF06F4C52C9DE2BCBF695581718"
    "3995497CEA956AE515D2261898FA051015728E5A8AAAC42DAD33170D04507A33"
    "A85521ABDF1CBA64ECFB850458DBEF0A8AEA71575D060C7DB3970F85A6E1E4C7"
    "ABF5AE8CDB0933D71E8C94E04A25619DCEE3D2261AD2EE6BF12FFA06D98A0864"
    "D87602733EC86A64521F2B18177B200CBBE117577A615D6C770988C0BAD946E2"
    "08E24FA074E5AB3143DB5BFCE0FD108E4B82D120A93AD2CAFFFFFFFFFFFFFFFF",
    16,
)

_PRIMES = {
    System.MODP_2048: _MODP_2048,
    System.MODP_3072: _MODP_3072,
}


@dataclass(frozen=True)
class ModPoint:
    value: int
    size: int

    def to_bytes(self) -> bytes:
        return le_int_to_bytes(self.value, self.size)

    def hex(self) -> str:
        return self.to_bytes().hex()


class ModularGroup:
    """Order-``q`` subgroup of ``Z_p^*`` for a safe prime ``p = 2q + 1``.

    Since ``p = 7 (mod 8)``, ``2`` is a quadratic residue and generates the
    subgroup. Elements are encoded little-endian on the byte length of ``p``.
    """

    def __init__(self, label: System) -> None:
        try:
            modulus = _PRIMES[System(label)]
        except (KeyError, ValueError):
            raise UnsupportedGroup(f"Unsupported group: {label}") from None
        self.label = System(label)
        self.modulus = modulus
        self.order = (modulus - 1) // 2
        self.point_size = (modulus.bit_length() + 7) // 8
        self.scalar_size = (self.order.bit_length() + 7) // 8
        self.generator = ModPoint(2, self.point_size)
        self.neutral = ModPoint(1, self.point_size)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, ModularGroup) and other.label == self.label

    def __hash__(self) -> int:
        return hash(self.label)

    def __repr__(self) -> str:
        return f"ModularGroup(label={self.label.value!r})"

    def operate(self, lhs: ModPoint, rhs: ModPoint) -> ModPoint:
        return ModPoint(lhs.value * rhs.value % self.modulus, self.point_size)

    def exp(self, point: ModPoint, scalar: int) -> ModPoint:
        return ModPoint(pow(point.value, scalar % self.order, self.modulus), self.point_size)

    def invert(self, point: ModPoint) -> ModPoint:
        return ModPoint(pow(point.value, -1, self.modulus), self.point_size)

    def unpack(self, data: bytes) -> ModPoint:
        data = bytes(data)
        if len(data) != self.point_size:
            raise InvalidPointEncoding(f"bad encoding: expected {self.point_size} bytes, got {len(data)}")
        value = le_bytes_to_int(data)
        if not 0 < value < self.modulus:
            raise InvalidPointEncoding("bad encoding: value out of range")
        return ModPoint(value, self.point_size)

    def unpack_valid(self, data: bytes) -> ModPoint:
        point = self.unpack(data)
        self.validate_point(point)
        return point

    def validate_point(self, point: ModPoint, *, raise_on_invalid: bool = True) -> bool:
        flag = 0 < point.value < self.modulus and pow(point.value, self.order, self.modulus) == 1
        if not flag and raise_on_invalid:
            raise PointNotInSubgroup("Point not in subgroup")
        return flag

    def validate_scalar(self, scalar: int, *, raise_on_invalid: bool = True) -> bool:
        flag = 0 < scalar < self.order
        if not flag and raise_on_invalid:
            raise InvalidScalar("Scalar not in range")
        return flag

    def pack_scalar(self, scalar: int) -> bytes:
        return le_int_to_bytes(scalar % self.order, self.scalar_size)

    def unpack_scalar(self, data: bytes) -> int:
        data = bytes(data)
        if len(data) != self.scalar_size:
            raise InvalidScalar(f"Invalid scalar length: {len(data)} != {self.scalar_size}")
        value = le_bytes_to_int(data)
        if value >= self.order:
            raise InvalidScalar("Scalar not in range")
        return value

    def reduce_scalar(self, data: bytes) -> int:
        return le_bytes_to_int(data) % self.order

    def random_bytes(self) -> bytes:
        return secrets.token_bytes(self.scalar_size)

    def random_scalar(self) -> int:
        return secrets.randbelow(self.order - 1) + 1

    def random_point(self) -> ModPoint:
        return self.exp(self.generator, self.random_scalar())

    def random_secret(self) -> bytes:
        return self.pack_scalar(self.random_scalar())


__all__ = ["ModularGroup", "ModPoint"]
