# SPDX-FileCopyrightText: 2025 vsskit contributors
# SPDX-License-Identifier: MIT
"""Helpers for secret scalars and their public counterparts.

Secrets travel as canonical little-endian scalar bytes and public values as
group element encodings; these helpers convert between the two and compare
them without exposing timing differences on secret material.
"""
from __future__ import annotations

import hmac
from typing import Iterable, Tuple

from vsskit.backend import Group
from vsskit.errors import InvalidScalar, InvalidSecret


def validate_secret(group: Group, secret: bytes) -> int:
    """Decode ``secret`` and return its scalar; raise :class:`InvalidSecret` otherwise."""
    try:
        scalar = group.unpack_scalar(secret)
    except InvalidScalar as exc:
        raise InvalidSecret("Invalid secret provided") from exc
    if not group.validate_scalar(scalar, raise_on_invalid=False):
        raise InvalidSecret("Invalid secret provided")
    return scalar


def generate_secret(group: Group) -> Tuple[bytes, bytes]:
    """Return a fresh ``(secret, public)`` pair."""
    scalar = group.random_scalar()
    public = group.exp(group.generator, scalar)
    return group.pack_scalar(scalar), public.to_bytes()


def extract_public(group: Group, secret: bytes) -> bytes:
    scalar = validate_secret(group, secret)
    return group.exp(group.generator, scalar).to_bytes()


def is_equal_secret(group: Group, lhs: bytes, rhs: bytes) -> bool:
    return hmac.compare_digest(
        group.pack_scalar(group.unpack_scalar(lhs)),
        group.pack_scalar(group.unpack_scalar(rhs)),
    )


def is_equal_public(group: Group, lhs: bytes, rhs: bytes) -> bool:
    return group.unpack_valid(lhs) == group.unpack_valid(rhs)


def is_keypair(group: Group, secret: bytes, public: bytes) -> bool:
    return is_equal_public(group, extract_public(group, secret), public)


def add_secrets(group: Group, secrets: Iterable[bytes]) -> bytes:
    """Sum of scalars mod order, as used by distributed key generation."""
    total = 0
    for secret in secrets:
        total = (total + group.unpack_scalar(secret)) % group.order
    return group.pack_scalar(total)


def combine_publics(group: Group, publics: Iterable[bytes]) -> bytes:
    acc = group.neutral
    for public in publics:
        acc = group.operate(acc, group.unpack_valid(public))
    return acc.to_bytes()


__all__ = [
    "validate_secret",
    "generate_secret",
    "extract_public",
    "is_equal_secret",
    "is_equal_public",
    "is_keypair",
    "add_secrets",
    "combine_publics",
]
