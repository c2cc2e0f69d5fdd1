# SPDX-FileCopyrightText: 2025 vsskit contributors
# SPDX-License-Identifier: MIT
"""Shareholder side: packet verification and proof-carrying contributions."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Sequence, Tuple, Union

from vsskit.backend import Group, Point
from vsskit.dealer import PublicShare, SecretPacket, SecretShare
from vsskit.enums import Algorithm
from vsskit.errors import (
    InvalidDimensions,
    InvalidPartialDecryptor,
    InvalidPointEncoding,
    InvalidPublicShare,
    InvalidSecretShare,
    MissingBinding,
    PointNotInSubgroup,
)
from vsskit.nizk import DDHTuple, DlogPair, NizkProof, nizk

_logger = logging.getLogger(__name__)

AlgorithmLike = Optional[Union[Algorithm, str]]


@dataclass(frozen=True)
class SchnorrPacket:
    value: bytes
    index: int
    proof: NizkProof


@dataclass(frozen=True)
class PartialDecryptor:
    value: bytes
    index: int
    proof: NizkProof


def _commitment_product(group: Group, index: int, commitments: Sequence[bytes]) -> Point:
    acc = group.neutral
    power = 1
    for commitment in commitments:
        c = group.unpack_valid(commitment)
        acc = group.operate(acc, group.exp(c, power))
        power = power * index % group.order
    return acc


def verify_feldman_commitments(group: Group, share: SecretShare, commitments: Sequence[bytes]) -> bool:
    """Check ``g^value == prod_j C_j^(index^j)``."""
    x = group.unpack_scalar(share.value)
    lhs = group.exp(group.generator, x)
    if lhs != _commitment_product(group, share.index, commitments):
        raise InvalidSecretShare(f"Invalid share at index {share.index}", index=share.index)
    return True


def verify_pedersen_commitments(
    group: Group,
    share: SecretShare,
    binding: bytes,
    public_reference: bytes,
    commitments: Sequence[bytes],
) -> bool:
    """Check ``g^value * h^binding == prod_j C_j^(index^j)``."""
    h = group.unpack_valid(public_reference)
    x = group.unpack_scalar(share.value)
    b = group.unpack_scalar(binding)
    lhs = group.operate(group.exp(group.generator, x), group.exp(h, b))
    if lhs != _commitment_product(group, share.index, commitments):
        raise InvalidSecretShare(f"Invalid share at index {share.index}", index=share.index)
    return True


def parse_feldman_packet(group: Group, commitments: Sequence[bytes], packet: SecretPacket) -> SecretShare:
    share = packet.share
    verify_feldman_commitments(group, share, commitments)
    return share


def parse_pedersen_packet(
    group: Group,
    commitments: Sequence[bytes],
    public_reference: bytes,
    packet: SecretPacket,
) -> Tuple[SecretShare, bytes]:
    if packet.binding is None:
        raise MissingBinding(f"No binding found for index {packet.index}", index=packet.index)
    share = packet.share
    verify_pedersen_commitments(group, share, packet.binding, public_reference, commitments)
    return share, packet.binding


def create_schnorr_packet(
    group: Group,
    share: SecretShare,
    algorithm: AlgorithmLike = None,
    nonce: Optional[bytes] = None,
) -> SchnorrPacket:
    """Publish ``g^share`` with a proof of knowledge of its discrete log."""
    x = group.unpack_scalar(share.value)
    y = group.exp(group.generator, x)
    proof = nizk(group, algorithm).prove_dlog(x, DlogPair(group.generator, y), nonce)
    return SchnorrPacket(y.to_bytes(), share.index, proof)


def parse_schnorr_packet(
    group: Group,
    packet: SchnorrPacket,
    algorithm: AlgorithmLike = None,
    nonce: Optional[bytes] = None,
) -> PublicShare:
    try:
        y = group.unpack_valid(packet.value)
    except (InvalidPointEncoding, PointNotInSubgroup) as exc:
        raise InvalidPublicShare(f"Invalid packet with index {packet.index}", index=packet.index) from exc
    try:
        valid = nizk(group, algorithm).verify_dlog(DlogPair(group.generator, y), packet.proof, nonce)
    except InvalidDimensions:
        valid = False
    if not valid:
        raise InvalidPublicShare(f"Invalid packet with index {packet.index}", index=packet.index)
    return PublicShare(packet.value, packet.index)


def compute_partial_decryptor(
    group: Group,
    share: SecretShare,
    ciphertext_beta: bytes,
    algorithm: AlgorithmLike = None,
    nonce: Optional[bytes] = None,
) -> PartialDecryptor:
    """Return ``beta^share`` with a DDH proof tying it to the holder's public share."""
    x = group.unpack_scalar(share.value)
    beta = group.unpack_valid(ciphertext_beta)
    decryptor = group.exp(beta, x)
    public = group.exp(group.generator, x)
    proof = nizk(group, algorithm).prove_ddh(x, DDHTuple(beta, public, decryptor), nonce)
    return PartialDecryptor(decryptor.to_bytes(), share.index, proof)


def verify_partial_decryptor(
    group: Group,
    public_share: bytes,
    ciphertext_beta: bytes,
    partial: PartialDecryptor,
    algorithm: AlgorithmLike = None,
    nonce: Optional[bytes] = None,
) -> bool:
    beta = group.unpack_valid(ciphertext_beta)
    public = group.unpack_valid(public_share)
    try:
        decryptor = group.unpack_valid(partial.value)
    except (InvalidPointEncoding, PointNotInSubgroup) as exc:
        raise InvalidPartialDecryptor(
            f"Invalid partial decryptor with index {partial.index}", index=partial.index
        ) from exc
    try:
        valid = nizk(group, algorithm).verify_ddh(DDHTuple(beta, public, decryptor), partial.proof, nonce)
    except InvalidDimensions:
        valid = False
    if not valid:
        _logger.debug("partial decryptor %d failed its DDH proof", partial.index)
        raise InvalidPartialDecryptor(
            f"Invalid partial decryptor with index {partial.index}", index=partial.index
        )
    return True


__all__ = [
    "SchnorrPacket",
    "PartialDecryptor",
    "verify_feldman_commitments",
    "verify_pedersen_commitments",
    "parse_feldman_packet",
    "parse_pedersen_packet",
    "create_schnorr_packet",
    "parse_schnorr_packet",
    "compute_partial_decryptor",
    "verify_partial_decryptor",
]
