# SPDX-FileCopyrightText: 2025 vsskit contributors
# SPDX-License-Identifier: MIT
"""Shamir secret sharing with Feldman and Pedersen commitments.

``distribute_secret``
    Split a secret among ``nr_shares`` participants with reconstruction
    threshold ``threshold``; returns the secret and a :class:`ShamirSharing`.

``ShamirSharing``
    Read-only view of the sharing polynomial that emits shares and
    verifiable commitment packets.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from vsskit.backend import Group
from vsskit.errors import InterpolationError, InvalidInput, InvalidSecret, ShamirError
from vsskit.keys import extract_public, validate_secret
from vsskit.polynomials import FieldPolynomial, interpolate, random_polynomial

_logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SecretShare:
    value: bytes
    index: int


@dataclass(frozen=True)
class PublicShare:
    value: bytes
    index: int


@dataclass(frozen=True)
class SecretPacket:
    value: bytes
    index: int
    binding: Optional[bytes] = None

    @property
    def share(self) -> SecretShare:
        return SecretShare(self.value, self.index)


@dataclass(frozen=True)
class FeldmanDistribution:
    packets: Tuple[SecretPacket, ...]
    commitments: Tuple[bytes, ...]


@dataclass(frozen=True)
class PedersenDistribution:
    packets: Tuple[SecretPacket, ...]
    bindings: Tuple[bytes, ...]
    commitments: Tuple[bytes, ...]


def extract_public_share(group: Group, share: SecretShare) -> PublicShare:
    return PublicShare(extract_public(group, share.value), share.index)


class ShamirSharing:
    """Degree ``threshold - 1`` sharing of a secret among ``nr_shares`` holders."""

    def __init__(self, group: Group, nr_shares: int, threshold: int, polynomial: FieldPolynomial) -> None:
        self.group = group
        self.nr_shares = nr_shares
        self.threshold = threshold
        self.polynomial = polynomial

    def __repr__(self) -> str:
        return f"ShamirSharing(nr_shares={self.nr_shares}, threshold={self.threshold})"

    def _value(self, index: int) -> bytes:
        return self.group.pack_scalar(self.polynomial.evaluate(index))

    def original_secret(self) -> bytes:
        return self._value(0)

    def secret_shares(self) -> List[SecretShare]:
        return [SecretShare(self._value(i), i) for i in range(1, self.nr_shares + 1)]

    def public_shares(self) -> List[PublicShare]:
        g = self.group.generator
        return [
            PublicShare(self.group.exp(g, self.polynomial.evaluate(i)).to_bytes(), i)
            for i in range(1, self.nr_shares + 1)
        ]

    def share(self, index: int) -> Tuple[SecretShare, PublicShare]:
        """Return the secret and public share held by ``index``."""
        x = self.polynomial.evaluate(index)
        y = self.group.exp(self.group.generator, x)
        return SecretShare(self.group.pack_scalar(x), index), PublicShare(y.to_bytes(), index)

    def _coefficients(self) -> List[int]:
        # P(0) is a valid non-zero secret, so the zero polynomial never occurs
        coeffs = list(self.polynomial.coeffs)
        return coeffs + [0] * (self.threshold - len(coeffs))

    def create_feldman_packets(self) -> FeldmanDistribution:
        group = self.group
        commitments = tuple(group.exp(group.generator, a).to_bytes() for a in self._coefficients())
        packets = tuple(SecretPacket(self._value(i), i) for i in range(1, self.nr_shares + 1))
        return FeldmanDistribution(packets, commitments)

    def create_pedersen_packets(self, public_reference: bytes) -> PedersenDistribution:
        """Commit with an independent blinding polynomial against ``public_reference``."""
        group = self.group
        h = group.unpack_valid(public_reference)
        if h == group.neutral or h == group.generator:
            raise InvalidInput("Public reference must be independent of the generator")
        blinding = random_polynomial(group, self.threshold - 1)
        blinding_coeffs = list(blinding.coeffs)
        commitments = tuple(
            group.operate(group.exp(group.generator, a), group.exp(h, b)).to_bytes()
            for a, b in zip(self._coefficients(), blinding_coeffs)
        )
        bindings = tuple(group.pack_scalar(blinding.evaluate(i)) for i in range(1, self.nr_shares + 1))
        packets = tuple(
            SecretPacket(self._value(i), i, bindings[i - 1]) for i in range(1, self.nr_shares + 1)
        )
        return PedersenDistribution(packets, bindings, commitments)


def distribute_secret(
    group: Group,
    nr_shares: int,
    threshold: int,
    secret: Optional[bytes] = None,
    predefined: Optional[Sequence[bytes]] = None,
) -> Tuple[bytes, ShamirSharing]:
    """Split ``secret`` (random if omitted) into ``nr_shares`` shares.

    ``predefined`` fixes the share values of indices ``1..len(predefined)``,
    which lets external parties pre-commit partial values. The remaining
    ``threshold - 1 - len(predefined)`` points are drawn at random.
    """
    predefined = list(predefined or [])
    if nr_shares < 1:
        raise ShamirError(f"Number of shares must be at least one: {nr_shares}")
    if threshold < 1:
        raise ShamirError(f"Threshold parameter must be at least 1: {threshold}")
    if threshold > nr_shares:
        raise ShamirError(f"Threshold parameter exceeds number of shares: {threshold} > {nr_shares}")
    if not nr_shares < group.order:
        raise ShamirError(f"Number of shares violates the group order: {nr_shares} >= {group.order}")
    if not len(predefined) < threshold:
        raise ShamirError(
            f"Number of predefined shares violates threshold: {len(predefined)} >= {threshold}"
        )

    if secret is None:
        secret = group.random_secret()
    try:
        scalar = validate_secret(group, secret)
    except InvalidSecret:
        raise InvalidSecret("Invalid secret provided") from None

    points = [(0, scalar)]
    for index in range(1, threshold):
        if index <= len(predefined):
            y = group.unpack_scalar(predefined[index - 1])
        else:
            y = group.random_scalar()
        points.append((index, y))
    try:
        polynomial = interpolate(group, points)
    except InterpolationError as exc:
        raise ShamirError(str(exc)) from exc

    _logger.debug(
        "distributed secret over %s: nr_shares=%d threshold=%d predefined=%d",
        group.label.value,
        nr_shares,
        threshold,
        len(predefined),
    )
    return secret, ShamirSharing(group, nr_shares, threshold, polynomial)


__all__ = [
    "SecretShare",
    "PublicShare",
    "SecretPacket",
    "FeldmanDistribution",
    "PedersenDistribution",
    "ShamirSharing",
    "distribute_secret",
    "extract_public_share",
]
