# SPDX-FileCopyrightText: 2025 vsskit contributors
# SPDX-License-Identifier: MIT
"""Threshold recombination with fault attribution.

Combination functions weight each contribution by its Lagrange coefficient
over the supplied index set. They trust their input: without an explicit
``threshold`` a sub-threshold set silently yields a meaningless value.

Recovery functions verify every contribution first. A failed check either
raises immediately (``error_on_invalid=True``, the default) or puts the
index on the blame list and leaves the contribution out; rejected
contributions are never re-admitted. Survivors are weighted over the
surviving index set, so recovery stays correct while at least
``threshold`` honest contributions remain.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, List, Mapping, Optional, Sequence, Tuple, Union

from vsskit.arith import mod_inv
from vsskit.audit import AuditTrail
from vsskit.backend import Group
from vsskit.dealer import PublicShare, SecretShare
from vsskit.elgamal import Ciphertext, elgamal
from vsskit.enums import Algorithm, BlockMode, ElgamalScheme
from vsskit.errors import (
    InsufficientShares,
    InvalidInput,
    InvalidPartialDecryptor,
    InvalidPublicShare,
    MissingNonce,
    MissingPublicShare,
)
from vsskit.shareholder import (
    PartialDecryptor,
    SchnorrPacket,
    parse_schnorr_packet,
    verify_partial_decryptor,
)

_logger = logging.getLogger(__name__)

AlgorithmLike = Optional[Union[Algorithm, str]]
Nonces = Optional[Mapping[int, bytes]]


@dataclass(frozen=True)
class Recovery:
    recovered: bytes
    blame: Tuple[int, ...] = ()


@dataclass(frozen=True)
class Decryption:
    plaintext: bytes
    blame: Tuple[int, ...] = ()


def _check_threshold(count: int, threshold: Optional[int]) -> None:
    if threshold is not None and count < threshold:
        raise InsufficientShares()


def _check_distinct(indexes: Sequence[int]) -> None:
    if len(set(indexes)) != len(indexes):
        raise InvalidInput(f"Duplicate indices in combination: {sorted(indexes)}")


def compute_lambda(group: Group, index: int, qualified_indexes: Iterable[int]) -> int:
    """Lagrange coefficient of ``index`` for reconstructing ``P(0)``."""
    order = group.order
    numerator = 1
    denominator = 1
    for j in qualified_indexes:
        if j == index:
            continue
        numerator = numerator * j % order
        denominator = denominator * (j - index) % order
    return numerator * mod_inv(denominator, order) % order


def combine_secret_shares(
    group: Group, shares: Sequence[SecretShare], threshold: Optional[int] = None
) -> bytes:
    _check_threshold(len(shares), threshold)
    indexes = [share.index for share in shares]
    _check_distinct(indexes)
    total = 0
    for share in shares:
        weight = compute_lambda(group, share.index, indexes)
        total = (total + weight * group.unpack_scalar(share.value)) % group.order
    return group.pack_scalar(total)


def _combine_points(group: Group, values: Sequence[Tuple[int, bytes]]) -> bytes:
    indexes = [index for index, _ in values]
    _check_distinct(indexes)
    acc = group.neutral
    for index, value in values:
        weight = compute_lambda(group, index, indexes)
        acc = group.operate(acc, group.exp(group.unpack_valid(value), weight))
    return acc.to_bytes()


def combine_public_shares(
    group: Group, shares: Sequence[PublicShare], threshold: Optional[int] = None
) -> bytes:
    _check_threshold(len(shares), threshold)
    return _combine_points(group, [(share.index, share.value) for share in shares])


def combine_partial_decryptors(
    group: Group, partials: Sequence[PartialDecryptor], threshold: Optional[int] = None
) -> bytes:
    _check_threshold(len(partials), threshold)
    return _combine_points(group, [(partial.index, partial.value) for partial in partials])


def _select_nonce(nonces: Nonces, index: int) -> Optional[bytes]:
    if nonces is None:
        return None
    try:
        return nonces[index]
    except KeyError:
        raise MissingNonce(f"No nonce for index {index}", index=index) from None


def _record(audit: Optional[AuditTrail], event: str, group: Group, indexes: List[int], blame: List[int]) -> None:
    if audit is None:
        return
    audit.record(event, details={"system": group.label.value, "indexes": indexes, "blame": blame})


def recover_public(
    group: Group,
    packets: Sequence[SchnorrPacket],
    algorithm: AlgorithmLike = None,
    nonces: Nonces = None,
    threshold: Optional[int] = None,
    error_on_invalid: bool = True,
    audit: Optional[AuditTrail] = None,
) -> Recovery:
    """Verify Schnorr packets and combine the valid public shares."""
    _check_threshold(len(packets), threshold)
    _check_distinct([packet.index for packet in packets])
    survivors: List[PublicShare] = []
    blame: List[int] = []
    for packet in packets:
        nonce = _select_nonce(nonces, packet.index)
        try:
            survivors.append(parse_schnorr_packet(group, packet, algorithm, nonce))
        except InvalidPublicShare as exc:
            if error_on_invalid:
                raise
            _logger.warning("blamed public share %d: %s", packet.index, exc)
            blame.append(packet.index)
    recovered = combine_public_shares(group, survivors)
    _logger.debug("recovered public from %d of %d packets", len(survivors), len(packets))
    _record(audit, "recover_public", group, [p.index for p in packets], blame)
    return Recovery(recovered, tuple(blame))


def recover_decryptor(
    group: Group,
    partials: Sequence[PartialDecryptor],
    ciphertext: Ciphertext,
    public_shares: Sequence[PublicShare],
    algorithm: AlgorithmLike = None,
    nonces: Nonces = None,
    threshold: Optional[int] = None,
    error_on_invalid: bool = True,
    audit: Optional[AuditTrail] = None,
) -> Recovery:
    """Verify partial decryptors against the holders' public shares and combine them."""
    _check_threshold(len(partials), threshold)
    _check_distinct([partial.index for partial in partials])
    publics = {share.index: share.value for share in public_shares}
    survivors: List[PartialDecryptor] = []
    blame: List[int] = []
    for partial in partials:
        if partial.index not in publics:
            raise MissingPublicShare(f"No public share with index {partial.index}", index=partial.index)
        nonce = _select_nonce(nonces, partial.index)
        try:
            verify_partial_decryptor(
                group, publics[partial.index], ciphertext.beta, partial, algorithm, nonce
            )
        except InvalidPartialDecryptor as exc:
            if error_on_invalid:
                raise
            _logger.warning("blamed partial decryptor %d: %s", partial.index, exc)
            blame.append(partial.index)
            continue
        survivors.append(partial)
    recovered = combine_partial_decryptors(group, survivors)
    _logger.debug("recovered decryptor from %d of %d partials", len(survivors), len(partials))
    _record(audit, "recover_decryptor", group, [p.index for p in partials], blame)
    return Recovery(recovered, tuple(blame))


def threshold_decrypt(
    group: Group,
    ciphertext: Ciphertext,
    partials: Sequence[PartialDecryptor],
    public_shares: Sequence[PublicShare],
    scheme: Union[ElgamalScheme, str],
    mode: Optional[Union[BlockMode, str]] = None,
    algorithm: AlgorithmLike = None,
    nonces: Nonces = None,
    threshold: Optional[int] = None,
    error_on_invalid: bool = True,
    audit: Optional[AuditTrail] = None,
) -> Decryption:
    """Recover the decryptor and open ``ciphertext`` with it.

    Any blamed contribution aborts decryption: the result then carries an
    empty plaintext together with the blame list.
    """
    recovery = recover_decryptor(
        group,
        partials,
        ciphertext,
        public_shares,
        algorithm=algorithm,
        nonces=nonces,
        threshold=threshold,
        error_on_invalid=error_on_invalid,
        audit=audit,
    )
    if recovery.blame:
        return Decryption(b"", recovery.blame)
    driver = elgamal(group, scheme, algorithm, mode)
    plaintext = driver.decapsulate(ciphertext.alpha, ciphertext.beta, recovery.recovered)
    return Decryption(plaintext)


__all__ = [
    "Recovery",
    "Decryption",
    "compute_lambda",
    "combine_secret_shares",
    "combine_public_shares",
    "combine_partial_decryptors",
    "recover_public",
    "recover_decryptor",
    "threshold_decrypt",
]
