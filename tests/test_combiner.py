import dataclasses
import itertools
import logging

import pytest

from vsskit.combiner import (
    combine_public_shares,
    combine_secret_shares,
    compute_lambda,
    recover_public,
)
from vsskit.dealer import SecretShare, distribute_secret
from vsskit.errors import (
    ErrorKind,
    InsufficientShares,
    InvalidInput,
    InvalidPublicShare,
    MissingNonce,
)
from vsskit.keys import extract_public
from vsskit.shareholder import create_schnorr_packet


def _tamper_share(group, share):
    value = (group.unpack_scalar(share.value) + 1) % group.order
    return SecretShare(group.pack_scalar(value), share.index)


def test_lambda_small_set(ed25519):
    # for S = {1, 2}: lambda_1 = 2 / (2 - 1) = 2, lambda_2 = 1 / (1 - 2) = -1
    assert compute_lambda(ed25519, 1, [1, 2]) == 2
    assert compute_lambda(ed25519, 2, [1, 2]) == ed25519.order - 1


def test_every_qualified_subset_recovers(group):
    secret, sharing = distribute_secret(group, 4, 2)
    shares = sharing.secret_shares()
    for size in (2, 3, 4):
        for subset in itertools.combinations(shares, size):
            assert combine_secret_shares(group, list(subset), threshold=2) == secret


def test_concrete_scenario(group):
    secret, sharing = distribute_secret(group, 5, 3)
    shares = sharing.secret_shares()

    assert combine_secret_shares(group, shares[:3]) == secret

    with pytest.raises(InsufficientShares, match="Insufficient number of shares") as excinfo:
        combine_secret_shares(group, shares[:2], threshold=3)
    assert excinfo.value.kind == ErrorKind.INSUFFICIENT_SHARES
    assert combine_secret_shares(group, shares[:2]) != secret

    tampered = list(shares)
    tampered[3] = _tamper_share(group, shares[3])
    packets = [create_schnorr_packet(group, share) for share in tampered]
    # share 4 now disagrees with the published public share
    public_4 = sharing.public_shares()[3].value
    packets[3] = dataclasses.replace(packets[3], value=public_4)
    recovery = recover_public(group, packets, threshold=3, error_on_invalid=False)
    assert recovery.blame == (4,)
    assert recovery.recovered == extract_public(group, secret)


def test_public_combination(group):
    secret, sharing = distribute_secret(group, 5, 3)
    publics = sharing.public_shares()
    assert combine_public_shares(group, publics[1:4]) == extract_public(group, secret)
    with pytest.raises(InsufficientShares):
        combine_public_shares(group, publics[:2], threshold=3)


def test_duplicate_indices_rejected(ed25519):
    _, sharing = distribute_secret(ed25519, 3, 2)
    shares = sharing.secret_shares()
    with pytest.raises(InvalidInput, match="Duplicate"):
        combine_secret_shares(ed25519, [shares[0], shares[0]])


def test_recover_public_escalates_by_default(ed25519):
    _, sharing = distribute_secret(ed25519, 3, 2)
    packets = [create_schnorr_packet(ed25519, share) for share in sharing.secret_shares()]
    packets[1] = dataclasses.replace(packets[1], value=ed25519.random_point().to_bytes())
    with pytest.raises(InvalidPublicShare, match="Invalid packet with index 2"):
        recover_public(ed25519, packets)


def test_blame_accuracy(ed25519, caplog):
    secret, sharing = distribute_secret(ed25519, 6, 3)
    packets = [create_schnorr_packet(ed25519, share) for share in sharing.secret_shares()]
    for position in (0, 4):
        packets[position] = dataclasses.replace(packets[position], value=ed25519.random_point().to_bytes())
    with caplog.at_level(logging.WARNING, logger="vsskit.combiner"):
        recovery = recover_public(ed25519, packets, error_on_invalid=False)
    assert recovery.blame == (1, 5)
    assert recovery.recovered == extract_public(ed25519, secret)
    assert "blamed public share 1" in caplog.text


def test_nonces_by_index(ed25519):
    secret, sharing = distribute_secret(ed25519, 3, 2)
    nonces = {share.index: f"nonce-{share.index}".encode() for share in sharing.secret_shares()}
    packets = [
        create_schnorr_packet(ed25519, share, nonce=nonces[share.index])
        for share in sharing.secret_shares()
    ]
    recovery = recover_public(ed25519, packets, nonces=nonces)
    assert recovery.blame == ()
    assert recovery.recovered == extract_public(ed25519, secret)

    del nonces[3]
    with pytest.raises(MissingNonce, match="No nonce for index 3"):
        recover_public(ed25519, packets, nonces=nonces, error_on_invalid=False)


def test_recover_threshold_checked_first(ed25519):
    _, sharing = distribute_secret(ed25519, 3, 3)
    packets = [create_schnorr_packet(ed25519, share) for share in sharing.secret_shares()[:2]]
    with pytest.raises(InsufficientShares):
        recover_public(ed25519, packets, threshold=3)
