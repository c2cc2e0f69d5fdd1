import dataclasses

import pytest
from hypothesis import given, settings as hsettings, strategies as st

from vsskit.backend import init_group
from vsskit.enums import Algorithm, System
from vsskit.errors import InvalidDimensions
from vsskit.nizk import DDHTuple, DlogPair, LinearRelation, NizkProof, nizk

ED = init_group(System.ED25519)


def _flip_response(proof: NizkProof, group) -> NizkProof:
    response = list(proof.response)
    response[0] = (response[0] + 1) % group.order
    return dataclasses.replace(proof, response=tuple(response))


def _flip_commitment(proof: NizkProof, group) -> NizkProof:
    commitment = list(proof.commitment)
    commitment[0] = group.operate(commitment[0], group.generator)
    return dataclasses.replace(proof, commitment=tuple(commitment))


def test_dlog_complete_and_sound(group):
    protocol = nizk(group)
    x = group.random_scalar()
    pair = DlogPair(group.generator, group.exp(group.generator, x))
    proof = protocol.prove_dlog(x, pair)
    assert protocol.verify_dlog(pair, proof)
    assert not protocol.verify_dlog(pair, _flip_response(proof, group))
    assert not protocol.verify_dlog(pair, _flip_commitment(proof, group))
    assert not protocol.verify_dlog(DlogPair(group.generator, group.random_point()), proof)


def test_nonce_binding(group):
    protocol = nizk(group)
    x = group.random_scalar()
    pair = DlogPair(group.generator, group.exp(group.generator, x))
    proof = protocol.prove_dlog(x, pair, nonce=b"round-1")
    assert protocol.verify_dlog(pair, proof, nonce=b"round-1")
    assert not protocol.verify_dlog(pair, proof, nonce=b"round-2")
    assert not protocol.verify_dlog(pair, proof)


def test_absent_and_empty_nonce_are_distinct():
    protocol = nizk(ED)
    x = ED.random_scalar()
    pair = DlogPair(ED.generator, ED.exp(ED.generator, x))
    proof = protocol.prove_dlog(x, pair, nonce=b"")
    assert protocol.verify_dlog(pair, proof, nonce=b"")
    assert not protocol.verify_dlog(pair, proof, nonce=None)


def test_extras_bind_associated_message():
    protocol = nizk(ED)
    x = ED.random_scalar()
    pair = DlogPair(ED.generator, ED.exp(ED.generator, x))
    proof = protocol.prove_dlog(x, pair, extras=[b"message"])
    assert protocol.verify_dlog(pair, proof, extras=[b"message"])
    assert not protocol.verify_dlog(pair, proof, extras=[b"other"])
    # framing keeps ("ab", "c") apart from ("a", "bc")
    proof = protocol.prove_dlog(x, pair, extras=[b"ab", b"c"])
    assert not protocol.verify_dlog(pair, proof, extras=[b"a", b"bc"])


def test_ddh(group):
    protocol = nizk(group)
    z = group.random_scalar()
    u = group.random_point()
    ddh = DDHTuple(u, group.exp(group.generator, z), group.exp(u, z))
    proof = protocol.prove_ddh(z, ddh)
    assert protocol.verify_ddh(ddh, proof)
    forged = DDHTuple(u, ddh.v, group.operate(ddh.w, group.generator))
    assert not protocol.verify_ddh(forged, proof)
    assert not protocol.verify_ddh(ddh, _flip_response(proof, group))


def test_eq_and_and_dlog():
    protocol = nizk(ED)
    x = ED.random_scalar()
    bases = [ED.random_point() for _ in range(3)]
    pairs = [DlogPair(u, ED.exp(u, x)) for u in bases]
    assert protocol.verify_eq_dlog(pairs, protocol.prove_eq_dlog(x, pairs))

    xs = [ED.random_scalar() for _ in range(3)]
    pairs = [DlogPair(u, ED.exp(u, w)) for u, w in zip(bases, xs)]
    proof = protocol.prove_and_dlog(xs, pairs)
    assert protocol.verify_and_dlog(pairs, proof)
    assert not protocol.verify_and_dlog(list(reversed(pairs)), proof)


def test_representation():
    protocol = nizk(ED)
    s, t = ED.random_scalar(), ED.random_scalar()
    h = ED.random_point()
    u = ED.operate(ED.exp(ED.generator, s), ED.exp(h, t))
    proof = protocol.prove_representation(s, t, h, u)
    assert protocol.verify_representation(h, u, proof)
    assert not protocol.verify_representation(h, ED.random_point(), proof)


def test_dimension_mismatch_raises():
    protocol = nizk(ED)
    g = ED.generator
    with pytest.raises(InvalidDimensions):
        protocol.prove_linear([1, 2], LinearRelation.of([[g]], [g]))
    with pytest.raises(InvalidDimensions):
        protocol.prove_linear([1], LinearRelation.of([[g], [g]], [g]))
    proof = protocol.prove_linear([1], LinearRelation.of([[g]], [g]))
    with pytest.raises(InvalidDimensions):
        protocol.verify_linear(LinearRelation.of([[g, g]], [g]), proof)
    with pytest.raises(InvalidDimensions):
        protocol.verify_linear(LinearRelation.of([[g], [g]], [g, g]), proof)
    with pytest.raises(InvalidDimensions):
        protocol.verify_linear(LinearRelation.of([], []), NizkProof((), (), Algorithm.SHA256))
    with pytest.raises(InvalidDimensions):
        protocol.verify_linear(LinearRelation.of([[]], [g]), NizkProof((g,), (), Algorithm.SHA256))


def test_proof_wire_shape(group):
    protocol = nizk(group, Algorithm.SHA3_256)
    x = group.random_scalar()
    pair = DlogPair(group.generator, group.exp(group.generator, x))
    proof = protocol.prove_dlog(x, pair)
    data = proof.to_dict(group)
    assert all(len(c) == group.point_size for c in data["commitment"])
    assert all(len(s) == group.scalar_size for s in data["response"])
    restored = NizkProof.from_dict(group, data)
    assert restored == proof
    assert nizk(group).verify_dlog(pair, restored)


@hsettings(max_examples=15, deadline=None)
@given(
    st.lists(st.integers(min_value=1, max_value=ED.order - 1), min_size=1, max_size=3),
    st.integers(min_value=1, max_value=3),
    st.sampled_from(list(Algorithm)),
)
def test_linear_relations_round_trip(witnesses, rows, algorithm):
    protocol = nizk(ED, algorithm)
    us = [[ED.random_point() for _ in witnesses] for _ in range(rows)]
    vs = []
    for row in us:
        acc = ED.neutral
        for u, x in zip(row, witnesses):
            acc = ED.operate(acc, ED.exp(u, x))
        vs.append(acc)
    relation = LinearRelation.of(us, vs)
    proof = protocol.prove_linear(witnesses, relation)
    assert protocol.verify_linear(relation, proof)
    assert not protocol.verify_linear(relation, _flip_response(proof, ED))
