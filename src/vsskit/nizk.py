# SPDX-FileCopyrightText: 2025 vsskit contributors
# SPDX-License-Identifier: MIT
"""Non-interactive zero-knowledge proofs for linear relations over a group.

A linear relation is a matrix ``us`` (``m x k`` group elements) and a vector
``vs`` (``m`` elements). A proof shows knowledge of witnesses ``x_1..x_k`` with
``v_i = prod_j u_ij^x_j`` for every row ``i``, without revealing them. The
challenge is derived Fiat-Shamir style from the group parameters, the whole
relation, the prover's commitments, any extra bound data and an optional
nonce. Discrete-log, DDH, equality, AND-composition and representation
proofs are all instances of the same engine.
"""
from __future__ import annotations

import hashlib
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence, Tuple, Union

from vsskit.arith import le_int_to_bytes
from vsskit.backend import Group, Point
from vsskit.config import settings
from vsskit.enums import Algorithm
from vsskit.errors import InvalidDimensions

_LENGTH_PREFIX = 8


@dataclass(frozen=True)
class NizkProof:
    commitment: Tuple[Point, ...]
    response: Tuple[int, ...]
    algorithm: Algorithm

    def to_dict(self, group: Group) -> Dict[str, object]:
        """Wire shape: commitments as point bytes, responses as scalar bytes."""
        return {
            "commitment": [c.to_bytes() for c in self.commitment],
            "response": [group.pack_scalar(s) for s in self.response],
            "algorithm": self.algorithm.value,
        }

    @classmethod
    def from_dict(cls, group: Group, data: Dict[str, object]) -> "NizkProof":
        return cls(
            commitment=tuple(group.unpack_valid(c) for c in data["commitment"]),  # type: ignore[union-attr]
            response=tuple(group.unpack_scalar(s) for s in data["response"]),  # type: ignore[union-attr]
            algorithm=Algorithm(data.get("algorithm", settings.algorithm.value)),
        )


@dataclass(frozen=True)
class LinearRelation:
    us: Tuple[Tuple[Point, ...], ...]
    vs: Tuple[Point, ...]

    @classmethod
    def of(cls, us: Sequence[Sequence[Point]], vs: Sequence[Point]) -> "LinearRelation":
        return cls(tuple(tuple(row) for row in us), tuple(vs))


@dataclass(frozen=True)
class DlogPair:
    u: Point
    v: Point


@dataclass(frozen=True)
class DDHTuple:
    u: Point
    v: Point
    w: Point


def _frame(data: bytes) -> bytes:
    return len(data).to_bytes(_LENGTH_PREFIX, "little") + data


class FiatShamir:
    """Challenge derivation bound to one group instantiation."""

    def __init__(self, group: Group, algorithm: Optional[Union[Algorithm, str]] = None) -> None:
        self.group = group
        self.algorithm = Algorithm(algorithm) if algorithm else settings.algorithm

    def compute_challenge(
        self,
        points: Sequence[Point],
        scalars: Sequence[int],
        extras: Sequence[bytes],
        nonce: Optional[bytes] = None,
        algorithm: Optional[Algorithm] = None,
    ) -> int:
        group = self.group
        hasher = hashlib.new(Algorithm(algorithm or self.algorithm).value)
        hasher.update(le_int_to_bytes(group.modulus))
        hasher.update(le_int_to_bytes(group.order))
        hasher.update(group.generator.to_bytes())
        for point in points:
            hasher.update(point.to_bytes())
        for scalar in scalars:
            hasher.update(group.pack_scalar(scalar))
        for extra in extras:
            hasher.update(_frame(bytes(extra)))
        # absent and empty nonces are distinct transcripts
        if nonce is None:
            hasher.update(b"\x00")
        else:
            hasher.update(b"\x01" + _frame(bytes(nonce)))
        return group.reduce_scalar(hasher.digest())


def _fill_matrix(point: Point, m: int, n: int) -> List[List[Point]]:
    return [[point] * n for _ in range(m)]


class NizkProtocol(FiatShamir):
    """Generic prover and verifier for linear relations."""

    def _transcript(self, relation: LinearRelation, commitment: Sequence[Point]) -> List[Point]:
        points: List[Point] = [u for row in relation.us for u in row]
        points.extend(relation.vs)
        points.extend(commitment)
        return points

    def prove_linear(
        self,
        witnesses: Sequence[int],
        relation: LinearRelation,
        extras: Sequence[bytes] = (),
        nonce: Optional[bytes] = None,
    ) -> NizkProof:
        group = self.group
        us, vs = relation.us, relation.vs
        k = len(witnesses)
        if not vs or len(us) != len(vs) or k == 0:
            raise InvalidDimensions()
        for row in us:
            if len(row) != k:
                raise InvalidDimensions()

        # randomness must never be reused across proofs
        rs = [group.random_scalar() for _ in range(k)]
        commitment = []
        for row in us:
            acc = group.neutral
            for r, u in zip(rs, row):
                acc = group.operate(acc, group.exp(u, r))
            commitment.append(acc)
        challenge = self.compute_challenge(self._transcript(relation, commitment), [], extras, nonce)
        response = tuple((r + x * challenge) % group.order for r, x in zip(rs, witnesses))
        return NizkProof(tuple(commitment), response, self.algorithm)

    def verify_linear(
        self,
        relation: LinearRelation,
        proof: NizkProof,
        extras: Sequence[bytes] = (),
        nonce: Optional[bytes] = None,
    ) -> bool:
        """Return whether ``proof`` is valid for ``relation``.

        Raises :class:`InvalidDimensions` when the proof does not fit the
        relation's shape; any other failure is reported as ``False``.
        """
        group = self.group
        us, vs = relation.us, relation.vs
        commitment, response = proof.commitment, proof.response
        if not vs or not response or len(vs) != len(commitment) or len(us) != len(vs):
            raise InvalidDimensions()
        for row in us:
            if len(row) != len(response):
                raise InvalidDimensions()

        challenge = self.compute_challenge(
            self._transcript(relation, commitment), [], extras, nonce, proof.algorithm
        )
        valid = True
        for row, v, c in zip(us, vs, commitment):
            rhs = group.operate(c, group.exp(v, challenge))
            lhs = group.neutral
            for s, u in zip(response, row):
                lhs = group.operate(lhs, group.exp(u, s))
            valid = valid and lhs == rhs
        return valid

    # Specializations -------------------------------------------------------------
    def prove_dlog(self, x: int, pair: DlogPair, nonce: Optional[bytes] = None,
                   extras: Sequence[bytes] = ()) -> NizkProof:
        return self.prove_linear([x], LinearRelation.of([[pair.u]], [pair.v]), extras, nonce)

    def verify_dlog(self, pair: DlogPair, proof: NizkProof, nonce: Optional[bytes] = None,
                    extras: Sequence[bytes] = ()) -> bool:
        return self.verify_linear(LinearRelation.of([[pair.u]], [pair.v]), proof, extras, nonce)

    def _ddh_relation(self, ddh: DDHTuple) -> LinearRelation:
        g, n = self.group.generator, self.group.neutral
        return LinearRelation.of([[g, n], [n, ddh.u]], [ddh.v, ddh.w])

    def prove_ddh(self, z: int, ddh: DDHTuple, nonce: Optional[bytes] = None) -> NizkProof:
        """Prove ``v = g^z`` and ``w = u^z`` without revealing ``z``."""
        return self.prove_linear([z, z], self._ddh_relation(ddh), (), nonce)

    def verify_ddh(self, ddh: DDHTuple, proof: NizkProof, nonce: Optional[bytes] = None) -> bool:
        return self.verify_linear(self._ddh_relation(ddh), proof, (), nonce)

    def _diagonal_relation(self, pairs: Sequence[DlogPair]) -> LinearRelation:
        m = len(pairs)
        us = _fill_matrix(self.group.neutral, m, m)
        for i, pair in enumerate(pairs):
            us[i][i] = pair.u
        return LinearRelation.of(us, [pair.v for pair in pairs])

    def prove_and_dlog(self, witnesses: Sequence[int], pairs: Sequence[DlogPair],
                       nonce: Optional[bytes] = None) -> NizkProof:
        """Prove knowledge of ``x_i = log_{u_i} v_i`` for every pair."""
        return self.prove_linear(witnesses, self._diagonal_relation(pairs), (), nonce)

    def verify_and_dlog(self, pairs: Sequence[DlogPair], proof: NizkProof,
                        nonce: Optional[bytes] = None) -> bool:
        return self.verify_linear(self._diagonal_relation(pairs), proof, (), nonce)

    def prove_eq_dlog(self, x: int, pairs: Sequence[DlogPair],
                      nonce: Optional[bytes] = None) -> NizkProof:
        """Prove that every pair shares the same discrete logarithm ``x``."""
        us = [[pair.u] for pair in pairs]
        return self.prove_linear([x], LinearRelation.of(us, [pair.v for pair in pairs]), (), nonce)

    def verify_eq_dlog(self, pairs: Sequence[DlogPair], proof: NizkProof,
                       nonce: Optional[bytes] = None) -> bool:
        us = [[pair.u] for pair in pairs]
        return self.verify_linear(LinearRelation.of(us, [pair.v for pair in pairs]), proof, (), nonce)

    def prove_representation(self, s: int, t: int, h: Point, u: Point,
                             nonce: Optional[bytes] = None) -> NizkProof:
        """Okamoto: prove knowledge of ``(s, t)`` with ``u = g^s h^t``."""
        relation = LinearRelation.of([[self.group.generator, h]], [u])
        return self.prove_linear([s, t], relation, (), nonce)

    def verify_representation(self, h: Point, u: Point, proof: NizkProof,
                              nonce: Optional[bytes] = None) -> bool:
        relation = LinearRelation.of([[self.group.generator, h]], [u])
        return self.verify_linear(relation, proof, (), nonce)


def nizk(group: Group, algorithm: Optional[Union[Algorithm, str]] = None) -> NizkProtocol:
    return NizkProtocol(group, algorithm)


__all__ = [
    "NizkProof",
    "LinearRelation",
    "DlogPair",
    "DDHTuple",
    "FiatShamir",
    "NizkProtocol",
    "nizk",
]
