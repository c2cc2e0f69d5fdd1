# SPDX-FileCopyrightText: 2025 vsskit contributors
# SPDX-License-Identifier: MIT
"""Capability interface every group realization provides.

Realizations do not share a base class; they satisfy these protocols
structurally and every protocol component receives the group explicitly.
"""
from __future__ import annotations

from typing import Protocol, TypeVar, runtime_checkable

from vsskit.enums import System


@runtime_checkable
class Point(Protocol):
    """Immutable group element."""

    def to_bytes(self) -> bytes:
        ...

    def __eq__(self, other: object) -> bool:
        ...

    def __hash__(self) -> int:
        ...


P = TypeVar("P", bound=Point)


@runtime_checkable
class Group(Protocol[P]):
    """Prime-order group with a distinguished generator."""

    label: System
    modulus: int
    order: int
    generator: P
    neutral: P
    scalar_size: int
    point_size: int

    def operate(self, lhs: P, rhs: P) -> P:
        ...

    def exp(self, point: P, scalar: int) -> P:
        ...

    def invert(self, point: P) -> P:
        ...

    def unpack(self, data: bytes) -> P:
        ...

    def unpack_valid(self, data: bytes) -> P:
        ...

    def validate_point(self, point: P, *, raise_on_invalid: bool = True) -> bool:
        ...

    def validate_scalar(self, scalar: int, *, raise_on_invalid: bool = True) -> bool:
        ...

    def random_bytes(self) -> bytes:
        ...

    def random_scalar(self) -> int:
        ...

    def random_point(self) -> P:
        ...

    def random_secret(self) -> bytes:
        ...

    def pack_scalar(self, scalar: int) -> bytes:
        ...

    def unpack_scalar(self, data: bytes) -> int:
        ...

    def reduce_scalar(self, data: bytes) -> int:
        ...


__all__ = ["Point", "Group", "P"]
