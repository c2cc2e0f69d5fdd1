# SPDX-FileCopyrightText: 2025 vsskit contributors
# SPDX-License-Identifier: MIT
"""Polynomials over the scalar field of a group.

``FieldPolynomial``
    Immutable polynomial with coefficients reduced modulo a prime order.

``random_polynomial``
    Uniformly random polynomial of exact degree.

``interpolate``
    Unique minimal-degree polynomial through points with distinct ``x``.
"""
from __future__ import annotations

from typing import Iterable, Sequence, Tuple, Union

from vsskit.arith import mod_inv
from vsskit.backend import Group
from vsskit.errors import InterpolationError, InvalidInput, PolynomialError

Number = Union[int, float]
XYPoint = Tuple[int, int]


class FieldPolynomial:
    """Polynomial with coefficients in ``Z_order``; index 0 is the constant term."""

    __slots__ = ("_coeffs", "_order")

    def __init__(self, coeffs: Iterable[int], order: int) -> None:
        if order <= 1:
            raise PolynomialError("Order must be > 1")
        reduced = [int(c) % order for c in coeffs]
        while reduced and reduced[-1] == 0:
            reduced.pop()
        self._coeffs = tuple(reduced)
        self._order = order

    @classmethod
    def zero(cls, order: int) -> "FieldPolynomial":
        return cls([], order)

    @property
    def coeffs(self) -> Tuple[int, ...]:
        return self._coeffs

    @property
    def order(self) -> int:
        return self._order

    @property
    def degree(self) -> Number:
        """Highest non-zero index, ``-inf`` for the zero polynomial."""
        return len(self._coeffs) - 1 if self._coeffs else float("-inf")

    def is_zero(self) -> bool:
        return not self._coeffs

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FieldPolynomial):
            return NotImplemented
        return self._order == other.order and self._coeffs == other.coeffs

    def __hash__(self) -> int:
        return hash((self._coeffs, self._order))

    def __repr__(self) -> str:
        return f"FieldPolynomial(coeffs={list(self._coeffs)!r}, order={self._order})"

    def add(self, other: "FieldPolynomial") -> "FieldPolynomial":
        if self._order != other.order:
            raise PolynomialError("Cannot add polynomials with different orders")
        size = max(len(self._coeffs), len(other.coeffs))
        lhs = self._coeffs + (0,) * (size - len(self._coeffs))
        rhs = other.coeffs + (0,) * (size - len(other.coeffs))
        return FieldPolynomial([a + b for a, b in zip(lhs, rhs)], self._order)

    def mult(self, other: "FieldPolynomial") -> "FieldPolynomial":
        if self._order != other.order:
            raise PolynomialError("Cannot multiply polynomials with different orders")
        if self.is_zero() or other.is_zero():
            return FieldPolynomial.zero(self._order)
        product = [0] * (len(self._coeffs) + len(other.coeffs) - 1)
        for i, a in enumerate(self._coeffs):
            for j, b in enumerate(other.coeffs):
                product[i + j] += a * b
        return FieldPolynomial(product, self._order)

    def mult_scalar(self, scalar: int) -> "FieldPolynomial":
        return FieldPolynomial([scalar * c for c in self._coeffs], self._order)

    __add__ = add
    __mul__ = mult

    def evaluate(self, value: int) -> int:
        """Horner evaluation modulo the order."""
        acc = 0
        for c in reversed(self._coeffs):
            acc = (acc * value + c) % self._order
        return acc

    __call__ = evaluate


def random_polynomial(group: Group, degree: int) -> FieldPolynomial:
    """Random polynomial of exactly ``degree`` over the group's scalar field."""
    if degree < 0:
        raise PolynomialError("Polynomial degree must be non-negative")
    coeffs = [group.random_scalar() for _ in range(degree)]
    # random_scalar() never returns zero, so the leading term is non-zero
    coeffs.append(group.random_scalar())
    return FieldPolynomial(coeffs, group.order)


def interpolate(group: Group, points: Sequence[XYPoint]) -> FieldPolynomial:
    """Lagrange-interpolate ``points`` over the group's scalar field.

    Builds ``sum_j y_j * w_j * prod_{i != j} (X - x_i)`` where
    ``w_j = prod_{i != j} (x_j - x_i)^{-1}``.
    """
    order = group.order
    if len(points) > order:
        raise InterpolationError("Number of provided points exceeds order")
    xs = [int(x) % order for x, _ in points]
    if len(set(xs)) != len(xs):
        raise InterpolationError("Not all provided x's are distinct modulo order")

    result = FieldPolynomial.zero(order)
    for j, (xj, yj) in enumerate(points):
        basis = FieldPolynomial([1], order)
        denominator = 1
        for i, (xi, _) in enumerate(points):
            if i == j:
                continue
            basis = basis.mult(FieldPolynomial([-xi, 1], order))
            denominator = denominator * (xj - xi) % order
        try:
            weight = mod_inv(denominator, order)
        except InvalidInput:  # pragma: no cover - excluded by the distinctness check
            raise InterpolationError("Not all provided x's are distinct modulo order") from None
        result = result.add(basis.mult_scalar(yj * weight))
    return result


__all__ = ["FieldPolynomial", "random_polynomial", "interpolate"]
