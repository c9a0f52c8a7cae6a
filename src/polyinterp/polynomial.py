"""Polynomials over a generic scalar domain/range pair.

A Polynomial holds its coefficients lowest power first:
coeffs = [c_0, c_1, ..., c_{n-1}] represents c_0 + c_1*x + ... + c_{n-1}*x^(n-1).
Coefficients are kept in canonical form (no trailing zeros), so the empty
tuple is the only representation of the zero polynomial.

Any scalar that supports + - * / and mixes with small ints works as a
coefficient or as x: float, complex, fractions.Fraction, GF61.
"""

import numbers
import operator
from itertools import zip_longest
from typing import Protocol


class Scalar(Protocol):
    """Arithmetic a coefficient (or x value) must support."""

    def __add__(self, other): ...
    def __sub__(self, other): ...
    def __mul__(self, other): ...
    def __truediv__(self, other): ...
    def __neg__(self): ...
    def __eq__(self, other) -> bool: ...


class Polynomial:
    """Immutable polynomial. coeffs[0] = constant term."""

    __slots__ = ('_coeffs',)

    def __init__(self, coeffs=()):
        coeffs = list(coeffs)
        while coeffs and coeffs[-1] == 0:
            coeffs.pop()
        self._coeffs = tuple(coeffs)

    @staticmethod
    def one() -> 'Polynomial':
        return Polynomial([1])

    @property
    def coefficients(self) -> tuple:
        return self._coeffs

    @property
    def degree(self) -> int:
        """len(coefficients) - 1; -1 for the zero polynomial."""
        return len(self._coeffs) - 1

    def is_zero(self) -> bool:
        return not self._coeffs

    def __bool__(self):
        return bool(self._coeffs)

    def evaluate(self, x):
        """Evaluate at x using Horner's method (highest power first)."""
        result = 0
        for c in reversed(self._coeffs):
            result = x * result + c
        return result

    def __call__(self, x):
        """p(x) evaluates; p(q) with a Polynomial q composes to p(q(x))."""
        if isinstance(x, Polynomial):
            return compose(self, x)
        return self.evaluate(x)

    def __pos__(self):
        return self

    def __neg__(self):
        return Polynomial([-c for c in self._coeffs])

    def scale(self, s: Scalar) -> 'Polynomial':
        """Multiply every coefficient by the scalar s."""
        return Polynomial([c * s for c in self._coeffs])

    def __add__(self, other):
        if not isinstance(other, Polynomial):
            return NotImplemented
        return Polynomial([
            a + b for a, b in zip_longest(self._coeffs, other._coeffs, fillvalue=0)
        ])

    def __sub__(self, other):
        if not isinstance(other, Polynomial):
            return NotImplemented
        return Polynomial([
            a - b for a, b in zip_longest(self._coeffs, other._coeffs, fillvalue=0)
        ])

    def __mul__(self, other):
        if not isinstance(other, Polynomial):
            return self.scale(other)
        a, b = self._coeffs, other._coeffs
        # len(a) + len(b) - 1 is only meaningful for nonzero operands
        if not a or not b:
            return Polynomial()
        product = [0] * (len(a) + len(b) - 1)
        for i, ai in enumerate(a):
            for j, bj in enumerate(b):
                product[i + j] = product[i + j] + ai * bj
        return Polynomial(product)

    def __rmul__(self, other):
        return self.scale(other)

    def __pow__(self, exponent, modulo=None):
        """Raise to a non-negative integer power by square-and-multiply.

        p ** 0 is Polynomial([1]) for every p, the zero polynomial included.
        That is a convention (0^0 is undefined), kept so that code building
        powers in a loop needs no special case.
        """
        if modulo is not None:
            return NotImplemented
        exponent = operator.index(exponent)
        if exponent < 0:
            raise ValueError(f"Exponent must be non-negative, got {exponent}")
        product = Polynomial.one()
        square = self
        while exponent:
            if exponent & 1:
                product = product * square
            exponent >>= 1
            if exponent:
                square = square * square
        return product

    def derivative(self) -> 'Polynomial':
        return Polynomial([i * c for i, c in enumerate(self._coeffs) if i > 0])

    def integral(self, constant: Scalar = 0) -> 'Polynomial':
        """Antiderivative with the given constant term.

        integral(c).derivative() == self for every c.
        """
        return Polynomial(
            [constant] + [c / (i + 1) for i, c in enumerate(self._coeffs)]
        )

    def __eq__(self, other):
        if not isinstance(other, Polynomial):
            return NotImplemented
        return self._coeffs == other._coeffs

    def __hash__(self):
        return hash(self._coeffs)

    def __repr__(self):
        return f"Polynomial({list(self._coeffs)!r})"

    def __str__(self):
        return format(self, '')

    def __format__(self, spec: str) -> str:
        """Render as c0 + c1*x + c2*x^2 + ..., spec applied per coefficient."""
        if not self._coeffs:
            return format(0, spec)
        text = format(self._coeffs[0], spec)
        for power, c in enumerate(self._coeffs[1:], start=1):
            if isinstance(c, numbers.Real) and c < 0:
                text += ' - ' + format(-c, spec)
            else:
                text += ' + ' + format(c, spec)
            text += '*x' if power == 1 else f'*x^{power}'
        return text


def compose(outer: Polynomial, inner: Polynomial) -> Polynomial:
    """Return outer(inner(x)) as a polynomial in inner's variable.

    Accumulates c_i * inner^i, growing the power of inner by one
    multiplication per term instead of evaluating symbolically.
    """
    total = Polynomial()
    power = Polynomial.one()
    for i, c in enumerate(outer.coefficients):
        if i > 0:
            power = power * inner
        total = total + c * power
    return total
