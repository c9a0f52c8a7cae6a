"""GF(M61) field elements — an exact scalar type for polynomial algebra.

All operations over the Mersenne prime field M61 = 2^61 - 1.
Uses Python int (not numpy uint64) to avoid overflow on 61x61-bit multiply.
Elements mix freely with small Python ints, so they can be used as both
the domain and the range of a Polynomial without rounding error.
"""

import secrets

M61 = (1 << 61) - 1  # 2^61 - 1 = 2305843009213693951


def _reduce(x: int) -> int:
    """Fast reduction mod M61 using Mersenne prime structure.

    For x < 2^122 (product of two 61-bit numbers):
      x mod (2^61 - 1) = (x >> 61) + (x & M61), with a final correction.
    """
    r = (x >> 61) + (x & M61)
    if r >= M61:
        r -= M61
    return r


def _coerce(other):
    if isinstance(other, GF61):
        return other
    if isinstance(other, int):
        return GF61(other)
    return None


class GF61:
    """Element of GF(M61)."""

    __slots__ = ('value',)

    def __init__(self, value: int = 0):
        self.value = value % M61

    @classmethod
    def _raw(cls, value: int) -> 'GF61':
        # value already in [0, M61)
        e = cls.__new__(cls)
        e.value = value
        return e

    def __add__(self, other):
        other = _coerce(other)
        if other is None:
            return NotImplemented
        s = self.value + other.value
        if s >= M61:
            s -= M61
        return GF61._raw(s)

    __radd__ = __add__

    def __sub__(self, other):
        other = _coerce(other)
        if other is None:
            return NotImplemented
        s = self.value - other.value
        if s < 0:
            s += M61
        return GF61._raw(s)

    def __rsub__(self, other):
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return other - self

    def __mul__(self, other):
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return GF61._raw(_reduce(self.value * other.value))

    __rmul__ = __mul__

    def __truediv__(self, other):
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return self * other.inverse()

    def __rtruediv__(self, other):
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return other * self.inverse()

    def __neg__(self):
        return GF61._raw(M61 - self.value if self.value != 0 else 0)

    def __pos__(self):
        return self

    def __pow__(self, exp: int):
        if not isinstance(exp, int):
            return NotImplemented
        if exp < 0:
            return self.inverse() ** -exp
        return GF61._raw(pow(self.value, exp, M61))

    def inverse(self) -> 'GF61':
        """Multiplicative inverse via Fermat's little theorem: a^(M61-2) mod M61."""
        if self.value == 0:
            raise ZeroDivisionError("Cannot invert zero in GF(M61)")
        return GF61._raw(pow(self.value, M61 - 2, M61))

    def __eq__(self, other):
        if isinstance(other, GF61):
            return self.value == other.value
        if isinstance(other, int):
            return self.value == other % M61
        return NotImplemented

    def __hash__(self):
        return hash(self.value)

    def __bool__(self):
        return self.value != 0

    def __repr__(self):
        return f"GF61({self.value})"

    def __format__(self, spec: str) -> str:
        return format(self.value, spec)

    @classmethod
    def random(cls, rng=None) -> 'GF61':
        """Sample a uniform random element via rejection sampling.

        Draws 61 random bits, rejects if >= M61.
        """
        while True:
            if rng is not None:
                r = rng.getrandbits(61)
            else:
                r = secrets.randbits(61)
            if r < M61:
                return cls._raw(r)

    @classmethod
    def random_nonzero(cls, rng=None) -> 'GF61':
        while True:
            r = cls.random(rng)
            if r:
                return r
