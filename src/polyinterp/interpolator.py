"""Lagrange interpolation through a set of sample points.

Interpolator rebuilds the interpolating Polynomial from scratch on each
polynomial() call. IncrementalInterpolator trades the symbolic result for
O(n) updates per insert and direct evaluation at a point.

x values must be pairwise distinct; a duplicate is rejected by insert()
(returns False) rather than raised. Near-duplicates are accepted and give
ill-conditioned results.
"""

import logging
from dataclasses import dataclass

from polyinterp.polynomial import Polynomial

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DataPoint:
    x: object
    y: object


class Interpolator:
    """Accumulates distinct (x, y) points; polynomial() is the Lagrange interpolant."""

    def __init__(self, points=()):
        self._points: list[DataPoint] = []
        for x, y in points:
            self.insert(x, y)

    @property
    def points(self) -> tuple:
        return tuple(self._points)

    def __len__(self):
        return len(self._points)

    def __contains__(self, x):
        return any(p.x == x for p in self._points)

    def clear(self):
        logger.debug(f"Clearing {len(self._points)} points")
        self._points.clear()

    def insert(self, x, y) -> bool:
        """Add (x, y). Returns False, leaving the set unchanged, if x is already present."""
        if x in self:
            logger.debug(f"Rejected duplicate x={x!r}")
            return False
        self._points.append(DataPoint(x, y))
        return True

    def polynomial(self) -> Polynomial:
        """Build the unique polynomial of degree < n through all n points.

        L(x) = sum_j y_j * prod_{k!=j} (x - x_k)/(x_j - x_k).
        Each basis factor is the line [-x_k/d, 1/d] with d = x_j - x_k,
        which is 0 at x_k and 1 at x_j.
        """
        result = Polynomial()
        for j, pj in enumerate(self._points):
            basis = Polynomial.one()
            for k, pk in enumerate(self._points):
                if k == j:
                    continue
                denom = pj.x - pk.x
                basis = basis * Polynomial([-pk.x / denom, 1 / denom])
            result = result + pj.y * basis
        logger.debug(
            f"Interpolated {len(self._points)} points, degree {result.degree}"
        )
        return result


class _Term:
    """One point's Lagrange basis in factored form.

    basis(t) = prod(t - d for d in diffs) / denom, equal to 1 at point.x
    and 0 at every other inserted x.
    """

    __slots__ = ('point', 'diffs', 'denom')

    def __init__(self, point: DataPoint, diffs: list, denom):
        self.point = point
        self.diffs = diffs
        self.denom = denom

    def value_at(self, t):
        """y * basis(t)."""
        product = 1
        for d in self.diffs:
            product = product * (t - d)
        return self.point.y * product / self.denom


class IncrementalInterpolator:
    """Lagrange interpolation maintained point by point.

    O(n) per insert, O(n^2) per evaluation, no symbolic polynomial.
    """

    def __init__(self, points=()):
        self._terms: list[_Term] = []
        for x, y in points:
            self.insert(x, y)

    @property
    def points(self) -> tuple:
        return tuple(t.point for t in self._terms)

    def __len__(self):
        return len(self._terms)

    def __contains__(self, x):
        return any(t.point.x == x for t in self._terms)

    def clear(self):
        logger.debug(f"Clearing {len(self._terms)} points")
        self._terms.clear()

    def insert(self, x, y) -> bool:
        """Add (x, y), updating every existing basis to vanish at x."""
        if x in self:
            logger.debug(f"Rejected duplicate x={x!r}")
            return False

        denom = 1
        for t in self._terms:
            t.diffs.append(x)
            t.denom = t.denom * (t.point.x - x)
            denom = denom * (x - t.point.x)

        diffs = [t.point.x for t in self._terms]
        self._terms.append(_Term(DataPoint(x, y), diffs, denom))
        return True

    def evaluate(self, x):
        """Value of the interpolating polynomial at x; 0 with no points."""
        result = 0
        for t in self._terms:
            result = result + t.value_at(x)
        return result

    def __call__(self, x):
        return self.evaluate(x)
