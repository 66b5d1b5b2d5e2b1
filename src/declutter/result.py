"""
Output containers shared by the aggregators.
"""

# std
import itertools as itt
from collections import abc
from typing import Any, NamedTuple, Optional

# third-party
import numpy as np
from more_itertools import map_reduce

# relative
from .config import CONFIG


# ---------------------------------------------------------------------------- #

class AggregatedPoint(NamedTuple):
    """A weighted point standing in for `count` observations."""

    x: float
    y: float
    count: int
    label: Optional[Any] = None


class AggregationResult(abc.Sequence):
    """
    Immutable sequence of `AggregatedPoint`s, with columnar array access for
    passing on to plotting routines.
    """

    __slots__ = ('_points', )

    def __init__(self, points=()):
        self._points = tuple(AggregatedPoint(*p) for p in points)

    @classmethod
    def from_arrays(cls, x, y, counts, label=None):
        return cls(AggregatedPoint(float(x_), float(y_), int(n), label)
                   for x_, y_, n in zip(x, y, counts))

    @classmethod
    def concat(cls, results):
        return cls(itt.chain.from_iterable(results))

    # ------------------------------------------------------------------------ #
    def __getitem__(self, key):
        if isinstance(key, slice):
            return type(self)(self._points[key])
        return self._points[key]

    def __len__(self):
        return len(self._points)

    def __add__(self, other):
        if not isinstance(other, AggregationResult):
            return NotImplemented
        return type(self)(self._points + other._points)

    def __eq__(self, other):
        if isinstance(other, AggregationResult):
            return self._points == other._points
        return NotImplemented

    def __hash__(self):
        return hash(self._points)

    def __repr__(self):
        return f'{type(self).__name__}(n={len(self)}, total={self.total})'

    # ------------------------------------------------------------------------ #
    @property
    def x(self):
        return np.array([p.x for p in self._points], float)

    @property
    def y(self):
        return np.array([p.y for p in self._points], float)

    @property
    def xy(self):
        return np.column_stack([self.x, self.y]) if self else np.empty((0, 2))

    @property
    def counts(self):
        return np.array([p.count for p in self._points], int)

    @property
    def labels(self):
        return [p.label for p in self._points]

    @property
    def total(self):
        """Total number of observations represented."""
        return sum(p.count for p in self._points)

    # ------------------------------------------------------------------------ #
    def relabel(self, label):
        """Copy of the result with every point tagged as `label`."""
        return type(self)(p._replace(label=label) for p in self._points)

    def groups(self):
        """Sub-results keyed on label, in order of first appearance."""
        groups = map_reduce(self._points, lambda p: p.label)
        return {label: type(self)(points) for label, points in groups.items()}

    def sizes(self, smin=CONFIG.sizes.smin, k=CONFIG.sizes.k):
        """
        Marker sizes for the points. Counts are rescaled linearly into the
        interval [smin, max(k, max count)], so the smallest count maps to
        `smin` and the largest to the upper bound.

        Parameters
        ----------
        smin : float
            Size of the marker for the smallest count.
        k : float
            Lower limit for the largest marker size. When the counts exceed
            this value, the largest count is used instead.

        Returns
        -------
        np.ndarray
            Marker sizes, one per point.
        """
        counts = self.counts
        if counts.size == 0:
            return np.empty(0)

        lo, hi = counts.min(), counts.max()
        if lo == hi:
            return np.full(counts.shape, smin, float)

        smax = max(k, hi)
        return smin + (counts - lo) * (smax - smin) / (hi - lo)

    def to_records(self):
        return [p._asdict() for p in self._points]
