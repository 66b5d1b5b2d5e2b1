"""
Aggregate points by iteratively merging close pairs into their midpoint.

The merge is greedy and sequential. Each pass visits the surviving points in
input order, and for each one scans all other survivors (also in input order),
absorbing any point that lies within `epsilon` of its *current* position. A
merge moves the surviving point to the midpoint immediately, so later
comparisons in the same pass see the updated position. The outcome therefore
depends on the order of the input, and is not an optimal clustering.
"""

# third-party
import numpy as np
from loguru import logger

# relative
from .config import CONFIG
from .result import AggregationResult
from .utils import check_max_iterations, sanitize_points


# ---------------------------------------------------------------------------- #

def _absorb_neighbours(i, x, y, w, epsilon):
    """
    Merge every live point within `epsilon` of point `i` into `i`, scanning
    candidates in index order. Returns the number of merges.
    """
    n = len(w)
    merges = 0
    start = 0
    while start < n:
        live = w[start:] > 0
        if i >= start:
            live[i - start] = False

        # distances from the current position of `i`
        near = np.hypot(x[start:] - x[i], y[start:] - y[i]) < epsilon
        hits = np.flatnonzero(live & near)
        if hits.size == 0:
            break

        j = start + hits[0]
        x[i] = (x[i] + x[j]) / 2
        y[i] = (y[i] + y[j]) / 2
        w[i] += w[j]
        w[j] = 0
        merges += 1
        start = j + 1

    return merges


def _merge_pass(x, y, w, epsilon):
    merges = 0
    for i in range(len(w)):
        # absorbed points take no further part
        if w[i] > 0:
            merges += _absorb_neighbours(i, x, y, w, epsilon)
    return merges


# ---------------------------------------------------------------------------- #

class ProximityAggregator:
    """
    Merge pairs of points closer than `epsilon` until no more merges happen,
    or until `max_iterations` passes have been done.

    Diagnostics for the most recent run are available as attributes:

    n_passes : int
        Number of passes executed.
    n_merges : int
        Total number of merges.
    converged : bool
        Whether the final pass did no merges. When False, the iteration cap
        was hit and the result is a partial aggregation.
    """

    def __init__(self, epsilon=CONFIG.proximity.epsilon,
                 max_iterations=CONFIG.proximity.max_iterations):
        self.epsilon = float(epsilon)
        self.max_iterations = check_max_iterations(max_iterations)
        self.n_passes = 0
        self.n_merges = 0
        self.converged = None

    def __repr__(self):
        return (f'{type(self).__name__}(epsilon={self.epsilon}, '
                f'max_iterations={self.max_iterations})')

    def __call__(self, points):
        """
        Aggregate `points`.

        Parameters
        ----------
        points : array-like (N, 2)
            Point coordinates. Their order determines the merge order.

        Returns
        -------
        AggregationResult
            One point per survivor, in input order.
        """
        data = sanitize_points(points)
        x, y = data.T.copy()
        w = np.ones(len(data), int)

        self.n_passes = self.n_merges = 0
        self.converged = True
        if len(data) < 2 or self.epsilon <= 0:
            logger.debug('Nothing to merge for {} point(s) with epsilon={}.',
                         len(data), self.epsilon)
            return AggregationResult.from_arrays(x, y, w)

        self.converged = False
        while self.n_passes < self.max_iterations:
            merges = _merge_pass(x, y, w, self.epsilon)
            self.n_passes += 1
            self.n_merges += merges
            logger.trace('Pass {}: {} merges.', self.n_passes, merges)
            if merges == 0:
                self.converged = True
                break

        if not self.converged:
            logger.warning('Proximity aggregation did not converge within {} '
                           'passes. Returning partial result.',
                           self.max_iterations)

        keep = w > 0
        logger.debug('Merged {} points into {} in {} passes.',
                     len(data), keep.sum(), self.n_passes)

        return AggregationResult.from_arrays(x[keep], y[keep], w[keep])


def aggregate_proximity(points,
                        epsilon=CONFIG.proximity.epsilon,
                        max_iterations=CONFIG.proximity.max_iterations):
    """
    Iteratively merge points that are closer than `epsilon` into their
    midpoint, accumulating counts. See `ProximityAggregator`.

    Parameters
    ----------
    points : array-like (N, 2)
        Point coordinates.
    epsilon : float
        Distance threshold. Points strictly closer than this are merged. Non-
        positive values disable merging.
    max_iterations : int
        Maximum number of merge passes.

    Returns
    -------
    AggregationResult
    """
    return ProximityAggregator(epsilon, max_iterations)(points)
