"""
Aggregate points by counting observations in integer grid cells.
"""

# third-party
import numpy as np
from loguru import logger

# relative
from .result import AggregationResult
from .utils import round_half_away, sanitize_points


# ---------------------------------------------------------------------------- #

def aggregate_grid(points):
    """
    Round coordinates to the nearest integer and count the number of
    observations that land in each integer cell. Cells without observations
    are dropped. The result does not depend on the order of the input.

    The counts are tabulated on a dense grid spanning the bounding box of the
    rounded coordinates, so memory scales with the area of that box rather
    than the number of points. Sparse data spread over a very wide range
    should be rescaled or shifted by the caller beforehand.

    Parameters
    ----------
    points : array-like (N, 2)
        Point coordinates.

    Returns
    -------
    AggregationResult
        One point per occupied cell, ordered by x and then by y.
    """
    data = sanitize_points(points)
    if len(data) == 0:
        return AggregationResult()

    ix, iy = round_half_away(data).T

    # grid spans the bounding box of the rounded data
    x0, y0 = ix.min(), iy.min()
    counts = np.zeros((ix.max() - x0 + 1, iy.max() - y0 + 1), int)
    np.add.at(counts, (ix - x0, iy - y0), 1)

    # occupied cells
    cx, cy = np.nonzero(counts)
    logger.debug('Binned {} points into {} of {} grid cells.',
                 len(data), len(cx), counts.size)

    return AggregationResult.from_arrays(cx + x0, cy + y0, counts[cx, cy])


class GridAggregator:
    """Callable wrapper around `aggregate_grid`."""

    def __call__(self, points):
        return aggregate_grid(points)

    def __repr__(self):
        return f'{type(self).__name__}()'
