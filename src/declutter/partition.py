"""
Run an aggregator independently on each label group of a dataset.
"""

# third-party
from loguru import logger
from more_itertools import map_reduce

# relative
from .grid import aggregate_grid
from .proximity import aggregate_proximity
from .result import AggregationResult
from .utils import sanitize_labels, sanitize_points


# ---------------------------------------------------------------------------- #
AGGREGATORS = {
    'grid': aggregate_grid,
    'proximity': aggregate_proximity
}

# ---------------------------------------------------------------------------- #


def group_indices(labels):
    """
    Map each distinct label to the indices of its observations. Groups are
    ordered by first appearance of the label.
    """
    return map_reduce(enumerate(labels),
                      keyfunc=lambda item: item[1],
                      valuefunc=lambda item: item[0])


def aggregate_by_label(points, labels=None, aggregator=aggregate_grid, **kws):
    """
    Aggregate `points` separately for each distinct label. Points with
    different labels are never combined.

    Parameters
    ----------
    points : array-like (N, 2)
        Point coordinates.
    labels : sequence, optional
        Category label for each point. If not given, the aggregator is run once
        on all the data and the labels of the result are left unset.
    aggregator : callable
        Aggregation function, called as `aggregator(points, **kws)` for each
        group.
    **kws
        Parameters passed to the aggregator. The same values are used for
        every group.

    Returns
    -------
    AggregationResult
        Concatenated group results, in order of first label appearance.

    Raises
    ------
    InvalidInput
        If the number of labels does not match the number of points.
    """
    data = sanitize_points(points)
    labels = sanitize_labels(labels, len(data))

    if labels is None:
        return aggregator(data, **kws)

    groups = group_indices(labels)
    logger.debug('Aggregating {} points in {} label groups.',
                 len(data), len(groups))

    return AggregationResult.concat(
        aggregator(data[indices], **kws).relabel(label)
        for label, indices in groups.items()
    )


def aggregate(points, labels=None, method='grid', **kws):
    """
    Aggregate `points`, optionally grouped by `labels`, using the aggregator
    named by `method`.

    Parameters
    ----------
    points : array-like (N, 2)
        Point coordinates.
    labels : sequence, optional
        Category label for each point.
    method : {'grid', 'proximity'}
        Aggregation algorithm.
    **kws
        Parameters for the aggregator, eg. `epsilon` and `max_iterations` for
        the proximity method.

    Returns
    -------
    AggregationResult
    """
    if (aggregator := AGGREGATORS.get(str(method).lower())) is None:
        raise ValueError(f'Invalid aggregation method {method!r}: Valid '
                         f'choices are {set(AGGREGATORS)}')

    return aggregate_by_label(points, labels, aggregator, **kws)
