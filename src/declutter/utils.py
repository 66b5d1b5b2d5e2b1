# std
import numbers

# third-party
import numpy as np

# relative
from .errors import InvalidInput


def sanitize_points(points):
    """
    Validate point coordinates and return them as a fresh float array of shape
    (N, 2). The aggregators mutate their working buffers, so the returned
    array never shares memory with the input.

    Parameters
    ----------
    points : array-like (N, 2)
        Coordinates of the observations. An empty sequence is allowed.

    Returns
    -------
    np.ndarray
        Float array of shape (N, 2).

    Raises
    ------
    InvalidInput
        If the data have the wrong shape or contain non-finite values.
    """
    try:
        data = np.array(points, dtype=float)
    except (TypeError, ValueError) as err:
        raise InvalidInput(f'Could not interpret coordinates: {err}') from err

    if data.size == 0:
        return np.empty((0, 2))

    if data.ndim != 2 or data.shape[-1] != 2:
        raise InvalidInput(f'Expected coordinates with shape (N, 2), '
                           f'received array with shape {data.shape}.')

    if not np.isfinite(data).all():
        bad = np.flatnonzero(~np.isfinite(data).all(1))
        raise InvalidInput(f'Coordinates contain non-finite values at '
                           f'indices {bad.tolist()}.')
    return data


def sanitize_labels(labels, n):
    # labels are optional
    if labels is None:
        return None

    if isinstance(labels, str):
        raise InvalidInput(f'Expected a sequence of labels, received a '
                           f'string: {labels!r}.')

    labels = list(labels)
    if len(labels) != n:
        raise InvalidInput(f'Number of labels ({len(labels)}) does not match '
                           f'number of points ({n}).')
    return labels


def check_max_iterations(max_iterations):
    if (isinstance(max_iterations, bool)
            or not isinstance(max_iterations, numbers.Integral)
            or max_iterations < 1):
        raise InvalidInput(f'`max_iterations` should be a positive integer, '
                           f'received {max_iterations!r}.')
    return int(max_iterations)


def round_half_away(a):
    """
    Round to the nearest integer, with ties rounded away from zero (unlike
    `np.round` which rounds ties to even).

    >>> round_half_away([0.5, 1.5, 2.5, -0.5, 1.4])
    array([ 1,  2,  3, -1,  1])
    """
    a = np.asanyarray(a, float)
    # step away from zero only if the fractional part is at least a half
    t = np.trunc(a)
    return np.where(np.abs(a - t) >= 0.5, t + np.sign(a), t).astype(int)
