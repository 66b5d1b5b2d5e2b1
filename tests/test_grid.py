# third-party
import pytest
import numpy as np

# local
from declutter import InvalidInput, GridAggregator, aggregate_grid
from declutter.utils import round_half_away


# ---------------------------------------------------------------------------- #
# fixtures

@pytest.fixture
def scattered():
    rng = np.random.default_rng(27189)
    return rng.uniform(0, 6, (500, 2))


# ---------------------------------------------------------------------------- #

@pytest.mark.parametrize(
    'values, expected',
    [([0.5, 1.5, 2.5], [1, 2, 3]),
     ([-0.5, -1.5, -2.5], [-1, -2, -3]),
     ([1.4, 1.6, -1.4, -1.6], [1, 2, -1, -2]),
     ([0.0, -0.2, 0.2], [0, 0, 0]),
     # just below the tie
     ([0.49999999999999994, -0.49999999999999994], [0, 0]),
     ([2.49999999999999956, -2.49999999999999956], [2, -2]),
     # odd integers beyond float mantissa precision
     ([2.0 ** 52 + 1, -(2.0 ** 52 + 1)], [2 ** 52 + 1, -(2 ** 52 + 1)])]
)
def test_round_half_away(values, expected):
    np.testing.assert_array_equal(round_half_away(values), expected)


def test_rounds_to_cells():
    result = aggregate_grid([(1.2, 1.4), (1.6, 1.6)])

    assert len(result) == 2
    assert [tuple(p) for p in result] == [(1, 1, 1, None), (2, 2, 1, None)]


def test_counts_shared_cells():
    result = aggregate_grid([(0.9, 2.1), (1.1, 1.9), (1.4, 2.4), (3, 0)])

    assert result.total == 4
    np.testing.assert_array_equal(result.xy, [[1, 2], [3, 0]])
    np.testing.assert_array_equal(result.counts, [3, 1])


def test_value_below_tie_stays_in_cell():
    result = aggregate_grid([(0.49999999999999994, 0)])
    assert tuple(result[0]) == (0, 0, 1, None)


def test_ties_round_away_from_zero():
    result = aggregate_grid([(0.5, 2.5), (1.0, 3.0)])

    assert len(result) == 1
    assert result[0].count == 2
    assert (result[0].x, result[0].y) == (1, 3)


def test_negative_coordinates():
    result = aggregate_grid([(-1.2, -3.6), (-0.8, -4.4), (2.2, 0.1)])

    np.testing.assert_array_equal(result.xy, [[-1, -4], [2, 0]])
    np.testing.assert_array_equal(result.counts, [2, 1])


def test_empty():
    assert len(aggregate_grid([])) == 0
    assert len(GridAggregator()(np.empty((0, 2)))) == 0


def test_count_conservation(scattered):
    result = aggregate_grid(scattered)

    assert result.total == len(scattered)
    assert (result.counts >= 1).all()


def test_order_independent(scattered):
    rng = np.random.default_rng(1)
    result = aggregate_grid(scattered)
    for _ in range(5):
        assert aggregate_grid(rng.permutation(scattered)) == result


def test_cells_sorted(scattered):
    xy = aggregate_grid(scattered).xy
    order = np.lexsort((xy[:, 1], xy[:, 0]))
    np.testing.assert_array_equal(order, np.arange(len(xy)))


@pytest.mark.parametrize(
    'points',
    [[1, 2, 3],
     [(1, 2, 3), (4, 5, 6)],
     [(0, np.nan)],
     [(np.inf, 1)]]
)
def test_invalid_points(points):
    with pytest.raises(InvalidInput):
        aggregate_grid(points)
