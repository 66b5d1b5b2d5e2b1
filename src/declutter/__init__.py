"""
Reduce overlapping scatter plot data to a smaller set of weighted points.
"""

# third-party
from loguru import logger

# silent unless the application opts in with `logger.enable('declutter')`
logger.disable('declutter')

# relative
from .errors import InvalidInput
from .config import CONFIG, load_config
from .result import AggregatedPoint, AggregationResult
from .grid import GridAggregator, aggregate_grid
from .proximity import ProximityAggregator, aggregate_proximity
from .partition import aggregate, aggregate_by_label
