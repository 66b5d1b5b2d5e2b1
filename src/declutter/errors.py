"""
Exceptions raised by the aggregators.
"""


class InvalidInput(ValueError):
    """Usage error: malformed coordinates, labels or aggregator parameters."""
