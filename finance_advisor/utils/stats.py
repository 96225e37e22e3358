"""Small statistics helpers shared by the pattern and trend stages"""

import statistics
from typing import Sequence


def population_std_dev(values: Sequence[float]) -> float:
    """Standard deviation dividing by n (not n - 1); 0 for empty input"""
    if not values:
        return 0.0
    return statistics.pstdev(values)


def linear_trend(values: Sequence[float]) -> float:
    """
    Slope of the least-squares line fitted to values against their index.

    Returns 0 for fewer than two points.
    """
    n = len(values)
    if n < 2:
        return 0.0

    x_mean = (n - 1) / 2
    y_mean = statistics.fmean(values)

    numerator = sum((i - x_mean) * (y - y_mean) for i, y in enumerate(values))
    denominator = sum((i - x_mean) ** 2 for i in range(n))

    return 0.0 if denominator == 0 else numerator / denominator
