"""Summary statistics for Werks."""

import logging
from typing import Iterable

import numpy as np

logger = logging.getLogger(__name__)

def gini(values: Iterable[float]) -> float:
    """
    Calculate the Gini coefficient of a set of non-negative values.

    Uses the sorted-rank formula ``(2 * sum(i * y_i) / sum(y) - (n + 1)) / n``
    with 1-based ranks i, so equal values give 0 and a single holder of
    everything gives (n - 1) / n.

    Args:
        values: Non-negative numbers, e.g. incomes or populations

    Returns:
        Gini coefficient in [0, 1)

    Raises:
        ValueError: If values are empty, negative, or sum to zero
    """
    sorted_v = np.sort(np.asarray(list(values), dtype=float))

    n = sorted_v.size
    if n == 0:
        raise ValueError("Gini coefficient needs at least one value")

    if np.any(sorted_v < 0):
        raise ValueError("Gini coefficient is undefined for negative values")

    total = sorted_v.sum()
    if total == 0:
        raise ValueError("Gini coefficient is undefined when all values are zero")

    ranks = np.arange(1, n + 1)
    numerator = 2 * np.sum(ranks * sorted_v)

    return float((numerator / total - (n + 1)) / n)
