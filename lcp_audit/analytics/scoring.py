"""
Opportunity scoring — pure functions only.

Savings map onto a log-normal curve fixed by two control points:
`p10` ms scores 0.9 and `median` ms scores 0.5.
"""
from __future__ import annotations

import math

from scipy.stats import lognorm, norm

WASTED_MS_FOR_AVERAGE = 300
WASTED_MS_FOR_POOR    = 750

_Z_P10 = norm.ppf(0.9)


def log_normal_score(value: float, p10: float, median: float) -> float:
    """Complementary log-normal CDF through (p10, 0.9) and (median, 0.5)."""
    if median <= 0 or p10 <= 0:
        raise ValueError("control points must be positive")
    if p10 >= median:
        raise ValueError("p10 must be below the median")
    if value <= 0:
        return 1.0
    sigma = math.log(median / p10) / _Z_P10
    return float(lognorm.sf(value, sigma, scale=median))


def score_for_wasted_ms(
    wasted_ms: float,
    p10: float = WASTED_MS_FOR_AVERAGE,
    median: float = WASTED_MS_FOR_POOR,
) -> float:
    percentile = log_normal_score(wasted_ms, p10, median)
    # Stretch (0.9, 1] to (0.9, 1.005] so near-perfect results floor to 1.
    if percentile > 0.9:
        percentile += 0.05 * (percentile - 0.9)
    return min(1.0, math.floor(percentile * 100) / 100)
