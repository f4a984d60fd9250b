"""Power-law exponent estimation for degree distributions."""

from __future__ import annotations

import math
from collections.abc import Mapping


def mle_power_law_exponent(degree_counts: Mapping[int, int], k_min: int) -> float:
    """Estimate the power-law exponent by weighted least squares.

    Fits log(count) against log(degree) for degrees ``>= k_min`` with
    non-zero counts, weighting each point by its count, and returns the
    negated slope. Returns 0.0 when there is too little data for a fit.
    """
    points = [
        (float(count), math.log(k), math.log(count))
        for k, count in degree_counts.items()
        if k >= k_min and count > 0
    ]

    sum_w = sum(w for w, _, _ in points)
    if sum_w == 0.0:
        return 0.0

    mean_x = sum(w * x for w, x, _ in points) / sum_w
    mean_y = sum(w * y for w, _, y in points) / sum_w

    cov_xy = sum(w * (x - mean_x) * (y - mean_y) for w, x, y in points)
    var_x = sum(w * (x - mean_x) ** 2 for w, x, _ in points)

    if var_x == 0.0:
        return 0.0

    return -(cov_xy / var_x)