"""
double_mass.regression
~~~~~~~~~~~~~~~~~~~~~~
Least-squares slope and Pearson correlation of a contiguous stretch of the
double mass curve (cumulative reference on x, cumulative station on y).

Ranges with fewer than two points, ranges that fall outside the series and
zero-variance ranges all yield ``0.0`` instead of raising; the detector's
correlation gate keeps such ranges from being chosen.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional, Sequence

import numpy as np

from .series import CumulativeRecord


@dataclass(frozen=True)
class RegressionResult:
    slope: float
    correlation: float


@dataclass(frozen=True)
class _Sums:
    n: int
    sum_x: float
    sum_y: float
    sum_xy: float
    sum_x2: float
    sum_y2: float


def _segment_sums(
    records: Sequence[CumulativeRecord], start: int, end: int
) -> Optional[_Sums]:
    """Return the regression sums over ``records[start:end + 1]``, or
    *None* when the range is degenerate."""
    if start < 0 or start >= end or end >= len(records):
        return None
    segment = records[start : end + 1]
    x = np.array([r.cum_reference for r in segment], dtype=float)
    y = np.array([r.cum_station for r in segment], dtype=float)
    return _Sums(
        n=len(segment),
        sum_x=float(x.sum()),
        sum_y=float(y.sum()),
        sum_xy=float((x * y).sum()),
        sum_x2=float((x * x).sum()),
        sum_y2=float((y * y).sum()),
    )


def _slope_from(s: _Sums) -> float:
    denominator = s.n * s.sum_x2 - s.sum_x * s.sum_x
    if denominator == 0.0:
        return 0.0
    return (s.n * s.sum_xy - s.sum_x * s.sum_y) / denominator


def _correlation_from(s: _Sums) -> float:
    numerator = s.n * s.sum_xy - s.sum_x * s.sum_y
    variance_product = (s.n * s.sum_x2 - s.sum_x * s.sum_x) * (
        s.n * s.sum_y2 - s.sum_y * s.sum_y
    )
    # Rounding can push a near-zero product slightly negative.
    if variance_product <= 0.0:
        return 0.0
    return numerator / math.sqrt(variance_product)


def slope(records: Sequence[CumulativeRecord], start: int, end: int) -> float:
    """OLS slope of cumulative station against cumulative reference over
    the inclusive index range ``[start, end]``."""
    sums = _segment_sums(records, start, end)
    return 0.0 if sums is None else _slope_from(sums)


def correlation(records: Sequence[CumulativeRecord], start: int, end: int) -> float:
    """Pearson r of cumulative station against cumulative reference over
    the inclusive index range ``[start, end]``."""
    sums = _segment_sums(records, start, end)
    return 0.0 if sums is None else _correlation_from(sums)


def fit_segment(
    records: Sequence[CumulativeRecord], start: int, end: int
) -> RegressionResult:
    """Slope and correlation of one range, computed from a single set of sums."""
    sums = _segment_sums(records, start, end)
    if sums is None:
        return RegressionResult(slope=0.0, correlation=0.0)
    return RegressionResult(slope=_slope_from(sums), correlation=_correlation_from(sums))
